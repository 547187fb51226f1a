# coding: utf-8
# Takeov3r - dangling CNAME takeover detector
"""
CNAME lookups.

Both resolvers expose ``resolve_cname(hostname)``, which returns the
lowercase CNAME target without the trailing root dot, raises ``NoRecord``
when the name has no CNAME and ``ResolutionFailed`` for anything that kept
the query from completing.
"""

import json
import logging
import time

import dns.exception
import dns.resolver
import requests

from cnamewatch.exceptions import NoRecord, ResolutionFailed

logger = logging.getLogger(__name__)

DOH_URL = 'https://dns.google/resolve'
DEFAULT_TIMEOUT = 5

# DoH answers are a few hundred bytes; anything past this is not one
MAX_BODY = 64 * 1024
# small reads so the deadline is checked while a slow server drips the body
READ_CHUNK = 1

# RFC 1035 TYPE value and RCODE used by the JSON DoH API
CNAME_TYPE = 5
NXDOMAIN_STATUS = 3


def _clean_target(value):
    return str(value).strip().rstrip('.').lower()


def _check_timeout(timeout):
    if timeout is None or timeout <= 0:
        raise ValueError(f"timeout must be a positive number of seconds, got {timeout!r}")
    return timeout


class DohResolver(object):
    """DNS-over-HTTPS JSON API client (dns.google / cloudflare-dns.com style).

    ``timeout`` bounds the whole query, body included, not just each read.
    """

    def __init__(self, url=DOH_URL, timeout=DEFAULT_TIMEOUT, session=None):
        self.url = url
        self.timeout = _check_timeout(timeout)
        # without a session each query goes through requests.get, which is
        # safe to share between worker threads
        self.session = session
        self.headers = {
            'Accept': 'application/dns-json',
            'User-Agent': 'Takeov3r/1.0',
        }

    def _read_body(self, resp, hostname, deadline):
        body = bytearray()
        for chunk in resp.iter_content(chunk_size=READ_CHUNK):
            if time.monotonic() > deadline:
                raise ResolutionFailed(f"DoH query for {hostname} timed out after {self.timeout}s")
            body.extend(chunk)
            if len(body) > MAX_BODY:
                raise ResolutionFailed(f"DoH response for {hostname} exceeds {MAX_BODY} bytes")
        return bytes(body)

    def query(self, hostname):
        http = self.session or requests
        deadline = time.monotonic() + self.timeout
        try:
            resp = http.get(self.url,
                            params={'name': hostname, 'type': 'CNAME'},
                            headers=self.headers,
                            timeout=self.timeout,
                            stream=True)
        except requests.RequestException as e:
            raise ResolutionFailed(f"DoH query for {hostname} failed: {e}") from e
        try:
            resp.raise_for_status()
            body = self._read_body(resp, hostname, deadline)
        except requests.RequestException as e:
            raise ResolutionFailed(f"DoH query for {hostname} failed: {e}") from e
        finally:
            resp.close()

        try:
            data = json.loads(body)
        except ValueError as e:
            raise ResolutionFailed(f"Unparseable DoH response for {hostname}") from e
        if not isinstance(data, dict):
            raise ResolutionFailed(f"Unexpected DoH response for {hostname}: {data!r}")
        return data

    def resolve_cname(self, hostname):
        data = self.query(hostname)
        status = data.get('Status', 0)
        if status == NXDOMAIN_STATUS:
            logger.debug("%s: NXDOMAIN", hostname)
            raise NoRecord(hostname)
        if status != 0:
            raise ResolutionFailed(f"DoH server answered {hostname} with rcode {status}")

        answers = data.get('Answer') or []
        if not isinstance(answers, list):
            raise ResolutionFailed(f"Unexpected Answer section for {hostname}")
        for answer in answers:
            if not isinstance(answer, dict) or not answer.get('data'):
                continue
            if answer.get('type', CNAME_TYPE) != CNAME_TYPE:
                continue
            target = _clean_target(answer['data'])
            if len(answers) > 1:
                logger.debug("%s: %d answers, using %s", hostname, len(answers), target)
            return target
        raise NoRecord(hostname)


class DnsResolver(object):
    """Plain DNS lookups through dnspython."""

    def __init__(self, timeout=DEFAULT_TIMEOUT, nameservers=None):
        _check_timeout(timeout)
        self.resolver = dns.resolver.Resolver()
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout
        if nameservers:
            self.resolver.nameservers = list(nameservers)

    def resolve_cname(self, hostname):
        try:
            answers = self.resolver.resolve(hostname, 'CNAME')
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer) as e:
            logger.debug("%s: %s", hostname, e.__class__.__name__)
            raise NoRecord(hostname) from e
        except dns.exception.DNSException as e:
            raise ResolutionFailed(f"DNS query for {hostname} failed: {e}") from e
        targets = [_clean_target(r.target.to_text()) for r in answers]
        if not targets:
            raise NoRecord(hostname)
        return targets[0]
