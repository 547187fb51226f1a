# coding: utf-8
# Takeov3r - dangling CNAME takeover detector

import re

from cnamewatch.exceptions import InvalidInput

_SCHEME = re.compile(r'^https?://', re.I)


def normalize_domain(raw):
    """Turn user input such as ``HTTPS://Old.Example.com/`` into ``old.example.com``."""
    domain = (raw or '').strip()
    if not domain:
        raise InvalidInput("Please enter a domain")
    domain = _SCHEME.sub('', domain)
    if domain.endswith('/'):
        domain = domain[:-1]
    # "https://" on its own leaves nothing to look up
    if not domain:
        raise InvalidInput(f"No hostname in {raw!r}")
    return domain.lower()
