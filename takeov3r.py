#!/usr/bin/env python3
# coding: utf-8
"""
Takeov3r - dangling CNAME subdomain takeover detector

Usage examples:
  python takeov3r.py -d old.example.com
  python takeov3r.py -i subdomains.txt -o results.txt -t 20 -v
  cat subdomains.txt | python takeov3r.py -j -o results.json

Requirements:
  pip install dnspython requests colorama
"""
import argparse
import json
import logging
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

import colorama

from cnamewatch import FINGERPRINTS, Detector, DnsResolver, DohResolver, InvalidInput, Status
from cnamewatch.resolver import DEFAULT_TIMEOUT, DOH_URL

# Console Colors (using colorama for cross-platform)
colorama.init(autoreset=True)
G = '\033[92m'  # green
Y = '\033[93m'  # yellow
B = '\033[94m'  # blue
R = '\033[91m'  # red
W = '\033[0m'   # white

# Lock for thread-safe prints and writes
LOCK = threading.Lock()


def no_color():
    global G, Y, B, R, W
    G = Y = B = R = W = ''


def banner():
    print(f"""{R}
    ╔══════════════════════════════════════════════════════════════╗
    ║  Takeov3r - dangling CNAME takeover detector                 ║
    ║  Matches CNAME targets against takeover-prone hosts          ║
    ╚══════════════════════════════════════════════════════════════╝{W}
    """)


def positive_float(value):
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return seconds


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Detect subdomains whose CNAME points at an unclaimed hosting service")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-d", "--domain", action="append", help="Domain to check (repeatable)")
    source.add_argument("-i", "--input", help="Input file of domains, one per line")
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument("-j", "--json", action="store_true", help="Write the output file as JSON")
    parser.add_argument("--resolver", choices=("doh", "dns"), default="doh",
                        help="DNS-over-HTTPS (default) or plain DNS via the system resolver")
    parser.add_argument("--doh-url", default=DOH_URL, help=f"DoH JSON endpoint (default: {DOH_URL})")
    parser.add_argument("--timeout", type=positive_float, default=DEFAULT_TIMEOUT,
                        help=f"Lookup timeout in seconds (default: {DEFAULT_TIMEOUT})")
    parser.add_argument("-t", "--threads", type=int, default=10, help="Concurrent threads")
    parser.add_argument("--delay", type=float, default=0.0, help="Delay between results")
    parser.add_argument("--only-vulnerable", action="store_true", help="Only print vulnerable domains")
    parser.add_argument("--list-services", action="store_true", help="List the fingerprinted services and exit")
    parser.add_argument("-n", "--no-color", action="store_true", help="Output without color")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose debug")
    return parser.parse_args(argv)


def build_resolver(args):
    if args.resolver == "dns":
        return DnsResolver(timeout=args.timeout)
    return DohResolver(url=args.doh_url, timeout=args.timeout)


def read_domains(args):
    if args.domain:
        return list(args.domain)
    if args.input:
        with open(args.input) as f:
            return [x.strip() for x in f if x.strip()]
    return [x.strip() for x in sys.stdin if x.strip()]


def status_style(status):
    return {
        Status.CHECKING: (B, "[*]"),
        Status.VULNERABLE: (R, "[!]"),
        Status.SAFE: (G, "[+]"),
        Status.WARNING: (Y, "[-]"),
    }[status]


def list_services():
    print(f"{B}[*] {len(FINGERPRINTS)} fingerprints, first match wins:{W}")
    for entry in FINGERPRINTS:
        color = {"high": R, "medium": Y, "low": G}[entry.risk.value]
        print(f"    {entry.pattern:<24} {entry.service:<22} {color}{entry.risk.value}{W}")


def format_result(result):
    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    color, marker = status_style(result.status)
    if result.status is Status.VULNERABLE:
        return color, (f"{marker} {ts} {result.domain} VULNERABLE ({result.matched_service}) | "
                           f"Risk: {result.risk.value} | CNAME: {result.cname} | {result.recommendation}")
    if result.status is Status.SAFE:
        return color, f"{marker} {ts} {result.domain} SAFE | CNAME: {result.cname}"
    return color, f"{marker} {ts} {result.domain} WARNING | {result.description}"


def process_domain(detector, raw, args):
    color, marker = status_style(Status.CHECKING)
    with LOCK:
        print(f"{color}{marker} {Status.CHECKING.value.capitalize()} {raw}{W}")
    try:
        result = detector.detect(raw)
    except InvalidInput as e:
        with LOCK:
            print(f"{R}[!] INVALID {raw!r}: {e}{W}")
        return None

    if args.only_vulnerable and not result.vulnerable:
        return result
    color, line = format_result(result)
    with LOCK:
        print(f"{color}{line}{W}")
        if args.output and not args.json:
            with open(args.output, "a") as f:
                f.write(line + "\n")
    return result


def write_json(filename, results):
    print(f"{Y}[-] Saving results to file: {W}{R}{filename}{W}")
    with open(filename, "w") as f:
        json.dump([r.to_dict() for r in results], f, indent=4)


def main(argv=None):
    args = parse_args(argv)
    if args.no_color:
        no_color()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG] %(name)s: %(message)s")

    banner()
    if args.list_services:
        list_services()
        return 0
    domains = read_domains(args)
    if not domains:
        print(f"{R}[!] No domains provided{W}")
        return 1

    detector = Detector(build_resolver(args))
    results = {}
    with ThreadPoolExecutor(max_workers=max(1, args.threads)) as exe:
        futures = {exe.submit(process_domain, detector, d, args): i for i, d in enumerate(domains)}
        for fut in as_completed(futures):
            results[futures[fut]] = fut.result()
            if args.delay > 0:
                time.sleep(args.delay)

    ordered = [results[i] for i in sorted(results) if results[i] is not None]
    if args.output and args.json:
        write_json(args.output, ordered)

    vulnerable = sum(1 for r in ordered if r.vulnerable)
    print(f"{G}[+] Scan complete: {len(ordered)} checked, {vulnerable} vulnerable{W}")
    return 2 if vulnerable else 0


if __name__ == "__main__":
    sys.exit(main())
