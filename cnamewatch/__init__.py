# coding: utf-8
# Takeov3r - dangling CNAME takeover detector

from cnamewatch.engine import DetectionResult, Detector, Status, detect
from cnamewatch.exceptions import (InvalidInput, NoRecord, ResolutionFailed,
                                   ResolverError, TakeoverError)
from cnamewatch.fingerprints import (FINGERPRINTS, FingerprintEntry, RiskTier,
                                     match_fingerprint)
from cnamewatch.normalize import normalize_domain
from cnamewatch.resolver import DnsResolver, DohResolver

__version__ = '1.0'
