# coding: utf-8
# Takeov3r - dangling CNAME takeover detector
"""
Detection engine: normalize the domain, resolve its CNAME, match the
target against the fingerprints and turn the outcome into a verdict.

Only ``InvalidInput`` leaves ``detect``; resolver failures become a
WARNING result.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from cnamewatch.exceptions import NoRecord, ResolutionFailed
from cnamewatch.fingerprints import FINGERPRINTS, RiskTier, match_fingerprint
from cnamewatch.normalize import normalize_domain
from cnamewatch.resolver import DohResolver

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    CHECKING = 'checking'
    VULNERABLE = 'vulnerable'
    SAFE = 'safe'
    WARNING = 'warning'


@dataclass(frozen=True)
class DetectionResult:
    domain: str
    status: Status
    description: str
    matched_service: Optional[str] = None
    recommendation: Optional[str] = None
    cname: Optional[str] = None
    risk: Optional[RiskTier] = None

    @property
    def vulnerable(self) -> bool:
        return self.status is Status.VULNERABLE

    def to_dict(self):
        return {
            'domain': self.domain,
            'status': self.status.value,
            'service': self.matched_service,
            'risk': self.risk.value if self.risk else None,
            'cname': self.cname,
            'description': self.description,
            'recommendation': self.recommendation,
        }


class Detector(object):

    def __init__(self, resolver=None, fingerprints=FINGERPRINTS):
        self.resolver = resolver if resolver is not None else DohResolver()
        self.fingerprints = fingerprints

    def detect(self, raw_domain):
        domain = normalize_domain(raw_domain)

        try:
            cname = self.resolver.resolve_cname(domain)
        except ResolutionFailed as e:
            logger.debug("%s: resolution failed: %s", domain, e)
            return DetectionResult(
                domain=domain,
                status=Status.WARNING,
                description="Failed to query DNS records. Please try again.",
            )
        except NoRecord:
            return DetectionResult(
                domain=domain,
                status=Status.WARNING,
                description="No CNAME record found. Domain may not be properly configured.",
            )

        entry = match_fingerprint(cname, self.fingerprints)
        if entry is None:
            logger.debug("%s -> %s: no fingerprint", domain, cname)
            return DetectionResult(
                domain=domain,
                status=Status.SAFE,
                description="No dangling CNAME records found pointing to vulnerable services.",
                cname=cname,
            )

        logger.info("%s -> %s matches %s", domain, cname, entry.service)
        return DetectionResult(
            domain=domain,
            status=Status.VULNERABLE,
            description=(f"Domain has a CNAME record pointing to {entry.service} "
                         f"({cname}) but the service may not be claimed."),
            matched_service=entry.service,
            recommendation=(f"Claim the {entry.service} service or remove the "
                            f"dangling CNAME record."),
            cname=cname,
            risk=entry.risk,
        )


def detect(raw_domain, resolver=None):
    """Check one domain. Raises InvalidInput for empty input."""
    return Detector(resolver).detect(raw_domain)
