# coding: utf-8
# Takeov3r - dangling CNAME takeover detector
"""
Hosting platforms known to allow subdomain takeover.

Each entry's pattern is matched as a substring of the resolved CNAME
target, so ``mybucket.s3.amazonaws.com`` hits ``s3.amazonaws.com``.
Order matters: the first entry whose pattern matches wins.
Based on https://github.com/EdOverflow/can-i-take-over-xyz
"""

import enum
from dataclasses import dataclass


class RiskTier(enum.Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


@dataclass(frozen=True)
class FingerprintEntry:
    pattern: str
    service: str
    risk: RiskTier


# --- Fingerprints ---
FINGERPRINTS = (
    FingerprintEntry('cloudfront.net', 'AWS CloudFront', RiskTier.HIGH),
    FingerprintEntry('herokuapp.com', 'Heroku', RiskTier.HIGH),
    FingerprintEntry('heroku.com', 'Heroku', RiskTier.HIGH),
    FingerprintEntry('github.io', 'GitHub Pages', RiskTier.MEDIUM),
    FingerprintEntry('gitlab.io', 'GitLab Pages', RiskTier.MEDIUM),
    FingerprintEntry('bitbucket.io', 'Bitbucket Pages', RiskTier.MEDIUM),
    FingerprintEntry('azurewebsites.net', 'Azure App Service', RiskTier.HIGH),
    FingerprintEntry('cloudapp.azure.com', 'Azure Cloud App', RiskTier.HIGH),
    FingerprintEntry('s3.amazonaws.com', 'AWS S3', RiskTier.HIGH),
    FingerprintEntry('aws.amazon.com', 'AWS', RiskTier.HIGH),
    FingerprintEntry('digitaloceanspaces.com', 'DigitalOcean Spaces', RiskTier.MEDIUM),
    FingerprintEntry('fastly.net', 'Fastly', RiskTier.HIGH),
    FingerprintEntry('fastly.com', 'Fastly', RiskTier.HIGH),
    FingerprintEntry('squarespace.com', 'Squarespace', RiskTier.MEDIUM),
    FingerprintEntry('shopify.com', 'Shopify', RiskTier.MEDIUM),
    FingerprintEntry('wixsite.com', 'Wix', RiskTier.MEDIUM),
    FingerprintEntry('weebly.com', 'Weebly', RiskTier.MEDIUM),
    FingerprintEntry('wordpress.com', 'WordPress.com', RiskTier.MEDIUM),
    FingerprintEntry('pantheonsite.io', 'Pantheon', RiskTier.MEDIUM),
    FingerprintEntry('platform.sh', 'Platform.sh', RiskTier.MEDIUM),
    FingerprintEntry('render.com', 'Render', RiskTier.MEDIUM),
    FingerprintEntry('vercel.app', 'Vercel', RiskTier.MEDIUM),
    FingerprintEntry('now.sh', 'Vercel (now.sh)', RiskTier.MEDIUM),
    FingerprintEntry('netlify.app', 'Netlify', RiskTier.MEDIUM),
    FingerprintEntry('netlify.com', 'Netlify', RiskTier.MEDIUM),
    FingerprintEntry('firebaseapp.com', 'Firebase Hosting', RiskTier.MEDIUM),
    FingerprintEntry('firebaseio.com', 'Firebase', RiskTier.MEDIUM),
    FingerprintEntry('uploads.github.com', 'GitHub', RiskTier.LOW),
)


def match_fingerprint(target, fingerprints=FINGERPRINTS):
    """Return the first entry whose pattern occurs in ``target``, or None."""
    target = target.lower()
    for entry in fingerprints:
        if entry.pattern.lower() in target:
            return entry
    return None
