# coding: utf-8
# Takeov3r - dangling CNAME takeover detector


class TakeoverError(Exception):
    """Base class for everything cnamewatch raises."""


class InvalidInput(TakeoverError, ValueError):
    """The domain given by the caller is empty or unusable."""


class ResolverError(TakeoverError):
    pass


class ResolutionFailed(ResolverError):
    """Network, timeout, HTTP status or parse failure during the lookup."""


class NoRecord(ResolverError):
    """The lookup succeeded but the name has no CNAME."""
