import pytest

from cnamewatch import (Detector, DohResolver, InvalidInput, NoRecord, ResolutionFailed,
                        RiskTier, Status, detect)


def test_end_to_end_github_pages(fake_resolver):
    resolver = fake_resolver({"old.example.com": "random123.github.io"})
    result = detect("https://old.example.com/", resolver)

    assert resolver.calls == ["old.example.com"]
    assert result.domain == "old.example.com"
    assert result.status is Status.VULNERABLE
    assert result.matched_service == "GitHub Pages"
    assert result.risk is RiskTier.MEDIUM
    assert result.cname == "random123.github.io"
    assert "GitHub Pages" in result.description
    assert result.recommendation
    assert result.vulnerable


def test_s3_target_is_vulnerable(fake_resolver):
    result = detect("files.example.com", fake_resolver({"files.example.com": "mybucket.s3.amazonaws.com"}))
    assert result.status is Status.VULNERABLE
    assert result.matched_service == "AWS S3"


def test_unknown_target_is_safe(fake_resolver):
    result = detect("mail.example.com", fake_resolver({"mail.example.com": "mail.google.com"}))
    assert result.status is Status.SAFE
    assert result.matched_service is None
    assert result.recommendation is None
    assert result.cname == "mail.google.com"


def test_no_record_is_warning(fake_resolver):
    result = detect("bare.example.com", fake_resolver({"bare.example.com": NoRecord}))
    assert result.status is Status.WARNING
    assert result.matched_service is None
    assert result.recommendation is None
    assert "No CNAME" in result.description


def test_resolution_failure_is_warning(failing_resolver):
    result = detect("old.example.com", failing_resolver)
    assert result.status is Status.WARNING
    assert result.matched_service is None
    assert "try again" in result.description


def test_failure_and_no_record_have_different_descriptions(fake_resolver):
    resolver = fake_resolver({"a.example.com": NoRecord, "b.example.com": ResolutionFailed})
    assert detect("a.example.com", resolver).description != detect("b.example.com", resolver).description


def test_doh_timeout_becomes_warning(fake_session):
    import requests
    resolver = DohResolver(session=fake_session(exc=requests.Timeout("read timed out")))
    result = detect("old.example.com", resolver)
    assert result.status is Status.WARNING


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_empty_input_raises_without_lookup(fake_resolver, raw):
    resolver = fake_resolver()
    with pytest.raises(InvalidInput):
        detect(raw, resolver)
    assert resolver.calls == []


def test_engine_never_returns_checking(fake_resolver):
    resolver = fake_resolver({"a.example.com": "x.herokuapp.com", "b.example.com": "example.org",
                              "c.example.com": ResolutionFailed})
    detector = Detector(resolver)
    statuses = {detector.detect(d).status for d in ("a.example.com", "b.example.com",
                                                     "c.example.com", "d.example.com")}
    assert Status.CHECKING not in statuses
    assert statuses == {Status.VULNERABLE, Status.SAFE, Status.WARNING}


def test_result_is_frozen(fake_resolver):
    result = detect("a.example.com", fake_resolver({"a.example.com": "x.herokuapp.com"}))
    with pytest.raises(AttributeError):
        result.status = Status.SAFE


def test_to_dict(fake_resolver):
    result = detect("a.example.com", fake_resolver({"a.example.com": "x.herokuapp.com"}))
    assert result.to_dict() == {
        "domain": "a.example.com",
        "status": "vulnerable",
        "service": "Heroku",
        "risk": "high",
        "cname": "x.herokuapp.com",
        "description": result.description,
        "recommendation": result.recommendation,
    }


def test_default_resolver_is_doh():
    assert isinstance(Detector().resolver, DohResolver)
