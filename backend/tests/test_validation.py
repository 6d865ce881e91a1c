from __future__ import annotations

from adr_registry.codes import ErrorCode
from adr_registry.identifiers import OpaqueId
from adr_registry.services.validation import (
    amendment_valid,
    first_failure,
    submission_fields,
    valid_description,
    valid_drug_id,
    valid_severity,
)


def _fields(**overrides):
    args = dict(
        drug_id=1,
        anonymous_id=OpaqueId(raw=b"a" * 32),
        description="Headache",
        severity=3,
        location="New York",
        evidence_hash=OpaqueId(raw=b"b" * 32),
        metadata="",
    )
    args.update(overrides)
    return submission_fields(**args)


def test_valid_submission_passes():
    assert first_failure(_fields()) is None


def test_first_failing_check_wins():
    checks = _fields(description="", severity=0, location="")
    assert first_failure(checks) == ErrorCode.INVALID_DESCRIPTION


def test_later_checks_are_not_evaluated():
    calls = []
    checks = [
        (ErrorCode.INVALID_DRUG_ID, lambda: False),
        (ErrorCode.INVALID_HASH, lambda: calls.append(1) or True),
    ]
    assert first_failure(checks) == ErrorCode.INVALID_DRUG_ID
    assert calls == []


def test_description_limits():
    assert valid_description("x")
    assert valid_description("x" * 500)
    assert not valid_description("")
    assert not valid_description("x" * 501)


def test_severity_range():
    assert [valid_severity(s) for s in range(0, 7)] == [False, True, True, True, True, True, False]


def test_amendment():
    assert amendment_valid("Nausea", 4)
    assert not amendment_valid("", 4)
    assert not amendment_valid("Nausea", 9)


def test_numeric_fields_must_be_integers():
    assert not valid_severity(3.5)
    assert not valid_severity(True)
    assert not valid_drug_id(1.5)
    assert valid_drug_id(10**9)
    assert first_failure(_fields(severity=2.0)) == ErrorCode.INVALID_SEVERITY


def test_long_opaque_values_are_valid():
    checks = _fields(anonymous_id=OpaqueId(raw=b"a" * 64), evidence_hash=OpaqueId(raw=b"b" * 64))
    assert first_failure(checks) is None
    assert first_failure(_fields(evidence_hash=OpaqueId(raw=b""))) == ErrorCode.INVALID_HASH
