from __future__ import annotations
from typing import Callable, List, Optional, Tuple

from ..codes import (
    ErrorCode,
    MAX_DESCRIPTION_LEN,
    MAX_LOCATION_LEN,
    MAX_METADATA_LEN,
    MIN_SEVERITY,
    MAX_SEVERITY,
)
from ..identifiers import OpaqueId


Check = Tuple[ErrorCode, Callable[[], bool]]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def valid_drug_id(drug_id: int) -> bool:
    return _is_int(drug_id) and drug_id > 0


def valid_description(text: str) -> bool:
    return isinstance(text, str) and 0 < len(text) <= MAX_DESCRIPTION_LEN


def valid_severity(severity: int) -> bool:
    return _is_int(severity) and MIN_SEVERITY <= severity <= MAX_SEVERITY


def valid_location(text: str) -> bool:
    return isinstance(text, str) and 0 < len(text) <= MAX_LOCATION_LEN


def valid_metadata(text: str) -> bool:
    return isinstance(text, str) and len(text) <= MAX_METADATA_LEN


def valid_opaque(value: OpaqueId) -> bool:
    return not value.is_empty()


def first_failure(checks: List[Check]) -> Optional[ErrorCode]:
    """Run checks in order; return the code of the first one that fails."""
    for code, check in checks:
        if not check():
            return code
    return None


def submission_fields(
    drug_id: int,
    anonymous_id: OpaqueId,
    description: str,
    severity: int,
    location: str,
    evidence_hash: OpaqueId,
    metadata: str,
) -> List[Check]:
    return [
        (ErrorCode.INVALID_DRUG_ID, lambda: valid_drug_id(drug_id)),
        (ErrorCode.INVALID_ANONYMOUS_ID, lambda: valid_opaque(anonymous_id)),
        (ErrorCode.INVALID_DESCRIPTION, lambda: valid_description(description)),
        (ErrorCode.INVALID_SEVERITY, lambda: valid_severity(severity)),
        (ErrorCode.INVALID_LOCATION, lambda: valid_location(location)),
        (ErrorCode.INVALID_HASH, lambda: valid_opaque(evidence_hash)),
        (ErrorCode.INVALID_METADATA, lambda: valid_metadata(metadata)),
    ]


def amendment_valid(description: str, severity: int) -> bool:
    return valid_description(description) and valid_severity(severity)
