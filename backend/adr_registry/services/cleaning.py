from __future__ import annotations
import hashlib
from typing import Any

FIELD_SEPARATOR = "\x1f"


def canonical_field(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    return " ".join(str(value).split()).casefold()


def evidence_fingerprint(
    drug_id: Any,
    anonymous_id: Any,
    description: Any,
    location: Any,
    metadata: Any = None,
) -> bytes:
    """SHA-256 over the canonical report fields.

    Used as the evidence hash when a submitter has none of their own, so the
    same reporter filing the same reaction twice is caught as a duplicate.
    """
    parts = [canonical_field(v) for v in (drug_id, anonymous_id, description, location, metadata)]
    return hashlib.sha256(FIELD_SEPARATOR.join(parts).encode("utf-8")).digest()
