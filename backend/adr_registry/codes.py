from __future__ import annotations
from enum import IntEnum


class ErrorCode(IntEnum):
    NOT_AUTHORIZED = 100
    INVALID_DRUG_ID = 101
    INVALID_SEVERITY = 102
    INVALID_DESCRIPTION = 103
    INVALID_HASH = 104
    REPORT_ALREADY_EXISTS = 106
    REPORT_NOT_FOUND = 107
    INVALID_LOCATION = 110
    AUTHORITY_NOT_SET = 111
    INVALID_METADATA = 113
    INVALID_ANONYMOUS_ID = 114
    INVALID_REPORT_COUNT = 115


MAX_DESCRIPTION_LEN = 500
MAX_LOCATION_LEN = 100
MAX_METADATA_LEN = 200
MIN_SEVERITY = 1
MAX_SEVERITY = 5

DEFAULT_MAX_REPORTS = 1_000_000
DEFAULT_SUBMISSION_FEE = 500
NULL_PRINCIPAL = "SP000000000000000000002Q6VF78"
DEFAULT_CALLER = "ST1TEST"

STATUS_PENDING = "pending"
