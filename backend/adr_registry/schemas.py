from __future__ import annotations
from typing import Any, Literal
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from .codes import STATUS_PENDING


ReportStatus = Literal["pending"]


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    drug_id: int
    anonymous_id: bytes
    description: str
    severity: int
    timestamp: int
    submitter: str
    location: str
    status: ReportStatus = STATUS_PENDING
    evidence_hash: bytes
    metadata: str = ""


class ReportUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    update_description: str
    update_severity: int
    update_timestamp: int
    updater: str


class FeeTransfer(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: int
    sender: str
    recipient: str


class ProcessingLog(BaseModel):
    id: str
    report_id: int
    created_at: datetime
    event: str
    detail: str | None = None


class Result(BaseModel):
    """Tagged (success flag, value) pair returned by every registry call."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Any = None


def ok(value: Any = True) -> Result:
    return Result(ok=True, value=value)


def err(value: Any = False) -> Result:
    return Result(ok=False, value=value)
