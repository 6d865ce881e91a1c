from __future__ import annotations
from typing import List
from datetime import datetime, timezone
from uuid import uuid4
from .schemas import ProcessingLog


class AuditLog:
    def __init__(self):
        self._logs: List[ProcessingLog] = []

    def write(self, report_id: int, event: str, detail: str | None = None) -> ProcessingLog:
        log = ProcessingLog(
            id=str(uuid4()),
            report_id=report_id,
            created_at=datetime.now(timezone.utc),
            event=event,
            detail=detail,
        )
        self._logs.append(log)
        return log

    def for_report(self, report_id: int) -> List[ProcessingLog]:
        return [l for l in self._logs if l.report_id == report_id]

    def __len__(self) -> int:
        return len(self._logs)
