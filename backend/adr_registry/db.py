from __future__ import annotations
import logging
from typing import Dict, Optional

from .codes import DEFAULT_MAX_REPORTS, DEFAULT_SUBMISSION_FEE
from .identifiers import OpaqueId
from .schemas import Report, ReportUpdate

logger = logging.getLogger(__name__)


class RegistryState:
    """In-memory store owned by one registry: counter, fee, authority binding and the three maps."""

    def __init__(self, max_reports: int = DEFAULT_MAX_REPORTS, submission_fee: int = DEFAULT_SUBMISSION_FEE):
        self.next_report_id = 0
        self.max_reports = max_reports
        self.submission_fee = submission_fee
        self.authority_contract: Optional[str] = None
        self.reports: Dict[int, Report] = {}
        self.report_updates: Dict[int, ReportUpdate] = {}
        self.reports_by_hash: Dict[str, int] = {}
        logger.debug("In-memory registry state initialized (max_reports=%s, fee=%s)" % (max_reports, submission_fee))

    def is_full(self) -> bool:
        return self.next_report_id >= self.max_reports

    def add_report(self, report: Report) -> int:
        report_id = self.next_report_id
        self.reports[report_id] = report
        self.add_fingerprint(OpaqueId.of(report.evidence_hash), report_id)
        self.next_report_id += 1
        return report_id

    def put_report(self, report_id: int, report: Report) -> None:
        self.reports[report_id] = report

    def get_report(self, report_id: int) -> Optional[Report]:
        return self.reports.get(report_id)

    def add_update(self, report_id: int, update: ReportUpdate) -> None:
        self.report_updates[report_id] = update

    def get_update(self, report_id: int) -> Optional[ReportUpdate]:
        return self.report_updates.get(report_id)

    def add_fingerprint(self, key: OpaqueId, report_id: int) -> None:
        self.reports_by_hash[key.hex()] = report_id

    def get_by_fingerprint(self, key: OpaqueId) -> Optional[int]:
        return self.reports_by_hash.get(key.hex())

    def has_fingerprint(self, key: OpaqueId) -> bool:
        return key.hex() in self.reports_by_hash
