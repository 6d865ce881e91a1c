from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Union

from .audit import AuditLog
from .authority import AuthoritySet
from .codes import ErrorCode, STATUS_PENDING
from .config import RegistrySettings
from .db import RegistryState
from .identifiers import OpaqueId
from .ledger import FeeLedger
from .schemas import FeeTransfer, Report, ReportUpdate, Result, ok, err
from .services.cleaning import evidence_fingerprint
from .services.validation import amendment_valid, first_failure, submission_fields

logger = logging.getLogger(__name__)

Buffer = Union[OpaqueId, bytes, bytearray]


class ReportRegistry:
    """Registry of adverse drug reaction reports.

    Accepts submissions from verified authorities, charges the submission
    fee to the bound authority contract, deduplicates on evidence hash and
    lets the original submitter amend description and severity. Every call
    returns a ``Result``; business failures never raise and leave no trace.
    """

    def __init__(self, settings: Optional[RegistrySettings] = None):
        self.settings = settings or RegistrySettings.from_env()
        self.reset()

    def reset(self) -> None:
        s = self.settings
        self.state = RegistryState(max_reports=s.max_reports, submission_fee=s.submission_fee)
        self.block_height = 0
        self.caller = s.default_caller
        self.authorities = AuthoritySet(s.initial_authorities())
        self.ledger = FeeLedger()
        self.audit = AuditLog()
        logger.info("Report registry reset")

    @property
    def fee_transfers(self) -> List[FeeTransfer]:
        return list(self.ledger.transfers)

    def advance_block(self, n: int = 1) -> int:
        if n < 0:
            raise ValueError("block height cannot move backwards")
        self.block_height += n
        return self.block_height

    def set_authorities(self, principals: Iterable[str]) -> None:
        self.authorities = AuthoritySet(principals)

    def is_verified_authority(self, principal: str) -> Result:
        return ok(principal in self.authorities)

    def set_authority_contract(self, principal: str) -> Result:
        if principal == self.settings.null_principal:
            logger.warning("Refused null principal as authority contract")
            return err(False)
        if self.state.authority_contract is not None:
            logger.warning("Authority contract already bound to %s" % self.state.authority_contract)
            return err(False)
        self.state.authority_contract = principal
        logger.info("Authority contract bound to %s" % principal)
        return ok(True)

    def set_submission_fee(self, fee: int) -> Result:
        if not self.state.authority_contract:
            logger.warning("Submission fee change rejected: no authority contract")
            return err(False)
        self.state.submission_fee = fee
        logger.info("Submission fee set to %s" % fee)
        return ok(True)

    def submit_report(
        self,
        drug_id: int,
        anonymous_id: Buffer,
        description: str,
        severity: int,
        location: str,
        evidence_hash: Optional[Buffer] = None,
        metadata: str = "",
    ) -> Result:
        anon = OpaqueId.of(anonymous_id)
        if evidence_hash is None:
            evidence_hash = evidence_fingerprint(drug_id, anon.raw, description, location, metadata)
        key = OpaqueId.of(evidence_hash)
        state = self.state
        checks = [(ErrorCode.INVALID_REPORT_COUNT, lambda: not state.is_full())]
        checks += submission_fields(drug_id, anon, description, severity, location, key, metadata)
        checks += [
            (ErrorCode.NOT_AUTHORIZED, lambda: self.is_verified_authority(self.caller).value),
            (ErrorCode.REPORT_ALREADY_EXISTS, lambda: not state.has_fingerprint(key)),
            (ErrorCode.AUTHORITY_NOT_SET, lambda: bool(state.authority_contract)),
        ]
        code = first_failure(checks)
        if code is not None:
            logger.debug("Report submission rejected with %s (%d)" % (code.name, code))
            return err(code)

        report = Report(
            drug_id=drug_id,
            anonymous_id=anon.raw,
            description=description,
            severity=severity,
            timestamp=self.block_height,
            submitter=self.caller,
            location=location,
            status=STATUS_PENDING,
            evidence_hash=key.raw,
            metadata=metadata,
        )
        self.ledger.record(state.submission_fee, self.caller, state.authority_contract)
        report_id = state.add_report(report)
        self.audit.write(report_id, "submitted", f"hash={key.hex()}")
        logger.info("Stored report %s for drug %s" % (report_id, drug_id))
        return ok(report_id)

    def update_report(self, report_id: int, new_description: str, new_severity: int) -> Result:
        report = self.state.get_report(report_id)
        if report is None:
            return err(False)
        if report.submitter != self.caller:
            logger.debug("Update of report %s refused for %s" % (report_id, self.caller))
            return err(False)
        if not amendment_valid(new_description, new_severity):
            return err(False)

        updated = report.model_copy(
            update={
                "description": new_description,
                "severity": new_severity,
                "timestamp": self.block_height,
            }
        )
        self.state.put_report(report_id, updated)
        self.state.add_update(
            report_id,
            ReportUpdate(
                update_description=new_description,
                update_severity=new_severity,
                update_timestamp=self.block_height,
                updater=self.caller,
            ),
        )
        self.audit.write(report_id, "updated", f"severity={new_severity}")
        logger.info("Amended report %s" % report_id)
        return ok(True)

    def get_report(self, report_id: int) -> Optional[Report]:
        return self.state.get_report(report_id)

    def get_report_update(self, report_id: int) -> Optional[ReportUpdate]:
        return self.state.get_update(report_id)

    def get_report_count(self) -> Result:
        return ok(self.state.next_report_id)

    def is_report_registered(self, evidence_hash: Buffer) -> Result:
        return ok(self.state.has_fingerprint(OpaqueId.of(evidence_hash)))
