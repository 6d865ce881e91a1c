from __future__ import annotations
import logging
from typing import List
from .schemas import FeeTransfer

logger = logging.getLogger(__name__)


class FeeLedger:
    """Append-only record of fee transfer intents. Settlement happens elsewhere."""

    def __init__(self):
        self.transfers: List[FeeTransfer] = []

    def record(self, amount: int, sender: str, recipient: str) -> FeeTransfer:
        transfer = FeeTransfer(amount=amount, sender=sender, recipient=recipient)
        self.transfers.append(transfer)
        logger.info("Recorded fee transfer of %s from %s to %s" % (amount, sender, recipient))
        return transfer

    def total_for(self, recipient: str) -> int:
        return sum(t.amount for t in self.transfers if t.recipient == recipient)

