"""
Business rules for accepting a reviewed bill for saving.

The extraction engine always returns a complete record, but the user may clear
fields while reviewing it. A bill is only saved when vendor, amount and date
are filled in; the engine is never re-run to fill them.
"""

from loguru import logger
from typing import Dict, Any
from pydantic import BaseModel

from ..models.bill import SaveBillRequest

REQUIRED_FIELDS = ("vendor", "amount", "date")


class SaveDecision(BaseModel):
    """Result of a save check with explanation"""
    accepted: bool
    reason: str
    checks: Dict[str, bool]
    metadata: Dict[str, Any] = {}


class SaveRulesConfig(BaseModel):
    required_fields: list[str] = list(REQUIRED_FIELDS)


class BillSaveRules:
    """
    Encapsulates the checks a bill must pass before it is persisted.

    Each required field produces a "<field>_present" check; a field holding
    only whitespace counts as missing.
    """

    def __init__(self, config: SaveRulesConfig = None):
        self.config = config or SaveRulesConfig()

    def evaluate(self, bill: SaveBillRequest) -> SaveDecision:
        """
        Evaluate whether a bill may be saved.

        Args:
            bill: Bill as confirmed by the user

        Returns:
            SaveDecision with accepted flag, reason, and check details
        """
        checks = {}
        missing = []

        for field in self.config.required_fields:
            present = bool(str(getattr(bill, field, "") or "").strip())
            checks[f"{field}_present"] = present
            if not present:
                missing.append(field)

        accepted = not missing
        if accepted:
            reason = f"Bill from {bill.vendor.strip()} accepted"
        else:
            reason = "Missing information: please fill in " + ", ".join(missing)

        logger.info(
            "Bill save decision",
            accepted=accepted,
            vendor=bill.vendor,
            checks=checks
        )

        return SaveDecision(
            accepted=accepted,
            reason=reason,
            checks=checks,
            metadata={
                "category": bill.category.value,
                "config": self.config.model_dump()
            }
        )
