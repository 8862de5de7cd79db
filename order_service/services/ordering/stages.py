"""Order workflow stage enumeration."""
from enum import Enum


class WorkflowStage(str, Enum):
    """Stages an order creation request moves through."""

    RECEIVED = "received"  # Request accepted, nothing checked yet
    VALIDATED = "validated"  # Line items present
    ACCOUNT_RESOLVED = "account_resolved"  # Account found
    PRICED = "priced"  # Totals computed
    PAYMENT_DECIDED = "payment_decided"  # Payment approved or denied
    PERSISTED = "persisted"  # Order saved
    FULFILLED = "fulfilled"  # Inventory updated and shipment requested
    REJECTED = "rejected"  # Request failed

    def __str__(self) -> str:
        """Return the string value of the stage."""
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self in (WorkflowStage.FULFILLED, WorkflowStage.REJECTED)


# Forward path; REJECTED is reachable from any non-terminal stage.
NEXT_STAGE = {
    WorkflowStage.RECEIVED: WorkflowStage.VALIDATED,
    WorkflowStage.VALIDATED: WorkflowStage.ACCOUNT_RESOLVED,
    WorkflowStage.ACCOUNT_RESOLVED: WorkflowStage.PRICED,
    WorkflowStage.PRICED: WorkflowStage.PAYMENT_DECIDED,
    WorkflowStage.PAYMENT_DECIDED: WorkflowStage.PERSISTED,
    WorkflowStage.PERSISTED: WorkflowStage.FULFILLED,
}


def can_transition(current: WorkflowStage, target: WorkflowStage) -> bool:
    """Check whether moving from ``current`` to ``target`` is allowed."""
    if current.is_terminal:
        return False
    if target == WorkflowStage.REJECTED:
        return True
    return NEXT_STAGE.get(current) == target
