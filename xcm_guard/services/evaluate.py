from xcm_guard.core.capabilities import CapabilityTable
from xcm_guard.core.validation import validate_request
from xcm_guard.schemas.evaluation import TransferEvaluation
from xcm_guard.schemas.transfer import TransferRequest
from xcm_guard.services.dry_run import build_dry_run
from xcm_guard.services.fees import quote_for_request
from xcm_guard.services.guard import Snapshots, evaluate_guard


def evaluate_transfer(
    req: TransferRequest,
    snapshots: Snapshots | None = None,
    network_fee_estimate: str | None = None,
    service_fee_enabled: bool = True,
    table: CapabilityTable | None = None,
) -> TransferEvaluation:
    """Run validator, guard and fee quoter; build a preview only when both pass."""
    errors = validate_request(req)
    guard = evaluate_guard(req, snapshots, table)
    fees = quote_for_request(
        req, network_fee_estimate, mode=guard.mode, service_fee_enabled=service_fee_enabled
    )
    can_preview = not errors and guard.ok
    return TransferEvaluation(
        errors=errors,
        guard=guard,
        fees=fees,
        can_preview=can_preview,
        dry_run=build_dry_run(req, fees) if can_preview else None,
    )
