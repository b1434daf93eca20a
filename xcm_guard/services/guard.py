"""Route, amount and bootstrap policy for a single transfer request.

``evaluate_guard`` is a pure function of its arguments: the request, the most
recent balance snapshots the caller has, and the capability table. Every
refusal is a hard block; there is nothing to retry at this layer.
"""

import logging
from decimal import Decimal
from typing import Mapping, Optional

from xcm_guard.core.assets import AssetClass, get_asset, parse_amount
from xcm_guard.core.capabilities import CAPABILITIES, CapabilityTable, RouteMode
from xcm_guard.core.chains import Chain, get_chain
from xcm_guard.core.errors import ErrorKind
from xcm_guard.schemas.transfer import BalanceSnapshot, GuardResult, TransferRequest

logger = logging.getLogger(__name__)

Snapshots = Mapping[Chain, Optional[BalanceSnapshot]]


def _allow(mode: RouteMode, reason: str | None = None) -> GuardResult:
    return GuardResult(ok=True, hard_block=False, mode=mode, reason=reason)


def _block(
    kind: ErrorKind,
    reason: str,
    mode: RouteMode | None = None,
    min_required: Decimal | None = None,
) -> GuardResult:
    return GuardResult(
        ok=False,
        hard_block=True,
        mode=mode,
        reason=reason,
        min_required=min_required,
        error=kind,
    )


def _snapshot(snapshots: Snapshots | None, chain: Chain) -> Optional[BalanceSnapshot]:
    snap = (snapshots or {}).get(chain)
    if snap is None or not snap.ok:
        return None
    return snap


def _check_bootstrap(
    req: TransferRequest,
    amount: Decimal,
    snapshots: Snapshots | None,
    table: CapabilityTable,
) -> GuardResult | None:
    """Keep a below-ED destination account from receiving too little to survive."""
    buffer = table.bootstrap_for(req.to_chain)
    if buffer is None:
        return None

    name = get_chain(req.to_chain).name
    snap = _snapshot(snapshots, req.to_chain)
    if snap is None:
        return _block(
            ErrorKind.UNKNOWN_BALANCE,
            f"{name} balance is unknown. Refresh balances before sending.",
            RouteMode.TELEPORT,
        )
    if not snap.below_existential_deposit:
        return None

    min_required = (snap.existential_deposit - snap.free) + buffer.total
    if amount < min_required:
        return _block(
            ErrorKind.AMOUNT_OUT_OF_RANGE,
            f"{name} account is below ED. "
            f"Send at least ~{min_required:.4f} DOT to bootstrap safely.",
            RouteMode.TELEPORT,
            min_required,
        )
    return None


def _guard_stable(req: TransferRequest, amount: Decimal, table: CapabilityTable) -> GuardResult:
    mode = RouteMode.RESERVE_TRANSFER
    cls = table.get(mode)
    if not table.in_routes(req.from_chain, req.to_chain, mode):
        return _block(
            ErrorKind.ROUTE_UNSUPPORTED, "Stablecoin route not supported in safe-mode.", mode
        )
    if amount < cls.min_amount:
        return _block(
            ErrorKind.AMOUNT_OUT_OF_RANGE,
            f"Minimum stablecoin amount is {cls.min_amount:.2f}.",
            mode,
        )
    return _allow(mode)


def _guard_teleport(
    req: TransferRequest,
    amount: Decimal,
    snapshots: Snapshots | None,
    table: CapabilityTable,
) -> GuardResult:
    mode = RouteMode.TELEPORT
    cls = table.get(mode)
    if amount < cls.min_amount:
        return _block(
            ErrorKind.AMOUNT_OUT_OF_RANGE,
            f"Minimum DOT teleport amount is {cls.min_amount:.2f}.",
            mode,
        )
    return _check_bootstrap(req, amount, snapshots, table) or _allow(mode)


def _guard_advanced(amount: Decimal, table: CapabilityTable) -> GuardResult:
    mode = RouteMode.ADVANCED_EXPERIMENTAL
    cls = table.get(mode)
    if not cls.enabled:
        return _block(ErrorKind.ROUTE_UNSUPPORTED, "Advanced DOT route is disabled.", mode)
    if amount < cls.min_amount or amount > cls.max_amount:
        return _block(
            ErrorKind.AMOUNT_OUT_OF_RANGE,
            f"Advanced DOT execute supports {cls.min_amount:.2f}-{cls.max_amount:.2f} DOT.",
            mode,
        )
    return _allow(mode, "experimental route enabled")


def evaluate_guard(
    req: TransferRequest,
    snapshots: Snapshots | None = None,
    table: CapabilityTable | None = None,
) -> GuardResult:
    table = table or CAPABILITIES
    result = _evaluate(req, snapshots, table)
    if not result.ok:
        logger.debug(
            "guard blocked %s %s->%s amount=%s: %s",
            req.asset.value, req.from_chain.value, req.to_chain.value,
            req.amount, result.reason,
        )
    return result


def _evaluate(
    req: TransferRequest, snapshots: Snapshots | None, table: CapabilityTable
) -> GuardResult:
    # Callers should have run the validator already; never rely on it here.
    if req.from_chain == req.to_chain:
        return _block(ErrorKind.STRUCTURAL, "From and To must be different.")
    amount = parse_amount(req.amount)
    if amount is None or amount <= 0:
        return _block(ErrorKind.STRUCTURAL, "Amount must be greater than zero.")

    asset_class = get_asset(req.asset).asset_class

    if asset_class is AssetClass.STABLE:
        return _guard_stable(req, amount, table)

    if asset_class is AssetClass.NATIVE:
        if table.in_routes(req.from_chain, req.to_chain, RouteMode.TELEPORT):
            return _guard_teleport(req, amount, snapshots, table)
        if table.in_routes(req.from_chain, req.to_chain, RouteMode.ADVANCED_EXPERIMENTAL):
            return _guard_advanced(amount, table)

    return _block(ErrorKind.ROUTE_UNSUPPORTED, "Unsupported asset/route combination.")
