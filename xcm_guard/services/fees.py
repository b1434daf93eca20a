from dataclasses import dataclass
from decimal import Decimal

from xcm_guard.config import settings
from xcm_guard.core.assets import AssetClass, format_amount, get_asset, parse_amount
from xcm_guard.core.capabilities import RouteMode
from xcm_guard.schemas.fees import UNKNOWN, FeeQuote
from xcm_guard.schemas.transfer import TransferRequest

ON_CHAIN_MODES = frozenset({RouteMode.TELEPORT})

# Estimates this large cannot be added to a service fee without losing digits.
MAX_NETWORK_FEE = Decimal("1e18")


@dataclass(frozen=True)
class FeeClamp:
    pct: Decimal
    min_fee: Decimal
    max_fee: Decimal


def clamp_for(asset_class: AssetClass) -> FeeClamp:
    cfg = settings.SERVICE_FEES[asset_class.value]
    return FeeClamp(pct=cfg["pct"], min_fee=cfg["min"], max_fee=cfg["max"])


def _unknown_quote(units: str, notes: list[str]) -> FeeQuote:
    return FeeQuote(
        units=units,
        network_fee_estimate=UNKNOWN,
        service_fee=UNKNOWN,
        total_fee=UNKNOWN,
        notes=notes,
    )


def quote_fees(
    amount: str,
    network_fee_estimate: str,
    clamp: FeeClamp,
    units: str,
    mode: RouteMode | None = None,
    service_fee_enabled: bool = True,
) -> FeeQuote:
    if mode in ON_CHAIN_MODES:
        return _unknown_quote(units, [
            "Teleport mode: fees are paid on-chain.",
            "Small teleports may be largely consumed by execution costs.",
        ])

    value = parse_amount(amount)
    if value is None or value <= 0:
        return _unknown_quote(units, ["Amount must be greater than zero to quote fees."])
    network = parse_amount(network_fee_estimate)
    if network is None or network < 0:
        return _unknown_quote(units, ["Network fee estimate is unavailable."])
    if network >= MAX_NETWORK_FEE:
        return _unknown_quote(units, ["Network fee estimate is implausibly large."])

    places = settings.FEE_DECIMALS
    notes: list[str] = []

    if not service_fee_enabled:
        service = Decimal(0)
        notes.append("Service fee disabled (opt-out).")
    else:
        service = value * clamp.pct
        if service < clamp.min_fee:
            service = clamp.min_fee
            notes.append(f"Service fee clamped to minimum {clamp.min_fee} {units}")
        if service > clamp.max_fee:
            service = clamp.max_fee
            notes.append(f"Service fee clamped to maximum {clamp.max_fee} {units}")

    return FeeQuote(
        units=units,
        network_fee_estimate=format_amount(network, places),
        service_fee=format_amount(service, places),
        total_fee=format_amount(network + service, places),
        notes=notes,
    )


def quote_for_request(
    req: TransferRequest,
    network_fee_estimate: str | None = None,
    mode: RouteMode | None = None,
    service_fee_enabled: bool = True,
) -> FeeQuote:
    meta = get_asset(req.asset)
    if network_fee_estimate is None:
        network_fee_estimate = settings.DEFAULT_NETWORK_FEE_ESTIMATE
    return quote_fees(
        req.amount,
        network_fee_estimate,
        clamp_for(meta.asset_class),
        meta.symbol,
        mode=mode,
        service_fee_enabled=service_fee_enabled,
    )
