from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import Optional


class Asset(str, Enum):
    DOT = "DOT"
    USDC = "USDC"
    USDT = "USDT"


class AssetClass(str, Enum):
    NATIVE = "native"
    STABLE = "stable"


@dataclass(frozen=True)
class AssetMeta:
    symbol: str
    decimals: int
    asset_class: AssetClass

    @property
    def native(self) -> bool:
        return self.asset_class is AssetClass.NATIVE


ASSETS: dict[Asset, AssetMeta] = {
    Asset.DOT:  AssetMeta("DOT",  10, AssetClass.NATIVE),
    Asset.USDC: AssetMeta("USDC",  6, AssetClass.STABLE),
    Asset.USDT: AssetMeta("USDT",  6, AssetClass.STABLE),
}


def get_asset(symbol: Asset | str) -> AssetMeta:
    try:
        return ASSETS[Asset(symbol)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported asset: {symbol}") from None


def parse_amount(value) -> Optional[Decimal]:
    """Parse a user-entered decimal string.

    Returns ``None`` for anything that is not a finite number, so callers can
    report the problem as data instead of catching exceptions.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def format_amount(value: Decimal, places: int) -> str:
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return format(value.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def human_amount_from_base(amount_base_units: int, decimals: int) -> Decimal:
    return Decimal(int(amount_base_units)).scaleb(-decimals)


def base_amount_from_human(amount_human: str, decimals: int) -> int:
    # Extra fractional digits are dropped, never rounded up.
    amount = parse_amount(amount_human)
    if amount is None or amount <= 0:
        return 0
    return int(amount.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN))
