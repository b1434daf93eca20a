from typing import Iterable, Optional

from xcm_guard.config import settings
from xcm_guard.core.assets import Asset, parse_amount
from xcm_guard.core.chains import Chain
from xcm_guard.schemas.transfer import TransferRequest


def validate_request(
    req: TransferRequest,
    supported_assets: Optional[Iterable[Asset]] = None,
    supported_chains: Optional[Iterable[Chain]] = None,
) -> list[str]:
    """Structural checks only; an empty list means the request is well-formed."""
    assets = set(supported_assets) if supported_assets is not None else settings.SUPPORTED_ASSETS
    chains = set(supported_chains) if supported_chains is not None else settings.SUPPORTED_CHAINS

    errs: list[str] = []
    if req.from_chain == req.to_chain:
        errs.append("From and To chains must be different.")

    amount = parse_amount(req.amount)
    if amount is None or amount <= 0:
        errs.append("Amount must be greater than zero.")

    if req.asset not in assets:
        errs.append(f"Unsupported asset: {req.asset.value}.")

    if req.from_chain not in chains or req.to_chain not in chains:
        errs.append("Unsupported chain.")

    return errs
