from xcm_guard.core.chains import HUB_CHAIN, Chain, get_chain
from xcm_guard.schemas.dry_run import (
    BuyExecution,
    DepositAsset,
    DryRunInstructions,
    DryRunPreview,
    WithdrawAsset,
)
from xcm_guard.schemas.fees import FeeQuote
from xcm_guard.schemas.transfer import TransferRequest


def classify_route(req: TransferRequest, hub: Chain = HUB_CHAIN) -> str:
    if req.from_chain == hub or req.to_chain == hub:
        return "direct"
    return f"via {get_chain(hub).name}"


def build_dry_run(req: TransferRequest, fee: FeeQuote, hub: Chain = HUB_CHAIN) -> DryRunPreview:
    """Assemble a read-only preview of the transfer's intent.

    The instruction triple mirrors withdraw / buy-execution / deposit but is not
    an executable message and is never submitted.
    """
    instructions = DryRunInstructions(
        withdraw_asset=WithdrawAsset(asset=req.asset, amount=req.amount, chain=req.from_chain),
        buy_execution=BuyExecution(fees=fee.total_fee, asset=fee.units),
        deposit_asset=DepositAsset(asset=req.asset, amount=req.amount, chain=req.to_chain),
    )
    return DryRunPreview(
        from_chain=req.from_chain,
        to_chain=req.to_chain,
        asset=req.asset,
        amount=req.amount,
        route=classify_route(req, hub),
        fees=fee,
        instructions=instructions,
    )


def render_dry_run(preview: DryRunPreview) -> str:
    return preview.model_dump_json(indent=2, by_alias=True)
