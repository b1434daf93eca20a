from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from xcm_guard.core.assets import Asset
from xcm_guard.core.chains import Chain
from xcm_guard.schemas.fees import FeeQuote


class WithdrawAsset(BaseModel):
    asset: Asset
    amount: str
    chain: Chain


class BuyExecution(BaseModel):
    fees: str
    asset: str


class DepositAsset(BaseModel):
    asset: Asset
    amount: str
    chain: Chain


class DryRunInstructions(BaseModel):
    withdraw_asset: WithdrawAsset
    buy_execution: BuyExecution
    deposit_asset: DepositAsset


class DryRunPreview(BaseModel):
    mode: Literal["dry-run"] = "dry-run"
    from_chain: Chain = Field(..., alias="from")
    to_chain: Chain = Field(..., alias="to")
    asset: Asset
    amount: str
    route: str
    fees: FeeQuote
    instructions: DryRunInstructions

    model_config = ConfigDict(populate_by_name=True)
