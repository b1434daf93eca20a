from decimal import ROUND_DOWN, Decimal

from pydantic import BaseModel, ConfigDict, Field

from xcm_guard.core.assets import Asset, human_amount_from_base
from xcm_guard.core.capabilities import RouteMode
from xcm_guard.core.chains import Chain
from xcm_guard.core.errors import ErrorKind

SNAPSHOT_DECIMALS = 6


class TransferRequest(BaseModel):
    from_chain: Chain = Field(..., alias="from")
    to_chain: Chain = Field(..., alias="to")
    asset: Asset
    amount: str = Field(..., description="Human-readable decimal string, e.g. 0.05")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BalanceSnapshot(BaseModel):
    """Native-token balance of one account on one chain, as probed externally."""

    free: Decimal = Field(..., ge=0)
    existential_deposit: Decimal = Field(..., ge=0)
    ok: bool = True
    error: str | None = None
    rpc: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def below_existential_deposit(self) -> bool:
        return self.free < self.existential_deposit

    @classmethod
    def from_base_units(
        cls, free: int, existential_deposit: int, decimals: int, **kwargs
    ) -> "BalanceSnapshot":
        quantum = Decimal(1).scaleb(-SNAPSHOT_DECIMALS)
        return cls(
            free=human_amount_from_base(free, decimals).quantize(quantum, rounding=ROUND_DOWN),
            existential_deposit=human_amount_from_base(existential_deposit, decimals).quantize(
                quantum, rounding=ROUND_DOWN
            ),
            **kwargs,
        )


class GuardResult(BaseModel):
    ok: bool
    hard_block: bool
    mode: RouteMode | None = None
    reason: str | None = None
    min_required: Decimal | None = None
    error: ErrorKind | None = None

    model_config = ConfigDict(frozen=True)


class TransferPayload(BaseModel):
    request: TransferRequest
    snapshots: dict[Chain, BalanceSnapshot] = Field(default_factory=dict)
    network_fee_estimate: str | None = None
    service_fee_enabled: bool = True
