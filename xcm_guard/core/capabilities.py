from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from xcm_guard.config import Settings, settings
from xcm_guard.core.assets import Asset, AssetClass
from xcm_guard.core.chains import Chain


class RouteMode(str, Enum):
    RESERVE_TRANSFER = "reserve-transfer"
    TELEPORT = "teleport"
    ADVANCED_EXPERIMENTAL = "advanced-experimental"


@dataclass(frozen=True)
class Route:
    from_chain: Chain
    to_chain: Chain
    mode: RouteMode


@dataclass(frozen=True)
class CapabilityClass:
    mode: RouteMode
    asset_class: AssetClass
    assets: frozenset[Asset]
    routes: frozenset[Route]
    min_amount: Decimal
    max_amount: Optional[Decimal] = None
    enabled: bool = True


@dataclass(frozen=True)
class BootstrapBuffer:
    fee_buffer: Decimal
    safety_buffer: Decimal

    @property
    def total(self) -> Decimal:
        return self.fee_buffer + self.safety_buffer


def _both_ways(a: Chain, b: Chain, mode: RouteMode) -> set[Route]:
    return {Route(a, b, mode), Route(b, a, mode)}


class CapabilityTable:
    """Immutable registry of legal routes and their amount bounds."""

    def __init__(
        self,
        classes: Mapping[RouteMode, CapabilityClass],
        bootstrap: Mapping[Chain, BootstrapBuffer],
    ):
        self._classes = MappingProxyType(dict(classes))
        self._bootstrap = MappingProxyType(dict(bootstrap))
        self._routes = frozenset(
            route for cls in self._classes.values() for route in cls.routes
        )

    def in_routes(self, from_chain: Chain, to_chain: Chain, mode: RouteMode) -> bool:
        return Route(from_chain, to_chain, mode) in self._routes

    def get(self, mode: RouteMode) -> CapabilityClass:
        return self._classes[mode]

    def bootstrap_for(self, chain: Chain) -> Optional[BootstrapBuffer]:
        return self._bootstrap.get(chain)

    @property
    def classes(self) -> Mapping[RouteMode, CapabilityClass]:
        return self._classes


def build_capability_table(cfg: Settings) -> CapabilityTable:
    stable = CapabilityClass(
        mode=RouteMode.RESERVE_TRANSFER,
        asset_class=AssetClass.STABLE,
        assets=frozenset({Asset.USDC, Asset.USDT}),
        routes=frozenset(
            _both_ways(Chain.ASSET_HUB, Chain.HYDRADX, RouteMode.RESERVE_TRANSFER)
        ),
        min_amount=cfg.STABLE_MIN_AMOUNT,
    )
    teleport = CapabilityClass(
        mode=RouteMode.TELEPORT,
        asset_class=AssetClass.NATIVE,
        assets=frozenset({Asset.DOT}),
        routes=frozenset(
            _both_ways(Chain.ASSET_HUB, Chain.RELAY, RouteMode.TELEPORT)
            | _both_ways(Chain.ASSET_HUB, Chain.PEOPLE, RouteMode.TELEPORT)
        ),
        min_amount=cfg.TELEPORT_MIN_AMOUNT,
    )
    advanced = CapabilityClass(
        mode=RouteMode.ADVANCED_EXPERIMENTAL,
        asset_class=AssetClass.NATIVE,
        assets=frozenset({Asset.DOT}),
        routes=frozenset(
            {Route(Chain.ASSET_HUB, Chain.HYDRADX, RouteMode.ADVANCED_EXPERIMENTAL)}
        ),
        min_amount=cfg.ADVANCED_MIN_AMOUNT,
        max_amount=cfg.ADVANCED_MAX_AMOUNT,
        enabled=cfg.ADVANCED_ROUTE_ENABLED,
    )
    bootstrap = {
        Chain(key): BootstrapBuffer(fee_buffer=fee, safety_buffer=safety)
        for key, (fee, safety) in cfg.BOOTSTRAP_BUFFERS.items()
    }
    return CapabilityTable(
        {cls.mode: cls for cls in (stable, teleport, advanced)},
        bootstrap,
    )


CAPABILITIES = build_capability_table(settings)
