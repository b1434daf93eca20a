from dataclasses import dataclass
from enum import Enum


class Chain(str, Enum):
    ASSET_HUB = "assethub"
    HYDRADX = "hydradx"
    RELAY = "relay"
    PEOPLE = "people"


@dataclass(frozen=True)
class ChainMeta:
    key: Chain
    name: str
    native_symbol: str
    native_decimals: int


CHAINS: dict[Chain, ChainMeta] = {
    Chain.ASSET_HUB: ChainMeta(Chain.ASSET_HUB, "Asset Hub", "DOT", 10),
    Chain.HYDRADX:   ChainMeta(Chain.HYDRADX,   "HydraDX",   "HDX", 12),
    Chain.RELAY:     ChainMeta(Chain.RELAY,     "Relay",     "DOT", 10),
    Chain.PEOPLE:    ChainMeta(Chain.PEOPLE,    "People",    "DOT", 10),
}

# Routes that touch the hub are direct; everything else is relayed through it.
HUB_CHAIN = Chain.ASSET_HUB


def get_chain(key: Chain | str) -> ChainMeta:
    try:
        return CHAINS[Chain(key)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported chain: {key}") from None
