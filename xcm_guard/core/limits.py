from typing import Hashable, Tuple
from cachetools import LRUCache

from xcm_guard.config import settings
from xcm_guard.schemas.transfer import TransferPayload

# Results are pure functions of the payload, so entries never go stale.
evaluation_cache = LRUCache(maxsize=settings.EVALUATION_CACHE_SIZE)


def evaluation_cache_key(payload: TransferPayload) -> Tuple[Hashable, ...]:
    req = payload.request
    snaps = tuple(sorted(
        (chain.value, snap.free, snap.existential_deposit, snap.ok)
        for chain, snap in payload.snapshots.items()
    ))
    return (
        req.from_chain.value,
        req.to_chain.value,
        req.asset.value,
        req.amount,
        snaps,
        payload.network_fee_estimate,
        payload.service_fee_enabled,
    )
