import logging

from fastapi import APIRouter

from xcm_guard.core.limits import evaluation_cache, evaluation_cache_key
from xcm_guard.core.responses import ok, err
from xcm_guard.core.validation import validate_request
from xcm_guard.schemas.transfer import TransferPayload, TransferRequest
from xcm_guard.services.dry_run import build_dry_run
from xcm_guard.services.evaluate import evaluate_transfer
from xcm_guard.services.fees import quote_for_request
from xcm_guard.services.guard import evaluate_guard

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/transfers', tags=['transfers'])


@router.post('/validate')
def validate_transfer(payload: TransferRequest):
    return ok({'errors': validate_request(payload)})


@router.post('/guard')
def guard_transfer(payload: TransferPayload):
    return ok(evaluate_guard(payload.request, payload.snapshots))


@router.post('/quote')
def quote_transfer(payload: TransferPayload):
    guard = evaluate_guard(payload.request, payload.snapshots)
    quote = quote_for_request(
        payload.request,
        payload.network_fee_estimate,
        mode=guard.mode,
        service_fee_enabled=payload.service_fee_enabled,
    )
    return ok(quote)


@router.post('/evaluate')
def evaluate(payload: TransferPayload):
    ck = evaluation_cache_key(payload)
    if ck in evaluation_cache:
        return ok(evaluation_cache[ck])

    result = evaluate_transfer(
        payload.request,
        payload.snapshots,
        payload.network_fee_estimate,
        payload.service_fee_enabled,
    )
    evaluation_cache[ck] = result
    return ok(result)


@router.post('/dry-run')
def dry_run(payload: TransferPayload):
    errors = validate_request(payload.request)
    if errors:
        return err(' '.join(errors), code='invalid_request', http_status=400)

    guard = evaluate_guard(payload.request, payload.snapshots)
    if not guard.ok:
        logger.info("dry-run refused: %s", guard.reason)
        return err(guard.reason, code=guard.error, http_status=400)

    quote = quote_for_request(
        payload.request,
        payload.network_fee_estimate,
        mode=guard.mode,
        service_fee_enabled=payload.service_fee_enabled,
    )
    return ok(build_dry_run(payload.request, quote))
