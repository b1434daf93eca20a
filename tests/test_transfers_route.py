from fastapi.testclient import TestClient

from xcm_guard.core.limits import evaluation_cache
from xcm_guard.main import app

client = TestClient(app)

AH_TO_RELAY = {'from': 'assethub', 'to': 'relay', 'asset': 'DOT', 'amount': '0.05'}
AH_TO_HYDRA_USDC = {'from': 'assethub', 'to': 'hydradx', 'asset': 'USDC', 'amount': '1.00'}
RELAY_BELOW_ED = {'relay': {'free': '0', 'existential_deposit': '0.01'}}


def test_validate_ok():
    r = client.post('/transfers/validate', json=AH_TO_HYDRA_USDC)
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'ok'
    assert body['data'] == {'errors': []}


def test_validate_reports_errors():
    payload = {'from': 'hydradx', 'to': 'hydradx', 'asset': 'USDT', 'amount': '0'}
    r = client.post('/transfers/validate', json=payload)
    assert r.status_code == 200
    assert len(r.json()['data']['errors']) == 2


def test_unknown_chain_rejected_by_schema():
    payload = dict(AH_TO_HYDRA_USDC, to='kusama')
    r = client.post('/transfers/validate', json=payload)
    assert r.status_code == 422


def test_guard_reports_min_required():
    r = client.post('/transfers/guard', json={'request': AH_TO_RELAY, 'snapshots': RELAY_BELOW_ED})
    assert r.status_code == 200
    data = r.json()['data']
    assert data['ok'] is False
    assert data['hard_block'] is True
    assert data['mode'] == 'teleport'
    assert data['error'] == 'amount_out_of_range'
    assert data['min_required'] == '0.07'


def test_guard_without_snapshot_is_not_allowed():
    r = client.post('/transfers/guard', json={'request': AH_TO_RELAY})
    data = r.json()['data']
    assert data['ok'] is False
    assert data['error'] == 'unknown_balance'


def test_quote_for_teleport_is_unknown():
    r = client.post('/transfers/quote', json={'request': dict(AH_TO_RELAY, amount='1'), 'snapshots': RELAY_BELOW_ED})
    data = r.json()['data']
    for k in ('network_fee_estimate', 'service_fee', 'total_fee'):
        assert data[k] == 'unknown'


def test_quote_reserve_transfer():
    r = client.post('/transfers/quote', json={'request': AH_TO_HYDRA_USDC, 'network_fee_estimate': '0.01'})
    data = r.json()['data']
    assert data['units'] == 'USDC'
    assert data['total_fee'] == '0.030000'


def test_evaluate_builds_preview_when_allowed():
    evaluation_cache.clear()
    r = client.post('/transfers/evaluate', json={'request': AH_TO_HYDRA_USDC})
    assert r.status_code == 200
    data = r.json()['data']
    assert data['errors'] == []
    assert data['guard']['ok'] is True
    assert data['can_preview'] is True
    assert data['dry_run']['route'] == 'direct'
    assert data['dry_run']['fees']['total_fee'] == '0.032000'


def test_evaluate_is_memoized():
    evaluation_cache.clear()
    body = {'request': AH_TO_RELAY, 'snapshots': RELAY_BELOW_ED}
    first = client.post('/transfers/evaluate', json=body).json()
    assert len(evaluation_cache) == 1
    second = client.post('/transfers/evaluate', json=body).json()
    assert first == second
    assert len(evaluation_cache) == 1
    assert first['data']['can_preview'] is False
    assert first['data']['dry_run'] is None


def test_dry_run_ok():
    r = client.post('/transfers/dry-run', json={'request': dict(AH_TO_RELAY, amount='0.10'), 'snapshots': RELAY_BELOW_ED})
    assert r.status_code == 200
    data = r.json()['data']
    assert data['mode'] == 'dry-run'
    assert data['from'] == 'assethub'
    assert data['instructions']['buy_execution']['fees'] == 'unknown'


def test_dry_run_invalid_request():
    payload = {'request': dict(AH_TO_HYDRA_USDC, amount='abc')}
    r = client.post('/transfers/dry-run', json=payload)
    assert r.status_code == 400
    assert r.json()['detail']['error']['code'] == 'invalid_request'


def test_dry_run_blocked_by_guard():
    r = client.post('/transfers/dry-run', json={'request': AH_TO_RELAY, 'snapshots': RELAY_BELOW_ED})
    assert r.status_code == 400
    error = r.json()['detail']['error']
    assert error['code'] == 'amount_out_of_range'
    assert 'bootstrap' in error['message']


def test_quote_with_huge_network_estimate_is_data():
    r = client.post('/transfers/quote', json={'request': dict(AH_TO_HYDRA_USDC, amount='1'), 'network_fee_estimate': '1e30'})
    assert r.status_code == 200
    data = r.json()['data']
    assert data['total_fee'] == 'unknown'
    assert data['notes'] == ['Network fee estimate is implausibly large.']
