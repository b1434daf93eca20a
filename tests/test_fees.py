from decimal import Decimal

from xcm_guard.core.assets import Asset, AssetClass
from xcm_guard.core.capabilities import RouteMode
from xcm_guard.core.chains import Chain
from xcm_guard.schemas.fees import UNKNOWN
from xcm_guard.schemas.transfer import TransferRequest
from xcm_guard.services.fees import FeeClamp, clamp_for, quote_fees, quote_for_request

DOT_CLAMP = FeeClamp(pct=Decimal("0.0015"), min_fee=Decimal("0.02"), max_fee=Decimal("0.20"))


def test_fee_clamped_to_minimum():
    quote = quote_fees("1", "0.012", DOT_CLAMP, "DOT")
    assert quote.service_fee == "0.020000"
    assert quote.network_fee_estimate == "0.012000"
    assert quote.total_fee == "0.032000"
    assert quote.notes == ["Service fee clamped to minimum 0.02 DOT"]


def test_fee_inside_clamp_has_no_notes():
    quote = quote_fees("100", "0.012", DOT_CLAMP, "DOT")
    assert quote.service_fee == "0.150000"
    assert quote.total_fee == "0.162000"
    assert quote.notes == []


def test_fee_clamped_to_maximum():
    quote = quote_fees("1000", "0.012", DOT_CLAMP, "DOT")
    assert quote.service_fee == "0.200000"
    assert quote.notes == ["Service fee clamped to maximum 0.20 DOT"]


def test_clamp_boundary_uses_exact_arithmetic():
    # 0.7 * 0.1 is 0.06999999999999999 in binary floating point
    clamp = FeeClamp(pct=Decimal("0.1"), min_fee=Decimal("0.07"), max_fee=Decimal("1"))
    quote = quote_fees("0.7", "0", clamp, "DOT")
    assert quote.service_fee == "0.070000"
    assert quote.notes == []


def test_output_rounds_half_up():
    clamp = FeeClamp(pct=Decimal("0.0000001"), min_fee=Decimal("0"), max_fee=Decimal("1"))
    quote = quote_fees("5", "0", clamp, "DOT")
    assert quote.service_fee == "0.000001"
    assert quote.total_fee == "0.000001"


def test_teleport_returns_unknown_sentinel():
    quote = quote_fees("10", "0.012", DOT_CLAMP, "DOT", mode=RouteMode.TELEPORT)
    assert quote.network_fee_estimate == UNKNOWN
    assert quote.service_fee == UNKNOWN
    assert quote.total_fee == UNKNOWN
    assert not quote.estimable
    assert any("on-chain" in note for note in quote.notes)


def test_quote_is_pure():
    a = quote_fees("42.5", "0.012", DOT_CLAMP, "DOT", mode=RouteMode.RESERVE_TRANSFER)
    b = quote_fees("42.5", "0.012", DOT_CLAMP, "DOT", mode=RouteMode.RESERVE_TRANSFER)
    assert a == b


def test_service_fee_non_decreasing_then_constant():
    amounts = ["0.01", "1", "13", "14", "50", "133", "134", "500", "10000"]
    fees = [Decimal(quote_fees(a, "0", DOT_CLAMP, "DOT").service_fee) for a in amounts]
    assert fees == sorted(fees)
    assert fees[-3:] == [Decimal("0.2")] * 3


def test_service_fee_opt_out():
    quote = quote_fees("1000", "0.012", DOT_CLAMP, "DOT", service_fee_enabled=False)
    assert quote.service_fee == "0.000000"
    assert quote.total_fee == "0.012000"
    assert quote.notes == ["Service fee disabled (opt-out)."]


def test_invalid_inputs_are_reported_not_raised():
    quote = quote_fees("-1", "0.012", DOT_CLAMP, "DOT")
    assert quote.total_fee == UNKNOWN
    quote = quote_fees("1", "n/a", DOT_CLAMP, "DOT")
    assert quote.total_fee == UNKNOWN
    assert quote.notes == ["Network fee estimate is unavailable."]


def test_quote_for_request_uses_asset_class():
    req = TransferRequest(from_chain=Chain.ASSET_HUB, to_chain=Chain.HYDRADX, asset=Asset.USDC, amount="1")
    quote = quote_for_request(req, "0.012", mode=RouteMode.RESERVE_TRANSFER)
    assert quote.units == "USDC"
    assert quote.service_fee == "0.020000"
    assert clamp_for(AssetClass.STABLE).min_fee == Decimal("0.02")


def test_quote_for_request_defaults_network_estimate():
    req = TransferRequest(from_chain=Chain.ASSET_HUB, to_chain=Chain.HYDRADX, asset=Asset.DOT, amount="0.30")
    quote = quote_for_request(req)
    assert quote.network_fee_estimate == "0.012000"


def test_huge_network_estimate_is_reported_not_raised():
    quote = quote_fees("1", "1e30", DOT_CLAMP, "DOT")
    assert quote.total_fee == UNKNOWN
    assert quote.notes == ["Network fee estimate is implausibly large."]


def test_large_network_estimate_below_bound_keeps_all_digits():
    quote = quote_fees("1", "999999999999999999", DOT_CLAMP, "DOT")
    assert quote.network_fee_estimate == "999999999999999999.000000"
    assert quote.total_fee == "999999999999999999.020000"
