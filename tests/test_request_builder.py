import pytest

from bscscan_node import PreconditionError, build_request, get_registry, resolve_params

from conftest import ADDRESS, API_KEY, TXHASH

MAINNET = "https://api.bscscan.com/api"


def _build(operation_id, fields, api_key=API_KEY):
    descriptor = get_registry().lookup(operation_id)
    params = resolve_params(descriptor, fields)
    return build_request(descriptor, params, api_key, MAINNET)


def test_single_balance_query_order():
    spec = _build("getBalanceSingle", {"address": ADDRESS})

    assert spec.url == MAINNET
    assert spec.query_params == (
        ("module", "account"),
        ("action", "balance"),
        ("address", ADDRESS),
        ("tag", "latest"),
        ("apikey", API_KEY),
    )


def test_contract_creator_uses_contractaddresses_without_tag():
    addresses = f"{ADDRESS},0x0000000000000000000000000000000000001000"
    spec = _build("getContractCreator", {"address": addresses})

    assert spec.params == {
        "module": "contract",
        "action": "getcontractcreation",
        "contractaddresses": addresses,
        "apikey": API_KEY,
    }


def test_tx_receipt_status_uses_txhash():
    spec = _build("getTxReceiptStatus", {"txhash": TXHASH, "address": ADDRESS})

    assert spec.params == {
        "module": "transaction",
        "action": "gettxreceiptstatus",
        "txhash": TXHASH,
        "apikey": API_KEY,
    }


def test_build_is_deterministic():
    first = _build("getBalanceMulti", {"address": f"{ADDRESS},{ADDRESS}"})
    second = _build("getBalanceMulti", {"address": f"{ADDRESS},{ADDRESS}"})

    assert first == second
    assert first.full_url == second.full_url


def test_comma_separated_addresses_are_not_escaped():
    spec = _build("getBalanceMulti", {"address": "0xaaa,0xbbb"})

    assert spec.query_string == "module=account&action=balancemulti&address=0xaaa,0xbbb&tag=latest&apikey=TESTKEY123"


def test_values_are_percent_encoded():
    spec = _build("getContractAbi", {"address": "0x a&b"})

    assert "address=0x%20a%26b" in spec.query_string


def test_missing_txhash_raises_precondition_error():
    descriptor = get_registry().lookup("getTxReceiptStatus")
    with pytest.raises(PreconditionError, match="txhash"):
        resolve_params(descriptor, {})


@pytest.mark.parametrize("value", ["", "   "])
def test_empty_address_raises_precondition_error(value):
    descriptor = get_registry().lookup("getBalanceSingle")
    with pytest.raises(PreconditionError, match="address"):
        resolve_params(descriptor, {"address": value})


def test_values_pass_through_without_validation():
    descriptor = get_registry().lookup("getContractAbi")
    assert resolve_params(descriptor, {"address": "not-an-address"}) == {"address": "not-an-address"}


def test_missing_api_key_raises_precondition_error():
    with pytest.raises(PreconditionError, match="API key"):
        _build("getBalanceSingle", {"address": ADDRESS}, api_key="")
