import pytest

from bscscan_node import ConfigurationError, NetworkId, get_network_configs, resolve_network


def test_primary_network_resolves_to_mainnet_endpoint():
    assert resolve_network("bsc") == "https://api.bscscan.com/api"
    assert resolve_network(NetworkId.BSC) == "https://api.bscscan.com/api"


def test_testnet_resolves_to_testnet_endpoint():
    assert resolve_network("bsc_testnet") == "https://api-testnet.bscscan.com/api"
    assert resolve_network(NetworkId.BSC_TESTNET) == "https://api-testnet.bscscan.com/api"


@pytest.mark.parametrize("network_id", ["homestead", "", None, "BSC", "polygon"])
def test_unknown_network_fails_closed(network_id):
    with pytest.raises(ConfigurationError):
        resolve_network(network_id)


def test_every_network_id_has_exactly_one_endpoint():
    configs = get_network_configs()
    assert set(configs) == {member.value for member in NetworkId}
    for cfg in configs.values():
        assert cfg["api"].startswith("https://")
