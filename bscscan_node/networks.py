#networks.py

import logging
from typing import Dict

from .configuration import config
from .models import NetworkId
from .utils import ConfigurationError

logger = logging.getLogger(__name__)


def get_network_configs() -> Dict[str, dict]:
    return {
        NetworkId.BSC.value: {
            "name": "BNB Smart Chain",
            "label": "BSC Mainnet",
            "symbol": "BNB",
            "explorer": config.BSCSCAN_EXPLORER_URL,
            "api": config.BSCSCAN_API_URL,
        },
        NetworkId.BSC_TESTNET.value: {
            "name": "BNB Smart Chain Testnet",
            "label": "BSC Testnet",
            "symbol": "tBNB",
            "explorer": config.BSCSCAN_TESTNET_EXPLORER_URL,
            "api": config.BSCSCAN_TESTNET_API_URL,
        },
    }


NETWORK_CONFIGS = get_network_configs()


def resolve_network(network_id) -> str:
    """네트워크 id에 해당하는 API 기본 URL 반환

    알 수 없는 네트워크는 빈 URL 대신 ConfigurationError로 실패한다.
    """
    key = network_id.value if isinstance(network_id, NetworkId) else str(network_id or "").strip()
    cfg = NETWORK_CONFIGS.get(key)
    if cfg is None or not cfg.get("api"):
        logger.warning(f"지원하지 않는 네트워크: {network_id!r}")
        raise ConfigurationError(
            f"Unsupported network '{network_id}'. Supported networks: {', '.join(NETWORK_CONFIGS)}"
        )
    logger.debug(f"[{key}] API URL: {cfg['api']}")
    return cfg["api"]
