"""
BscScan 노드 설정 관리
환경 변수에서 한 번만 읽어 프로세스 전체에서 공유
"""
import os
import logging
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from .models import NetworkId

load_dotenv()

logger = logging.getLogger(__name__)
# 루트 로거로 전파되도록 설정
logger.propagate = True
logger.handlers.clear()


class BscscanConfiguration:
    """BscScan 노드 설정 클래스"""

    # ========== 노드 정보 ==========
    NODE_NAME: str = "bscscan"
    NODE_LABEL: str = "Bscscan"
    NODE_DESCRIPTION: str = "Perform Bscscan operations"
    NODE_VERSION: float = 1.0

    # ========== API 엔드포인트 ==========
    # https://docs.bscscan.com/getting-started/endpoint-urls
    BSCSCAN_API_URL: str = os.getenv("BSCSCAN_API_URL", "https://api.bscscan.com/api")
    BSCSCAN_TESTNET_API_URL: str = os.getenv("BSCSCAN_TESTNET_API_URL", "https://api-testnet.bscscan.com/api")

    # 익스플로러 URL (UI 목록용)
    BSCSCAN_EXPLORER_URL: str = "https://bscscan.com/"
    BSCSCAN_TESTNET_EXPLORER_URL: str = "https://testnet.bscscan.com/"

    # ========== 인증 ==========
    # 노드 데이터에 자격 증명이 없을 때 사용하는 기본 API 키
    BSCSCAN_API_KEY: Optional[str] = os.getenv("BSCSCAN_API_KEY")

    # ========== 기본값 ==========
    DEFAULT_NETWORK: str = os.getenv("BSCSCAN_DEFAULT_NETWORK", "bsc")
    DEFAULT_OPERATION: str = "getBalanceSingle"

    # 업스트림 요청 헤더
    REQUEST_HEADERS: dict = {"Content-Type": "application/json"}

    # ========== LangSmith 추적 ==========
    LANGSMITH_TRACING: bool = os.getenv("LANGSMITH_TRACING", "false").lower() == "true"
    LANGSMITH_API_KEY: Optional[str] = os.getenv("LANGSMITH_API_KEY")
    LANGSMITH_PROJECT: str = os.getenv("LANGSMITH_PROJECT", "bscscan-node")
    LANGSMITH_ENDPOINT: str = os.getenv("LANGSMITH_ENDPOINT", "https://api.smith.langchain.com")

    # ========== 기타 설정 ==========
    # 실행 환경 (development 이면 DEBUG 로깅)
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production").lower()
    # 로깅 레벨
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if ENVIRONMENT == "development" else "INFO")

    @classmethod
    def validate(cls) -> bool:
        """설정 유효성 검사"""
        for name in ("BSCSCAN_API_URL", "BSCSCAN_TESTNET_API_URL"):
            url = getattr(cls, name)
            parsed = urlparse(url or "")
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError(f"{name} 값이 올바른 URL이 아닙니다: {url!r}")

        supported_networks = [member.value for member in NetworkId]
        if cls.DEFAULT_NETWORK not in supported_networks:
            raise ValueError(
                f"BSCSCAN_DEFAULT_NETWORK 값이 지원하지 않는 네트워크입니다: {cls.DEFAULT_NETWORK!r} "
                f"(지원: {', '.join(supported_networks)})"
            )

        if not cls.BSCSCAN_API_KEY:
            logger.warning("BSCSCAN_API_KEY가 설정되지 않았습니다. 노드 자격 증명의 API 키만 사용됩니다.")

        return True

    @classmethod
    def is_debug(cls) -> bool:
        return cls.ENVIRONMENT == "development"


# 전역 설정 인스턴스
config = BscscanConfiguration()
