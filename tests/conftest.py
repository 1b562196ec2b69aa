"""
테스트 공용 픽스처
httpx.MockTransport로 BscScan API 응답을 흉내낸다
"""
import json
from typing import Any, Callable, List

import httpx
import pytest

from bscscan_node import BscscanNode

API_KEY = "TESTKEY123"
ADDRESS = "0x0000000000000000000000000000000000001004"
TXHASH = "0x4a8f3a1f5b2c6d7e8f9a0b1c2d3e4f5a6b7c8d9e0f1a2b3c4d5e6f7a8b9c0d1e"


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """JSON 본문을 가진 mock 응답"""
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(data).encode(),
        headers={"content-type": "application/json"},
    )


class RecordingTransport:
    """요청을 기록하는 mock 전송 계층"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture
def node() -> BscscanNode:
    return BscscanNode()


def node_data(api: str, network: str = "bsc", api_key: str = API_KEY, **inputs) -> dict:
    """호스트 노드 데이터 형태"""
    return {
        "actions": {"api": api},
        "networks": {"network": network},
        "credentials": {"apiKey": api_key},
        "inputParameters": inputs,
    }
