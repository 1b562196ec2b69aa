"""
BscScan 노드에서 사용하는 타입 정의
"""
from typing import Any, Dict, FrozenSet, List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .utils import PreconditionError, serialize_query_params

# 결과 엔벨로프: 업스트림 응답 레코드의 순서 있는 목록
ResultEnvelope = List[Any]


# 네트워크 Enum
class NetworkId(str, Enum):
    """지원하는 네트워크"""
    BSC = "bsc"                    # BNB Smart Chain 메인넷
    BSC_TESTNET = "bsc_testnet"    # BNB Smart Chain 테스트넷


class OperationDescriptor(BaseModel):
    """지원하는 업스트림 작업 하나의 정의 (불변)"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="작업 식별자")
    upstream_module: str = Field(description="업스트림 module 파라미터")
    upstream_action: str = Field(description="업스트림 action 파라미터")
    required_fields: FrozenSet[str] = Field(description="필수 입력 필드")
    # (입력 필드명, 업스트림 쿼리 파라미터명) 순서대로
    field_mapping: Tuple[Tuple[str, str], ...] = Field(description="입력 필드 → 쿼리 파라미터 매핑")
    include_tag: bool = Field(default=False, description="tag=latest 포함 여부")
    label: str = Field(default="", description="UI 표시 이름")
    description: str = Field(default="", description="UI 설명")
    aliases: Tuple[str, ...] = Field(default=(), description="호스트의 이전 작업 id")


class RequestSpec(BaseModel):
    """HTTP 호출 한 번에 대한 요청 정의"""
    model_config = ConfigDict(frozen=True)

    url: str
    # 순서를 유지하는 (이름, 값) 목록
    query_params: Tuple[Tuple[str, str], ...]

    @property
    def params(self) -> Dict[str, str]:
        return dict(self.query_params)

    @property
    def query_string(self) -> str:
        return serialize_query_params(self.params)

    @property
    def full_url(self) -> str:
        return f"{self.url}?{self.query_string}"


class ExecutionContext(BaseModel):
    """노드 실행 한 번의 입력 (호출마다 새로 생성)"""
    operation_id: str
    network_id: str
    api_key: Optional[str] = None
    fields: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_node_data(cls, node_data: Dict[str, Any], default_api_key: Optional[str] = None) -> "ExecutionContext":
        """호스트 노드 데이터에서 실행 컨텍스트 생성

        node_data 형태:
            {
                "actions": {"api": "getBalanceSingle"},
                "networks": {"network": "bsc"},
                "credentials": {"apiKey": "..."},
                "inputParameters": {"address": "0x..."}
            }
        """
        if not isinstance(node_data, dict):
            raise PreconditionError("Required data missing")

        actions = node_data.get("actions")
        networks = node_data.get("networks")
        credentials = node_data.get("credentials")
        input_parameters = node_data.get("inputParameters")

        # 각 블록은 dict 여야 한다
        if not all(isinstance(block, dict) for block in (actions, networks, credentials, input_parameters)):
            raise PreconditionError("Required data missing")

        api_key = credentials.get("apiKey")
        fields = {
            str(name): value
            for name, value in input_parameters.items()
            if isinstance(value, str)
        }

        return cls(
            operation_id=str(actions.get("api") or ""),
            network_id=str(networks.get("network") or ""),
            api_key=api_key if isinstance(api_key, str) and api_key else default_api_key,
            fields=fields,
        )
