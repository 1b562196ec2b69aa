"""
BscScan 액션 노드 - 작업 디스패치 실행 엔진

작업 조회 → 네트워크 URL 결정 → 파라미터 추출 → 요청 생성 → HTTP 호출 → 응답 정규화
모든 실패는 run()의 한 지점에서 변환되어 전달된다.
"""
import logging
from typing import Any, Dict, Optional, Union

import httpx
from langsmith import traceable

from .configuration import BscscanConfiguration, config
from .executor import execute_request, normalize_response
from .models import ExecutionContext, ResultEnvelope
from .networks import resolve_network
from .operations import OperationRegistry, get_registry
from .request_builder import build_request, resolve_params
from .utils import BscscanNodeError, ensure_logger_setup, translate_error

logger = logging.getLogger(__name__)


def _hide_credentials(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """추적 입력에서 자격 증명 제거"""
    node_data = inputs.get("node_data")
    if isinstance(node_data, ExecutionContext):
        node_data = node_data.model_dump(exclude={"api_key"})
    elif isinstance(node_data, dict):
        node_data = {key: value for key, value in node_data.items() if key != "credentials"}
    return {"node_data": node_data}


class BscscanNode:
    """BscScan 작업을 수행하는 액션 노드

    레지스트리와 설정은 생성 시 한 번 주입되며 실행 중에 변경되지 않는다.
    실행마다 상태를 남기지 않으므로 여러 실행을 동시에 돌려도 된다.
    """

    def __init__(
        self,
        registry: Optional[OperationRegistry] = None,
        configuration: Optional[BscscanConfiguration] = None,
    ):
        self.configuration = configuration or config
        self.registry = registry or get_registry()
        self.name = self.configuration.NODE_NAME
        self.label = self.configuration.NODE_LABEL
        self.description = self.configuration.NODE_DESCRIPTION
        self.version = self.configuration.NODE_VERSION

    def to_context(self, node_data: Union[ExecutionContext, Dict[str, Any]]) -> ExecutionContext:
        if isinstance(node_data, ExecutionContext):
            if not node_data.api_key and self.configuration.BSCSCAN_API_KEY:
                return node_data.model_copy(update={"api_key": self.configuration.BSCSCAN_API_KEY})
            return node_data
        return ExecutionContext.from_node_data(node_data, default_api_key=self.configuration.BSCSCAN_API_KEY)

    @traceable(name="bscscan_node", run_type="tool", process_inputs=_hide_credentials)
    async def run(
        self,
        node_data: Union[ExecutionContext, Dict[str, Any]],
        client: Optional[httpx.AsyncClient] = None,
    ) -> ResultEnvelope:
        """노드 실행

        Args:
            node_data: 호스트 노드 데이터 또는 ExecutionContext
            client: 사용할 httpx.AsyncClient (없으면 호출마다 새로 생성)

        Returns:
            업스트림 응답 레코드 목록

        Raises:
            ConfigurationError, PreconditionError, TransportError, BscscanNodeError
        """
        ensure_logger_setup()
        try:
            context = self.to_context(node_data)
            descriptor = self.registry.lookup(context.operation_id)
            base_url = resolve_network(context.network_id)
            params = resolve_params(descriptor, context.fields)
            spec = build_request(descriptor, params, context.api_key, base_url)

            logger.info(f"[{self.name}] {descriptor.id} 실행 ({context.network_id})")
            payload = await execute_request(spec, client=client)
        except BscscanNodeError as e:
            error = translate_error(e, node_name=self.name)
            logger.warning(f"[{self.name}] 실행 실패: {error.message}")
            raise error from e
        except Exception as e:
            logger.error(f"[{self.name}] 알 수 없는 오류 발생 → {e}", exc_info=True)
            raise translate_error(e, node_name=self.name) from e

        results = normalize_response(payload)
        logger.info(f"[{self.name}] {descriptor.id} 완료: {len(results)}개 레코드")
        return results

    async def __call__(self, node_data, client: Optional[httpx.AsyncClient] = None) -> ResultEnvelope:
        return await self.run(node_data, client=client)


# 전역 노드 인스턴스
_node = None


def get_node() -> BscscanNode:
    """노드 인스턴스 가져오기"""
    global _node
    if _node is None:
        _node = BscscanNode()
    return _node
