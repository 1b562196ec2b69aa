import logging
from typing import Any, Optional

import certifi
import httpx

from .configuration import config
from .models import RequestSpec, ResultEnvelope
from .utils import TransportError, mask_api_key

# 로거 설정
logger = logging.getLogger(__name__)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


async def execute_request(spec: RequestSpec, client: Optional[httpx.AsyncClient] = None) -> Any:
    """GET 요청 한 번을 보내고 JSON 응답 본문을 반환

    재시도나 타임아웃 재정의 없이 전송 계층 기본값을 사용한다.
    client를 넘기면 그대로 사용하고 닫지 않는다.
    """
    if client is None:
        async with httpx.AsyncClient(verify=certifi.where()) as owned_client:
            return await _send(owned_client, spec)
    return await _send(client, spec)


async def _send(client: httpx.AsyncClient, spec: RequestSpec) -> Any:
    url = spec.full_url
    try:
        res = await client.get(url, headers=dict(config.REQUEST_HEADERS))
        logger.debug(f"응답 상태코드: {res.status_code} ({spec.url} {mask_api_key(spec.params)})")
        res.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning(f"HTTP 오류 (상태코드: {status_code}) → API: {spec.url}")
        raise TransportError(
            f"Request failed with status code {status_code}",
            status_code=status_code,
            response_body=_response_body(e.response),
            original_error=e,
        ) from e
    except (httpx.RequestError, httpx.InvalidURL) as e:
        # 네트워크 오류 (DNS, 연결 거부, 연결 끊김, 잘못된 URL 등)
        logger.warning(f"요청 오류 → {e!r}. API: {spec.url}")
        raise TransportError(
            str(e) or type(e).__name__,
            original_error=e,
        ) from e

    try:
        return res.json()
    except ValueError as e:
        logger.warning(f"JSON 파싱 실패 (상태코드: {res.status_code}) → {e}. 응답 본문: {res.text[:200]}")
        raise TransportError(
            "Upstream returned a non-JSON response",
            status_code=res.status_code,
            response_body=res.text,
            original_error=e,
        ) from e


def normalize_response(payload: Any) -> ResultEnvelope:
    """업스트림 응답을 레코드 목록으로 정규화

    배열이면 순서대로 각 요소를, 아니면 응답 전체를 하나의 레코드로 담는다.
    status/message/result 필드는 풀지 않고 그대로 둔다.
    """
    if isinstance(payload, list):
        return list(payload)
    return [payload]
