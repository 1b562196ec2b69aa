"""
BscScan 노드에서 사용하는 헬퍼 함수들
"""
import json
import logging
import sys
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

# 로거 설정
logger = logging.getLogger(__name__)


def ensure_logger_setup():
    """로거가 제대로 설정되었는지 확인하고 필요시 재설정"""
    root = logging.getLogger()
    logger.propagate = True
    logger.handlers.clear()
    # 루트 로거에 핸들러가 없으면 추가
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)


def serialize_query_params(params: Mapping[str, str]) -> str:
    """쿼리 파라미터 직렬화

    입력 순서를 그대로 유지하고, 주소 목록의 쉼표는 인코딩하지 않는다.
    """
    return urlencode(list(params.items()), quote_via=quote, safe=",")


def mask_api_key(params: Mapping[str, str]) -> dict:
    """로깅용으로 apikey 값을 가린 사본 반환"""
    masked = dict(params)
    if masked.get("apikey"):
        masked["apikey"] = "***"
    return masked


# ========== 에러 핸들링 유틸리티 ==========

class BscscanNodeError(Exception):
    """BscScan 노드 관련 커스텀 에러"""
    def __init__(self, message: str, node_name: str = "bscscan", original_error: Optional[Exception] = None):
        self.message = message
        self.node_name = node_name
        self.original_error = original_error
        super().__init__(self.message)


class ConfigurationError(BscscanNodeError):
    """알 수 없는 operation id 또는 network id (I/O 전에 발생)"""


class PreconditionError(BscscanNodeError):
    """실행 컨텍스트의 필수 값 누락 (I/O 전에 발생)"""


class TransportError(BscscanNodeError):
    """네트워크/HTTP 실패 또는 JSON이 아닌 응답"""
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Any = None,
        node_name: str = "bscscan",
        original_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message, node_name=node_name, original_error=original_error)


def extract_upstream_message(body: Any) -> Optional[str]:
    """업스트림 응답 본문에서 사람이 읽을 수 있는 에러 메시지 추출"""
    if body is None:
        return None
    if isinstance(body, str):
        text = body.strip()
        return text[:500] if text else None
    if isinstance(body, dict):
        # BscScan 에러 형태: {"status": "0", "message": "NOTOK", "result": "Invalid API Key"}
        parts = [
            body[key] for key in ("error", "msg", "message", "Message", "result")
            if isinstance(body.get(key), str) and body[key].strip()
        ]
        if parts:
            return ": ".join(parts)
        if isinstance(body.get("error"), dict):
            return json.dumps(body["error"], ensure_ascii=False)
        return json.dumps(body, ensure_ascii=False)[:500]
    return json.dumps(body, ensure_ascii=False)[:500]


def build_error_message(error: Exception) -> str:
    """실패 원인과 업스트림 메시지를 합쳐 에러 메시지 생성"""
    parts = []
    message = getattr(error, "message", None) or str(error)
    if message:
        parts.append(message.rstrip(".") + ".")

    if isinstance(error, TransportError):
        upstream = extract_upstream_message(error.response_body)
        if upstream and upstream not in message:
            parts.append(upstream.rstrip(".") + ".")

    if not parts:
        return "Unexpected Error."
    return " ".join(parts)


def translate_error(error: Exception, node_name: str = "bscscan") -> BscscanNodeError:
    """파이프라인에서 발생한 모든 예외를 단일 노드 에러로 변환

    분류(ConfigurationError, PreconditionError, TransportError)는 유지하고
    메시지만 사람이 읽을 수 있는 형태로 정리한다.
    """
    message = build_error_message(error)

    if isinstance(error, TransportError):
        return TransportError(
            message,
            status_code=error.status_code,
            response_body=error.response_body,
            node_name=node_name,
            original_error=error.original_error or error,
        )
    if isinstance(error, BscscanNodeError):
        return type(error)(message, node_name=node_name, original_error=error.original_error or error)

    return BscscanNodeError(message, node_name=node_name, original_error=error)
