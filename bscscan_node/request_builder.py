"""
파라미터 추출 및 요청 생성
"""
import logging
from typing import Dict, Mapping

from .models import OperationDescriptor, RequestSpec
from .utils import PreconditionError, mask_api_key

logger = logging.getLogger(__name__)


def resolve_params(descriptor: OperationDescriptor, fields: Mapping[str, str]) -> Dict[str, str]:
    """작업에 필요한 입력 필드만 추출

    값은 변환하거나 형식을 검사하지 않고 그대로 넘긴다 (검증은 업스트림 API 몫).
    """
    params: Dict[str, str] = {}
    for field_name in sorted(descriptor.required_fields):
        value = fields.get(field_name)
        if value is None or not str(value).strip():
            raise PreconditionError(f"Missing required field '{field_name}' for operation '{descriptor.id}'")
        params[field_name] = value
    return params


def build_request(
    descriptor: OperationDescriptor,
    params: Mapping[str, str],
    api_key: str,
    base_url: str,
) -> RequestSpec:
    """HTTP 호출 한 번에 필요한 URL과 쿼리 파라미터 생성

    순서: module, action, 작업별 필드, tag, apikey
    """
    if not api_key or not str(api_key).strip():
        raise PreconditionError("Missing API key in credentials")

    query = [
        ("module", descriptor.upstream_module),
        ("action", descriptor.upstream_action),
    ]
    for field_name, query_name in descriptor.field_mapping:
        if field_name in params:
            query.append((query_name, params[field_name]))
    if descriptor.include_tag:
        query.append(("tag", "latest"))
    query.append(("apikey", api_key))

    spec = RequestSpec(url=base_url, query_params=tuple(query))
    logger.debug(f"[{descriptor.id}] 요청 생성: {base_url} {mask_api_key(spec.params)}")
    return spec
