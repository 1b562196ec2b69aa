"""
노드 라우터 (작업 목록, 네트워크 목록, 노드 실행)
"""
from fastapi import Request
from fastapi.responses import JSONResponse
import logging

from ..configuration import config
from ..networks import get_network_configs
from ..node import get_node
from ..operations import get_registry
from ..utils import BscscanNodeError, ConfigurationError, PreconditionError, TransportError

logger = logging.getLogger(__name__)


def error_status_code(error: Exception) -> int:
    """에러 분류에 맞는 HTTP 상태코드"""
    if isinstance(error, (ConfigurationError, PreconditionError)):
        return 400
    if isinstance(error, TransportError):
        return 502
    return 500


def register_node_routes(app):
    """노드 라우트를 FastAPI 앱에 등록"""

    @app.get("/api/bscscan/operations")
    async def get_operations():
        """지원하는 작업 목록 조회 API"""
        registry = get_registry()
        operations = [
            {
                "name": op.id,
                "label": op.label,
                "description": op.description,
                "requiredFields": sorted(op.required_fields),
            }
            for op in registry.list_operations()
        ]
        return JSONResponse(content={"operations": operations, "default": registry.default_operation})

    @app.get("/api/bscscan/networks")
    async def get_networks():
        """지원하는 네트워크 목록 조회 API"""
        networks = [
            {"name": key, "label": cfg["label"], "symbol": cfg["symbol"], "explorer": cfg["explorer"]}
            for key, cfg in get_network_configs().items()
        ]
        return JSONResponse(content={"networks": networks, "default": config.DEFAULT_NETWORK})

    @app.post("/api/bscscan/run")
    async def run_node(request: Request):
        """노드 실행 API"""
        try:
            node_data = await request.json()
        except ValueError:
            return JSONResponse(
                status_code=400,
                content={"success": False, "error": "PreconditionError", "message": "Request body must be JSON."}
            )
        if not isinstance(node_data, dict):
            return JSONResponse(
                status_code=400,
                content={"success": False, "error": "PreconditionError", "message": "Required data missing"}
            )

        try:
            results = await get_node().run(node_data)
        except BscscanNodeError as e:
            return JSONResponse(
                status_code=error_status_code(e),
                content={"success": False, "error": type(e).__name__, "message": e.message}
            )

        return JSONResponse(content={"success": True, "results": results})
