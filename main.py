import uvicorn
import os
import logging
import sys

from dotenv import load_dotenv

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bscscan_node import config
from bscscan_node.routers import register_node_routes, register_utility_routes

load_dotenv()

# --- 환경 감지 및 설정 ---
DEBUG_MODE = config.is_debug()
RELOAD_ENABLED = os.getenv("RELOAD", "false").lower() == "true" if DEBUG_MODE else False

# --- LangSmith 추적 초기화 ---
if config.LANGSMITH_TRACING:
    if config.LANGSMITH_API_KEY:
        os.environ["LANGCHAIN_TRACING_V2"] = "true"
        os.environ["LANGCHAIN_ENDPOINT"] = config.LANGSMITH_ENDPOINT
        os.environ["LANGCHAIN_API_KEY"] = config.LANGSMITH_API_KEY
        os.environ["LANGCHAIN_PROJECT"] = config.LANGSMITH_PROJECT

        print("="*60)
        print("LangSmith 추적 활성화됨")
        print(f"  - 프로젝트: {config.LANGSMITH_PROJECT}")
        print(f"  - 엔드포인트: {config.LANGSMITH_ENDPOINT}")
        print("="*60)
    else:
        print("="*60)
        print("⚠️ LangSmith 추적이 활성화되었지만 API 키가 설정되지 않았습니다.")
        print("="*60)

# --- 로깅 설정 ---
log_level_str = config.LOG_LEVEL.upper()
log_level = getattr(logging, log_level_str, logging.INFO)

logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True
)

httpx_logger = logging.getLogger("httpx")
httpx_logger.setLevel(logging.WARNING)
httpx_logger.propagate = True

for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "bscscan_node", "main"]:
    logger_instance = logging.getLogger(logger_name)
    logger_instance.setLevel(log_level)
    logger_instance.propagate = True
    logger_instance.handlers.clear()

logger = logging.getLogger(__name__)

logger.info("="*60)
logger.info(f"로깅 시스템 초기화 완료 - 레벨: {log_level_str}")
logger.info("="*60)

# --- 설정 검증 ---
config.validate()

# --- FastAPI 앱 초기화 ---
app = FastAPI(title="BscScan Action Node", version=str(config.NODE_VERSION))

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_utility_routes(app)
register_node_routes(app)


if __name__ == "__main__":
    log_level_uvicorn = log_level_str.lower()

    uvicorn_log_config = {
        "version": 1, "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s", "datefmt": "%Y-%m-%d %H:%M:%S"},
            "access": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s", "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "default": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
            "access": {"formatter": "access", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": log_level_str, "propagate": True},
            "uvicorn.error": {"handlers": ["default"], "level": log_level_str, "propagate": True},
            "uvicorn.access": {"handlers": ["access"], "level": log_level_str, "propagate": True},
        },
        "root": {"level": log_level_str, "handlers": ["default"]},
    }

    host = "127.0.0.1" if DEBUG_MODE else "0.0.0.0"
    port = int(os.getenv("PORT", "8000"))

    logger.info(f"서버 시작 (포트 {port}, 호스트: {host})")
    uvicorn.run("main:app", host=host, port=port, log_level=log_level_uvicorn, log_config=uvicorn_log_config, use_colors=False, access_log=True, reload=RELOAD_ENABLED)
