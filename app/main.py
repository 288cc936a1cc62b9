import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.api import api_router
from app.core.config import settings
from app.common.exceptionhandler import register_exception_handler
from app.common.middleware import register_cors_middleware
from app.scheduler.record_cleanup_scheduler import start_cleanup_scheduler, stop_cleanup_scheduler

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    logger.info(f"Starting Load Test Launcher API (runner backend: {settings.RUNNER_BACKEND})...")

    if not settings.K6_INFLUXDB_TOKEN:
        logger.warning("K6_INFLUXDB_TOKEN is not set - load tests cannot be launched until it is configured")

    # 테스트 기록 정리 스케줄러 시작
    try:
        start_cleanup_scheduler()
    except Exception as e:
        logger.error(f"Failed to start test record cleanup scheduler: {e}")

    yield

    logger.info("Shutting down Load Test Launcher API...")

    try:
        stop_cleanup_scheduler()
    except Exception as e:
        logger.error(f"Failed to stop test record cleanup scheduler: {e}")


app = FastAPI(
    title="Load Test Launcher API",
    description="k6 부하테스트를 생성/실행하고 실행 상태를 추적하는 API입니다.",
    version="1.0.0",
    docs_url="/api/swagger",
    lifespan=lifespan
)

app.include_router(api_router)

register_cors_middleware(app)
register_exception_handler(app)
