import logging
import threading
from datetime import timedelta
from typing import Any, Dict, Optional

from app.core.config import settings
from app.dependencies.services import get_test_status_registry
from app.services.testing.test_status_registry import LoadTestStatusRegistry

logger = logging.getLogger(__name__)


class LoadTestRecordCleanupScheduler:
    """
    종료된 테스트 기록을 주기적으로 정리하는 백그라운드 스케줄러

    RUNNING 상태 기록은 보존 기간이 지나도 삭제하지 않는다.
    """

    def __init__(
            self,
            registry: LoadTestStatusRegistry,
            retention: timedelta,
            cleanup_interval: int = 300,
    ):
        """
        Args:
            registry: 정리할 테스트 기록 저장소
            retention: 기록 보존 기간
            cleanup_interval: 정리 주기 (초)
        """
        self.registry = registry
        self.retention = retention
        self.cleanup_interval = cleanup_interval
        self.is_running = False
        self._cleanup_thread = None
        self._stop_event = threading.Event()

        self.stats = {
            'total_cleanups': 0,
            'evicted_records': 0,
        }

        logger.info(f"LoadTestRecordCleanupScheduler initialized with retention={retention}, "
                    f"cleanup_interval={cleanup_interval}s")

    def start(self):
        if self.is_running:
            logger.warning("Test record cleanup scheduler is already running")
            return

        self.is_running = True
        self._stop_event.clear()
        self._cleanup_thread = threading.Thread(target=self._run_cleanup_loop, daemon=True)
        self._cleanup_thread.start()
        logger.info("Test record cleanup scheduler started")

    def stop(self):
        if not self.is_running:
            return

        self.is_running = False
        self._stop_event.set()

        if self._cleanup_thread and self._cleanup_thread.is_alive():
            self._cleanup_thread.join(timeout=10)

        logger.info("Test record cleanup scheduler stopped")

    def _run_cleanup_loop(self):
        while self.is_running and not self._stop_event.is_set():
            try:
                self.cleanup()
            except Exception as e:
                logger.error(f"Error in test record cleanup loop: {e}")

            self._stop_event.wait(timeout=self.cleanup_interval)

    def cleanup(self) -> int:
        """보존 기간이 지난 종료 기록 정리. 정리된 기록 수 반환"""
        evicted = self.registry.evict_older_than(self.retention)
        self.stats['total_cleanups'] += 1
        self.stats['evicted_records'] += evicted
        return evicted

    def get_stats(self) -> Dict[str, Any]:
        return {
            **self.stats,
            'is_running': self.is_running,
            'tracked_records': len(self.registry),
        }


# 글로벌 스케줄러 인스턴스
_cleanup_scheduler: Optional[LoadTestRecordCleanupScheduler] = None


def get_cleanup_scheduler() -> LoadTestRecordCleanupScheduler:
    """기록 정리 스케줄러 싱글톤 인스턴스 반환"""
    global _cleanup_scheduler
    if _cleanup_scheduler is None:
        retention_config = settings.get_retention_config()
        _cleanup_scheduler = LoadTestRecordCleanupScheduler(
            registry=get_test_status_registry(),
            retention=timedelta(minutes=retention_config["retention_minutes"]),
            cleanup_interval=retention_config["cleanup_interval"],
        )
    return _cleanup_scheduler


def start_cleanup_scheduler():
    scheduler = get_cleanup_scheduler()
    scheduler.start()


def stop_cleanup_scheduler():
    scheduler = get_cleanup_scheduler()
    scheduler.stop()
