from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

import pytz


class LifecycleState(str, Enum):
    """테스트 실행 상태. RUNNING 만 종료되지 않은 상태이다."""
    RUNNING = "running"
    COMPLETED = "completed"
    ERRORED = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not LifecycleState.RUNNING


@dataclass
class LoadTestRecord:
    """실행된 부하테스트 한 건의 추적 정보"""
    test_id: str
    runner_handle: Optional[str] = None   # 러너 시작 응답 전까지는 None
    state: LifecycleState = LifecycleState.RUNNING
    started_at: datetime = field(default_factory=lambda: datetime.now(pytz.utc))
