from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Stage:
    """부하 증감 구간 하나 (duration 동안 target VU 까지 선형 변화)"""
    duration: str
    target: int


@dataclass(frozen=True)
class SmokeProfile:
    """고정 VU 수로 일정 시간 실행하는 프로필"""
    virtual_users: int
    duration: str


@dataclass(frozen=True)
class StagedProfile:
    """선언 순서대로 실행되는 stage 목록 프로필"""
    stages: Tuple[Stage, ...]


LoadProfile = Union[SmokeProfile, StagedProfile]

# 프로필이 지정되지 않은 경우 사용하는 기본 부하 곡선
DEFAULT_STAGES: Tuple[Stage, ...] = (
    Stage(duration="30s", target=10),
    Stage(duration="1m", target=10),
    Stage(duration="30s", target=0),
)
