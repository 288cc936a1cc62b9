from enum import Enum
from pydantic import BaseModel
from typing import Optional, List

class LoadTestType(str, Enum):
    SMOKE = "smoke"
    LOAD = "load"
    STRESS = "stress"
    SPIKE = "spike"
    SOAK = "soak"
    BREAKPOINT = "breakpoint"

class StageConfig(BaseModel):
    duration: str          # 형식: "30s", "2m", "1h"
    target: int            # 목표 가상 사용자 수

class LoadTestRequest(BaseModel):
    target_endpoint: Optional[str] = None         # 부하를 보낼 API URL
    test_type: LoadTestType = LoadTestType.LOAD
    virtual_users: Optional[int] = None           # smoke 전용
    duration: Optional[str] = None                # smoke 전용
    stages: Optional[List[StageConfig]] = None    # smoke 외 모든 유형
