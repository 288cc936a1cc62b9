from datetime import datetime
from pydantic import BaseModel

from app.models.load_test_record import LifecycleState

class LoadTestStartResponse(BaseModel):
    test_id: str
    script_name: str
    dashboard_url: str
    state: LifecycleState
    message: str

class LoadTestStatusResponse(BaseModel):
    test_id: str
    state: LifecycleState
    started_at: datetime
