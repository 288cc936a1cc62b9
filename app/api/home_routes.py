from fastapi import APIRouter, Depends

from app.common.response.code import SuccessCode
from app.common.response.response_template import ResponseTemplate
from app.scheduler.record_cleanup_scheduler import LoadTestRecordCleanupScheduler, get_cleanup_scheduler

router = APIRouter()

@router.get(
    path="/",
    summary = "health check",
    description = "health check 용 엔드포인트. 추적 중인 테스트 기록 수와 정리 스케줄러 상태를 함께 반환합니다."
)
async def home(
        scheduler: LoadTestRecordCleanupScheduler = Depends(get_cleanup_scheduler)
):
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, scheduler.get_stats())
