import asyncio
import logging

from fastapi import APIRouter, Depends

from app.common.response.code import SuccessCode
from app.common.response.response_template import ResponseTemplate
from app.dependencies.services import get_metrics_secrets, get_runner_launcher, get_status_poller
from app.dto.load_test.test_definition import MetricsSecrets
from app.schemas.load_test.load_test_request import LoadTestRequest
from app.schemas.load_test.load_test_response import LoadTestStartResponse, LoadTestStatusResponse
from app.services.testing.load_test_service import compile_load_test_request
from app.services.testing.runner_launcher import RunnerLauncher
from app.services.testing.test_status_service import StatusPoller

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post(
    path="",
    summary="K6 부하테스트 실행 API",
    description="""
    부하 프로필을 입력받아 K6 테스트 스크립트를 생성하고 격리된 러너에서 부하테스트를 시작합니다.

    ## 📝 요청 파라미터
    - **target_endpoint**: 부하를 보낼 API URL (string, 필수)
    - **test_type**: 테스트 유형 (string, 기본값 `load`)
      - `smoke`: virtual_users, duration 사용
      - `load`, `stress`, `spike`, `soak`, `breakpoint`: stages 사용
    - **virtual_users**: 가상 사용자 수 (int, smoke 필수)
    - **duration**: 테스트 시간 (string, smoke 필수) - 형식: "10s", "2m", "1h"
    - **stages** (배열): 단계별 부하 설정, 선언 순서대로 실행
      - **duration**: 단계 지속시간 (string)
      - **target**: 목표 가상 사용자 수 (int)

    모든 스크립트에는 다음 판정 기준이 포함됩니다.
    - 응답 상태 코드 200 확인
    - `http_req_duration`: p(95) < 2000ms
    - `http_req_failed`: rate < 10%

    ## 📋 요청 예시
    ```json
    {
      "target_endpoint": "https://api.example.com/users",
      "test_type": "load",
      "stages": [
        {"duration": "2m", "target": 50},
        {"duration": "5m", "target": 50},
        {"duration": "1m", "target": 0}
      ]
    }
    ```

    ## 📤 응답값
    - **test_id**: 상태 조회에 사용할 테스트 ID
    - **script_name**: 생성된 K6 스크립트 이름
    - **dashboard_url**: Grafana 대시보드 링크
    - **state**: `running`

    러너 시작 요청이 수락되면 바로 응답하며, 테스트 종료는 상태 조회 API로 확인합니다.
    """,
)
async def create_load_test(
        request: LoadTestRequest,
        launcher: RunnerLauncher = Depends(get_runner_launcher),
        secrets: MetricsSecrets = Depends(get_metrics_secrets),
):
    # 1. 스크립트 생성
    definition = compile_load_test_request(request)

    # 2. 러너 시작 - 시작 요청 결과만 기다림
    result = await asyncio.to_thread(launcher.launch, definition, secrets)

    return ResponseTemplate.success(
        SuccessCode.TEST_STARTED,
        LoadTestStartResponse(
            test_id=result.test_id,
            script_name=result.script_name,
            dashboard_url=result.dashboard_url,
            state=result.state,
            message=result.message,
        )
    )


@router.get(
    path="/{test_id}/status",
    summary="부하테스트 상태 조회 API",
    description="""
    테스트 ID로 현재 실행 상태를 조회합니다.

    - **state**: `running` | `completed` | `error`
    - **started_at**: 테스트 시작 시각

    실행 중인 테스트는 조회할 때마다 러너 상태를 확인해 갱신합니다.
    러너 상태 확인에 실패해도 마지막으로 알려진 상태를 반환합니다.
    존재하지 않는 test_id 는 404 를 반환합니다.
    """,
)
async def get_load_test_status(
        test_id: str,
        poller: StatusPoller = Depends(get_status_poller),
):
    record = await asyncio.to_thread(poller.poll, test_id)

    return ResponseTemplate.success(
        SuccessCode.SUCCESS_CODE,
        LoadTestStatusResponse(
            test_id=record.test_id,
            state=record.state,
            started_at=record.started_at,
        )
    )
