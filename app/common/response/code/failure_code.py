from app.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    INTERNAL_SERVER_ERROR = ("서버 에러입니다.", 500)
    NOT_FOUND_DATA = ("존재하지 않는 데이터입니다", 404)
    BAD_REQUEST = ("잘못된 요청입니다", 400)

    # 부하테스트 요청 검증
    MISSING_ENDPOINT = ("API URL is required", 400)
    MISSING_PROFILE_PARAMETERS = ("Required load profile parameters are missing", 400)
    INVALID_PROFILE = ("Load profile parameters are invalid", 400)

    # 실행 환경
    MISSING_METRICS_TOKEN = ("K6_INFLUXDB_TOKEN environment variable is not set", 500)
    RUNNER_START_FAILED = ("Failed to start k6 runner", 502)
    TEST_NOT_FOUND = ("Test not found", 404)
