from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode


class ValidationError(ApiException):
    """잘못되거나 누락된 입력. 어떤 부수효과도 발생하기 전에 반환된다."""


class CompileError(ValidationError):
    """부하 프로필을 k6 스크립트로 변환할 수 없는 경우"""


class MissingEndpointError(CompileError):
    def __init__(self, message: str = None):
        super().__init__(FailureCode.MISSING_ENDPOINT, message)


class MissingProfileParametersError(CompileError):
    def __init__(self, message: str = None):
        super().__init__(FailureCode.MISSING_PROFILE_PARAMETERS, message)


class InvalidProfileError(CompileError):
    def __init__(self, message: str = None):
        super().__init__(FailureCode.INVALID_PROFILE, message)


class ConfigurationError(ApiException):
    """필수 자격 증명 누락. 러너를 시작하기 전에 반환된다."""

    def __init__(self, message: str = None):
        super().__init__(FailureCode.MISSING_METRICS_TOKEN, message)


class LaunchError(ApiException):
    """러너 시작 실패"""

    def __init__(self, message: str = None):
        super().__init__(FailureCode.RUNNER_START_FAILED, message)


class NotFoundError(ApiException):
    def __init__(self, test_id: str):
        self.test_id = test_id
        super().__init__(FailureCode.TEST_NOT_FOUND, f"Test not found: {test_id}")
