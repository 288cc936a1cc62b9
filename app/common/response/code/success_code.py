from app.common.response.code.base_code import BaseCode

class SuccessCode(BaseCode):
    SUCCESS_CODE = ("요청 처리에 성공하였습니다.", 200)
    TEST_STARTED = ("부하테스트가 시작되었습니다.", 200)
