from abc import ABC, abstractmethod
from typing import Dict, Optional


class RunnerError(Exception):
    """격리 실행 환경 호출 실패 (시작 실패, 조회 타임아웃, 명령 오류 등)"""


class RunnerBackend(ABC):
    """k6 스크립트를 격리된 프로세스에서 실행하는 외부 실행 환경 추상 클래스"""

    @abstractmethod
    def start(self, script_path: str, env: Dict[str, str]) -> str:
        """
        스크립트를 detached 모드로 실행합니다. 러너 종료를 기다리지 않습니다.

        Args:
            script_path: 공유 스테이징 디렉터리에 저장된 스크립트 경로
            env: 러너에 그대로 전달할 환경변수

        Returns:
            str: 러너 핸들 (컨테이너 ID, Job 이름 등)

        Raises:
            RunnerError: 러너를 시작하지 못한 경우
        """
        pass

    @abstractmethod
    def is_alive(self, handle: str) -> bool:
        """러너가 아직 실행 중인지 확인합니다."""
        pass

    @abstractmethod
    def exit_code(self, handle: str) -> Optional[int]:
        """
        종료된 러너의 종료 코드를 반환합니다.

        Returns:
            종료 코드. 실행 환경에서 러너를 찾을 수 없으면 None
        """
        pass
