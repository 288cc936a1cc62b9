import logging
from pathlib import Path
from typing import Dict, Optional

from kubernetes.client.rest import ApiException

from app.services.runner.runner_backend import RunnerBackend, RunnerError
from k8s.job_service import JobService, JobStatus
from k8s.k8s_service import create_k6_job

logger = logging.getLogger(__name__)

# Kubernetes 리소스 이름 제한 (RFC 1123)
MAX_JOB_NAME_LENGTH = 63


class KubernetesJobRunner(RunnerBackend):
    """
    k6 스크립트를 Kubernetes Job 으로 실행하는 러너

    스크립트 스테이징 디렉터리는 PVC 로 공유되며 Job 컨테이너에도 같은 경로로 마운트된다.
    """

    def __init__(
            self,
            image: str,
            pvc_name: str,
            mount_path: str,
            namespace: str = "default",
            ttl_seconds_after_finished: int = 60,
            request_timeout: Optional[int] = None,
    ):
        self.image = image
        self.pvc_name = pvc_name
        self.mount_path = mount_path
        self.namespace = namespace
        self.ttl_seconds_after_finished = ttl_seconds_after_finished
        self.job_service = JobService(namespace=namespace, request_timeout=request_timeout)

    def start(self, script_path: str, env: Dict[str, str]) -> str:
        script_file = Path(script_path)
        job_name = self._generate_job_name(script_file.stem)
        job_env = {**env, "K6_SCRIPT": f"{self.mount_path.rstrip('/')}/{script_file.name}"}

        try:
            return create_k6_job(
                job_name=job_name,
                image=self.image,
                env=job_env,
                pvc_name=self.pvc_name,
                mount_path=self.mount_path,
                namespace=self.namespace,
                ttl_seconds_after_finished=self.ttl_seconds_after_finished,
            )
        except ApiException as e:
            raise RunnerError(f"Failed to create k6 job {job_name}: {e.status} {e.reason}") from e
        except Exception as e:
            raise RunnerError(f"Failed to create k6 job {job_name}: {e}") from e

    def is_alive(self, handle: str) -> bool:
        try:
            return self.job_service.get_job_status(handle) == JobStatus.RUNNING
        except Exception as e:
            raise RunnerError(f"Failed to read job {handle}: {e}") from e

    def exit_code(self, handle: str) -> Optional[int]:
        try:
            return self.job_service.get_job_exit_code(handle)
        except Exception as e:
            raise RunnerError(f"Failed to read exit code of job {handle}: {e}") from e

    def _generate_job_name(self, script_name: str) -> str:
        """스크립트 이름을 Job 이름 규칙(소문자, 숫자, '-', 63자 이하)에 맞게 변환"""
        normalized = "".join(
            char if char.isascii() and char.isalnum() else "-" for char in script_name.lower()
        )
        return normalized[:MAX_JOB_NAME_LENGTH].strip("-")
