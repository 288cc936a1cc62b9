import logging
from typing import Optional

from kubernetes.client import V1Job
from kubernetes.client.rest import ApiException
from k8s.k8s_client import get_batch_api, get_core_api

logger = logging.getLogger(__name__)


class JobStatus:
    """k8s Job 상태 상수"""
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    NOT_FOUND = "NotFound"


class JobService:
    """
    Kubernetes Job 상태 조회 서비스

    404 는 None / NOT_FOUND 로 변환하고, 그 외 API 오류는 그대로 전파한다.
    """

    def __init__(self, namespace: str = "default", request_timeout: Optional[int] = None):
        self.namespace = namespace
        self.request_timeout = request_timeout

    def read_job(self, job_name: str) -> Optional[V1Job]:
        try:
            return get_batch_api().read_namespaced_job(
                name=job_name,
                namespace=self.namespace,
                _request_timeout=self.request_timeout
            )
        except ApiException as e:
            if e.status == 404:
                logger.info(f"Job {job_name} not found in namespace {self.namespace}")
                return None
            raise

    def get_job_status(self, job_name: str) -> str:
        job = self.read_job(job_name)
        if job is None:
            return JobStatus.NOT_FOUND
        return self._determine_job_status(job.status)

    def _determine_job_status(self, status) -> str:
        """Job 상태 객체를 기반으로 상태를 판단합니다."""
        if status and status.conditions:
            for condition in status.conditions:
                if condition.type == "Complete" and condition.status == "True":
                    return JobStatus.SUCCEEDED
                elif condition.type == "Failed" and condition.status == "True":
                    return JobStatus.FAILED

        # 완료된 Pod 가 있지만 조건이 아직 없으면 성공으로 간주
        if status and not status.active and status.succeeded:
            return JobStatus.SUCCEEDED

        # 스케줄링 대기 중인 Pod 도 실행 중으로 본다
        return JobStatus.RUNNING

    def get_job_exit_code(self, job_name: str) -> Optional[int]:
        """
        Job 의 k6 컨테이너 종료 코드를 조회합니다.

        Returns:
            종료 코드. Job 이 이미 삭제되었으면 None
        """
        pods = get_core_api().list_namespaced_pod(
            namespace=self.namespace,
            label_selector=f"job-name={job_name}",
            _request_timeout=self.request_timeout
        )

        for pod in pods.items:
            for container_status in (pod.status.container_statuses or []):
                terminated = container_status.state.terminated if container_status.state else None
                if terminated is not None:
                    return terminated.exit_code

        # Pod 가 정리된 경우 Job 조건으로 판단
        job_status = self.get_job_status(job_name)
        if job_status == JobStatus.NOT_FOUND:
            return None
        if job_status == JobStatus.SUCCEEDED:
            return 0
        if job_status == JobStatus.FAILED:
            return 1

        raise RuntimeError(f"Job {job_name} has not terminated yet")
