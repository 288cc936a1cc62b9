from functools import lru_cache

from app.core.config import settings
from app.dto.load_test.test_definition import MetricsSecrets
from app.services.runner.docker_runner import DockerRunner
from app.services.runner.kubernetes_runner import KubernetesJobRunner
from app.services.runner.runner_backend import RunnerBackend
from app.services.testing.runner_launcher import RunnerLauncher
from app.services.testing.test_status_registry import LoadTestStatusRegistry
from app.services.testing.test_status_service import StatusPoller


@lru_cache()
def get_test_status_registry() -> LoadTestStatusRegistry:
    """프로세스 전체에서 공유하는 LoadTestStatusRegistry 싱글턴 인스턴스 반환"""
    return LoadTestStatusRegistry()

@lru_cache()
def get_runner_backend() -> RunnerBackend:
    if settings.RUNNER_BACKEND.lower() == "docker":
        return DockerRunner(
            image=settings.K6_RUNNER_IMAGE,
            timeout_seconds=settings.RUNNER_QUERY_TIMEOUT_SECONDS
        )
    return KubernetesJobRunner(
        image=settings.K6_RUNNER_IMAGE,
        pvc_name=settings.K6_SCRIPT_PVC,
        mount_path=settings.K6_WORK_DIR,
        namespace=settings.KUBERNETES_TEST_NAMESPACE,
        ttl_seconds_after_finished=settings.K6_JOB_TTL_SECONDS,
        request_timeout=settings.RUNNER_QUERY_TIMEOUT_SECONDS
    )

@lru_cache()
def get_runner_launcher() -> RunnerLauncher:
    return RunnerLauncher(
        runner=get_runner_backend(),
        registry=get_test_status_registry(),
        work_dir=settings.K6_WORK_DIR,
        grafana_url=settings.GRAFANA_URL,
        team=settings.K6_TEAM
    )

@lru_cache()
def get_status_poller() -> StatusPoller:
    return StatusPoller(
        registry=get_test_status_registry(),
        runner=get_runner_backend()
    )

def get_metrics_secrets() -> MetricsSecrets:
    """요청마다 현재 설정에서 메트릭 저장소 접속 정보를 읽어 반환"""
    return MetricsSecrets(**settings.get_metrics_secrets())
