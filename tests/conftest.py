from datetime import timedelta
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from app.dependencies.services import get_metrics_secrets, get_runner_launcher, get_status_poller
from app.dto.load_test.test_definition import MetricsSecrets
from app.main import app
from app.scheduler.record_cleanup_scheduler import LoadTestRecordCleanupScheduler, get_cleanup_scheduler
from app.services.runner.runner_backend import RunnerBackend
from app.services.testing.runner_launcher import RunnerLauncher
from app.services.testing.test_status_registry import LoadTestStatusRegistry
from app.services.testing.test_status_service import StatusPoller


class FakeRunner(RunnerBackend):
    """In-memory stand-in for the isolated-execution runtime."""

    def __init__(self):
        self.started = []
        self.alive: Dict[str, bool] = {}
        self.exit_codes: Dict[str, int] = {}
        self.start_error: Optional[Exception] = None
        self.query_error: Optional[Exception] = None
        self.query_count = 0

    def start(self, script_path, env):
        if self.start_error is not None:
            raise self.start_error
        handle = f"runner-{len(self.started) + 1}"
        self.started.append((script_path, dict(env)))
        self.alive[handle] = True
        return handle

    def is_alive(self, handle):
        self.query_count += 1
        if self.query_error is not None:
            raise self.query_error
        return self.alive.get(handle, False)

    def exit_code(self, handle):
        self.query_count += 1
        if self.query_error is not None:
            raise self.query_error
        return self.exit_codes.get(handle)

    def finish(self, handle, exit_code):
        self.alive[handle] = False
        self.exit_codes[handle] = exit_code

    def remove(self, handle):
        self.alive.pop(handle, None)
        self.exit_codes.pop(handle, None)


@pytest.fixture
def registry():
    return LoadTestStatusRegistry()


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def work_dir(tmp_path):
    return tmp_path / "k6-tests"


@pytest.fixture
def launcher(fake_runner, registry, work_dir):
    return RunnerLauncher(
        runner=fake_runner,
        registry=registry,
        work_dir=str(work_dir),
        grafana_url="http://grafana.local:3000/",
        team="ui",
    )


@pytest.fixture
def poller(registry, fake_runner):
    return StatusPoller(registry=registry, runner=fake_runner)


@pytest.fixture
def metrics_secrets():
    return MetricsSecrets(
        metrics_token="test-token",
        metrics_sink_address="http://localhost:8086",
        metrics_org="perf-org",
        metrics_bucket="k6",
    )


@pytest.fixture
def cleanup_scheduler(registry):
    return LoadTestRecordCleanupScheduler(registry, retention=timedelta(hours=1))


@pytest.fixture
def client(launcher, poller, metrics_secrets, cleanup_scheduler):
    """Test client wired to the fake runner and a fresh registry."""
    app.dependency_overrides[get_runner_launcher] = lambda: launcher
    app.dependency_overrides[get_status_poller] = lambda: poller
    app.dependency_overrides[get_metrics_secrets] = lambda: metrics_secrets
    app.dependency_overrides[get_cleanup_scheduler] = lambda: cleanup_scheduler
    yield TestClient(app)
    app.dependency_overrides.clear()
