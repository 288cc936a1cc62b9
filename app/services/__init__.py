from app.services.testing.load_test_service import compile_test_definition, build_load_profile
from app.services.testing.runner_launcher import RunnerLauncher
from app.services.testing.test_status_registry import LoadTestStatusRegistry
from app.services.testing.test_status_service import StatusPoller

__all__ = [
    "compile_test_definition",
    "build_load_profile",
    "RunnerLauncher",
    "LoadTestStatusRegistry",
    "StatusPoller",
]
