from .services import (get_test_status_registry,
                       get_runner_backend,
                       get_runner_launcher,
                       get_status_poller,
                       get_metrics_secrets)

# Singleton Instance 관리 패키지
__all__ = [
    "get_test_status_registry",
    "get_runner_backend",
    "get_runner_launcher",
    "get_status_poller",
    "get_metrics_secrets"
]
