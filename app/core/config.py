import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """애플리케이션 설정"""

    # 메트릭 저장소(InfluxDB v2) 설정 - 러너에 그대로 전달됨
    K6_INFLUXDB_ADDR: str = os.getenv("K6_INFLUXDB_ADDR", "http://host.docker.internal:8086")
    K6_INFLUXDB_ORG: str = os.getenv("K6_INFLUXDB_ORG", "perf-org")
    K6_INFLUXDB_BUCKET: str = os.getenv("K6_INFLUXDB_BUCKET", "k6")
    K6_INFLUXDB_TOKEN: str = os.getenv("K6_INFLUXDB_TOKEN", "")

    # 대시보드 설정
    GRAFANA_URL: str = os.getenv("GRAFANA_URL", "http://localhost:3000")

    # k6 러너 설정
    K6_RUNNER_IMAGE: str = os.getenv("K6_RUNNER_IMAGE", "perf/k6-runner:local")
    K6_WORK_DIR: str = os.getenv("K6_WORK_DIR", "/tmp/k6-tests")
    K6_TEAM: str = os.getenv("K6_TEAM", "ui")
    RUNNER_BACKEND: str = os.getenv("RUNNER_BACKEND", "kubernetes")  # kubernetes | docker
    RUNNER_QUERY_TIMEOUT_SECONDS: int = int(os.getenv("RUNNER_QUERY_TIMEOUT_SECONDS", "10"))

    # Kubernetes 설정
    KUBERNETES_TEST_NAMESPACE: str = os.getenv("KUBERNETES_TEST_NAMESPACE", "default")
    K6_SCRIPT_PVC: str = os.getenv("K6_SCRIPT_PVC", "k6-script-pvc")
    K6_JOB_TTL_SECONDS: int = int(os.getenv("K6_JOB_TTL_SECONDS", "60"))

    # 테스트 기록 보존 설정
    TEST_RECORD_RETENTION_MINUTES: int = int(os.getenv("TEST_RECORD_RETENTION_MINUTES", "1440"))
    TEST_RECORD_CLEANUP_INTERVAL: int = int(os.getenv("TEST_RECORD_CLEANUP_INTERVAL", "300"))  # 초

    # CORS 설정 (콤마 구분)
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_cors_allow_origins(cls) -> list:
        return [origin.strip() for origin in cls.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def get_metrics_secrets(cls) -> dict:
        """러너에 전달할 메트릭 저장소 접속 정보를 딕셔너리로 반환"""
        return {
            "metrics_token": cls.K6_INFLUXDB_TOKEN,
            "metrics_sink_address": cls.K6_INFLUXDB_ADDR,
            "metrics_org": cls.K6_INFLUXDB_ORG,
            "metrics_bucket": cls.K6_INFLUXDB_BUCKET,
        }

    @classmethod
    def get_retention_config(cls) -> dict:
        """기록 정리 스케줄러 설정을 딕셔너리로 반환"""
        return {
            "retention_minutes": cls.TEST_RECORD_RETENTION_MINUTES,
            "cleanup_interval": cls.TEST_RECORD_CLEANUP_INTERVAL,
        }


settings = Settings()
