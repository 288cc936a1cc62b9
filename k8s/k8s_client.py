import logging
from functools import lru_cache

from kubernetes import client, config

logger = logging.getLogger(__name__)


@lru_cache()
def load_kubernetes_config() -> None:
    """클러스터 내부 설정을 우선 사용하고, 없으면 로컬 kubeconfig 를 사용"""
    try:
        config.load_incluster_config()
        logger.info("In-cluster config loaded.")
    except config.ConfigException:
        config.load_kube_config()
        logger.info("Local kube config loaded.")


def get_batch_api() -> client.BatchV1Api:
    load_kubernetes_config()
    return client.BatchV1Api()


def get_core_api() -> client.CoreV1Api:
    load_kubernetes_config()
    return client.CoreV1Api()
