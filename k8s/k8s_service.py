import logging
from typing import Dict

from kubernetes import client
from k8s.k8s_client import get_batch_api

logger = logging.getLogger(__name__)

K6_RUNNER_LABELS = {"app": "k6-runner"}
SCRIPT_VOLUME_NAME = "k6-script-volume"


# job 구조 job_spec -> template -> pod_spec
def create_k6_job(
        job_name: str,
        image: str,
        env: Dict[str, str],
        pvc_name: str,
        mount_path: str,
        namespace: str = "default",
        ttl_seconds_after_finished: int = 60,
) -> str:
    """
    지정된 PVC 에 저장된 k6 스크립트를 실행하는 Job 생성

    러너 이미지는 K6_SCRIPT 환경변수로 스크립트 경로를 전달받는다.
    Job 은 재시도하지 않으며 종료 후 ttl_seconds_after_finished 가 지나면 자동 삭제된다.

    Returns:
        str: 생성된 Job 이름
    """
    # 1. container 설정
    container = client.V1Container(
        name="k6",
        image=image,
        env=[client.V1EnvVar(name=key, value=value) for key, value in env.items()],
        volume_mounts=[
            client.V1VolumeMount(
                name=SCRIPT_VOLUME_NAME,
                mount_path=mount_path,
                read_only=True,
            )
        ],
        resources=client.V1ResourceRequirements(
            requests={"cpu": "500m", "memory": "512Mi"},
            limits={"cpu": "1", "memory": "1Gi"}
        )
    )

    # 2. volume 설정
    volume = client.V1Volume(
        name=SCRIPT_VOLUME_NAME,
        persistent_volume_claim=client.V1PersistentVolumeClaimVolumeSource(
            claim_name=pvc_name
        )
    )

    labels = {**K6_RUNNER_LABELS, "test-script": job_name}

    # job 내부 pod spec
    pod_spec = client.V1PodSpec(
        containers=[container],
        restart_policy="Never",
        volumes=[volume]
    )

    template = client.V1PodTemplateSpec(
        metadata=client.V1ObjectMeta(labels=labels),
        spec=pod_spec
    )

    job_spec = client.V1JobSpec(
        template=template,
        backoff_limit=0,
        ttl_seconds_after_finished=ttl_seconds_after_finished
    )

    job = client.V1Job(
        metadata=client.V1ObjectMeta(name=job_name, labels=labels),
        spec=job_spec
    )

    created = get_batch_api().create_namespaced_job(namespace=namespace, body=job)
    logger.info(f"Job '{job_name}' created in namespace '{namespace}' with image '{image}'")
    return created.metadata.name
