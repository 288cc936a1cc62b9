"""
docker CLI 를 통해 k6 러너 컨테이너를 실행/조회하는 러너
`docker run --rm -d` 로 실행하므로 종료된 컨테이너는 곧 삭제될 수 있다.
"""
import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from app.services.runner.runner_backend import RunnerBackend, RunnerError
from app.utils.url_converter import convert_localhost_to_docker_host

logger = logging.getLogger(__name__)

CONTAINER_WORK_DIR = "/work"
METRICS_ADDRESS_ENV = "K6_INFLUXDB_ADDR"
TERMINATED_STATES = ("exited", "dead")


class DockerRunner(RunnerBackend):
    """로컬 docker 데몬에서 k6 러너 컨테이너를 실행"""

    def __init__(self, image: str, docker_binary: str = "docker", timeout_seconds: int = 10):
        self.image = image
        self.docker_binary = docker_binary
        self.timeout_seconds = timeout_seconds

    def start(self, script_path: str, env: Dict[str, str]) -> str:
        script_file = Path(script_path).resolve()
        container_env = {**env, "K6_SCRIPT": f"{CONTAINER_WORK_DIR}/{script_file.name}"}

        # 컨테이너 안에서는 localhost 가 호스트를 가리키지 않음
        if container_env.get(METRICS_ADDRESS_ENV):
            container_env[METRICS_ADDRESS_ENV] = convert_localhost_to_docker_host(container_env[METRICS_ADDRESS_ENV])

        command = [self.docker_binary, "run", "--rm", "-d"]
        for key, value in container_env.items():
            command.extend(["-e", f"{key}={value}"])
        command.extend(["-v", f"{script_file.parent}:{CONTAINER_WORK_DIR}", self.image])

        result = self._execute(command)
        if result.returncode != 0:
            raise RunnerError(f"docker run failed: {result.stderr.strip()}")

        container_id = result.stdout.strip()
        if not container_id:
            raise RunnerError("docker run returned no container id")
        return container_id

    def is_alive(self, handle: str) -> bool:
        result = self._execute([self.docker_binary, "ps", "-q", "-f", f"id={handle}"])
        if result.returncode != 0:
            raise RunnerError(f"docker ps failed: {result.stderr.strip()}")
        return bool(result.stdout.strip())

    def exit_code(self, handle: str) -> Optional[int]:
        result = self._execute([
            self.docker_binary, "inspect", handle,
            "--format", "{{.State.Status}} {{.State.ExitCode}}"
        ])
        if result.returncode != 0:
            if "no such" in result.stderr.lower():
                return None
            raise RunnerError(f"docker inspect failed: {result.stderr.strip()}")

        status, _, exit_code = result.stdout.strip().partition(" ")
        if status not in TERMINATED_STATES:
            raise RunnerError(f"Container {handle} is {status}, not terminated")
        try:
            return int(exit_code)
        except ValueError as e:
            raise RunnerError(f"Unexpected exit code from docker inspect: {exit_code!r}") from e

    def _execute(self, command: List[str]) -> subprocess.CompletedProcess:
        logger.debug(f"Executing: {' '.join(command[:3])} ...")
        try:
            return subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            raise RunnerError(f"{command[1]} timed out after {self.timeout_seconds}s") from e
        except OSError as e:
            raise RunnerError(f"Failed to execute {self.docker_binary}: {e}") from e
