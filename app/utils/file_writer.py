"""
k6 스크립트를 러너와 공유하는 스테이징 디렉터리에 저장/삭제하는 유틸리티
"""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def stage_script(content: str, filename: str, staging_dir: str) -> str:
    """
    스크립트를 스테이징 디렉터리에 저장

    임시 파일에 먼저 쓴 뒤 이름을 바꾸므로 러너가 쓰다 만 파일을 읽지 않는다.

    Returns:
        str: 저장된 파일의 절대 경로

    Raises:
        OSError: 디렉터리 생성 또는 파일 저장 실패시
    """
    target_dir = Path(staging_dir).resolve()
    target_dir.mkdir(parents=True, exist_ok=True)

    file_path = target_dir / filename
    temp_path = target_dir / f".{filename}.tmp"

    try:
        with open(temp_path, 'w', encoding='utf-8') as f:
            f.write(content)
        os.replace(temp_path, file_path)
    except OSError as e:
        logger.error(f"Failed to stage script - path: {file_path}, error: {e}")
        temp_path.unlink(missing_ok=True)
        raise

    logger.info(f"Staged k6 script: {file_path}")
    return str(file_path)


def remove_staged_script(file_path: str) -> bool:
    """
    스테이징된 스크립트 제거 (best-effort, 실패해도 예외를 던지지 않음)

    Returns:
        bool: 제거 성공 여부
    """
    try:
        Path(file_path).unlink()
        logger.info(f"Removed staged script: {file_path}")
        return True
    except FileNotFoundError:
        logger.warning(f"Staged script already removed: {file_path}")
        return False
    except OSError as e:
        logger.error(f"Failed to remove staged script - path: {file_path}, error: {e}")
        return False
