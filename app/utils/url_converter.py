from urllib.parse import urlparse, urlunparse

LOCALHOST_NAMES = ('localhost', '127.0.0.1')
DOCKER_HOST_GATEWAY = 'host.docker.internal'


def is_localhost_url(url: str) -> bool:
    """
    URL이 localhost 패턴인지 확인

    Args:
        url: 확인할 URL

    Returns:
        bool: localhost 패턴이면 True
    """
    try:
        parsed = urlparse(url.lower())
    except ValueError:
        return False
    return parsed.hostname in LOCALHOST_NAMES


def convert_localhost_to_docker_host(url: str) -> str:
    """
    컨테이너 안에서 호스트에 접근할 수 있도록 localhost 를 host.docker.internal 로 변환

    localhost 가 아니거나 (예: docker-compose 서비스명) 파싱할 수 없는 URL 은 그대로 반환한다.
    """
    if not is_localhost_url(url):
        return url

    parsed = urlparse(url)
    new_netloc = f"{DOCKER_HOST_GATEWAY}:{parsed.port}" if parsed.port else DOCKER_HOST_GATEWAY

    return urlunparse((
        parsed.scheme,
        new_netloc,
        parsed.path,
        parsed.params,
        parsed.query,
        parsed.fragment
    ))
