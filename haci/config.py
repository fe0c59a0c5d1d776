"""
클라이언트 설정 및 로깅 초기화
"""
from typing import Optional
import logging
import os

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def env_flag(name: str, default: bool = False) -> bool:
    """환경변수를 bool 값으로 해석"""
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} 값을 해석할 수 없습니다: {value!r}")


# 백엔드 선택: memory (테스트용) 또는 web (원격 HaCi)
HACI_BACKEND = os.getenv("HACI_BACKEND", "memory")

# 원격 HaCi RESTWrapper 접속 정보
HACI_URL = os.getenv("HACI_URL", "http://localhost:8000")
HACI_USERNAME = os.getenv("HACI_USERNAME", "")
HACI_PASSWORD = os.getenv("HACI_PASSWORD", "")
HACI_ROOT = os.getenv("HACI_ROOT", "default")
HACI_VERIFY_TLS = env_flag("HACI_VERIFY_TLS", False)  # 사내 HaCi는 자체 서명 인증서를 사용
HACI_TIMEOUT = float(os.getenv("HACI_TIMEOUT", "30"))

# 인메모리 엔진 설정
HACI_ASSIGN_FIRST_ADDRESS = env_flag("HACI_ASSIGN_FIRST_ADDRESS", False)
HACI_CREATE_FROM = os.getenv("HACI_CREATE_FROM", "haci-memory")

HACI_LOG_LEVEL = os.getenv("HACI_LOG_LEVEL", "INFO")


def setup_logging(level: Optional[str] = None):
    """로깅 설정"""
    logging.basicConfig(level=(level or HACI_LOG_LEVEL).upper())
