"""
HaCi 클라이언트 예외 정의
"""
from typing import Optional


class HaciError(Exception):
    """모든 HaCi 클라이언트 예외의 기본 클래스"""


class ParseError(HaciError, ValueError):
    """CIDR 형식이 잘못된 경우"""


class NotFound(HaciError):
    """조회한 네트워크가 존재하지 않는 경우"""


class AlreadyExists(HaciError):
    """이미 등록된 네트워크를 다시 추가하려는 경우"""


class PoolExhausted(HaciError):
    """슈퍼넷에 할당 가능한 주소가 남아있지 않은 경우"""


class OperationFailed(HaciError):
    """원격 서버가 200이 아닌 응답을 반환한 경우"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class Unsupported(HaciError, NotImplementedError):
    """해당 백엔드가 지원하지 않는 작업"""
