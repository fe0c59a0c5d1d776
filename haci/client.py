"""
HaCi 클라이언트 공통 인터페이스
"""
from typing import List, Optional, Protocol, runtime_checkable

from haci import config
from haci.models.network import Network


@runtime_checkable
class Client(Protocol):
    """원격/인메모리 백엔드가 동일하게 구현하는 인터페이스"""

    def get(self, network: str) -> Network: ...

    def list(self, supernet: str) -> List[Network]: ...

    def assign(self, supernet: str, description: str = "", prefix_length: Optional[int] = None,
               tags: Optional[List[str]] = None) -> Network: ...

    def add(self, network: str, description: str = "", tags: Optional[List[str]] = None) -> Network: ...

    def delete(self, network: str) -> None: ...

    def search(self, description: str, exact: bool = False) -> List[Network]: ...

    def reset(self) -> None: ...

    def describe(self) -> str: ...


def create_client(backend: Optional[str] = None) -> Client:
    """설정에 따라 클라이언트 생성"""
    backend = (backend or config.HACI_BACKEND).lower()

    if backend == "memory":
        from haci.clients.memory import MemoryClient
        return MemoryClient()
    if backend == "web":
        from haci.clients.web import WebClient
        return WebClient()

    raise ValueError(f"지원하지 않는 백엔드입니다: {backend!r} (memory 또는 web)")
