"""
슈퍼넷 단위 주소 풀
"""
from typing import Callable, Dict, List, Optional
import ipaddress
import logging

from haci.errors import ParseError, PoolExhausted
from haci.models.network import Network

logger = logging.getLogger(__name__)


def parse_supernet(supernet: str):
    """슈퍼넷 CIDR 파싱 (호스트 비트는 무시)"""
    try:
        return ipaddress.ip_network(supernet, strict=False)
    except (ValueError, TypeError) as e:
        raise ParseError(f"유효하지 않은 네트워크 형식입니다: {supernet!r}") from e


class AddressPool:
    """슈퍼넷 하나의 할당 커서와 할당된 네트워크 목록

    커서는 마지막으로 할당한 주소이며 항상 슈퍼넷 범위 안이거나
    바로 한 칸 아래에 있다. 해제된 주소는 재사용하지 않는다.
    """

    def __init__(self, supernet: str, assign_first_address: bool = False):
        self.supernet = parse_supernet(supernet)
        self.networks: Dict[str, Network] = {}

        # 정수로 보관: 0.0.0.0/x 에서 첫 주소 모드이면 -1 이 된다
        start = int(self.supernet.network_address)
        self._cursor = start - 1 if assign_first_address else start

    def __repr__(self):
        return f"<AddressPool(supernet='{self.supernet}', allocated={len(self.networks)})>"

    @property
    def cursor(self) -> Optional[ipaddress._BaseAddress]:
        """마지막으로 할당한 주소 (주소 공간 밖이면 None)"""
        if self._cursor < 0:
            return None
        return self._address(self._cursor)

    @property
    def exhausted(self) -> bool:
        return self._cursor + 1 >= int(self.supernet.broadcast_address)

    def _address(self, value: int):
        return type(self.supernet.network_address)(value)

    def allocate(self, description: str = "", tags: Optional[List[str]] = None,
                 taken: Optional[Callable[[str], bool]] = None, **fields) -> Network:
        """다음 주소를 호스트 경로로 할당

        taken 이 참을 반환하는 주소(다른 풀이나 수동 등록에 이미 있는 주소)는
        건너뛰고 커서만 전진시킨다.
        """
        while True:
            if self.exhausted:
                logger.debug(f"주소 풀 소진: {self.supernet}")
                raise PoolExhausted(f"할당 가능한 주소가 없습니다: {self.supernet}")

            candidate = self._address(self._cursor + 1)
            cidr = f"{candidate}/{self.supernet.max_prefixlen}"
            if taken is None or not taken(cidr):
                break

            logger.debug(f"{cidr} 는 이미 사용 중, 건너뜀")
            self._cursor += 1

        network = Network(
            network=cidr,
            description=description,
            tags=tuple(tags or ()),
            **fields
        )
        self.networks[cidr] = network
        self._cursor += 1

        logger.debug(f"{self.supernet} 에서 {cidr} 할당")
        return network

    def release(self, cidr: str) -> Optional[Network]:
        """할당 해제 (커서는 되돌리지 않음)"""
        return self.networks.pop(cidr, None)

    def search(self, description: str, exact: bool = False) -> List[Network]:
        return [n for n in self.networks.values() if matches(n, description, exact)]


def matches(network: Network, description: str, exact: bool) -> bool:
    """설명 검색 조건 확인"""
    if exact:
        return network.description == description
    return description in network.description
