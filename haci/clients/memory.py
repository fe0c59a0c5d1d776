"""
인메모리 HaCi 클라이언트 (테스트 더블)

원격 HaCi 서버의 할당 동작을 네트워크 없이 재현한다.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
import ipaddress
import logging
import threading

from haci import config
from haci.errors import AlreadyExists, NotFound, ParseError
from haci.models.network import Network
from haci.models.pool import AddressPool, matches, parse_supernet

logger = logging.getLogger(__name__)


def normalize_cidr(cidr: str) -> str:
    """CIDR 문자열 정규화 (호스트 주소는 유지, 접두사 없으면 호스트 경로)"""
    try:
        return str(ipaddress.ip_interface(cidr))
    except (ValueError, TypeError) as e:
        raise ParseError(f"유효하지 않은 네트워크 형식입니다: {cidr!r}") from e


def _lookup_key(cidr: str) -> str:
    # 조회/삭제는 파싱 실패를 에러로 보지 않는다
    try:
        return normalize_cidr(cidr)
    except ParseError:
        return cidr


class MemoryClient:
    """슈퍼넷별 주소 풀과 수동 등록 네트워크를 관리하는 할당 엔진"""

    def __init__(self, assign_first_address: Optional[bool] = None, create_from: Optional[str] = None):
        if assign_first_address is None:
            assign_first_address = config.HACI_ASSIGN_FIRST_ADDRESS
        self.assign_first_address = assign_first_address
        self.create_from = create_from if create_from is not None else config.HACI_CREATE_FROM

        self.pools: Dict[str, AddressPool] = {}
        self.networks: Dict[str, Network] = {}
        self.counter = 1
        self._lock = threading.RLock()

    def __str__(self):
        return self.describe()

    def describe(self) -> str:
        with self._lock:
            mode = "first-address" if self.assign_first_address else "standard"
            return f"MemoryClient(pools={len(self.pools)}, networks={len(self.networks)}, mode={mode})"

    def _stamp(self) -> dict:
        """새 레코드의 식별자/생성 정보 (카운터 증가는 저장 후 호출자가 담당)"""
        return {
            "id": str(self.counter),
            "create_date": datetime.now(timezone.utc).isoformat(),
            "create_from": self.create_from,
        }

    def _find_pool(self, cidr: str):
        for pool in self.pools.values():
            if cidr in pool.networks:
                return pool
        return None

    def _taken(self, cidr: str) -> bool:
        """수동 등록 또는 어느 풀에든 이미 있는 CIDR 인지 확인"""
        return cidr in self.networks or self._find_pool(cidr) is not None

    def get(self, network: str) -> Network:
        """네트워크 조회"""
        key = _lookup_key(network)
        with self._lock:
            if key in self.networks:
                return self.networks[key]
            pool = self._find_pool(key)
            if pool is not None:
                return pool.networks[key]

        logger.debug(f"네트워크 없음: {network}")
        raise NotFound(f"네트워크를 찾을 수 없습니다: {network}")

    def list(self, supernet: str) -> List[Network]:
        """슈퍼넷에 할당된 네트워크 목록"""
        key = str(parse_supernet(supernet))
        with self._lock:
            pool = self.pools.get(key)
            if pool is None:
                return []
            return list(pool.networks.values())

    def assign(self, supernet: str, description: str = "", prefix_length: Optional[int] = None,
               tags: Optional[List[str]] = None) -> Network:
        """슈퍼넷에서 다음 주소 할당

        할당 단위는 항상 호스트 경로(/32, /128)이며 prefix_length 는
        원격 API와의 호환을 위해서만 받는다.
        """
        net = parse_supernet(supernet)
        key = str(net)

        with self._lock:
            pool = self.pools.get(key)
            if pool is None:
                pool = AddressPool(key, assign_first_address=self.assign_first_address)
                self.pools[key] = pool
                logger.info(f"주소 풀 생성: {key}")

            network = pool.allocate(description, tags, taken=self._taken, **self._stamp())
            self.counter += 1

        logger.info(f"네트워크 할당: {network.network} ({description})")
        return network

    def add(self, network: str, description: str = "", tags: Optional[List[str]] = None) -> Network:
        """이미 보유한 네트워크를 수동 등록"""
        key = normalize_cidr(network)

        with self._lock:
            if self._taken(key):
                logger.debug(f"이미 존재하는 네트워크: {key}")
                raise AlreadyExists(f"이미 존재하는 네트워크입니다: {key}")

            record = Network(
                network=key,
                description=description,
                tags=tuple(tags or ()),
                **self._stamp()
            )
            self.networks[key] = record
            self.counter += 1

        logger.info(f"네트워크 등록: {key} ({description})")
        return record

    def delete(self, network: str) -> None:
        """네트워크 삭제 (없는 네트워크는 무시)"""
        key = _lookup_key(network)
        with self._lock:
            if self.networks.pop(key, None) is not None:
                logger.info(f"네트워크 삭제: {key}")
                return
            pool = self._find_pool(key)
            if pool is not None:
                pool.release(key)
                logger.info(f"네트워크 삭제: {key} (풀 {pool.supernet})")
                return

        logger.debug(f"삭제할 네트워크 없음: {network}")

    def search(self, description: str, exact: bool = False) -> List[Network]:
        """설명으로 네트워크 검색"""
        with self._lock:
            result = [n for n in self.networks.values() if matches(n, description, exact)]
            for pool in self.pools.values():
                result.extend(pool.search(description, exact))
        return result

    def reset(self) -> None:
        """모든 풀과 등록 네트워크 초기화"""
        with self._lock:
            self.pools.clear()
            self.networks.clear()
            self.counter = 1
        logger.info("인메모리 클라이언트 초기화")
