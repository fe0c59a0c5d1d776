"""
네트워크 레코드 모델 정의
"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
import ipaddress

from haci.errors import ParseError


class Network(BaseModel):
    """할당된 주소/서브넷과 메타데이터

    JSON 키는 HaCi RESTWrapper 응답과 동일하게 유지한다.
    레코드는 불변이며 tags 도 튜플로 보관한다 (JSON 에서는 배열).
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[str] = Field(None, alias="ID", description="레코드 식별자")
    create_date: str = Field("", alias="createDate", description="생성 시각")
    create_from: str = Field("", alias="createFrom", description="생성 주체")
    description: str = Field("", description="설명")
    network: str = Field(..., description="CIDR 형식 네트워크 (예: 10.0.0.1/32)")
    tags: Tuple[str, ...] = Field((), description="태그 목록")

    def __repr__(self):
        return f"<Network(network='{self.network}', description='{self.description}')>"

    def _interface(self):
        try:
            return ipaddress.ip_interface(self.network)
        except ValueError as e:
            raise ParseError(f"유효하지 않은 네트워크 형식입니다: {self.network!r}") from e

    def ip(self) -> str:
        """CIDR에서 주소 부분만 반환"""
        return str(self._interface().ip)

    def network_info(self) -> Optional[dict]:
        """레코드 주소와 그 주소가 속한 네트워크 요약

        호스트 경로(/32, /128)이면 host_route 가 참이고 address 와 network 가 같다.
        CIDR 이 잘못된 원격 레코드는 None.
        """
        try:
            iface = self._interface()
        except ParseError:
            return None

        net = iface.network
        return {
            "address": str(iface.ip),
            "network": str(net),
            "version": iface.version,
            "prefix": net.prefixlen,
            "size": net.num_addresses,
            "host_route": net.prefixlen == net.max_prefixlen,
        }

    def to_json_dict(self) -> dict:
        """RESTWrapper 키 이름으로 직렬화 (tags 는 리스트)"""
        return self.model_dump(by_alias=True, mode="json")
