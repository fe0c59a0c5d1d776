"""
HaCi RESTWrapper 원격 클라이언트
"""
from typing import Any, Dict, List, Optional
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from haci import config
from haci.errors import OperationFailed, Unsupported
from haci.models.network import Network

logger = logging.getLogger(__name__)

_network_list = TypeAdapter(List[Network])


class WebClient:
    """원격 HaCi 서버로 요청을 전달하는 클라이언트

    재시도/백오프는 하지 않는다. 전송 오류(httpx.TransportError)는 그대로 전파된다.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        root: Optional[str] = None,
        verify: Optional[bool] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.url = (url if url is not None else config.HACI_URL).rstrip("/")
        self.root = root if root is not None else config.HACI_ROOT
        self.username = username if username is not None else config.HACI_USERNAME

        if http_client is None:
            password = password if password is not None else config.HACI_PASSWORD
            http_client = httpx.Client(
                auth=(self.username, password) if self.username else None,
                verify=config.HACI_VERIFY_TLS if verify is None else verify,
                timeout=config.HACI_TIMEOUT if timeout is None else timeout,
            )
            self._owns_client = True
        else:
            self._owns_client = False
        self.http = http_client

    def __str__(self):
        return self.describe()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_client:
            self.http.close()

    def describe(self) -> str:
        return f"WebClient(url={self.url}, root={self.root}, user={self.username or '-'})"

    # ---- HTTP helpers -------------------------------------------------
    def _call(self, endpoint: str, params: Dict[str, Any], context: str) -> httpx.Response:
        url = f"{self.url}/RESTWrapper/{endpoint}"
        params = {"rootName": self.root, **params}

        resp = self.http.get(url, params=params)
        if resp.status_code != 200:
            logger.warning(f"HaCi {context} 실패 (HTTP {resp.status_code}): {resp.text}")
            raise OperationFailed(
                f"{context} failed: {resp.text}", status_code=resp.status_code, body=resp.text
            )
        return resp

    def _decode(self, resp: httpx.Response, adapter, context: str):
        try:
            return adapter(resp.content)
        except ValidationError as e:
            logger.warning(f"HaCi {context} 응답 디코딩 실패: {resp.text}")
            raise OperationFailed(
                f"{context} failed: invalid response body", status_code=resp.status_code, body=resp.text
            ) from e

    def _one(self, resp, context: str) -> Network:
        return self._decode(resp, Network.model_validate_json, context)

    def _many(self, resp, context: str) -> List[Network]:
        if not resp.content.strip():
            return []
        return self._decode(resp, _network_list.validate_json, context)

    # ---- 공통 인터페이스 ----------------------------------------------
    def get(self, network: str) -> Network:
        resp = self._call("getNetworkDetails", {"network": network}, "lookup")
        return self._one(resp, "lookup")

    def list(self, supernet: str) -> List[Network]:
        resp = self._call("getSubnets", {"supernet": supernet}, "list")
        return self._many(resp, "list")

    def assign(self, supernet: str, description: str = "", prefix_length: Optional[int] = None,
               tags: Optional[List[str]] = None) -> Network:
        params = {
            "supernet": supernet,
            "description": description,
            "tags": " ".join(tags or []),
        }
        if prefix_length is not None:
            params["cidr"] = str(prefix_length)

        resp = self._call("assignFreeSubnet", params, "assignment")
        return self._one(resp, "assignment")

    def add(self, network: str, description: str = "", tags: Optional[List[str]] = None) -> Network:
        """네트워크 등록 (서버는 빈 응답을 반환하므로 입력값으로 레코드 구성)"""
        tags = list(tags or [])
        self._call(
            "addNet",
            {"network": network, "description": description, "tags": " ".join(tags)},
            "add",
        )
        return Network(network=network, description=description, tags=tags)

    def delete(self, network: str, lock: bool = False) -> None:
        self._call("delNet", {"network": network, "networkLock": "1" if lock else "0"}, "delete")

    def search(self, description: str, exact: bool = False) -> List[Network]:
        params = {"search": description, "withDetails": "1"}
        if exact:
            params["exact"] = "1"
        resp = self._call("search", params, "search")
        return self._many(resp, "search")

    def reset(self) -> None:
        raise Unsupported("HaCi RESTWrapper는 전체 초기화를 지원하지 않습니다")
