"""
HaCi RESTWrapper 호환 API 엔드포인트 (인메모리 백엔드)

WebClient 를 실제 HaCi 서버 없이 검증하기 위한 스텁 서비스.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from typing import List, Optional
import logging

from haci.clients.memory import MemoryClient
from haci.errors import AlreadyExists, NotFound, ParseError, PoolExhausted
from haci.models.network import Network

logger = logging.getLogger(__name__)

router = APIRouter()


def get_client(request: Request, rootName: str = Query(..., description="HaCi 루트 이름")) -> MemoryClient:
    """루트별 인메모리 클라이언트 의존성"""
    roots = request.app.state.roots
    if rootName not in roots:
        roots[rootName] = MemoryClient()
        logger.info(f"루트 생성: {rootName}")
    return roots[rootName]


def _split_tags(tags: Optional[str]) -> List[str]:
    return tags.split() if tags else []


@router.get("/getNetworkDetails", response_model=Network)
async def get_network_details(
    network: str = Query(...),
    client: MemoryClient = Depends(get_client)
):
    """네트워크 조회"""
    try:
        return client.get(network)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/getSubnets", response_model=List[Network])
async def get_subnets(
    supernet: str = Query(...),
    client: MemoryClient = Depends(get_client)
):
    """슈퍼넷 할당 목록 조회"""
    try:
        return client.list(supernet)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/assignFreeSubnet", response_model=Network)
async def assign_free_subnet(
    supernet: str = Query(...),
    description: str = "",
    cidr: Optional[int] = None,
    tags: Optional[str] = None,
    client: MemoryClient = Depends(get_client)
):
    """다음 주소 할당"""
    try:
        return client.assign(supernet, description, cidr, _split_tags(tags))
    except ParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PoolExhausted as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/addNet")
async def add_net(
    network: str = Query(...),
    description: str = "",
    tags: Optional[str] = None,
    client: MemoryClient = Depends(get_client)
):
    """네트워크 수동 등록"""
    try:
        client.add(network, description, _split_tags(tags))
    except ParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))
    return Response(status_code=200)


@router.get("/delNet")
async def del_net(
    network: str = Query(...),
    networkLock: bool = False,
    client: MemoryClient = Depends(get_client)
):
    """네트워크 삭제"""
    if networkLock:
        logger.debug(f"networkLock 무시: {network}")
    client.delete(network)
    return Response(status_code=200)


@router.get("/search", response_model=List[Network])
async def search_networks(
    search: str = Query(...),
    withDetails: bool = True,
    exact: bool = False,
    client: MemoryClient = Depends(get_client)
):
    """설명으로 네트워크 검색"""
    return client.search(search, exact)
