"""
HaCi RESTWrapper 스텁 서버 엔트리 포인트
"""
from typing import Dict, Optional
from fastapi import FastAPI
import logging

from haci import config
from haci.api import restwrapper
from haci.clients.memory import MemoryClient

logger = logging.getLogger(__name__)


def create_app(roots: Optional[Dict[str, MemoryClient]] = None) -> FastAPI:
    """스텁 서버 앱 생성 (루트 이름별 인메모리 클라이언트)"""
    app = FastAPI(
        title="HaCi RESTWrapper stub",
        description="인메모리 할당 엔진을 HaCi RESTWrapper 형식으로 노출",
        version="1.0.0"
    )
    app.state.roots = roots if roots is not None else {}

    # RESTWrapper 라우터 등록
    app.include_router(restwrapper.router, prefix="/RESTWrapper", tags=["restwrapper"])

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {
            "status": "healthy",
            "service": "haci-stub",
            "roots": {name: client.describe() for name, client in app.state.roots.items()}
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    config.setup_logging()
    logger.info("HaCi 스텁 서버 시작")
    uvicorn.run(app, host="0.0.0.0", port=8000)
