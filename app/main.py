import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from app.api.routes import products
from app.core.config import Settings, get_settings
from app.core.logging_config import setup_logging
from app.db.database import create_tables

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 시작 시 테이블 생성"""
    create_tables()
    logger.info("Database tables ready (%s)", settings.app_env)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Product 리소스에 대한 CRUD API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """저장소 오류는 재시도 없이 500으로 응답"""
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal database error"},
    )


# 라우터 등록
app.include_router(products.router, prefix="/api/products", tags=["products"])

# 웹 클라이언트 (/static/ 에서 index.html 제공)
app.mount("/static", StaticFiles(directory=STATIC_DIR, html=True), name="static")


@app.get("/")
async def root(settings: Settings = Depends(get_settings)):
    """루트 엔드포인트"""
    return {
        "message": settings.app_name,
        "env": settings.app_env,
        "status": "running",
        "docs": "/docs",
        "web": "/static/",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
