"""
API 서버 메인 애플리케이션
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace import __version__
from marketplace.config import settings
from marketplace.monitoring import get_logger, global_metrics, setup_logging
from marketplace.services.exceptions import MarketplaceError
from marketplace.storage.database import close_db, get_db, init_db, ping_db

from .middleware import TimingMiddleware
from .responses import failure
from .routers import auth, category, product, provcity, toko, trx, users

logger = get_logger(__name__)

APP_NAME = "Marketplace API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.is_production(),
    )
    logger.info("API 서버 시작")

    if settings.auto_create_tables:
        await init_db()

    yield

    logger.info("API 서버 종료")
    await close_db()


# FastAPI 앱 생성
app = FastAPI(
    title=APP_NAME,
    description="회원, 상점, 상품, 배송지, 주문을 다루는 마켓플레이스 REST API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# 미들웨어 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TimingMiddleware)

# 업로드 파일
app.mount("/uploads", StaticFiles(directory=str(settings.upload_path), check_dir=False), name="uploads")

# 라우터 등록
app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(users.router, prefix="/user", tags=["user"])
app.include_router(toko.router, prefix="/toko", tags=["toko"])
app.include_router(category.router, prefix="/category", tags=["category"])
app.include_router(product.router, prefix="/product", tags=["product"])
app.include_router(trx.router, prefix="/trx", tags=["trx"])
app.include_router(provcity.router, prefix="/provcity", tags=["provcity"])


# 예외 처리
@app.exception_handler(MarketplaceError)
async def marketplace_exception_handler(request: Request, exc: MarketplaceError):
    """서비스 오류 처리"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc}")
    return failure(request, exc.errors, exc.status_code, exc.title)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP 예외 처리 (없는 경로, 허용되지 않은 메서드 등)"""
    return failure(request, [str(exc.detail)], exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """검증 오류 처리 (400)"""
    global_metrics.increment("api.validation_errors")

    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "path":
            message = "invalid id"
        elif error.get("type") == "json_invalid":
            message = "invalid request body"
        else:
            field = ".".join(loc[1:]) or "body"
            message = f"{field}: {error.get('msg')}"
        if message not in errors:
            errors.append(message)

    return failure(request, errors, status.HTTP_400_BAD_REQUEST)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """일반 예외 처리"""
    logger.exception(f"처리되지 않은 예외: {exc}")
    return failure(request, ["internal server error"], status.HTTP_500_INTERNAL_SERVER_ERROR)


# 루트 엔드포인트
@app.get("/")
async def root():
    """API 상태 확인"""
    return {
        "name": APP_NAME,
        "version": __version__,
        "status": "running",
        "environment": settings.env,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check(session: AsyncSession = Depends(get_db)):
    """헬스 체크"""
    try:
        await ping_db(session)
        db_status = "healthy"
    except Exception as e:
        logger.error(f"DB 헬스 체크 실패: {e}")
        db_status = "unhealthy"

    metrics = global_metrics.get_summary()

    return {
        "status": "ok" if db_status == "healthy" else "degraded",
        "checks": {"database": db_status},
        "metrics": {
            "api_requests": metrics["api"]["total_requests"],
            "api_errors": metrics["api"]["total_errors"],
            "validation_errors": metrics["api"]["validation_errors"],
            "users_registered": metrics["business"]["users_registered"],
            "products_created": metrics["business"]["products_created"],
            "trx_created": metrics["business"]["trx_created"],
        },
    }


def run():
    """API 서버 실행"""
    import uvicorn

    logger.info(f"API 서버 시작: http://{settings.host}:{settings.port}")

    uvicorn.run(
        "marketplace.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
