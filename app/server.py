"""
Club Roster - FastAPI 웹 서버
선수 이름 검색 + 로그인

데이터 소스: Supabase (club_players)
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from app.config import get_settings
from app.errors import ServiceError, ServiceErrorKind

# Auth 모듈
from app.auth import auth_router

# 선수 검색 모듈
from app.players import players_router

# 환경변수 로드
load_dotenv()


def create_app() -> FastAPI:
    """FastAPI 앱 생성"""
    settings = get_settings()

    app = FastAPI(
        title="Club Roster",
        description="클럽 선수 명단 검색 API",
        version="1.0.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(players_router)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """서버 시작"""
        auth_mode = "필수" if settings.REQUIRE_SEARCH_AUTH else "비활성"
        logger.info(f"✅ 서버 시작 완료 - 검색 인증 {auth_mode}, 최대 {settings.search_limit}건")

    @app.on_event("shutdown")
    async def shutdown_event():
        """서버 종료 시 정리"""
        logger.info("서버 종료됨")

    @app.get("/api/health")
    async def health():
        """배포 상태 확인"""
        return {"status": "ok"}

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """모든 오류 응답을 {"error": ...} 형태로 통일"""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.kind == ServiceErrorKind.STORE_UNAVAILABLE:
            # 원본 오류는 서비스에서 이미 로깅됨
            message = "Player search is temporarily unavailable"
        else:
            logger.info(f"잘못된 검색 요청: {exc.message}")
            message = exc.message
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        field = ".".join(str(p) for p in errors[0].get("loc", [])[1:]) if errors else ""
        message = f"Invalid {field}" if field else "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


app = create_app()


# ==================== 서버 실행 ====================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.server:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level="info"
    )
