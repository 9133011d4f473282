"""
Club Roster 메인 - 서버 / 터미널 클라이언트 실행
"""
import argparse
import sys

from loguru import logger


# 로깅 설정
def setup_logging(level: str = "INFO", log_file: bool = True) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )
    if log_file:
        logger.add(
            "logs/club_{time:YYYY-MM-DD}.log",
            rotation="1 day",
            retention="30 days",
            level="DEBUG"
        )


def serve(host: str = None, port: int = None, reload: bool = False) -> None:
    """API 서버 실행"""
    import uvicorn
    from app.config import get_settings

    settings = get_settings()
    host = host or settings.HOST
    port = port or settings.PORT
    logger.info(f"서버 실행: http://{host}:{port}")
    uvicorn.run(
        "app.server:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


def main():
    parser = argparse.ArgumentParser(description="클럽 선수 검색")
    parser.add_argument("--debug", action="store_true", help="DEBUG 로그 출력")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="API 서버 실행")
    serve_parser.add_argument("--host", default=None, help="바인드 주소")
    serve_parser.add_argument("--port", type=int, default=None, help="포트 (기본 5000)")
    serve_parser.add_argument("--reload", action="store_true", help="코드 변경 시 재시작")

    client_parser = subparsers.add_parser("client", help="터미널 검색 클라이언트")
    client_parser.add_argument("--api-url", default=None, help="API 주소 (기본 CLUB_API_URL)")
    client_parser.add_argument("--token-path", default=None, help="세션 파일 경로")

    args = parser.parse_args()

    if args.command == "serve":
        setup_logging("DEBUG" if args.debug else "INFO")
        serve(args.host, args.port, args.reload)
    elif args.command == "client":
        # 클라이언트 화면에는 경고 이상만
        setup_logging("DEBUG" if args.debug else "WARNING", log_file=False)
        from client.cli import main as client_main
        try:
            client_main(args.api_url, args.token_path)
        except KeyboardInterrupt:
            logger.info("클라이언트 종료")
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
