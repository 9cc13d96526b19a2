"""
Run the API server:
  python -m storerate
Host and port come from HOST / PORT (see storerate.core.config).
"""
import uvicorn

from storerate.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "storerate.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
    )


if __name__ == "__main__":
    main()
