import uvicorn

from taskboard.config import get_settings


def run() -> None:
    settings = get_settings()
    try:
        uvicorn.run(
            "taskboard.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
