import uvicorn

from imgserver.logging import configure_logging
from imgserver.settings import settings


def main() -> None:
    configure_logging()
    uvicorn.run("web.app:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
