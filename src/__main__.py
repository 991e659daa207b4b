"""Run the service with uvicorn: `python -m src`."""

import uvicorn

from src.core.config import settings


def main() -> None:
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
