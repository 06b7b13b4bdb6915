"""
Run the API server:

  python -m stock_api

Host, port and log level come from HOST, PORT and LOG_LEVEL.
"""

import uvicorn

from stock_api.core.config import get_settings
from stock_api.core.logging import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "stock_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
