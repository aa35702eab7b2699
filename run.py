"""Start the Employee Records API under uvicorn.

Host, port and log level come from ``Settings`` (``HOST``, ``PORT`` and
``LOG_LEVEL``, read from the environment or a ``.env`` file).

Usage:
    python run.py
"""

from uvicorn import Config, Server

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.main import app


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    config = Config(
        app=app,
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
