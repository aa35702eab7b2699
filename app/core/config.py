import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    ENRICHMENT_ENABLED: bool = True
    ENRICHMENT_TIMEOUT_SECONDS: float = 5.0

    PICTURE_SERVICE_URL: str = "https://picsum.photos"
    # Pages at or above this index come back as an empty list.
    PICTURE_MAX_PAGE: int = 994
    PICTURE_SIZE: int = 450

    QUOTE_SERVICE_URL: str = "https://quotes.rest/qod"

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
