from __future__ import annotations
import os
from pydantic import BaseModel
from product_catalog.core.constants import DEFAULT_CATALOG_PATH


class Settings(BaseModel):
    catalog_path: str = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"
    log_file: str = ""


def load_settings() -> Settings:
    """
    Lee la configuración desde el entorno.
    Llamar load_dotenv() antes si se quiere usar un archivo .env.
    """
    return Settings(
        catalog_path=os.getenv("CATALOG_PATH", DEFAULT_CATALOG_PATH).strip() or DEFAULT_CATALOG_PATH,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_file=os.getenv("LOG_FILE", "").strip(),
    )
