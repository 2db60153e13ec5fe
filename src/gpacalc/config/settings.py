from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    db_path: str = os.getenv("GPACALC_DB_PATH", "data/gpacalc.db")
    storage_key: str = os.getenv("GPACALC_STORAGE_KEY", "gpaCalculatorCourses")
    strict_load: bool = _flag(os.getenv("GPACALC_STRICT_LOAD", "1"))

    web_mode: bool = _flag(os.getenv("GPACALC_WEB", "0"))
    port: int = int(os.getenv("PORT", "8550"))

    log_level: str = os.getenv("GPACALC_LOG_LEVEL", "INFO").upper()


settings = Settings()
