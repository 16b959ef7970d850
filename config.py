# config.py
# Settings are read from the environment on every script run so that a
# Streamlit rerun (or a test) picks up changes without re-importing.

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path(__file__).parent / "data"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    currency: str = "INR"
    locale: str = "en_IN"
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        data_dir=Path(os.environ.get("FOODCOST_DATA_DIR") or DEFAULT_DATA_DIR),
        currency=os.environ.get("FOODCOST_CURRENCY", "INR").strip().upper() or "INR",
        locale=os.environ.get("FOODCOST_LOCALE", "en_IN").strip() or "en_IN",
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
