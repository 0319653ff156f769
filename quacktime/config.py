"""Application settings loaded from the environment"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(dotenv_path=".env")

DEFAULT_DATA_DIR = Path.home() / ".quacktime"


class Settings(BaseModel):
    """Runtime configuration for the focus timer core"""
    data_dir: Path = DEFAULT_DATA_DIR
    shared_dir: Optional[Path] = None  # widget-sharing store, optional
    timezone: Optional[str] = None  # IANA name; None means the local zone
    tick_interval: float = Field(1.0, gt=0)
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build settings from environment variables"""
    shared_dir = os.getenv("QUACKTIME_SHARED_DIR")

    return Settings(
        data_dir=Path(os.getenv("QUACKTIME_DATA_DIR", str(DEFAULT_DATA_DIR))).expanduser(),
        shared_dir=Path(shared_dir).expanduser() if shared_dir else None,
        timezone=os.getenv("QUACKTIME_TIMEZONE") or None,
        tick_interval=float(os.getenv("QUACKTIME_TICK_INTERVAL", "1.0")),
        log_level=os.getenv("QUACKTIME_LOG_LEVEL", "INFO").upper(),
    )
