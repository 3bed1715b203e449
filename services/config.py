# services/config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_VEHICLE_FILE = "data/sample_car.xml"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    vehicle_file: str = DEFAULT_VEHICLE_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    log_path: Optional[str] = None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read CARDIAG_* settings from the environment, after loading a .env file if present."""
    load_dotenv(env_file)
    return Settings(
        vehicle_file=os.getenv("CARDIAG_VEHICLE_FILE") or DEFAULT_VEHICLE_FILE,
        log_level=(os.getenv("CARDIAG_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        log_path=os.getenv("CARDIAG_LOG_PATH") or None,
    )
