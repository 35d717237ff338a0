"""Configuration management for the 40-day plan tracker."""
import os
from datetime import date
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Plan Settings
PLAN_START_DATE: Final[date] = date.fromisoformat(os.getenv('PLAN_START_DATE', '2023-03-31'))
DEFAULT_USER_ID: Final[int] = int(os.getenv('DEFAULT_USER_ID', '1'))

