from typing import Optional
from dotenv import load_dotenv
from pathlib import Path
import os

from .singleton import Singleton


class EnvVars(metaclass=Singleton):

    def __init__(self):
        # Look for .env file in the project root directory
        project_root = Path(__file__).parent.parent.parent  # Go up from src/series_config/ to project root
        env_path = project_root / ".env"
        if env_path.exists():
            load_dotenv(env_path)
        self.env_variables = {}

        # Series conversion defaults
        self.default_time_type = self.get_env('SERIES_DEFAULT_TIME_TYPE', 'mysql')
        self.date_timezone = self.get_env('SERIES_DATE_TIMEZONE', 'UTC')

        # Logging
        self.log_level = self.get_env('LOG_LEVEL', 'INFO')
        self.log_path = self.get_env('LOG_PATH')


    def get_env(self, variable: str, default: Optional[str] = None) -> Optional[str]:
        return self.env_variables.get(variable) or self.env_variables.setdefault(
            variable,
            os.getenv(variable, default)
        )
