from .singleton import Singleton
from .env_vars import EnvVars

__all__ = ['Singleton', 'EnvVars']
