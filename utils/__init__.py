"""
Utilities Package
Shared helpers for deployment scripts
"""

from .logging_config import setup_logging
from .env_file import update_env_file

__all__ = ['setup_logging', 'update_env_file']
