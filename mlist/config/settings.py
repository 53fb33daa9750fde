"""
Configuration settings for the list membership manager.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv


class Config:
    """Configuration settings."""
    
    # Mailchimp credentials and target list
    MAILCHIMP_API_KEY = os.getenv('MAILCHIMP_API_KEY')
    MAILCHIMP_LIST_ID = os.getenv('MAILCHIMP_LIST_ID')
    
    # HTTP transport settings
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '10'))
    VERIFY_SSL = os.getenv('VERIFY_SSL', 'true').lower() == 'true'
    
    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.getenv('LOG_FORMAT', 'json')
    LOG_FILE = os.getenv('LOG_FILE')
    
    @classmethod
    def reload(cls):
        """Re-read settings from the environment (after loading a .env file)."""
        cls.MAILCHIMP_API_KEY = os.getenv('MAILCHIMP_API_KEY')
        cls.MAILCHIMP_LIST_ID = os.getenv('MAILCHIMP_LIST_ID')
        cls.REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '10'))
        cls.VERIFY_SSL = os.getenv('VERIFY_SSL', 'true').lower() == 'true'
        cls.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
        cls.LOG_FORMAT = os.getenv('LOG_FORMAT', 'json')
        cls.LOG_FILE = os.getenv('LOG_FILE')
    
    @classmethod
    def missing_settings(cls, required: List[str] = None) -> List[str]:
        """Names of required settings that are unset or empty."""
        required = required or ['MAILCHIMP_API_KEY']
        return [name for name in required if not getattr(cls, name, None)]
    
    @classmethod
    def validate(cls, required: List[str] = None):
        """Raise ValueError listing any missing required settings."""
        missing = cls.missing_settings(required)
        if missing:
            raise ValueError(f"Missing required settings: {', '.join(missing)}")


def load_config_from_env_file(env_file: str = '.env') -> bool:
    """
    Load configuration from an environment file.
    
    Returns:
        True if the file existed and was loaded
    """
    env_path = Path(env_file)
    if not env_path.exists():
        return False
    
    load_dotenv(env_path)
    Config.reload()
    return True
