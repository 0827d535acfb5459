import os
import secrets
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() in ['true', 'on', '1']


class Config:
    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # For development, generate a temporary secret key
        # In production, always set SECRET_KEY environment variable
        if os.environ.get('FLASK_ENV') == 'development' or _env_flag('FLASK_DEBUG'):
            SECRET_KEY = secrets.token_hex(32)
            print("WARNING: Using temporary SECRET_KEY for development. Set SECRET_KEY in .env for production!")
        else:
            # All workers must share the key: encrypted async URLs and
            # CSRF tokens issued by one worker are verified by another.
            raise ValueError("No SECRET_KEY set for Flask application. Please set it in your .env file.")

    # Fernet key for async URLs; derived from SECRET_KEY when unset
    PANEL_ENCRYPTION_KEY = os.environ.get('PANEL_ENCRYPTION_KEY')

    # Panel settings
    PANEL_NAME = os.environ.get('PANEL_NAME', 'ScreenKit')
    PANEL_PREFIX = os.environ.get('PANEL_PREFIX', '/admin')
    PANEL_FIELD_WRAPPER = os.environ.get('PANEL_FIELD_WRAPPER', 'vertical')  # 'vertical' or 'horizontal'

    # CSRF Settings
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour
    WTF_CSRF_SSL_STRICT = False  # Allow CSRF over HTTP for development

    # Session settings
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Authentication settings
    REMEMBER_COOKIE_DURATION = 86400 * 7  # 7 days
    REMEMBER_COOKIE_HTTPONLY = True
    REMEMBER_COOKIE_SAMESITE = 'Lax'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'ERROR')
    PANEL_DEBUG = _env_flag('PANEL_DEBUG')
