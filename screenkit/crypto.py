"""
Symmetric encryption of short strings placed in panel URLs.

Screen class paths travel through async URLs encrypted so the browser
can not pick an arbitrary class to instantiate.
"""

import base64
import hashlib
import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from flask import current_app

from .exceptions import DecryptError

logger = logging.getLogger(__name__)


def _derive_key(secret: str) -> bytes:
    """Turn an arbitrary secret into a valid Fernet key."""
    digest = hashlib.sha256(secret.encode('utf-8')).digest()
    return base64.urlsafe_b64encode(digest)


def get_fernet(key: Optional[str] = None) -> Fernet:
    """Build the cipher from an explicit key or the application config.

    PANEL_ENCRYPTION_KEY must be a Fernet key when set; otherwise a key is
    derived from SECRET_KEY.
    """
    if key is None:
        key = current_app.config.get('PANEL_ENCRYPTION_KEY')
        if not key:
            secret = current_app.config.get('SECRET_KEY')
            if not secret:
                raise RuntimeError("SECRET_KEY must be set to encrypt panel URLs")
            return Fernet(_derive_key(secret))
    return Fernet(key)


def encrypt_string(value: str, key: Optional[str] = None) -> str:
    return get_fernet(key).encrypt(value.encode('utf-8')).decode('ascii')


def decrypt_string(token: str, key: Optional[str] = None) -> str:
    try:
        return get_fernet(key).decrypt(token.encode('ascii')).decode('utf-8')
    except (InvalidToken, UnicodeError) as e:
        logger.warning(f"Rejected undecryptable panel token: {type(e).__name__}")
        raise DecryptError("The payload is invalid") from e
