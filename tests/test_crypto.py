"""Tests for encryption of screen identities in async URLs."""
import pytest
from cryptography.fernet import Fernet

from screenkit.crypto import decrypt_string, encrypt_string
from screenkit.exceptions import DecryptError


def test_encrypted_value_is_opaque_and_reversible(app):
    token = encrypt_string('screens.UserEditScreen')

    assert 'UserEditScreen' not in token
    assert '/' not in token
    assert decrypt_string(token) == 'screens.UserEditScreen'


def test_tampered_token_is_rejected(app):
    token = encrypt_string('screens.UserEditScreen')

    with pytest.raises(DecryptError):
        decrypt_string(token[:-4] + 'AAAA')

    with pytest.raises(DecryptError):
        decrypt_string('not-a-token')


def test_token_from_another_secret_is_rejected(app):
    foreign = encrypt_string('screens.UserEditScreen', key=Fernet.generate_key().decode())

    with pytest.raises(DecryptError):
        decrypt_string(foreign)


def test_explicit_encryption_key_is_used(app):
    key = Fernet.generate_key().decode()
    app.config['PANEL_ENCRYPTION_KEY'] = key

    token = encrypt_string('screens.PublicScreen')

    assert Fernet(key).decrypt(token.encode()).decode() == 'screens.PublicScreen'
