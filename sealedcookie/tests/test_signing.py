import base64
import hashlib
import hmac

import pytest

from sealedcookie.app.domain.errors import ConfigurationError
from sealedcookie.app.domain.sign import (
    decode_key,
    generate_keys,
    hmac_sha256,
    sign_to_base64,
    signatures_match,
)


def test_hmac_sha256_matches_stdlib():
    assert hmac_sha256(b"key", b"data") == hmac.new(b"key", b"data", hashlib.sha256).digest()


def test_signature_uses_subkey_derived_from_time():
    secret = b"s" * 32
    subkey = hmac.new(secret, b"1700000000000", hashlib.sha256).digest()
    expected = hmac.new(subkey, b"1700000000000user123", hashlib.sha256).digest()

    assert sign_to_base64(secret, "1700000000000", "user123") == base64.b64encode(expected).decode()


def test_signature_depends_on_time_and_data():
    secret = b"s" * 32
    base = sign_to_base64(secret, "1", "data")
    assert sign_to_base64(secret, "2", "data") != base
    assert sign_to_base64(secret, "1", "datb") != base
    assert sign_to_base64(b"t" * 32, "1", "data") != base


def test_signatures_match_is_exact():
    assert signatures_match("abc=", "abc=")
    assert not signatures_match("abc=", "abd=")
    assert not signatures_match("abc", "abc=")


def test_generate_keys_returns_independent_256_bit_keys():
    aes_key, hmac_secret = generate_keys()
    assert len(base64.b64decode(aes_key)) == 32
    assert len(base64.b64decode(hmac_secret)) == 32
    assert aes_key != hmac_secret


def test_decode_key_rejects_bad_material():
    with pytest.raises(ConfigurationError):
        decode_key(None, "AES key")
    with pytest.raises(ConfigurationError):
        decode_key("not base64!", "AES key")
    with pytest.raises(ConfigurationError):
        decode_key(base64.b64encode(b"k" * 16).decode(), "AES key", length=32)


def test_decode_key_accepts_exact_length():
    key = base64.b64encode(b"k" * 32).decode()
    assert decode_key(key, "AES key", length=32) == b"k" * 32
