"""AES-256-CBC with PKCS7 padding, IV prepended to the ciphertext."""
import os
from typing import Callable

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import DecryptionError

IV_BYTES = 16
BLOCK_BITS = 128


class AesCbcCipher:
    def __init__(self, iv_factory: Callable[[int], bytes] = os.urandom) -> None:
        self.iv_factory = iv_factory

    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        """Return ``IV || ciphertext`` using a fresh IV from ``iv_factory``."""
        iv = self.iv_factory(IV_BYTES)
        padder = padding.PKCS7(BLOCK_BITS).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        return iv + encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, key: bytes, blob: bytes) -> bytes:
        if len(blob) < IV_BYTES + BLOCK_BITS // 8 or (len(blob) - IV_BYTES) % (BLOCK_BITS // 8):
            raise DecryptionError("ciphertext has an invalid length")
        iv, ciphertext = blob[:IV_BYTES], blob[IV_BYTES:]
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_BITS).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise DecryptionError("invalid padding") from exc
