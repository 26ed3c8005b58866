"""Encrypt cookie payloads, then let ``SignedCookie`` sign the ciphertext.

Only ``get_if_good`` is offered for reading: decryption runs solely on values
whose signature and expiration already checked out, so forged ciphertext never
reaches the cipher.
"""
import base64
import binascii
import logging
from typing import Optional

from ..domain.crypto import AesCbcCipher
from ..domain.errors import DecryptionError
from ..domain.sign import KEY_BYTES, decode_key
from ..infra.http import CookieRequest, CookieResponse
from .signed import SignedCookie

logger = logging.getLogger(__name__)


class EncryptedCookie:
    def __init__(
        self,
        aes_key: str,
        delegate: SignedCookie,
        cipher: Optional[AesCbcCipher] = None,
    ) -> None:
        self.key = decode_key(aes_key, "AES key", length=KEY_BYTES)
        self.delegate = delegate
        self.cipher = cipher or AesCbcCipher()

    def get_if_good(self, req: CookieRequest) -> Optional[str]:
        ciphertext = self.delegate.get_if_good(req)
        if ciphertext is None:
            return None
        try:
            return self.decrypt_from_base64(ciphertext)
        except DecryptionError:
            # signed by us but undecryptable: wrong key or a bug, not an attacker
            logger.error(
                "authenticated cookie %s could not be decrypted",
                self.delegate.transport.name,
                exc_info=True,
            )
            return None

    def set(self, res: CookieResponse, value: str) -> None:
        """Encrypt ``value`` and hand it to the signed layer."""
        self.delegate.set(res, self.encrypt_to_base64(value))

    def unset(self, res: CookieResponse) -> None:
        self.delegate.unset(res)

    def encrypt_to_base64(self, value: str) -> str:
        return base64.b64encode(self.cipher.encrypt(self.key, value.encode("utf-8"))).decode("ascii")

    def decrypt_from_base64(self, value: str) -> str:
        try:
            blob = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecryptionError("ciphertext is not valid base64") from exc
        plaintext = self.cipher.decrypt(self.key, blob)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecryptionError("plaintext is not valid UTF-8") from exc
