"""Error types raised by the cookie stack."""


class ConfigurationError(ValueError):
    """Key material or settings are unusable; the component must not start."""


class DecryptionError(Exception):
    """Ciphertext could not be decoded, unpadded or decrypted."""
