from __future__ import annotations

import base64
import os

from cryptography.exceptions import InvalidTag
from cryptography.fernet import Fernet, InvalidToken, MultiFernet
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from mp_credentials.config.validation import InvalidConfigurationError
from mp_credentials.kernel.errors import DecryptionError, MalformedRecordError

__all__ = [
    "AesGcmEncryptor",
    "FernetEncryptor",
    "RsaOaepEncryptor",
]


class _TaggedEncryptor:
    """Shared ``<name>$<urlsafe base64 payload>`` record format.

    Subclasses implement ``_seal`` / ``_open`` over raw bytes.  ``decrypt``
    raises :class:`MalformedRecordError` for anything that is not one of
    this encryptor's records and :class:`DecryptionError` when a record
    fails authentication.
    """

    name: str = ""

    def _seal(self, plaintext: bytes) -> bytes:
        raise NotImplementedError

    def _open(self, payload: bytes) -> bytes:
        raise NotImplementedError

    def encrypt(self, data: str) -> str:
        payload = self._seal(data.encode("utf-8"))
        return f"{self.name}${base64.urlsafe_b64encode(payload).decode('ascii')}"

    def decrypt(self, data: str) -> str:
        prefix = f"{self.name}$"
        if not isinstance(data, str) or not data.startswith(prefix):
            raise MalformedRecordError(self.name, "missing algorithm tag")
        try:
            payload = base64.b64decode(data[len(prefix):], altchars=b"-_", validate=True)
        except ValueError as exc:
            raise MalformedRecordError(self.name, "payload is not base64", cause=exc) from exc
        if not payload:
            raise MalformedRecordError(self.name, "empty payload")
        plaintext = self._open(payload)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(self.name, "plaintext is not UTF-8", cause=exc) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FernetEncryptor(_TaggedEncryptor):
    """Fernet symmetric encryption; supports key rotation via MultiFernet list.

    The first key encrypts; every key in the list is tried on decrypt.
    """

    name = "fernet"

    def __init__(self, keys: list[bytes | str]) -> None:
        if not keys:
            raise InvalidConfigurationError("fernet", "at least one key is required")
        try:
            fernet_keys = [Fernet(k if isinstance(k, bytes) else k.encode()) for k in keys]
        except ValueError as exc:
            raise InvalidConfigurationError("fernet", "keys must be 32 url-safe base64-encoded bytes") from exc
        self._multi = MultiFernet(fernet_keys)

    @classmethod
    def generate_key(cls) -> bytes:
        return Fernet.generate_key()

    def _seal(self, plaintext: bytes) -> bytes:
        return self._multi.encrypt(plaintext)

    def _open(self, payload: bytes) -> bytes:
        try:
            return self._multi.decrypt(payload)
        except InvalidToken as exc:
            raise DecryptionError(self.name, cause=exc) from exc


class AesGcmEncryptor(_TaggedEncryptor):
    """AES-GCM authenticated encryption. Nonce prepended to ciphertext.

    The record tag is bound as associated data, so a payload lifted into
    another record format fails authentication.
    """

    name = "aesgcm"
    _NONCE_LEN = 12
    _TAG_LEN = 16

    def __init__(self, key: bytes) -> None:
        if len(key) not in (16, 24, 32):
            raise InvalidConfigurationError("aesgcm", "AES key must be 16, 24 or 32 bytes")
        self._aesgcm = AESGCM(key)

    @classmethod
    def generate_key(cls) -> bytes:
        return os.urandom(32)

    @classmethod
    def from_base64(cls, key: str) -> AesGcmEncryptor:
        try:
            raw = base64.urlsafe_b64decode(key.encode("ascii"))
        except ValueError as exc:
            raise InvalidConfigurationError("aesgcm", "key is not url-safe base64") from exc
        return cls(raw)

    def _seal(self, plaintext: bytes) -> bytes:
        nonce = os.urandom(self._NONCE_LEN)
        ct = self._aesgcm.encrypt(nonce, plaintext, self.name.encode())
        return nonce + ct

    def _open(self, payload: bytes) -> bytes:
        if len(payload) < self._NONCE_LEN + self._TAG_LEN:
            raise MalformedRecordError(self.name, "payload too short")
        nonce = payload[: self._NONCE_LEN]
        ct = payload[self._NONCE_LEN :]
        try:
            return self._aesgcm.decrypt(nonce, ct, self.name.encode())
        except InvalidTag as exc:
            raise DecryptionError(self.name, cause=exc) from exc


class RsaOaepEncryptor(_TaggedEncryptor):
    """RSA-OAEP (SHA-256) with the public half encrypting, private half decrypting.

    OAEP bounds the plaintext to ``key_bytes - 66`` bytes (190 for a 2048-bit
    key), which fits any single digest this package produces.
    """

    name = "rsa"

    def __init__(self, private_key: rsa.RSAPrivateKey) -> None:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise InvalidConfigurationError("rsa", "an RSA private key is required")
        self._private_key = private_key
        self._public_key = private_key.public_key()
        self._padding = padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        )

    @classmethod
    def generate(cls, key_size: int = 2048) -> RsaOaepEncryptor:
        return cls(rsa.generate_private_key(public_exponent=65537, key_size=key_size))

    @classmethod
    def from_pem(cls, pem: bytes | str, password: bytes | None = None) -> RsaOaepEncryptor:
        data = pem if isinstance(pem, bytes) else pem.encode("ascii")
        try:
            key = serialization.load_pem_private_key(data, password=password)
        except (ValueError, TypeError) as exc:
            raise InvalidConfigurationError("rsa", "could not load PEM private key") from exc
        return cls(key)  # type: ignore[arg-type]

    def private_pem(self, password: bytes | None = None) -> bytes:
        encryption: serialization.KeySerializationEncryption = (
            serialization.BestAvailableEncryption(password) if password else serialization.NoEncryption()
        )
        return self._private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=encryption,
        )

    def _seal(self, plaintext: bytes) -> bytes:
        return self._public_key.encrypt(plaintext, self._padding)

    def _open(self, payload: bytes) -> bytes:
        try:
            return self._private_key.decrypt(payload, self._padding)
        except ValueError as exc:
            raise DecryptionError(self.name, cause=exc) from exc
