from __future__ import annotations

from mp_credentials.kernel.security import Encryptor
from mp_credentials.observability.logging import get_logger

__all__ = ["KeyRotationService"]

_log = get_logger(__name__)


class KeyRotationService:
    """Re-encrypts stored credential records from one encryptor to another.

    The digest inside the record is carried over untouched, so the salt
    stored beside it stays valid.
    """

    @staticmethod
    def re_encrypt(old: Encryptor, new: Encryptor, record: str) -> str:
        digest = old.decrypt(record)
        return new.encrypt(digest)

    @staticmethod
    def re_encrypt_all(old: Encryptor, new: Encryptor, records: dict[str, str]) -> dict[str, str]:
        """Rotate a batch keyed by caller-chosen ids.

        Stops at the first record ``old`` cannot open; nothing is
        returned for a partially rotated batch.
        """
        rotated = {key: KeyRotationService.re_encrypt(old, new, record) for key, record in records.items()}
        _log.info("credential_records_rotated", count=len(rotated), old=old.name, new=new.name)
        return rotated
