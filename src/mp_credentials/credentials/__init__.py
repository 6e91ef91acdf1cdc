"""Credentials – derive and verify salted, optionally encrypted password records."""
from mp_credentials.credentials.factory import (
    ENCRYPTOR_FACTORIES,
    HASH_FACTORIES,
    build_credential_service,
    build_encryptor,
    build_hash_primitive,
)
from mp_credentials.credentials.service import CredentialService, DerivedCredential

__all__ = [
    "CredentialService",
    "DerivedCredential",
    "ENCRYPTOR_FACTORIES",
    "HASH_FACTORIES",
    "build_credential_service",
    "build_encryptor",
    "build_hash_primitive",
]
