"""
mp_credentials – Salted, multi-algorithm password credential pipeline.

Import path convention::

    from mp_credentials.credentials import CredentialService
    from mp_credentials.hashing import CompositeHasher, Sha256Hash
    from mp_credentials.salt import SecureSaltGenerator
    from mp_credentials.security.encryption import FernetEncryptor
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
