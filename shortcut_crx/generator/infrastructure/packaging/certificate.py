"""
SelfSignedCertificateFactory - signing key material for the extension.

A fresh RSA key and a long-lived self-signed certificate are produced per
request. Only the private key is needed by the packager; the certificate is
kept alongside for callers that want to persist it.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from shortcut_crx.core.constants import (
    CERTIFICATE_COMMON_NAME,
    DEFAULT_CERTIFICATE_VALIDITY_DAYS,
    DEFAULT_RSA_KEY_SIZE,
    RSA_PUBLIC_EXPONENT,
)
from shortcut_crx.generator.domain.exceptions import CertificateError
from shortcut_crx.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class KeyMaterial:
    private_key: rsa.RSAPrivateKey
    certificate: x509.Certificate

    @property
    def private_key_pem(self) -> bytes:
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    @property
    def certificate_pem(self) -> bytes:
        return self.certificate.public_bytes(serialization.Encoding.PEM)


class SelfSignedCertificateFactory:
    def __init__(
        self,
        key_size: int = DEFAULT_RSA_KEY_SIZE,
        validity_days: int = DEFAULT_CERTIFICATE_VALIDITY_DAYS,
        common_name: str = CERTIFICATE_COMMON_NAME,
    ):
        self.key_size = key_size
        self.validity_days = validity_days
        self.common_name = common_name

    async def create(self) -> KeyMaterial:
        """Generate key material in a worker thread (key generation is CPU bound)."""
        return await asyncio.to_thread(self.create_sync)

    def create_sync(self) -> KeyMaterial:
        try:
            private_key = rsa.generate_private_key(
                public_exponent=RSA_PUBLIC_EXPONENT, key_size=self.key_size
            )
            name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, self.common_name)])
            now = datetime.now(timezone.utc)
            certificate = (
                x509.CertificateBuilder()
                .subject_name(name)
                .issuer_name(name)
                .public_key(private_key.public_key())
                .serial_number(x509.random_serial_number())
                .not_valid_before(now)
                .not_valid_after(now + timedelta(days=self.validity_days))
                .sign(private_key, hashes.SHA256())
            )
        except (ValueError, TypeError) as e:
            raise CertificateError(str(e), original_exception=e) from e

        logger.debug(
            f"Generated {self.key_size}-bit signing key, certificate valid "
            f"for {self.validity_days} days"
        )
        return KeyMaterial(private_key=private_key, certificate=certificate)
