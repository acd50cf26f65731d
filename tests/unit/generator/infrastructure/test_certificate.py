from datetime import timedelta

import pytest
from cryptography.hazmat.primitives import serialization

from shortcut_crx.generator.domain.exceptions import CertificateError
from shortcut_crx.generator.infrastructure.packaging.certificate import (
    SelfSignedCertificateFactory,
)


@pytest.mark.asyncio
async def test_creates_long_lived_self_signed_certificate():
    material = await SelfSignedCertificateFactory(
        key_size=1024, validity_days=3650
    ).create()

    certificate = material.certificate
    assert certificate.issuer == certificate.subject
    lifetime = certificate.not_valid_after_utc - certificate.not_valid_before_utc
    assert lifetime == timedelta(days=3650)
    assert material.private_key.key_size == 1024


def test_pem_encodings_round_trip():
    material = SelfSignedCertificateFactory(key_size=1024).create_sync()

    loaded = serialization.load_pem_private_key(material.private_key_pem, password=None)
    assert loaded.private_numbers() == material.private_key.private_numbers()
    assert material.certificate_pem.startswith(b"-----BEGIN CERTIFICATE-----")


def test_invalid_key_size_raises_certificate_error():
    with pytest.raises(CertificateError):
        SelfSignedCertificateFactory(key_size=256).create_sync()
