import struct

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from shortcut_crx.generator.infrastructure.packaging.crx_format import (
    CRX_MAGIC,
    CrxFormatError,
    build_crx3,
    crx_id,
    encode_bytes_field,
    encode_varint,
    extension_id,
    public_key_der,
    read_crx3,
    verify_crx3,
)


@pytest.fixture(scope="module")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.mark.parametrize(
    "value,encoded",
    [(0, b"\x00"), (1, b"\x01"), (127, b"\x7f"), (128, b"\x80\x01"), (300, b"\xac\x02")],
)
def test_encode_varint(value, encoded):
    assert encode_varint(value) == encoded


def test_signed_header_field_uses_multi_byte_key():
    # field 10000, wire type 2 -> key 80002
    assert encode_bytes_field(10000, b"ab") == b"\x82\xf1\x04\x02ab"


def test_build_crx3_layout(private_key):
    content = build_crx3(b"PK-archive", private_key)

    assert content[:4] == CRX_MAGIC
    version, header_size = struct.unpack("<II", content[4:12])
    assert version == 3
    assert content[12 + header_size :] == b"PK-archive"


def test_package_verifies_and_exposes_parts(private_key):
    content = build_crx3(b"PK-archive", private_key)

    package = verify_crx3(content)

    assert package.archive == b"PK-archive"
    assert package.public_key_der == public_key_der(private_key)
    assert package.crx_id == crx_id(package.public_key_der)
    assert len(package.extension_id) == 32
    assert set(package.extension_id) <= set("abcdefghijklmnop")


def test_tampered_archive_fails_verification(private_key):
    content = bytearray(build_crx3(b"PK-archive", private_key))
    content[-1] ^= 0xFF

    with pytest.raises(CrxFormatError):
        verify_crx3(bytes(content))


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"PK\x03\x04",
        b"Cr24" + struct.pack("<II", 2, 0),
        b"Cr24" + struct.pack("<II", 3, 99),
    ],
)
def test_read_rejects_malformed_input(data):
    with pytest.raises(CrxFormatError):
        read_crx3(data)


def test_extension_id_is_stable(private_key):
    der = public_key_der(private_key)
    assert extension_id(der) == extension_id(der)
