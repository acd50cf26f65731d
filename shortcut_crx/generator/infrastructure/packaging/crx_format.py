"""
CRX3 container encoding.

Layout::

    "Cr24" | u32 version (3) | u32 header size | CrxFileHeader | zip archive

``CrxFileHeader`` is a protobuf message. Only the fields needed for a
single RSA signature are written, encoded by hand:

    CrxFileHeader  { repeated AsymmetricKeyProof sha256_with_rsa = 2;
                     bytes signed_header_data = 10000; }
    AsymmetricKeyProof { bytes public_key = 1; bytes signature = 2; }
    SignedData     { bytes crx_id = 1; }

The signature covers ``"CRX3 SignedData\\x00" | u32 len(signed data) |
signed data | zip archive`` using RSASSA-PKCS1-v1_5 with SHA-256.
"""

import hashlib
import struct
from dataclasses import dataclass
from typing import Dict, List, Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

CRX_MAGIC = b"Cr24"
CRX_VERSION = 3
SIGNATURE_CONTEXT = b"CRX3 SignedData\x00"

CRX_ID_LENGTH = 16

HEADER_SHA256_WITH_RSA = 2
HEADER_SIGNED_DATA = 10000
PROOF_PUBLIC_KEY = 1
PROOF_SIGNATURE = 2
SIGNED_DATA_CRX_ID = 1

_WIRE_VARINT = 0
_WIRE_LENGTH_DELIMITED = 2


class CrxFormatError(ValueError):
    """Raised when bytes cannot be read as a CRX3 package."""


@dataclass(frozen=True)
class Crx3Package:
    public_key_der: bytes
    signature: bytes
    signed_header_data: bytes
    archive: bytes

    @property
    def crx_id(self) -> bytes:
        fields = _parse_fields(self.signed_header_data)
        return fields.get(SIGNED_DATA_CRX_ID, [b""])[0]

    @property
    def extension_id(self) -> str:
        return extension_id(self.public_key_der)


def encode_varint(value: int) -> bytes:
    if value < 0:
        raise ValueError("varint must be non-negative")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_bytes_field(field_number: int, payload: bytes) -> bytes:
    key = (field_number << 3) | _WIRE_LENGTH_DELIMITED
    return encode_varint(key) + encode_varint(len(payload)) + payload


def public_key_der(private_key: rsa.RSAPrivateKey) -> bytes:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def crx_id(public_key: bytes) -> bytes:
    return hashlib.sha256(public_key).digest()[:CRX_ID_LENGTH]


def extension_id(public_key: bytes) -> str:
    """The 32-character id browsers show, hex digits mapped onto ``a``-``p``."""
    return "".join(chr(ord("a") + int(digit, 16)) for digit in crx_id(public_key).hex())


def _signature_payload(signed_header_data: bytes, archive: bytes) -> bytes:
    return (
        SIGNATURE_CONTEXT
        + struct.pack("<I", len(signed_header_data))
        + signed_header_data
        + archive
    )


def build_crx3(archive: bytes, private_key: rsa.RSAPrivateKey) -> bytes:
    """Wrap a zip archive in a signed CRX3 container."""
    public_key = public_key_der(private_key)
    signed_header_data = encode_bytes_field(SIGNED_DATA_CRX_ID, crx_id(public_key))
    signature = private_key.sign(
        _signature_payload(signed_header_data, archive),
        padding.PKCS1v15(),
        hashes.SHA256(),
    )

    proof = encode_bytes_field(PROOF_PUBLIC_KEY, public_key) + encode_bytes_field(
        PROOF_SIGNATURE, signature
    )
    header = encode_bytes_field(HEADER_SHA256_WITH_RSA, proof) + encode_bytes_field(
        HEADER_SIGNED_DATA, signed_header_data
    )
    return (
        CRX_MAGIC
        + struct.pack("<I", CRX_VERSION)
        + struct.pack("<I", len(header))
        + header
        + archive
    )


def _decode_varint(data: bytes, offset: int) -> Tuple[int, int]:
    value = 0
    shift = 0
    while True:
        if offset >= len(data):
            raise CrxFormatError("truncated varint")
        byte = data[offset]
        offset += 1
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value, offset
        shift += 7


def _parse_fields(data: bytes) -> Dict[int, List[bytes]]:
    """Collect length-delimited fields; varint fields are skipped."""
    fields: Dict[int, List[bytes]] = {}
    offset = 0
    while offset < len(data):
        key, offset = _decode_varint(data, offset)
        field_number, wire_type = key >> 3, key & 0x07
        if wire_type == _WIRE_VARINT:
            _, offset = _decode_varint(data, offset)
            continue
        if wire_type != _WIRE_LENGTH_DELIMITED:
            raise CrxFormatError(f"unsupported wire type {wire_type}")
        length, offset = _decode_varint(data, offset)
        if offset + length > len(data):
            raise CrxFormatError("truncated field")
        fields.setdefault(field_number, []).append(data[offset : offset + length])
        offset += length
    return fields


def read_crx3(data: bytes) -> Crx3Package:
    """Split a CRX3 container into its signature parts and the zip archive."""
    if len(data) < 12 or data[:4] != CRX_MAGIC:
        raise CrxFormatError("missing Cr24 magic")
    version, header_size = struct.unpack("<II", data[4:12])
    if version != CRX_VERSION:
        raise CrxFormatError(f"unsupported CRX version {version}")
    header_end = 12 + header_size
    if header_end > len(data):
        raise CrxFormatError("header exceeds file size")

    header = _parse_fields(data[12:header_end])
    proofs = header.get(HEADER_SHA256_WITH_RSA)
    signed = header.get(HEADER_SIGNED_DATA)
    if not proofs or not signed:
        raise CrxFormatError("header has no RSA proof or signed data")

    proof = _parse_fields(proofs[0])
    try:
        public_key = proof[PROOF_PUBLIC_KEY][0]
        signature = proof[PROOF_SIGNATURE][0]
    except KeyError as e:
        raise CrxFormatError("incomplete key proof") from e

    return Crx3Package(
        public_key_der=public_key,
        signature=signature,
        signed_header_data=signed[0],
        archive=data[header_end:],
    )


def verify_crx3(data: bytes) -> Crx3Package:
    """
    Read a CRX3 container and check its signature and id.

    Raises:
        CrxFormatError: if the container is malformed or the signature is bad.
    """
    package = read_crx3(data)
    if package.crx_id != crx_id(package.public_key_der):
        raise CrxFormatError("crx id does not match the public key")

    public_key = serialization.load_der_public_key(package.public_key_der)
    try:
        public_key.verify(
            package.signature,
            _signature_payload(package.signed_header_data, package.archive),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
    except InvalidSignature as e:
        raise CrxFormatError("signature verification failed") from e
    return package
