from .certificate import KeyMaterial, SelfSignedCertificateFactory
from .crx_format import Crx3Package, CrxFormatError, build_crx3, read_crx3, verify_crx3
from .crx_packager import CrxExtension

__all__ = [
    "Crx3Package",
    "CrxExtension",
    "CrxFormatError",
    "KeyMaterial",
    "SelfSignedCertificateFactory",
    "build_crx3",
    "read_crx3",
    "verify_crx3",
]
