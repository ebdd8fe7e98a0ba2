"""RSA Sign/Verify and Encrypt/Decrypt over bare base64 key bodies.

Provides an adapter around the `cryptography` RSA primitives for keys handed over as base64 bodies without their
BEGIN/END markers. Signatures use PKCS1 v1.5 with MD5, encryption PKCS1 v1.5, and all signatures and ciphertexts are
exchanged as base64, hex or raw bytes.

Typical usage example:

    ra = RsaAdapter(pub_body, priv_body)
    s = ra.sign("Hi there!", "hex")
    ok = ra.verify("Hi there!", s, "hex")
    r = ra.decrypt(ra.encrypt("Hi there!"))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from pemrsa.rsa import decode
from pemrsa.rsa import encode
from pemrsa.rsa import Encoding
from pemrsa.rsa import format_key_body
from pemrsa.rsa import KeyImportError
from pemrsa.rsa import Padding
from pemrsa.rsa import PaddingError
from pemrsa.rsa import read_key_body
from pemrsa.rsa import RsaAdapter
from pemrsa.rsa import RsaError

__version__ = "0.1.0"
__all__ = [
    "RsaAdapter",
    "RsaError",
    "KeyImportError",
    "PaddingError",
    "Encoding",
    "Padding",
    "encode",
    "decode",
    "format_key_body",
    "read_key_body",
]
