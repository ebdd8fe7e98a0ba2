"""Configures pytest further."""
import functools
import typing

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import pytest

TARGET_SIZES = [1024, 2048, pytest.param(4096, marks=pytest.mark.slow)]
e = 65537


class KeyBodies(typing.NamedTuple):
    """A provider key and its bare base64 bodies in every supported container."""
    key: rsa.RSAPrivateKey
    spki: str
    pkcs1_pub: str
    pkcs1_priv: str
    pkcs8: str
    pkcs8_pem: bytes

    @property
    def bsize(self) -> int:
        return (self.key.key_size + 7) // 8


def strip_pem(pem: bytes) -> str:
    return "".join(line for line in pem.decode("ascii").splitlines() if not line.startswith("-----"))


@functools.cache
def known_key(size: int, tag: str = "main") -> KeyBodies:
    """Generates, once per session, a key of the given size for the given tag."""
    pk = rsa.generate_private_key(public_exponent=e, key_size=size)
    pub = pk.public_key()
    pkcs8_pem = pk.private_bytes(serialization.Encoding.PEM, serialization.PrivateFormat.PKCS8,
                                 serialization.NoEncryption())
    return KeyBodies(
        key=pk,
        spki=strip_pem(pub.public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo)),
        pkcs1_pub=strip_pem(pub.public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.PKCS1)),
        pkcs1_priv=strip_pem(
            pk.private_bytes(serialization.Encoding.PEM, serialization.PrivateFormat.TraditionalOpenSSL,
                             serialization.NoEncryption())),
        pkcs8=strip_pem(pkcs8_pem),
        pkcs8_pem=pkcs8_pem,
    )


@pytest.fixture(scope="session", params=TARGET_SIZES)
def keyset(request) -> KeyBodies:
    return known_key(request.param)


@pytest.fixture(scope="session")
def small_key() -> KeyBodies:
    return known_key(1024)


@pytest.fixture(scope="session")
def other_key() -> KeyBodies:
    return known_key(1024, "other")


@pytest.fixture(scope="session")
def key2048() -> KeyBodies:
    return known_key(2048)


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--skip-slow"):
        return
    skip = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip)
