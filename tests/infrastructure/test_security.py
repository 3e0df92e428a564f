from passlib.context import CryptContext

from oms.infrastructure.security import PasslibPasswordHasher


def _hasher() -> PasslibPasswordHasher:
    # Low rounds keep the suite fast
    return PasslibPasswordHasher(
        CryptContext(schemes=["pbkdf2_sha256"], pbkdf2_sha256__rounds=1000)
    )


def test_hash_verifies():
    hasher = _hasher()
    hashed = hasher.hash("hunter22")
    assert hashed != "hunter22"
    assert hasher.verify("hunter22", hashed)


def test_wrong_password_rejected():
    hasher = _hasher()
    assert not hasher.verify("wrong", hasher.hash("hunter22"))


def test_malformed_hash_rejected():
    assert not _hasher().verify("hunter22", "not-a-hash")
