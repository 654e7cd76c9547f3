from __future__ import annotations

import pytest

from cookbook.application.services.password_hashing import WerkzeugPasswordHasher

# cheaper work factor keeps the suite fast; production uses the default
FAST_METHOD = "scrypt:1024:8:1"


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_METHOD)


def test_hash_is_salted_and_not_plaintext(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert "secret1" not in first
    assert first != second
    assert first.startswith("scrypt:")


@pytest.mark.parametrize("password", ["secret1", "pässwörd", "a" * 128, " spaced out "])
def test_verify_accepts_original_password(hasher: WerkzeugPasswordHasher, password: str) -> None:
    assert hasher.verify(password, hasher.hash(password)) is True


def test_verify_rejects_other_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify("secret2", hashed) is False
    assert hasher.verify("Secret1", hashed) is False


def test_verify_malformed_hash_returns_false(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.verify("secret1", "not-a-hash") is False
    assert hasher.verify("secret1", "") is False


def test_default_method_uses_fixed_scrypt_cost() -> None:
    hashed = WerkzeugPasswordHasher().hash("secret1")

    assert hashed.startswith("scrypt:32768:8:1$")
