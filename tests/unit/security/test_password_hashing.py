"""Unit tests for security/password.py"""

from notekeeper.security.password import dummy_verify, hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("Password123!")
    assert hashed != "Password123!"
    assert verify_password("Password123!", hashed)
    assert not verify_password("Password124!", hashed)


def test_hashes_are_salted():
    assert hash_password("same-password") != hash_password("same-password")


def test_long_passwords_not_truncated():
    prefix = "a" * 80
    hashed = hash_password(prefix + "x")
    assert not verify_password(prefix + "y", hashed)


def test_dummy_verify_runs_without_hash():
    assert dummy_verify() is None
