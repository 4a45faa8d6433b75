"""Password hashing utilities."""

from passlib.context import CryptContext

from ..config import get_settings

# bcrypt_sha256 pre-hashes with SHA-256 so long passwords are not truncated at 72 bytes
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=get_settings().password_hash_rounds,
)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Burn the time of one verification when there is no hash to check."""
    pwd_context.dummy_verify()
