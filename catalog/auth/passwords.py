from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Verified against when no user matches a login email, so that branch also
# pays for one hash verification.
_DUMMY_HASH = pwd_context.hash("catalog-dummy-password")


def hash_password(plaintext: str) -> str:
    return pwd_context.hash(plaintext)


def verify_password(plaintext: str, stored_hash: str) -> bool:
    try:
        return pwd_context.verify(plaintext, stored_hash)
    except (ValueError, TypeError):
        # Malformed or unknown stored hash.
        return False


def burn_verification(plaintext: str) -> None:
    pwd_context.verify(plaintext, _DUMMY_HASH)
