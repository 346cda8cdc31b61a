import hmac
import hashlib
import bcrypt

DEFAULT_WORK_FACTOR = 12


def _prepare_password_for_bcrypt(password: str) -> bytes:
    """
    Prepare a password for bcrypt hashing.
    Bcrypt has a 72 byte limit, so we hash longer passwords with SHA256 first.
    """
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > 72:
        return hashlib.sha256(password_bytes).hexdigest().encode('utf-8')
    return password_bytes


def hash_password(password: str, rounds: int = DEFAULT_WORK_FACTOR) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash
        rounds: bcrypt cost factor (log2 of the number of iterations)

    Returns:
        The bcrypt hash as a string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_prepare_password_for_bcrypt(password), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Verify a password against its bcrypt hash.

    Never raises: a missing or malformed hash simply fails verification.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The bcrypt hash to compare against

    Returns:
        True if the password matches, False otherwise
    """
    if not hashed_password:
        return False
    try:
        password_bytes = _prepare_password_for_bcrypt(plain_password)
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
    except (ValueError, TypeError, AttributeError):
        return False


def constant_time_compare(a: str, b: str) -> bool:
    """
    Perform a constant-time string comparison to prevent timing attacks.
    """
    return hmac.compare_digest(a.encode('utf-8'), b.encode('utf-8'))


class PasswordHasher:
    """bcrypt hashing with a fixed work factor taken from settings."""

    def __init__(self, rounds: int = DEFAULT_WORK_FACTOR):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return hash_password(password, rounds=self.rounds)

    def verify(self, password: str, hashed_password: str | None) -> bool:
        return verify_password(password, hashed_password)
