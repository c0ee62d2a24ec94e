"""Password Hashing — werkzeug salted hashes so no plain-text password is ever stored.

Invariants:
    - Stored format is werkzeug's "<method>$<salt>$<hash>"
    - verify_password never raises on malformed stored values, it returns False
"""

from werkzeug.security import check_password_hash, generate_password_hash


HASH_METHOD = "scrypt"


def hash_password(password: str, *, method: str = HASH_METHOD) -> str:
    return generate_password_hash(password, method=method)


def verify_password(password: str, stored: str) -> bool:
    try:
        return check_password_hash(stored, password)
    except ValueError:
        # unknown method or unparsable cost parameters
        return False
