"""
One-time passwords

Short codes emailed to confirm signups and logins. Only the bcrypt hash is
stored; codes are compared case-insensitively.
"""

import secrets
import string

import bcrypt

ONE_TIME_PASSWORD_ALPHABET = string.ascii_uppercase + string.digits
ONE_TIME_PASSWORD_LENGTH = 6


def generate_one_time_password() -> str:
    return "".join(
        secrets.choice(ONE_TIME_PASSWORD_ALPHABET) for _ in range(ONE_TIME_PASSWORD_LENGTH)
    )


def hash_one_time_password(one_time_password: str) -> str:
    return bcrypt.hashpw(one_time_password.encode("utf-8"), bcrypt.gensalt(12)).decode("utf-8")


def verify_one_time_password(one_time_password: str, one_time_password_hash: str) -> bool:
    """Callers must bound the input length; bcrypt rejects inputs over 72 bytes"""
    return bcrypt.checkpw(
        one_time_password.upper().encode("utf-8"), one_time_password_hash.encode("utf-8")
    )
