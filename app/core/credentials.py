"""
Credential generation.

Issues random passwords and collision-free usernames for new profiles.
"""

import secrets
import string
from typing import Callable

from app.core.config import settings

PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def generate_password(length: int | None = None) -> str:
    """Return a random alphanumeric password.

    Characters are drawn uniformly from :data:`PASSWORD_ALPHABET` with the
    ``secrets`` module.

    Args:
        length: Password length, defaults to ``settings.PASSWORD_LENGTH`` (10).
    """
    length = length or settings.PASSWORD_LENGTH
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


def generate_username(first_name: str, last_name: str, exists: Callable[[str], bool]) -> str:
    """Return the first free ``firstname.lastname[N]`` username.

    The base candidate is the lowercased ``first.last``.  While ``exists``
    reports the candidate as taken, a counter starting at 1 is appended to
    the base and the check repeats.

    Args:
        first_name: User first name.
        last_name: User last name.
        exists: Predicate telling whether a username is already taken.

    Returns:
        A username for which ``exists`` returned False.
    """
    base = f"{first_name.strip()}.{last_name.strip()}".lower()
    candidate = base
    suffix = 1
    while exists(candidate):
        candidate = f"{base}{suffix}"
        suffix += 1
    return candidate
