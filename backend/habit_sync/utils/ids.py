"""
Identifier Utilities - Random id generation
"""
import secrets
import string

from habit_sync.core.constants import SESSION_ID_LENGTH

ID_ALPHABET = string.ascii_letters + string.digits


def generate_random_string(length: int = SESSION_ID_LENGTH) -> str:
    """
    Generate a random alphanumeric string

    Args:
        length: Number of characters to return

    Returns:
        Random string of exactly `length` characters
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))
