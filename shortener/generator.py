import string
import random

SHORT_ID_LENGTH = 6
ALPHABET = string.ascii_letters + string.digits


def generate_short_id(length: int = SHORT_ID_LENGTH) -> str:
    """Генерирует случайный короткий идентификатор."""
    return ''.join(random.choice(ALPHABET) for _ in range(length))
