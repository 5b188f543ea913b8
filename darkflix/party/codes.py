import random
import string

ALPHABET = string.digits + string.ascii_lowercase


def generate_room_code(is_taken, length=5, rng=random):
    """Return an uppercase base-36 code for which ``is_taken`` is false.

    Codes only locate a room so they can be shared; they are drawn from the
    non-cryptographic ``random`` module and are guessable.
    """
    while True:
        code = ''.join(rng.choice(ALPHABET) for _ in range(length)).upper()
        if not is_taken(code):
            return code
