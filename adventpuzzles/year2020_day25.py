"""Combo breaker: crack a door's encryption handshake."""

MAGIC_NUMBER = 20201227
DEFAULT_SUBJECT_NUMBER = 7


def calculate_loop_size(public_key: int) -> int:
    """Number of transform steps of subject 7 that produce the public key."""
    loop_size = 0
    value = 1
    while value != public_key:
        value = value * DEFAULT_SUBJECT_NUMBER % MAGIC_NUMBER
        loop_size += 1
        if value == 1:
            raise ValueError(f"{public_key} cannot be reached")
    return loop_size


def transform(subject: int, loop_size: int) -> int:
    """Multiply 1 by subject loop_size times, modulo the magic number."""
    return pow(subject, loop_size, MAGIC_NUMBER)


def part1(text: str) -> int:
    """The encryption key shared by the card and the door."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected the card and the door public keys")
    card_key, door_key = int(lines[0]), int(lines[1])
    card_loop = calculate_loop_size(card_key)
    door_loop = calculate_loop_size(door_key)
    return transform(transform(DEFAULT_SUBJECT_NUMBER, card_loop), door_loop)