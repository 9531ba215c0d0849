"""Binary boarding: decode seat codes."""

_BITS = {"F": "0", "L": "0", "B": "1", "R": "1"}


def seat_id(code: str) -> int:
    """Decode a seat code such as ``FBFBBFFRLR`` into its id."""
    try:
        binary = "".join(_BITS[char] for char in code)
    except KeyError as error:
        raise ValueError(f"unexpected character {error.args[0]!r}") from None
    return int(binary, 2)


def part1(text: str) -> int:
    """Return the highest seat id."""
    ids = [seat_id(line) for line in text.splitlines()]
    if not ids:
        raise ValueError("list of ids cannot be empty")
    return max(ids)


def part2(text: str) -> int:
    """Return the missing seat whose neighbours are both taken."""
    ids = {seat_id(line) for line in text.splitlines()}
    for current in sorted(ids):
        if current + 1 not in ids and current + 2 in ids:
            return current + 1
    raise ValueError("could not find our seat")