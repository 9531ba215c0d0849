"""Crab combat: a card game, plain and recursive."""

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import islice


class Player(Enum):
    ONE = 1
    TWO = 2


def parse_deck(text: str) -> deque[int]:
    """Parse a deck: a header line followed by one card per line."""
    return deque(int(line) for line in text.splitlines()[1:])


def score(cards: Sequence[int]) -> int:
    """Each card times its position counted from the bottom, summed."""
    return sum(position * card for position, card in enumerate(reversed(cards), 1))


def deck_hash(cards: Iterable[int]) -> int:
    """A cheap fingerprint of a deck; collisions are possible but rare."""
    return sum((index * 29 + 1) * card for index, card in enumerate(cards))


def recursive_combat(
    deck1: Iterable[int], deck2: Iterable[int]
) -> tuple[Player, deque[int]]:
    """Play recursive combat; return the winner and the winning deck."""
    deck1 = deque(deck1)
    deck2 = deque(deck2)
    history: set[tuple[int, int]] = set()
    while True:
        state = (deck_hash(deck1), deck_hash(deck2))
        if state in history:
            return Player.ONE, deck1
        history.add(state)

        if not deck1:
            return Player.TWO, deck2
        if not deck2:
            return Player.ONE, deck1

        card1 = deck1.popleft()
        card2 = deck2.popleft()
        if card1 <= len(deck1) and card2 <= len(deck2):
            winner, _ = recursive_combat(islice(deck1, card1), islice(deck2, card2))
        else:
            winner = Player.ONE if card1 > card2 else Player.TWO

        if winner is Player.ONE:
            deck1.extend((card1, card2))
        else:
            deck2.extend((card2, card1))


def _decks(text: str) -> tuple[deque[int], deque[int]]:
    first, separator, second = text.partition("\n\n")
    if not separator:
        raise ValueError("expected two decks separated by a blank line")
    return parse_deck(first), parse_deck(second)


def part1(text: str) -> int:
    """Score of the winning deck in plain combat."""
    deck1, deck2 = _decks(text)
    while deck1 and deck2:
        card1 = deck1.popleft()
        card2 = deck2.popleft()
        if card1 > card2:
            deck1.extend((card1, card2))
        else:
            deck2.extend((card2, card1))
    return score(deck1 or deck2)


def part2(text: str) -> int:
    """Score of the winning deck in recursive combat."""
    deck1, deck2 = _decks(text)
    _, winning = recursive_combat(deck1, deck2)
    return score(winning)