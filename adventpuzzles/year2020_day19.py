"""Monster messages: match messages against a grammar of numbered rules."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Leaf:
    """Matches a single character."""

    char: str


@dataclass(frozen=True)
class Seq:
    """Matches the listed rules one after the other."""

    ids: tuple[int, ...]


@dataclass(frozen=True)
class Fork:
    """Matches either of two sequences of rules."""

    left: tuple[int, ...]
    right: tuple[int, ...]


Rule = Leaf | Seq | Fork


def _ids(text: str) -> tuple[int, ...]:
    return tuple(int(part) for part in text.split(" "))


def parse_rules(text: str) -> dict[int, Rule]:
    """Parse lines such as ``0: 1 2``, ``1: "a"`` and ``2: 1 3 | 3 1``."""
    rules: dict[int, Rule] = {}
    for line in text.splitlines():
        key, separator, definition = line.partition(": ")
        if not separator:
            raise ValueError(f"invalid rule: {line!r}")
        rule_id = int(key)
        if definition.startswith('"'):
            if len(definition) < 2:
                raise ValueError(f"invalid rule: {line!r}")
            rules[rule_id] = Leaf(definition[1])
        elif "|" in definition:
            left, separator, right = definition.partition(" | ")
            if not separator:
                raise ValueError(f"invalid rule: {line!r}")
            rules[rule_id] = Fork(_ids(left), _ids(right))
        else:
            rules[rule_id] = Seq(_ids(definition))
    return rules


def _apply_sequence(
    strings: list[str], rules: Mapping[int, Rule], ids: Iterable[int]
) -> list[str]:
    for rule_id in ids:
        strings = remainders(strings, rules, rule_id)
    return strings


def remainders(strings: list[str], rules: Mapping[int, Rule], rule_id: int) -> list[str]:
    """Return what is left of each string after every way rule_id can match its start."""
    if not strings:
        return []
    rule = rules[rule_id]
    if isinstance(rule, Leaf):
        return [string[1:] for string in strings if string.startswith(rule.char)]
    if isinstance(rule, Seq):
        return _apply_sequence(strings, rules, rule.ids)
    return _apply_sequence(list(strings), rules, rule.left) + _apply_sequence(
        strings, rules, rule.right
    )


def _split(text: str) -> tuple[dict[int, Rule], list[str]]:
    raw_rules, separator, messages = text.partition("\n\n")
    if not separator:
        raise ValueError("expected rules and messages separated by a blank line")
    return parse_rules(raw_rules), messages.splitlines()


def _count_matching(rules: Mapping[int, Rule], messages: Iterable[str]) -> int:
    return sum("" in remainders([message], rules, 0) for message in messages)


def part1(text: str) -> int:
    """Count messages that match rule 0 completely."""
    rules, messages = _split(text)
    return _count_matching(rules, messages)


def part2(text: str) -> int:
    """Count matching messages once rules 8 and 11 become recursive."""
    rules, messages = _split(text)
    rules[8] = Fork((42,), (42, 8))
    rules[11] = Fork((42, 31), (42, 11, 31))
    return _count_matching(rules, messages)