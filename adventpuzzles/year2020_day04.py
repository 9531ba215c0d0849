"""Passport processing: check passports for required and valid fields."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

REQUIRED_FIELDS = frozenset({"byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"})

_KEY = re.compile(r"\b(\w+):")
_KEY_VALUE = re.compile(r"\b(\w+):(\S+)")
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class RangeValidator:
    """Accepts an unsigned integer within an inclusive range."""

    low: int
    high: int

    def validate(self, value: str) -> bool:
        if _UNSIGNED.fullmatch(value) is None:
            return False
        return self.low <= int(value) <= self.high


@dataclass(frozen=True)
class RegexValidator:
    """Accepts values that match a pattern in full."""

    pattern: re.Pattern

    def validate(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


class HeightValidator:
    """Accepts 150-193 cm or 59-76 in."""

    _pattern = re.compile(r"([0-9]+)(in|cm)")
    _limits = {"in": (59, 76), "cm": (150, 193)}

    def validate(self, value: str) -> bool:
        match = self._pattern.fullmatch(value)
        if match is None:
            return False
        number, unit = match.groups()
        low, high = self._limits[unit]
        return low <= int(number) <= high


def create_byr_validator() -> RangeValidator:
    """Birth year: 1920 to 2002."""
    return RangeValidator(1920, 2002)


def create_iyr_validator() -> RangeValidator:
    """Issue year: 2010 to 2020."""
    return RangeValidator(2010, 2020)


def create_eyr_validator() -> RangeValidator:
    """Expiration year: 2020 to 2030."""
    return RangeValidator(2020, 2030)


def create_hgt_validator() -> HeightValidator:
    """Height in cm or in."""
    return HeightValidator()


def create_hcl_validator() -> RegexValidator:
    """Hair colour: # followed by six hex digits."""
    return RegexValidator(re.compile(r"#[0-9a-fA-F]{6}"))


def create_ecl_validator() -> RegexValidator:
    """Eye colour: one of a fixed set of codes."""
    return RegexValidator(re.compile(r"amb|blu|brn|gry|grn|hzl|oth"))


def create_pid_validator() -> RegexValidator:
    """Passport id: exactly nine digits."""
    return RegexValidator(re.compile(r"\d{9}"))


def split_passports(lines: Iterable[str]) -> list[str]:
    """Join blank-line separated groups of lines into passport records.

    Each blank line closes the current group. Lines after the last blank
    line are kept as separate records, one per line.
    """
    passports: list[str] = []
    current: list[str] = []
    for line in lines:
        if line.strip() == "":
            passports.append(" ".join(current))
            current = []
        else:
            current.append(line)
    passports.extend(current)
    return passports


def part1(lines: Iterable[str]) -> int:
    """Count passports that carry every required field."""
    return sum(
        REQUIRED_FIELDS <= set(_KEY.findall(passport))
        for passport in split_passports(lines)
    )


def part2(lines: Iterable[str]) -> int:
    """Count passports whose required fields are all present and valid."""
    validators = {
        "byr": create_byr_validator(),
        "iyr": create_iyr_validator(),
        "eyr": create_eyr_validator(),
        "hgt": create_hgt_validator(),
        "hcl": create_hcl_validator(),
        "ecl": create_ecl_validator(),
        "pid": create_pid_validator(),
    }
    valid = 0
    for passport in split_passports(lines):
        fields = dict(_KEY_VALUE.findall(passport))
        if all(
            field in fields and validator.validate(fields[field])
            for field, validator in validators.items()
        ):
            valid += 1
    return valid