"""Allergen assessment: work out which ingredient holds which allergen."""

from dataclasses import dataclass


@dataclass
class AllergenIndex:
    """Candidate ingredients per allergen and every ingredient listed, per food."""

    candidates: dict[str, set[str]]
    ingredients: list[str]


def parse_foods(text: str) -> AllergenIndex:
    """Parse lines such as ``mxmxvkd kfcds (contains dairy, fish)``."""
    candidates: dict[str, set[str]] = {}
    ingredients: list[str] = []
    for line in text.splitlines():
        body, separator, allergens = line[:-1].partition(" (contains ")
        if not separator:
            raise ValueError(f"invalid food: {line!r}")
        foods = set(body.split(" "))
        ingredients.extend(foods)
        for allergen in allergens.split(", "):
            candidates[allergen] = candidates.get(allergen, foods) & foods
    return AllergenIndex(candidates, ingredients)


def part1(text: str) -> int:
    """Count appearances of ingredients that cannot hold any allergen."""
    index = parse_foods(text)
    suspects = set().union(*index.candidates.values())
    return sum(ingredient not in suspects for ingredient in index.ingredients)


def part2(text: str) -> str:
    """The dangerous ingredients, ordered by their allergen's name."""
    candidates = {
        allergen: set(found) for allergen, found in parse_foods(text).candidates.items()
    }
    sure: dict[str, str] = {}
    while len(sure) != len(candidates):
        before = (len(sure), sum(map(len, candidates.values())))
        for allergen, found in candidates.items():
            if len(found) == 1:
                sure[allergen] = next(iter(found))
        for ingredient in sure.values():
            for found in candidates.values():
                if len(found) > 1:
                    found.discard(ingredient)
        if (len(sure), sum(map(len, candidates.values()))) == before:
            raise ValueError("allergens cannot be resolved")
    return ",".join(sure[allergen] for allergen in sorted(sure))