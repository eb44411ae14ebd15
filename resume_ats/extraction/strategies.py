from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

Validator = Callable[[str], bool]
Formatter = Callable[["re.Match[str]"], str]


def length_between(min_length: int, max_length: int) -> Validator:
    """Accept candidates with ``min_length <= len < max_length``."""

    def _check(candidate: str) -> bool:
        return min_length <= len(candidate) < max_length

    return _check


def all_of(*validators: Validator) -> Validator:
    def _check(candidate: str) -> bool:
        return all(validator(candidate) for validator in validators)

    return _check


@dataclass(frozen=True)
class Strategy:
    """One extraction attempt: a pattern, the group to keep and a sanity check."""

    name: str
    pattern: re.Pattern[str]
    group: int | str = 0
    validator: Validator | None = None
    formatter: Formatter | None = None

    def candidates(self, text: str) -> Iterable[str]:
        for match in self.pattern.finditer(text):
            if self.formatter is not None:
                value = self.formatter(match)
            else:
                value = match.group(self.group) or ""
            value = value.strip()
            if value:
                yield value

    def apply(self, text: str) -> str | None:
        for candidate in self.candidates(text):
            if self.validator is None or self.validator(candidate):
                return candidate
        return None


def first_match(strategies: Sequence[Strategy], text: str) -> str | None:
    """Evaluate strategies in order; the first validated candidate wins."""
    for strategy in strategies:
        value = strategy.apply(text)
        if value is not None:
            return value
    return None
