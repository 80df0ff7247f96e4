"""Normalising and validating target tags."""

from __future__ import annotations

import re
from collections.abc import Iterable

_VALID_TAG = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


class InvalidTagError(ValueError):
    """A tag that is not lowercase alphanumeric words joined by hyphens."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(
            f'invalid tag "{tag}": must be lowercase alphanumeric with optional hyphens'
        )


def normalise(tags: Iterable[str]) -> list[str]:
    """Lower-case each tag and strip surrounding whitespace, without validating."""
    return [tag.strip().lower() for tag in tags]


def validate(tags: Iterable[str]) -> None:
    """Raise InvalidTagError for the first tag that does not match the allowed form."""
    for tag in tags:
        if not _VALID_TAG.fullmatch(tag):
            raise InvalidTagError(tag)


def dedupe(tags: Iterable[str]) -> list[str]:
    """Remove duplicate tags, keeping the first occurrence of each."""
    return list(dict.fromkeys(tags))


def prepare(tags: Iterable[str]) -> list[str]:
    """Normalise, deduplicate and validate tags; return the cleaned list."""
    cleaned = dedupe(normalise(tags))
    validate(cleaned)
    return cleaned