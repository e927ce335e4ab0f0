"""Parsing of free-text pack size input from the sidebar form."""

from dataclasses import dataclass, field
from typing import List
import re


@dataclass
class ParsedPackSizes:
    """
    Result of parsing a pack size text field.

    Attributes:
        sizes: Valid (positive integer) sizes, distinct and sorted
        skipped: Tokens that were ignored
    """
    sizes: List[int] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.sizes


def parse_pack_size_input(text: str) -> ParsedPackSizes:
    """Parse comma/space separated pack sizes, skipping invalid tokens.

    Examples:
        >>> parse_pack_size_input("250, 500 abc -3").sizes
        [250, 500]
    """
    result = ParsedPackSizes()
    sizes = set()

    for token in re.split(r"[,\s]+", text or ""):
        if not token:
            continue
        try:
            size = int(token)
        except ValueError:
            result.skipped.append(token)
            continue
        if size <= 0:
            result.skipped.append(token)
            continue
        sizes.add(size)

    result.sizes = sorted(sizes)
    return result
