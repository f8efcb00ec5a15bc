"""
String helpers shared by the registry and settings
"""
import re
from typing import Iterable, List, Optional


def tokenize(value: Optional[str], delimiters: str = ",", trim: bool = True,
             ignore_empty: bool = True) -> List[str]:
    """
    Split a string on any of the given delimiter characters

    Args:
        value: String to split (None is treated as empty)
        delimiters: Every character in this string acts as a delimiter
        trim: Strip whitespace around each token
        ignore_empty: Drop tokens that end up empty

    Returns:
        Tokens in their original order
    """
    if not value:
        return []

    tokens = re.split(f"[{re.escape(delimiters)}]", value)

    if trim:
        tokens = [token.strip() for token in tokens]
    if ignore_empty:
        tokens = [token for token in tokens if token]

    return tokens


def has_text(value: Optional[str]) -> bool:
    """
    Check if a string contains at least one non-whitespace character

    Args:
        value: String to check

    Returns:
        True if the string has text, False for None or blank strings
    """
    return value is not None and bool(value.strip())


def concatenate(items: Optional[Iterable], delimiter: str = ",") -> str:
    """
    Join items into a single delimited string

    Args:
        items: Items to join, in iteration order
        delimiter: Separator placed between items

    Returns:
        The joined string, empty if there are no items
    """
    if not items:
        return ""
    return delimiter.join(str(item) for item in items)
