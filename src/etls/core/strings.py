"""
String casing helpers.
"""

import re

# Any run of characters that is not a letter or digit
_SEPARATOR_RE = re.compile(r"[\W_]+")


def _split_humps(chunk: str) -> list[str]:
    """Split a chunk before every uppercase letter that is not its first character."""
    words: list[str] = []
    current = ""
    for char in chunk:
        if char.isupper() and current:
            words.append(current)
            current = char
        else:
            current += char
    if current:
        words.append(current)
    return words


def kebab_case(value: str) -> str:
    """
    Convert a name to kebab-case.

    Separators (spaces, underscores, hyphens, punctuation) become single
    hyphens and every uppercase letter after the start of a word begins a
    new word, so consecutive capitals split individually.

    Examples:
        >>> kebab_case("MyCoolEtl")
        'my-cool-etl'
        >>> kebab_case("etlAB")
        'etl-a-b'
        >>> kebab_case("already-kebab")
        'already-kebab'
        >>> kebab_case("my_cool etl")
        'my-cool-etl'
    """
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(value):
        if chunk:
            words.extend(_split_humps(chunk))
    return "-".join(word.lower() for word in words)
