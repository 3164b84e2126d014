"""
String casing and small text helpers.

Casing helpers split identifiers on hyphens, underscores, whitespace and
lower-to-upper case boundaries, so they accept each other's output:
camel_case(kebab_case("helloWorld")) == "helloWorld".
"""

import re
from typing import List, Optional

_SEPARATORS = re.compile(r"[\s_-]+")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def _words(text: str) -> List[str]:
    spaced = _CASE_BOUNDARY.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(spaced) if word]


def camel_case(text: str) -> str:
    """camel_case("hello-world") == "helloWorld"."""
    words = _words(text)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def pascal_case(text: str) -> str:
    """pascal_case("hello_world") == "HelloWorld"."""
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(text))


def kebab_case(text: str) -> str:
    """kebab_case("helloWorld") == "hello-world"."""
    return "-".join(word.lower() for word in _words(text))


def snake_case(text: str) -> str:
    """snake_case("helloWorld") == "hello_world"."""
    return "_".join(word.lower() for word in _words(text))


def capitalize(text: str) -> str:
    """Upper-case the first character only; unlike str.capitalize the rest is kept."""
    return text[:1].upper() + text[1:]


def truncate(text: str, max_length: int, ellipsis: str = "...") -> str:
    """
    Shorten ``text`` to at most ``max_length`` characters, ending in ``ellipsis``.

    Text that already fits is returned unchanged. The ellipsis counts toward
    the limit: truncate("Hello world", 8) == "Hello...".
    """
    if len(text) <= max_length:
        return text
    keep = max(max_length - len(ellipsis), 0)
    return text[:keep] + ellipsis


def count_words(text: str) -> int:
    """Number of whitespace-separated words; 0 for blank text."""
    return len(text.split())


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    """
    Format ``count`` with the right noun form.

    pluralize(1, "file") == "1 file"; pluralize(3, "box", "boxes") == "3 boxes".
    The default plural appends "s".
    """
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural if plural is not None else singular + 's'}"
