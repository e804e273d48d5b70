"""
Line normalization and classification.

Lines are scanned as plain text: comments and string literals are not
stripped, so a commented-out declaration is classified like a live one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from uml_types import LineKind

# Generic-argument delimiter; never legal in C# identifiers.
GENERIC_MARKER = "~"

ACCESS_KEYWORDS: tuple[str, ...] = ("public", "private", "protected", "internal")

_ACCESS_RE = re.compile(r"^(?:" + "|".join(ACCESS_KEYWORDS) + r")\b")
_TYPE_KEYWORD_RE = re.compile(r'\b(?:class|interface)\b')
_ENUM_KEYWORD_RE = re.compile(r'\benum\b')
_ACCESSOR_RE = re.compile(r'^(?:get|set)\b')
_MARKUP_CLASS_RE = re.compile(r'\bx:Class\s*=\s*"')
_MARKUP_NAME_RE = re.compile(r'(?:^|\s)(?:x:)?Name\s*=\s*"[A-Za-z_]\w*"')


def normalize_line(raw: str) -> str:
    """Trim a raw line and turn angle brackets into the generic marker."""
    return raw.strip().replace("<", GENERIC_MARKER).replace(">", GENERIC_MARKER)


@dataclass(frozen=True)
class InterfaceNamePredicate:
    """Lexical interface test: ``prefix`` followed by an upper-case letter.

    No symbol table is consulted; the same test drives the interface
    stereotype and the realization/inheritance guess for base types.
    """
    prefix: str = "I"

    def __call__(self, name: str) -> bool:
        if not self.prefix or not name.startswith(self.prefix):
            return False
        rest = name[len(self.prefix):]
        return bool(rest) and rest[0].isupper()


is_interface_name = InterfaceNamePredicate()


def starts_with_access_keyword(line: str) -> bool:
    return bool(_ACCESS_RE.match(line))


def classify_line(line: str, in_type_block: bool, markup: bool = False) -> LineKind:
    """Assign exactly one LineKind to a normalized line.

    ``markup`` selects the XAML categories instead of the C# ones.
    """
    if markup:
        if _MARKUP_CLASS_RE.search(line):
            return LineKind.MARKUP_CLASS_NAME
        if _MARKUP_NAME_RE.search(line):
            return LineKind.MARKUP_BINDING
        return LineKind.NONE

    if starts_with_access_keyword(line):
        if (_TYPE_KEYWORD_RE.search(line)
                and not in_type_block
                and not line.endswith(";")):
            return LineKind.TYPE_DECLARATION
        if (("(" in line or ")" in line)
                and " new " not in line
                and "=" not in line):
            return LineKind.METHOD_DECLARATION
        if _ENUM_KEYWORD_RE.search(line):
            return LineKind.ENUM_DECLARATION
        return LineKind.PROPERTY_DECLARATION

    if _ACCESSOR_RE.match(line):
        return LineKind.ACCESSOR_FRAGMENT
    return LineKind.NONE


__all__ = [
    "GENERIC_MARKER",
    "ACCESS_KEYWORDS",
    "normalize_line",
    "InterfaceNamePredicate",
    "is_interface_name",
    "starts_with_access_keyword",
    "classify_line",
]
