#!/usr/bin/env python3
"""
Diagram-level types and enums for cs2mmd.
"""

from typing import NewType
from enum import Enum

# ---------- Type aliases for diagram elements ----------
TypeName = NewType('TypeName', str)
MemberFragment = NewType('MemberFragment', str)
Glyph = NewType('Glyph', str)


# ---------- Enums for diagram elements ----------
class LineKind(Enum):
    """Closed set of tags assigned to a normalized line."""
    TYPE_DECLARATION = "type"
    METHOD_DECLARATION = "method"
    ENUM_DECLARATION = "enum"
    PROPERTY_DECLARATION = "property"
    ACCESSOR_FRAGMENT = "accessor"
    MARKUP_BINDING = "markup_binding"
    MARKUP_CLASS_NAME = "markup_class_name"
    NONE = "none"


class Stereotype(Enum):
    NONE = ""
    INTERFACE = "<<interface>>"
    ENUMERATOR = "<<enumerator>>"


class Visibility(Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"

    @property
    def glyph(self) -> Glyph:
        if self is Visibility.PRIVATE:
            return Glyph("-")
        if self is Visibility.PROTECTED:
            return Glyph("#")
        return Glyph("+")

    @classmethod
    def from_keyword(cls, keyword: str) -> "Visibility":
        """Map an access keyword to a visibility; unknown or missing means public."""
        for v in cls:
            if v.value == keyword:
                return v
        return cls.PUBLIC


class ArrowKind(Enum):
    """Relationship kinds, with the Mermaid arrow used for each."""
    INHERITANCE = "--|>"
    REALIZATION = "..|>"
    AGGREGATION = '"1" --o "*"'
    COMPOSITION = '"1" --* "1"'

    @property
    def is_structural(self) -> bool:
        """True for kinds derived from base-type lists."""
        return self in (ArrowKind.INHERITANCE, ArrowKind.REALIZATION)
