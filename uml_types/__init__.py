#!/usr/bin/env python3
"""
Types module for cs2mmd.
Centralized type definitions.
"""

from .uml import (
    TypeName, MemberFragment, Glyph,
    LineKind, Stereotype, Visibility, ArrowKind
)

__all__ = [
    'TypeName', 'MemberFragment', 'Glyph',
    'LineKind', 'Stereotype', 'Visibility', 'ArrowKind',
]
