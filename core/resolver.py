"""
Whole-run resolution of candidate edges.

Runs once, after every file has been processed, so the declared-name view
is complete. Candidates are checked in insertion order:

1. self-referential edges are dropped;
2. inheritance and realization edges are kept (bases may live outside the
   scanned tree);
3. composition/aggregation edges are kept when both ends are declared;
   a nullable `T?` or array `T[]` end whose element type is declared is
   kept toward that type, arrays as a one-to-many aggregation; otherwise a
   declared name found among the generic arguments of the end type turns
   the edge into a one-to-many aggregation toward that name;
4. anything else is dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Collection, Iterable, List, Optional, Tuple

from core.line_classifier import GENERIC_MARKER
from core.model import Arrow, RunState
from core.signature_parser import split_top_level
from uml_types import ArrowKind

logger = logging.getLogger(__name__)

_GENERIC_ARGS = re.compile(re.escape(GENERIC_MARKER) + r'(.*)' + re.escape(GENERIC_MARKER))
_ACCESSOR_PAIRS = (" [get] [set]", " [set] [get]")
MERGED_ACCESSORS = " [get/set]"


def generic_arguments(type_repr: str) -> List[str]:
    """Argument names inside the outermost generic span, in textual order."""
    m = _GENERIC_ARGS.search(type_repr)
    if not m:
        return []
    names: List[str] = []
    for part in split_top_level(m.group(1)):
        for token in part.split(GENERIC_MARKER):
            token = token.strip().rstrip("?[]")
            if token:
                names.append(token)
    return names


def find_generic_match(type_repr: str, declared: Iterable[str]) -> Optional[str]:
    declared_set = set(declared)
    for name in generic_arguments(type_repr):
        if name in declared_set:
            return name
    return None


def element_type(type_repr: str) -> Tuple[str, bool]:
    """Strip nullable and array suffixes; the flag is True for arrays."""
    base = type_repr.rstrip("?")
    is_array = base.endswith("]")
    return base.rstrip("?[],"), is_array


def resolve_arrow(arrow: Arrow, declared: Collection[str]) -> Optional[Arrow]:
    """Validate one candidate; returns the edge to emit or ``None``."""
    if arrow.is_self_loop:
        return None
    if arrow.kind.is_structural:
        return arrow
    if arrow.start not in declared:
        return None
    if arrow.end in declared:
        return arrow
    base, is_array = element_type(arrow.end)
    if base != arrow.end and base in declared:
        if base == arrow.start:
            return None
        kind = ArrowKind.AGGREGATION if is_array else arrow.kind
        return Arrow(start=arrow.start, end=base, kind=kind)
    target = find_generic_match(arrow.end, declared)
    if target is None or target == arrow.start:
        return None
    return Arrow(start=arrow.start, end=target, kind=ArrowKind.AGGREGATION)


def resolve_arrows(state: RunState) -> List[Arrow]:
    declared = set(state.declared_type_names)
    resolved: List[Arrow] = []
    for arrow in state.candidate_edges:
        out = resolve_arrow(arrow, declared)
        if out is None:
            logger.debug("dropped edge %s %s %s", arrow.start, arrow.kind.name, arrow.end)
            continue
        resolved.append(out)
    logger.info("Resolved %d of %d candidate edges", len(resolved), len(state.candidate_edges))
    return resolved


def merge_accessors(text: str) -> str:
    """Merge adjacent ``[get]``/``[set]`` annotations into a single tag."""
    for pair in _ACCESSOR_PAIRS:
        text = text.replace(pair, MERGED_ACCESSORS)
    return text


__all__ = [
    "element_type",
    "generic_arguments",
    "find_generic_match",
    "resolve_arrow",
    "resolve_arrows",
    "merge_accessors",
    "MERGED_ACCESSORS",
]
