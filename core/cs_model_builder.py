#!/usr/bin/env python3
"""
C# Model Builder

Turns the lines of one C# source file into type records and candidate
edges. Lines are classified one at a time; each category dispatches to the
signature parser and the result is rendered into the open type block.

At most one class/interface block is opened per file. Enums are collected
as their own blocks and emitted after it, so blocks are never nested.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from core.line_classifier import classify_line, is_interface_name, normalize_line
from core.model import FileModel, RunState, TypeRecord
from core.signature_parser import CSharpSignatureParser
from uml_types import ArrowKind, LineKind, Stereotype, TypeName

logger = logging.getLogger(__name__)


class CSharpModelBuilder:
    """Per-file extraction for C# sources, accumulating into a RunState."""

    def __init__(self, state: RunState,
                 interface_predicate: Callable[[str], bool] = is_interface_name) -> None:
        self.state = state
        self.is_interface = interface_predicate
        self.parser = CSharpSignatureParser

    def build_file(self, path: str, text: str) -> FileModel:
        lines = [normalize_line(raw) for raw in text.splitlines()]
        file_model = FileModel(path=path)
        block: Optional[TypeRecord] = None
        enums: List[TypeRecord] = []

        for index, line in enumerate(lines):
            kind = classify_line(line, in_type_block=block is not None)
            if kind is LineKind.NONE:
                continue
            if kind is LineKind.TYPE_DECLARATION:
                block = self._open_type(line, path)
            elif kind is LineKind.ENUM_DECLARATION:
                record = self._build_enum(line, lines, index, path)
                if record is not None:
                    enums.append(record)
            elif block is None:
                logger.debug("%s:%d: %s outside of a type block, skipped", path, index + 1, kind.value)
            elif kind is LineKind.METHOD_DECLARATION:
                fragment = self.parser.parse_method(line)
                if fragment is None:
                    logger.debug("%s:%d: unparsed method line: %s", path, index + 1, line)
                    continue
                block.add_member(fragment)
            elif kind is LineKind.PROPERTY_DECLARATION:
                self._add_property(block, line, path, index)
            elif kind is LineKind.ACCESSOR_FRAGMENT:
                accessor = "[get]" if line.startswith("get") else "[set]"
                block.annotate_last_member(accessor)

        # A type header that failed to parse leaves no block; enums still count.
        if block is not None:
            file_model.types.append(block)
        file_model.types.extend(enums)
        self.state.add_file(file_model)
        return file_model

    def _open_type(self, line: str, path: str) -> Optional[TypeRecord]:
        parsed = self.parser.parse_type_declaration(line)
        if parsed is None:
            logger.debug("%s: no type name in %r", path, line)
            return None
        name, bases = parsed
        stereotype = Stereotype.INTERFACE if self.is_interface(name) else Stereotype.NONE
        record = TypeRecord(name=TypeName(name), stereotype=stereotype)
        self.state.declare(name)
        for base in bases:
            kind = ArrowKind.REALIZATION if self.is_interface(base) else ArrowKind.INHERITANCE
            self.state.add_edge(name, base, kind)
        return record

    def _build_enum(self, line: str, lines: List[str], index: int, path: str) -> Optional[TypeRecord]:
        parsed = self.parser.parse_enum(line, lines, index)
        if parsed is None:
            logger.debug("%s:%d: no enum name in %r", path, index + 1, line)
            return None
        name, values = parsed
        self.state.declare(name)
        return TypeRecord(name=TypeName(name), stereotype=Stereotype.ENUMERATOR,
                          values=values)

    def _add_property(self, block: TypeRecord, line: str, path: str, index: int) -> None:
        parsed = self.parser.parse_property(line)
        if parsed is None:
            logger.debug("%s:%d: unparsed member line: %s", path, index + 1, line)
            return
        fragment, var_type = parsed
        block.add_member(fragment)
        self.state.add_edge(block.name, var_type, ArrowKind.COMPOSITION)


__all__ = ["CSharpModelBuilder"]
