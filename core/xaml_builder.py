#!/usr/bin/env python3
"""
XAML Model Builder

Markup files contribute one block named after the view (``x:Class`` or the
file stem). Named elements become public members, and the view gets an edge
toward its design-time data context when one is declared.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from core.line_classifier import classify_line, normalize_line
from core.model import FileModel, RunState, TypeRecord
from core.signature_parser import CSharpSignatureParser
from uml_types import ArrowKind, LineKind, TypeName, Visibility

logger = logging.getLogger(__name__)


class XamlModelBuilder:
    """Per-file extraction for markup views, accumulating into a RunState."""

    def __init__(self, state: RunState) -> None:
        self.state = state
        self.parser = CSharpSignatureParser

    def build_file(self, path: str, text: str) -> FileModel:
        lines = [normalize_line(raw) for raw in text.splitlines()]
        file_model = FileModel(path=path)
        implied_name = Path(path).stem.split(".")[0]
        has_class_name = False
        bindings: List[Tuple[str, str]] = []
        last_tag: Optional[str] = None

        for line in lines:
            kind = classify_line(line, in_type_block=False, markup=True)
            if kind is LineKind.MARKUP_CLASS_NAME:
                name = self.parser.parse_markup_class_name(line)
                if name:
                    implied_name = name
                    has_class_name = True
            elif kind is LineKind.MARKUP_BINDING:
                binding = self.parser.parse_markup_binding(line, last_tag)
                if binding is None:
                    logger.debug("%s: named element without a tag: %s", path, line)
                else:
                    bindings.append(binding)
            last_tag = self.parser.last_opened_tag(line) or last_tag

        if not has_class_name and not bindings:
            self.state.add_file(file_model)
            return file_model

        record = TypeRecord(name=TypeName(implied_name))
        self.state.declare(implied_name)
        glyph = Visibility.PUBLIC.glyph
        for element_type, name in bindings:
            record.add_member(f"{glyph}{name}: {element_type}")
            self.state.add_edge(implied_name, element_type, ArrowKind.COMPOSITION)

        view_model = self.parser.parse_data_context("\n".join(lines))
        if view_model:
            self.state.add_edge(implied_name, view_model, ArrowKind.COMPOSITION)

        file_model.types.append(record)
        self.state.add_file(file_model)
        return file_model


__all__ = ["XamlModelBuilder"]
