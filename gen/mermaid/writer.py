"""Mermaid class-diagram rendering.

Blocks render in scan order, then validated edges in insertion order.
The output carries no timestamps, so an unchanged tree renders
byte-identically.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from app.config import DEFAULT_CONFIG, GeneratorConfig
from core.model import Arrow, FileModel, TypeRecord
from core.namespace import NamespaceNode
from core.resolver import merge_accessors

logger = logging.getLogger(__name__)

HEADER = "classDiagram"


def sanitize_id(name: str) -> str:
    """Convert a directory name to a valid Mermaid identifier."""
    s = re.sub(r"[^A-Za-z0-9_]", "_", name)
    # Mermaid IDs must not start with a digit
    if s and s[0].isdigit():
        s = "_" + s
    return s


class MermaidWriter:
    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        if config is None:
            config = DEFAULT_CONFIG
        self.config: GeneratorConfig = config
        self.indent: str = config.indent

    def render_block(self, record: TypeRecord, depth: int = 1) -> List[str]:
        pad = self.indent * depth
        inner = self.indent * (depth + 1)
        lines = [f"{pad}class {record.name} {{"]
        if record.stereotype.value:
            lines.append(f"{inner}{record.stereotype.value}")
        lines.extend(f"{inner}{member}" for member in record.members)
        lines.extend(f"{inner}{value}" for value in record.values)
        lines.append(f"{pad}}}")
        return lines

    def render_files(self, files: List[FileModel], depth: int = 1) -> List[str]:
        lines: List[str] = []
        for fm in files:
            for record in fm.types:
                lines.extend(self.render_block(record, depth))
        return lines

    def render_namespace(self, node: NamespaceNode) -> List[str]:
        lines = [f"{self.indent}namespace {sanitize_id(node.name)} {{"]
        lines.extend(self.render_files(node.files, depth=2))
        lines.append(f"{self.indent}}}")
        return lines

    def render_edge(self, arrow: Arrow) -> str:
        return f"{self.indent}{arrow.start} {arrow.kind.value} {arrow.end}"

    def render(self, files: List[FileModel], arrows: List[Arrow],
               namespaces: Optional[NamespaceNode] = None) -> str:
        lines = [HEADER, f"{self.indent}direction {self.config.direction}"]
        if namespaces is None:
            lines.extend(self.render_files(files))
        else:
            lines.extend(self.render_files(namespaces.files))
            for child in namespaces.children.values():
                # Mermaid rejects empty namespace bodies.
                if any(fm.types for fm in child.files):
                    lines.extend(self.render_namespace(child))
        lines.extend(self.render_edge(a) for a in arrows)
        return merge_accessors("\n".join(lines) + "\n")


__all__ = ["HEADER", "sanitize_id", "MermaidWriter"]
