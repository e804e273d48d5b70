"""
Build pipeline: scan a tree, extract every file, resolve, render.

Extraction runs file by file into one RunState; resolution happens only
after the whole traversal, when every declared name is known.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from app.config import DEFAULT_CONFIG, GeneratorConfig
from core.cs_model_builder import CSharpModelBuilder
from core.line_classifier import InterfaceNamePredicate
from core.model import Arrow, RunState
from core.namespace import NamespaceNode, build_namespace_tree, is_grouped_directory
from core.resolver import resolve_arrows
from core.xaml_builder import XamlModelBuilder
from gen.mermaid.writer import MermaidWriter
from utils.files import iter_source_files, read_text, write_text

logger = logging.getLogger(__name__)


@dataclass
class BuildArtifacts:
    root: str
    state: RunState
    arrows: List[Arrow]
    namespaces: Optional[NamespaceNode] = None


class BuildPipeline:
    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def extract_file(self, path: str, text: str, state: RunState) -> None:
        """Dispatch one file to the source or markup builder by extension."""
        lower = path.lower()
        if lower.endswith(tuple(self.config.markup_extensions)):
            XamlModelBuilder(state).build_file(path, text)
        else:
            predicate = InterfaceNamePredicate(self.config.interface_prefix)
            CSharpModelBuilder(state, interface_predicate=predicate).build_file(path, text)

    def build(self, root: str) -> BuildArtifacts:
        root = os.path.abspath(root)
        if not os.path.isdir(root):
            raise FileNotFoundError(f"Not a directory: {root}")
        extensions = tuple(self.config.source_extensions) + tuple(self.config.markup_extensions)
        keep_dir = is_grouped_directory if self.config.group_namespaces else None

        state = RunState()
        for path in iter_source_files(root, extensions, keep_dir=keep_dir):
            logger.info("parsing file: %s", path)
            self.extract_file(path, read_text(path), state)

        arrows = resolve_arrows(state)
        logger.info("Extracted %d types from %d files", len(state.type_records), len(state.files))
        namespaces = build_namespace_tree(state.files, root) if self.config.group_namespaces else None
        return BuildArtifacts(root=root, state=state, arrows=arrows, namespaces=namespaces)

    def render(self, artifacts: BuildArtifacts) -> str:
        writer = MermaidWriter(self.config)
        return writer.render(artifacts.state.files, artifacts.arrows, artifacts.namespaces)

    def output_path(self, root: str) -> str:
        return os.path.join(root, self.config.output_name)

    def generate(self, artifacts: BuildArtifacts, out_path: Optional[str] = None) -> str:
        out_path = out_path or self.output_path(artifacts.root)
        write_text(out_path, self.render(artifacts))
        return out_path


__all__ = ["BuildArtifacts", "BuildPipeline"]
