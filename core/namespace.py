import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from core.model import FileModel


@dataclass
class NamespaceNode:
    name: str
    children: Dict[str, "NamespaceNode"] = field(default_factory=dict)
    files: List[FileModel] = field(default_factory=list)


# "test", "tests" as a separated word (Tests, MyApp.Tests, test_data) or a
# CamelCase suffix (UnitTests, IntegrationTest).
_TEST_WORD = re.compile(r"(?:^|[._\- ])tests?(?:$|[._\- ])", re.IGNORECASE)
_TEST_SUFFIX = re.compile(r"[a-z0-9]Tests?$")


def is_test_directory(name: str) -> bool:
    return bool(_TEST_WORD.search(name) or _TEST_SUFFIX.search(name))


def is_grouped_directory(name: str) -> bool:
    """Top-level directories that become namespace groups: not hidden, not tests."""
    return not name.startswith(".") and not is_test_directory(name)


def top_level_directory(path: str, root: str) -> str:
    """First path component of ``path`` below ``root``; empty for root-level files."""
    rel = Path(path).relative_to(Path(root))
    return rel.parts[0] if len(rel.parts) > 1 else ""


def build_namespace_tree(files: List[FileModel], root: str) -> NamespaceNode:
    """Group file models by the top-level subdirectory they were read from.

    - files: per-file models in scan order
    - root: the scanned root directory; root-level files stay on the root node
    """
    tree = NamespaceNode(name="__root__")
    for fm in files:
        top = top_level_directory(fm.path, root)
        if not top:
            tree.files.append(fm)
            continue
        if top not in tree.children:
            tree.children[top] = NamespaceNode(name=top)
        tree.children[top].files.append(fm)
    return tree
