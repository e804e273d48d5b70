"""
In-memory records produced by the per-file builders and the run-scoped
accumulator that the resolver consumes once the traversal is complete.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from uml_types import ArrowKind, MemberFragment, Stereotype, TypeName


@dataclass
class TypeRecord:
    """One class, interface, enum or markup view and its rendered members."""
    name: TypeName
    stereotype: Stereotype = Stereotype.NONE
    members: List[MemberFragment] = field(default_factory=list)
    values: List[str] = field(default_factory=list)

    @property
    def is_interface(self) -> bool:
        return self.stereotype is Stereotype.INTERFACE

    def add_member(self, fragment: str) -> None:
        self.members.append(MemberFragment(fragment))

    def annotate_last_member(self, annotation: str) -> bool:
        """Append an annotation to the most recent member; False when there is none."""
        if not self.members:
            return False
        self.members[-1] = MemberFragment(f"{self.members[-1]} {annotation}")
        return True


@dataclass(frozen=True)
class Arrow:
    """Candidate edge. ``start``/``end`` are raw name tokens, not references."""
    start: str
    end: str
    kind: ArrowKind

    @property
    def is_self_loop(self) -> bool:
        return self.start == self.end


@dataclass
class FileModel:
    """Blocks contributed by a single input file, in output order."""
    path: str
    types: List[TypeRecord] = field(default_factory=list)


@dataclass
class RunState:
    """Whole-run accumulator shared by every file's extraction call."""
    declared_type_names: List[TypeName] = field(default_factory=list)
    candidate_edges: List[Arrow] = field(default_factory=list)
    files: List[FileModel] = field(default_factory=list)

    def declare(self, name: str) -> None:
        self.declared_type_names.append(TypeName(name))

    def add_edge(self, start: str, end: str, kind: ArrowKind) -> None:
        self.candidate_edges.append(Arrow(start=start, end=end, kind=kind))

    def add_file(self, file_model: FileModel) -> None:
        self.files.append(file_model)

    @property
    def type_records(self) -> List[TypeRecord]:
        return [t for fm in self.files for t in fm.types]
