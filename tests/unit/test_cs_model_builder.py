#!/usr/bin/env python3
"""
Tests for the C# model builder: block assembly and candidate edges.
"""

from core.cs_model_builder import CSharpModelBuilder
from core.line_classifier import InterfaceNamePredicate
from core.model import Arrow, RunState
from uml_types import ArrowKind, Stereotype

ORDER_CS = """
using System.Collections.Generic;

namespace Shop
{
    public class Order : EntityBase, IAuditable
    {
        private List<OrderLine> lines;
        private Customer customer;
        public int Count { get; set; }
        public string Name
        {
            get { return name; }
            set { name = value; }
        }
        public decimal Total(bool withTax)
        {
            return 0;
        }
        public enum Status { Open, Closed }
    }
}
"""


def _build(text, path="Order.cs", **kwargs):
    state = RunState()
    file_model = CSharpModelBuilder(state, **kwargs).build_file(path, text)
    return state, file_model


class TestCSharpModelBuilder:

    def test_blocks_and_members(self):
        state, fm = _build(ORDER_CS)
        assert [t.name for t in fm.types] == ["Order", "Status"]
        order, status = fm.types
        assert order.members == [
            "-lines: List~OrderLine~",
            "-customer: Customer",
            "+Count: int [get] [set]",
            "+Name: string [get] [set]",
            "+Total(withTax: bool) decimal",
        ]
        assert status.stereotype is Stereotype.ENUMERATOR
        assert status.values == ["Open", "Closed"]
        assert state.declared_type_names == ["Order", "Status"]
        assert state.files == [fm]

    def test_candidate_edges(self):
        state, _ = _build(ORDER_CS)
        assert state.candidate_edges == [
            Arrow("Order", "EntityBase", ArrowKind.INHERITANCE),
            Arrow("Order", "IAuditable", ArrowKind.REALIZATION),
            Arrow("Order", "List~OrderLine~", ArrowKind.COMPOSITION),
            Arrow("Order", "Customer", ArrowKind.COMPOSITION),
            Arrow("Order", "int", ArrowKind.COMPOSITION),
            Arrow("Order", "string", ArrowKind.COMPOSITION),
        ]

    def test_interface_stereotype(self):
        _, fm = _build("public interface IShape\n{\n    double Area();\n}\n")
        assert fm.types[0].name == "IShape"
        assert fm.types[0].is_interface
        # Interface members carry no access keyword and are not picked up.
        assert fm.types[0].members == []

    def test_single_block_per_file(self):
        state, fm = _build("public class A\n{\n}\npublic class B : A\n{\n}\n")
        assert [t.name for t in fm.types] == ["A"]
        assert state.declared_type_names == ["A"]
        assert state.candidate_edges == []

    def test_members_before_any_type_are_dropped(self):
        state, fm = _build("public int Orphan;\npublic void Nothing()\n")
        assert fm.types == []
        assert state.candidate_edges == []

    def test_accessor_without_member_is_ignored(self):
        _, fm = _build("public class Empty\n{\nget;\n}\n")
        assert fm.types[0].members == []

    def test_enum_outside_class_still_declared(self):
        state, fm = _build("namespace N\n{\n    public enum Mode\n    {\n        Fast,\n        Slow\n    }\n}\n")
        assert [t.name for t in fm.types] == ["Mode"]
        assert fm.types[0].values == ["Fast", "Slow"]
        assert state.declared_type_names == ["Mode"]

    def test_custom_interface_predicate(self):
        state, _ = _build("public class Circle : AbstractShape\n",
                          interface_predicate=InterfaceNamePredicate("Abstract"))
        assert state.candidate_edges == [Arrow("Circle", "AbstractShape", ArrowKind.REALIZATION)]

    def test_state_accumulates_across_files(self):
        state = RunState()
        builder = CSharpModelBuilder(state)
        builder.build_file("A.cs", "public class A\n")
        builder.build_file("B.cs", "public class B : A\n")
        assert state.declared_type_names == ["A", "B"]
        assert [fm.path for fm in state.files] == ["A.cs", "B.cs"]
