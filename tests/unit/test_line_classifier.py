#!/usr/bin/env python3
"""
Unit tests for line normalization, classification and the interface-name test.
"""

import pytest

from core.line_classifier import (
    ACCESS_KEYWORDS,
    InterfaceNamePredicate,
    classify_line,
    is_interface_name,
    normalize_line,
    starts_with_access_keyword,
)
from uml_types import LineKind


class TestNormalizeLine:

    def test_trims_and_marks_generics(self):
        assert normalize_line("    private List<Widget> items;  ") == "private List~Widget~ items;"

    def test_nested_generics(self):
        assert normalize_line("Dictionary<string, List<int>>") == "Dictionary~string, List~int~~"


class TestClassifySourceLines:

    @pytest.mark.parametrize("line, expected", [
        ("public class Order : EntityBase", LineKind.TYPE_DECLARATION),
        ("internal sealed class Cache", LineKind.TYPE_DECLARATION),
        ("public interface IShape", LineKind.TYPE_DECLARATION),
        ("public void Run(int x)", LineKind.METHOD_DECLARATION),
        ("public Order()", LineKind.METHOD_DECLARATION),
        ("public enum Color { Red, Green }", LineKind.ENUM_DECLARATION),
        ("public int Count { get; set; }", LineKind.PROPERTY_DECLARATION),
        ("private Foo foo = new Foo();", LineKind.PROPERTY_DECLARATION),
        ("get { return name; }", LineKind.ACCESSOR_FRAGMENT),
        ("set;", LineKind.ACCESSOR_FRAGMENT),
        ("getter();", LineKind.NONE),
        ("var total = 0;", LineKind.NONE),
        ("{", LineKind.NONE),
        ("", LineKind.NONE),
    ])
    def test_categories(self, line, expected):
        assert classify_line(line, in_type_block=False) is expected

    def test_no_type_declaration_while_block_open(self):
        line = "public class Nested"
        assert classify_line(line, in_type_block=False) is LineKind.TYPE_DECLARATION
        assert classify_line(line, in_type_block=True) is LineKind.PROPERTY_DECLARATION

    def test_forward_declaration_is_not_a_type(self):
        assert classify_line("public partial class Foo;", in_type_block=False) is not LineKind.TYPE_DECLARATION

    def test_class_keyword_must_be_a_token(self):
        assert classify_line("public Subclass Parent;", in_type_block=False) is LineKind.PROPERTY_DECLARATION

    def test_comments_are_not_stripped(self):
        # Known limitation: only lines starting with an access keyword qualify.
        assert classify_line("// public class Old", in_type_block=False) is LineKind.NONE
        assert classify_line("public class Old // legacy", in_type_block=False) is LineKind.TYPE_DECLARATION


class TestClassifyMarkupLines:

    def test_class_name(self):
        line = normalize_line('<Window x:Class="Demo.Views.MainWindow"')
        assert classify_line(line, in_type_block=False, markup=True) is LineKind.MARKUP_CLASS_NAME

    def test_named_element(self):
        line = normalize_line('<Button x:Name="SaveButton" Content="Save"/>')
        assert classify_line(line, in_type_block=False, markup=True) is LineKind.MARKUP_BINDING

    def test_plain_name_attribute(self):
        line = normalize_line('<TextBox Name="Query"/>')
        assert classify_line(line, in_type_block=False, markup=True) is LineKind.MARKUP_BINDING

    def test_binding_expression_is_not_a_name(self):
        line = normalize_line('<TextBlock Text="{Binding Name}" DisplayName="x"/>')
        assert classify_line(line, in_type_block=False, markup=True) is LineKind.NONE

    def test_source_categories_ignored_in_markup(self):
        assert classify_line("public class Foo", in_type_block=False, markup=True) is LineKind.NONE


class TestInterfaceName:

    @pytest.mark.parametrize("name, expected", [
        ("IShape", True),
        ("IRepository~T~", True),
        ("Item", False),
        ("Ifoo", False),
        ("I", False),
        ("", False),
    ])
    def test_default_convention(self, name, expected):
        assert is_interface_name(name) is expected

    def test_custom_prefix(self):
        predicate = InterfaceNamePredicate(prefix="Abstract")
        assert predicate("AbstractShape")
        assert not predicate("IShape")


@pytest.mark.parametrize("keyword", ACCESS_KEYWORDS)
def test_every_access_keyword_opens_a_declaration(keyword):
    assert starts_with_access_keyword(f"{keyword} int Count;")
    assert classify_line(f"{keyword} int Count;", in_type_block=True) is LineKind.PROPERTY_DECLARATION


def test_access_keyword_must_be_a_whole_word():
    assert not starts_with_access_keyword("publicity = 3;")
    assert not starts_with_access_keyword("protectedField = 1;")
