"""Test declaration kind classification."""

from ztags.tags import KIND_NAMES, classify
from ztags.tree import (
    ContainerDeclaration,
    ContainerField,
    ErrorSetDeclaration,
    ErrorTypeReference,
    FunctionSignature,
    OtherDeclaration,
    OtherExpression,
    VariableBinding,
)
from conftest import tok


class TestClassify:
    """Tests for classify."""

    def test_function(self, make_tree):
        tree = make_tree("fn main() void {}")
        node = FunctionSignature(name_token=tok(tree, "main"))
        assert classify(tree, node) == "f"

    def test_variable_without_initializer(self, make_tree):
        tree = make_tree("extern var counter: u32;")
        node = VariableBinding(name_token=tok(tree, "counter"))
        assert classify(tree, node) == "v"

    def test_variable_with_value(self, make_tree):
        tree = make_tree("var x: i32 = 5;")
        node = VariableBinding(name_token=tok(tree, "x"), init=OtherExpression("integer"))
        assert classify(tree, node) == "v"

    def test_struct(self, make_tree):
        tree = make_tree("const X = struct { a: i32 };")
        node = VariableBinding(
            name_token=tok(tree, "X"),
            init=ContainerDeclaration(
                kind_token=tok(tree, "struct"),
                members=(ContainerField(name_token=tok(tree, "a: i32", "a")),),
            ),
        )
        assert classify(tree, node) == "s"

    def test_union_and_enum(self, make_tree):
        tree = make_tree("const U = union { a: i32 };\nconst E = enum { a };")
        union = VariableBinding(
            name_token=tok(tree, "U"),
            init=ContainerDeclaration(kind_token=tok(tree, "union")),
        )
        enum = VariableBinding(
            name_token=tok(tree, "E"),
            init=ContainerDeclaration(kind_token=tok(tree, "enum")),
        )
        assert classify(tree, union) == "u"
        assert classify(tree, enum) == "e"

    def test_unrecognized_container_keyword(self, make_tree):
        tree = make_tree("const Handle = opaque {};")
        node = VariableBinding(
            name_token=tok(tree, "Handle"),
            init=ContainerDeclaration(kind_token=tok(tree, "opaque")),
        )
        assert classify(tree, node) is None

    def test_error_set(self, make_tree):
        tree = make_tree("const Err = error{ Oops };")
        node = VariableBinding(name_token=tok(tree, "Err"), init=ErrorSetDeclaration())
        assert classify(tree, node) == "r"

    def test_error_type_reference(self, make_tree):
        tree = make_tree("const AnyErr = anyerror;")
        node = VariableBinding(name_token=tok(tree, "AnyErr"), init=ErrorTypeReference())
        assert classify(tree, node) == "r"

    def test_container_field(self, make_tree):
        tree = make_tree("x: u8,")
        assert classify(tree, ContainerField(name_token=tok(tree, "x"))) == "m"

    def test_other_declaration(self, make_tree):
        tree = make_tree('test "adds" {}')
        assert classify(tree, OtherDeclaration("test_declaration")) is None

    def test_classification_is_stable(self, make_tree):
        tree = make_tree("const X = struct {};")
        node = VariableBinding(
            name_token=tok(tree, "X"),
            init=ContainerDeclaration(kind_token=tok(tree, "struct")),
        )
        assert classify(tree, node) == classify(tree, node) == "s"

    def test_every_kind_has_a_name(self):
        assert set(KIND_NAMES) == {"f", "v", "s", "u", "e", "r", "m"}
