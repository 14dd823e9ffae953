"""Map declarations to single-letter ctags kinds."""

from typing import Optional

from ..tree import (
    ContainerDeclaration,
    ContainerField,
    ErrorSetDeclaration,
    ErrorTypeReference,
    FunctionSignature,
    SourceTree,
    VariableBinding,
)

FUNCTION = "f"
VARIABLE = "v"
STRUCT = "s"
UNION = "u"
ENUM = "e"
ERROR_SET = "r"
MEMBER = "m"

KIND_NAMES = {
    FUNCTION: "function",
    VARIABLE: "variable",
    STRUCT: "struct",
    UNION: "union",
    ENUM: "enum",
    ERROR_SET: "error set",
    MEMBER: "member",
}

CONTAINER_KINDS = {
    "struct": STRUCT,
    "union": UNION,
    "enum": ENUM,
}


def classify(tree: SourceTree, node) -> Optional[str]:
    """Return the kind letter for a declaration, or None if it has none.

    A container keyword outside struct/union/enum (e.g. `opaque`) is not
    classified.
    """
    if isinstance(node, FunctionSignature):
        return FUNCTION

    if isinstance(node, VariableBinding):
        init = node.init
        if init is None:
            return VARIABLE
        if isinstance(init, ContainerDeclaration):
            return CONTAINER_KINDS.get(tree.token_slice(init.kind_token))
        if isinstance(init, (ErrorSetDeclaration, ErrorTypeReference)):
            return ERROR_SET
        return VARIABLE

    if isinstance(node, ContainerField):
        return MEMBER

    return None
