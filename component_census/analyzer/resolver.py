"""Qualified name resolution for JSX tag names."""
from tree_sitter import Node

from .syntax import UnrecognizedSyntaxShape, node_text

# Leaf node types of a tag name (`Header`, `my-element`, the `Logo` in `Header.Logo`)
NAME_LEAF_TYPES = {'identifier', 'property_identifier', 'jsx_identifier'}

# Member chains; older grammars call them nested_identifier
NAME_CHAIN_TYPES = {'member_expression', 'nested_identifier'}


def resolve_component_name(name_node: Node) -> str:
    """Turn a tag-name node into a dot-joined qualified name.

    ``<Header.Content.Column>`` is a left-associative chain
    ``((Header . Content) . Column)`` and resolves to
    ``"Header.Content.Column"``.

    Args:
        name_node: The ``name`` field of a JSX opening or self-closing tag

    Returns:
        Qualified component name

    Raises:
        UnrecognizedSyntaxShape: For any other node kind, e.g. a
            namespaced ``<svg:rect>`` name
    """
    if name_node.type in NAME_LEAF_TYPES:
        return node_text(name_node)

    if name_node.type in NAME_CHAIN_TYPES:
        object_node = name_node.child_by_field_name('object')
        property_node = name_node.child_by_field_name('property')
        if object_node is None or property_node is None:
            raise UnrecognizedSyntaxShape("name type", name_node)
        return f"{resolve_component_name(object_node)}.{resolve_component_name(property_node)}"

    raise UnrecognizedSyntaxShape("name type", name_node)
