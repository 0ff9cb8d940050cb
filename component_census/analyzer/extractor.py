"""Instance extraction from accepted JSX tags."""
from typing import Any, Tuple
from tree_sitter import Node

from .report import InstanceInfo, Location, Position
from .syntax import (
    UnrecognizedSyntaxShape,
    estree_kind,
    is_literal,
    literal_value,
    node_text,
    significant_children,
    unwrap_parentheses,
)


class InstanceExtractor:
    """Build InstanceInfo records for tags of one file."""

    def __init__(self, source_code: bytes, file_path: str):
        """Initialize extractor for one parsed file.

        Args:
            source_code: The exact bytes the tree was parsed from
            file_path: Path recorded in every instance location
        """
        self.source_code = source_code
        self.file_path = file_path

    def extract(self, tag_node: Node) -> InstanceInfo:
        """Extract props, spread flag and location of a tag.

        Args:
            tag_node: ``jsx_opening_element`` or ``jsx_self_closing_element``

        Returns:
            InstanceInfo for the usage

        Raises:
            UnrecognizedSyntaxShape: On an attribute of unknown shape
        """
        name_node = tag_node.child_by_field_name('name')
        line, column = self._position(name_node)
        info = InstanceInfo(location=Location(file=self.file_path, start=Position(line=line, column=column)))

        for attribute in tag_node.children_by_field_name('attribute'):
            if attribute.type == 'jsx_attribute':
                prop_name, prop_value = self._read_attribute(attribute)
                info.props[prop_name] = prop_value
            elif attribute.type == 'jsx_expression' and self._is_spread(attribute):
                # <X {...props} />
                info.props_spread = True
            else:
                raise UnrecognizedSyntaxShape("attribute type", attribute)

        return info

    def _position(self, node: Node) -> Tuple[int, int]:
        """Line (1-based) and UTF-16 code unit offset within the line.

        Tree-sitter columns count bytes, so the line prefix is decoded and
        re-measured in UTF-16 units, the way JavaScript tooling counts them.
        """
        row, byte_column = node.start_point
        line_start = node.start_byte - byte_column
        prefix = self.source_code[line_start:node.start_byte].decode('utf-8', errors='replace')
        return row + 1, len(prefix.encode('utf-16-le')) // 2

    @staticmethod
    def _is_spread(attribute: Node) -> bool:
        children = significant_children(attribute)
        return len(children) == 1 and children[0].type == 'spread_element'

    def _read_attribute(self, attribute: Node) -> Tuple[str, Any]:
        children = significant_children(attribute)
        name = node_text(children[0])
        value_node = children[1] if len(children) > 1 else None
        return name, self._prop_value(value_node)

    @staticmethod
    def _prop_value(value_node: Node | None) -> Any:
        """Resolve an attribute value.

        - ``<X foo />`` -> None
        - ``<X foo="a" />`` / ``<X foo={1} />`` -> the literal value
        - ``<X foo={bar} />`` -> ``"(Identifier)"``
        """
        if value_node is None:
            return None

        if value_node.type == 'string':
            return literal_value(value_node, jsx=True)

        if value_node.type == 'jsx_expression':
            inner = significant_children(value_node)
            if not inner:
                return "(JSXEmptyExpression)"

            expression = unwrap_parentheses(inner[0])
            if is_literal(expression):
                return literal_value(expression)
            return f"({estree_kind(expression)})"

        raise UnrecognizedSyntaxShape("node type", value_node)
