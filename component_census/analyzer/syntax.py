"""Helpers for reading tree-sitter TSX nodes as JavaScript values.

Tree-sitter node types are mapped onto ESTree kind names, since symbolic
attribute values are reported as ``"(<Kind>)"`` using the ESTree vocabulary
(Identifier, MemberExpression, ObjectExpression, ...).
"""
import html
import re
from typing import Any, List
from tree_sitter import Node


class UnrecognizedSyntaxShape(ValueError):
    """Raised when a node has a shape the scanner does not know how to read.

    The supported grammar should never produce these, so this signals a
    contract violation and aborts the current file instead of being skipped.
    """

    def __init__(self, what: str, node: Node):
        line, column = node.start_point
        super().__init__(f"Unknown {what}: {node.type} (line {line + 1}, column {column + 1})")
        self.node_type = node.type
        self.file_path = None


LITERAL_TYPES = {'string', 'number', 'true', 'false', 'null', 'regex'}

# Tree-sitter types whose ESTree kind does not depend on their contents
ESTREE_KINDS = {
    'identifier': 'Identifier',
    'undefined': 'Identifier',
    'this': 'ThisExpression',
    'super': 'Super',
    'new_expression': 'NewExpression',
    'template_string': 'TemplateLiteral',
    'object': 'ObjectExpression',
    'array': 'ArrayExpression',
    'function': 'FunctionExpression',
    'function_expression': 'FunctionExpression',
    'generator_function': 'FunctionExpression',
    'arrow_function': 'ArrowFunctionExpression',
    'class': 'ClassExpression',
    'meta_property': 'MetaProperty',
    'assignment_expression': 'AssignmentExpression',
    'augmented_assignment_expression': 'AssignmentExpression',
    'await_expression': 'AwaitExpression',
    'unary_expression': 'UnaryExpression',
    'update_expression': 'UpdateExpression',
    'ternary_expression': 'ConditionalExpression',
    'yield_expression': 'YieldExpression',
    'sequence_expression': 'SequenceExpression',
    'jsx_self_closing_element': 'JSXElement',
    'jsx_fragment': 'JSXFragment',
    'as_expression': 'TSAsExpression',
    'satisfies_expression': 'TSSatisfiesExpression',
    'non_null_expression': 'TSNonNullExpression',
    'instantiation_expression': 'TSInstantiationExpression',
    'type_assertion': 'TSTypeAssertion',
}

LOGICAL_OPERATORS = {'&&', '||', '??'}

SIMPLE_ESCAPES = {
    'n': '\n', 't': '\t', 'r': '\r', 'b': '\b',
    'f': '\f', 'v': '\v', '0': '\0',
}

LEGACY_OCTAL = re.compile(r'0[0-7]+')


def node_text(node: Node) -> str:
    return node.text.decode('utf-8', errors='replace')


def significant_children(node: Node) -> List[Node]:
    """Named children of a node, ignoring comments."""
    return [child for child in node.named_children if child.type != 'comment']


def unwrap_parentheses(node: Node) -> Node:
    """Strip ``( ... )`` wrappers; ESTree has no parenthesis node."""
    while node.type == 'parenthesized_expression':
        inner = significant_children(node)
        if len(inner) != 1:
            break
        node = inner[0]
    return node


def is_literal(node: Node) -> bool:
    return node.type in LITERAL_TYPES


def literal_value(node: Node, jsx: bool = False) -> Any:
    """Runtime value of a literal node.

    Args:
        node: Node whose type is in LITERAL_TYPES
        jsx: True for a JSX attribute string, which has no escape sequences
             but may contain HTML character references

    Returns:
        str, int, float, bool or None. Regular expressions are returned as
        their source text.
    """
    if node.type == 'string':
        if jsx:
            return html.unescape(node_text(node)[1:-1])
        return _decode_string(node)
    if node.type == 'number':
        return parse_number(node_text(node))
    if node.type == 'true':
        return True
    if node.type == 'false':
        return False
    if node.type == 'null':
        return None
    if node.type == 'regex':
        return node_text(node)
    raise UnrecognizedSyntaxShape("literal type", node)


def _decode_string(node: Node) -> str:
    parts = []
    for child in node.children:
        if child.type == 'escape_sequence':
            parts.append(decode_escape(node_text(child)))
        elif child.type in ('string_fragment', 'html_character_reference'):
            parts.append(node_text(child))
    return ''.join(parts)


def decode_escape(sequence: str) -> str:
    """Decode one JavaScript escape sequence such as ``\\n`` or ``\\u{1F600}``."""
    body = sequence[1:]
    if not body or body[0] in '\r\n\u2028\u2029':
        # Line continuation
        return ''
    head = body[0]
    if head == 'x' and len(body) == 3:
        return chr(int(body[1:], 16))
    if head == 'u':
        digits = body[2:-1] if body.startswith('u{') else body[1:]
        return chr(int(digits, 16))
    if head in SIMPLE_ESCAPES and len(body) == 1:
        return SIMPLE_ESCAPES[head]
    if head.isdigit() and all(c in '01234567' for c in body):
        return chr(int(body, 8))
    return body


def parse_number(text: str) -> int | float:
    """Convert a JavaScript numeric literal to a Python number.

    Handles separators, hex/octal/binary prefixes, legacy octal and the
    BigInt ``n`` suffix. Integral values come back as ``int`` so they
    serialize the way JSON.stringify prints them.
    """
    literal = text.replace('_', '').lower()
    if literal.endswith('n'):
        literal = literal[:-1]

    if literal.startswith(('0x', '0o', '0b')):
        return int(literal, 0)
    if LEGACY_OCTAL.fullmatch(literal):
        return int(literal, 8)

    value = float(literal)
    if value.is_integer() and abs(value) < 2 ** 53:
        return int(value)
    return value


def estree_kind(node: Node) -> str:
    """ESTree kind name of an expression node.

    Unmapped tree-sitter types fall back to their PascalCase spelling.
    """
    node = unwrap_parentheses(node)
    node_type = node.type

    if node_type in LITERAL_TYPES:
        return 'Literal'

    if node_type in ('member_expression', 'subscript_expression', 'call_expression'):
        if _has_optional_chain(node):
            return 'ChainExpression'
        if node_type != 'call_expression':
            return 'MemberExpression'
        function = node.child_by_field_name('function')
        arguments = node.child_by_field_name('arguments')
        if function is not None and function.type == 'import':
            return 'ImportExpression'
        if arguments is not None and arguments.type == 'template_string':
            return 'TaggedTemplateExpression'
        return 'CallExpression'

    if node_type == 'binary_expression':
        operator = node.child_by_field_name('operator')
        if operator is not None and operator.type in LOGICAL_OPERATORS:
            return 'LogicalExpression'
        return 'BinaryExpression'

    if node_type == 'jsx_element':
        # Fragments are jsx_element nodes whose opening tag has no name
        open_tag = node.child_by_field_name('open_tag')
        if open_tag is not None and open_tag.child_by_field_name('name') is None:
            return 'JSXFragment'
        return 'JSXElement'

    if node_type in ESTREE_KINDS:
        return ESTREE_KINDS[node_type]

    return ''.join(part.capitalize() for part in node_type.split('_'))


def _has_optional_chain(node: Node) -> bool:
    """Check the object/callee spine of a chain for ``?.``."""
    while node.type in ('member_expression', 'subscript_expression', 'call_expression'):
        if node.child_by_field_name('optional_chain') is not None:
            return True
        field = 'function' if node.type == 'call_expression' else 'object'
        node = node.child_by_field_name(field)
        if node is None:
            return False
    return False
