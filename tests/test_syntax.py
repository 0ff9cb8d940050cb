"""Attribute value classification: literals and ESTree kind names."""

import pytest
from component_census.analyzer.scanner import scan
from component_census.analyzer.syntax import decode_escape, parse_number
from component_census.config import ScanConfig


def prop_value(attribute_source):
    """Scan ``<Text p=... />`` and return the recorded value of ``p``."""
    report = {}
    scan(f"<Text p{attribute_source} />", 'value.jsx', report, ScanConfig(components={'Text'}))
    return report['Text'].instances[0].props['p']


class TestLiteralValues:
    """Literal attribute values are recorded as their runtime value."""

    @pytest.mark.parametrize("source, expected", [
        ('="plain"', 'plain'),
        ("='single'", 'single'),
        ('="a &amp; b"', 'a & b'),
        ("={'in braces'}", 'in braces'),
        (r"={'a\nb'}", 'a\nb'),
        (r"={'café'}", 'café'),
        ('={42}', 42),
        ('={1.5}', 1.5),
        ('={0x1F}', 31),
        ('={1_000}', 1000),
        ('={10n}', 10),
        ('={true}', True),
        ('={false}', False),
        ('={null}', None),
        ('={(7)}', 7),
        ('={/ab+c/i}', '/ab+c/i'),
    ])
    def test_literal(self, source, expected):
        assert prop_value(source) == expected

    def test_missing_value_is_none(self):
        assert prop_value('') is None


class TestSymbolicValues:
    """Non-literal expressions are recorded as ``(<Kind>)``."""

    @pytest.mark.parametrize("source, kind", [
        ('={bar}', 'Identifier'),
        ('={undefined}', 'Identifier'),
        ('={a.b}', 'MemberExpression'),
        ('={a[0]}', 'MemberExpression'),
        ('={this.x}', 'MemberExpression'),
        ('={a?.b}', 'ChainExpression'),
        ('={fn()}', 'CallExpression'),
        ('={new Date()}', 'NewExpression'),
        ('={a && b}', 'LogicalExpression'),
        ('={a ?? b}', 'LogicalExpression'),
        ('={a + b}', 'BinaryExpression'),
        ('={a === b}', 'BinaryExpression'),
        ('={a ? b : c}', 'ConditionalExpression'),
        ('={-1}', 'UnaryExpression'),
        ('={!flag}', 'UnaryExpression'),
        ('={{x: 1}}', 'ObjectExpression'),
        ('={[1, 2]}', 'ArrayExpression'),
        ('={() => 1}', 'ArrowFunctionExpression'),
        ('={function () {}}', 'FunctionExpression'),
        ('={`tpl ${x}`}', 'TemplateLiteral'),
        ('={css`color: red`}', 'TaggedTemplateExpression'),
        ('={<Box />}', 'JSXElement'),
        ('={<>text</>}', 'JSXFragment'),
        ('={value as string}', 'TSAsExpression'),
        ('={value!}', 'TSNonNullExpression'),
        ('={(a, b)}', 'SequenceExpression'),
    ])
    def test_kind(self, source, kind):
        assert prop_value(source) == f"({kind})"

    def test_empty_expression(self):
        assert prop_value('={/* nothing */}') == "(JSXEmptyExpression)"


class TestNumberParsing:
    """JavaScript numeric literal conversion."""

    @pytest.mark.parametrize("text, expected", [
        ('0', 0),
        ('3', 3),
        ('1.25', 1.25),
        ('.5', 0.5),
        ('1e3', 1000),
        ('2.0', 2),
        ('0b101', 5),
        ('0O17', 15),
        ('017', 15),
        ('019', 19),
        ('1_000_000', 1000000),
        ('123n', 123),
    ])
    def test_parse_number(self, text, expected):
        value = parse_number(text)
        assert value == expected
        assert type(value) is type(expected)


class TestEscapeDecoding:
    """JavaScript escape sequences inside string literals."""

    @pytest.mark.parametrize("sequence, expected", [
        (r'\n', '\n'),
        (r'\t', '\t'),
        (r'\0', '\0'),
        (r'\x41', 'A'),
        (r'\u0041', 'A'),
        (r'\u{1F600}', '\U0001F600'),
        (r'\101', 'A'),
        (r"\'", "'"),
        (r'\q', 'q'),
        ('\\\n', ''),
    ])
    def test_decode_escape(self, sequence, expected):
        assert decode_escape(sequence) == expected
