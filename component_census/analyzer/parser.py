"""Tree-sitter parser for JSX/TSX component markup."""
from pathlib import Path
from typing import Optional
from tree_sitter import Language, Node, Parser, Tree
import tree_sitter_typescript as tstypescript


class ParseFailure(Exception):
    """Raised when source text is not valid JSX/TypeScript."""


class SourceParser:
    """JSX-aware parser using the tree-sitter TSX grammar.

    TSX is a superset of the syntax the scanner needs: plain JavaScript,
    JSX markup and TypeScript type annotations all parse with one grammar.
    """

    SUPPORTED_EXTENSIONS = {
        '.js', '.jsx', '.mjs', '.cjs',
        '.ts', '.tsx', '.mts', '.cts',
    }

    def __init__(self):
        self.language = Language(tstypescript.language_tsx())
        self.parser = Parser(self.language)

    def parse_source(self, source_code: str | bytes) -> Tree:
        """Parse source text and return the tree-sitter Tree.

        Args:
            source_code: Source text (str is encoded as UTF-8)

        Returns:
            Parsed Tree object

        Raises:
            ParseFailure: If the tree contains syntax errors
        """
        if isinstance(source_code, str):
            source_code = source_code.encode('utf-8')

        tree = self.parser.parse(source_code)
        if tree.root_node.has_error:
            raise ParseFailure(self._describe_error(tree))
        mismatch = self._find_unbalanced_element(tree)
        if mismatch is not None:
            raise ParseFailure(mismatch)
        return tree

    @staticmethod
    def _find_unbalanced_element(tree: Tree) -> Optional[str]:
        """Find an element whose closing tag names a different component.

        The grammar accepts `<Text></Box>`, so tag names are compared here.
        Fragments carry no name on either tag.
        """
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == 'jsx_element':
                open_name = _tag_name(node.child_by_field_name('open_tag'))
                close_name = _tag_name(node.child_by_field_name('close_tag'))
                if open_name != close_name:
                    line, column = node.start_point
                    return (
                        f"expected closing tag for '{open_name or ''}' "
                        f"at line {line + 1}, column {column + 1}"
                    )
            stack.extend(reversed(node.children))
        return None

    @staticmethod
    def _describe_error(tree: Tree) -> str:
        """Locate the first ERROR or MISSING node for the failure message."""
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == 'ERROR' or node.is_missing:
                line, column = node.start_point
                return f"syntax error at line {line + 1}, column {column + 1}"
            stack.extend(child for child in reversed(node.children) if child.has_error or child.is_missing)
        return "syntax error"

    @classmethod
    def is_supported(cls, file_path: str | Path) -> bool:
        """Check whether a file extension is handled by the parser.

        TypeScript declaration files carry no markup and are rejected.
        """
        name = Path(file_path).name.lower()
        if name.endswith(('.d.ts', '.d.mts', '.d.cts')):
            return False
        return Path(name).suffix in cls.SUPPORTED_EXTENSIONS


def _tag_name(tag: Optional[Node]) -> Optional[str]:
    """Whitespace-free name text of an opening or closing tag."""
    if tag is None:
        return None
    name = tag.child_by_field_name('name')
    if name is None:
        return None
    return ''.join(name.text.decode('utf-8').split())


_parser: Optional[SourceParser] = None


def get_parser() -> SourceParser:
    """Get or create the shared SourceParser instance."""
    global _parser
    if _parser is None:
        _parser = SourceParser()
    return _parser
