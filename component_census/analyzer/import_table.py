"""Per-file import table: which module each local binding came from."""
from typing import Dict, Optional
from tree_sitter import Node

from .syntax import UnrecognizedSyntaxShape, literal_value, node_text, significant_children

ImportTable = Dict[str, str]


def build_import_table(root_node: Node) -> ImportTable:
    """Map every locally bound import name to its module specifier.

    Only top-level ``import`` declarations are read. Default, named and
    namespace specifiers are treated alike::

        import Header from 'ds'            -> {'Header': 'ds'}
        import { Core as Header } from 'ds' -> {'Header': 'ds'}
        import * as DS from 'ds'           -> {'DS': 'ds'}

    A local name bound twice keeps the last declaration's module.

    Args:
        root_node: Program node of a parsed file

    Returns:
        Dict of local name -> module specifier

    Raises:
        UnrecognizedSyntaxShape: On an import specifier of unknown shape
    """
    imports: ImportTable = {}

    for statement in root_node.named_children:
        if statement.type != 'import_statement':
            continue

        module_name = _module_specifier(statement)
        if module_name is None:
            # import x = require('mod') is not an import declaration
            continue

        for child in significant_children(statement):
            if child.type == 'import_clause':
                _collect_clause(child, module_name, imports)

    return imports


def _module_specifier(statement: Node) -> Optional[str]:
    source_node = statement.child_by_field_name('source')
    if source_node is None:
        return None
    return literal_value(source_node)


def _collect_clause(clause: Node, module_name: str, imports: ImportTable) -> None:
    """Record the bindings of one import clause.

    A clause may combine forms, e.g. ``import x, { y } from 'mod'``.
    """
    for child in significant_children(clause):
        # Default import: import x from 'mod'
        if child.type == 'identifier':
            imports[node_text(child)] = module_name

        # Namespace import: import * as ns from 'mod'
        elif child.type == 'namespace_import':
            for ns_child in significant_children(child):
                if ns_child.type != 'identifier':
                    raise UnrecognizedSyntaxShape("import specifier type", ns_child)
                imports[node_text(ns_child)] = module_name

        # Named imports: import { x, y as z } from 'mod'
        elif child.type == 'named_imports':
            for specifier in significant_children(child):
                if specifier.type != 'import_specifier':
                    raise UnrecognizedSyntaxShape("import specifier type", specifier)
                local_node = specifier.child_by_field_name('alias') or specifier.child_by_field_name('name')
                if local_node is None:
                    raise UnrecognizedSyntaxShape("import specifier type", specifier)
                imports[node_text(local_node)] = module_name

        else:
            raise UnrecognizedSyntaxShape("import specifier type", child)
