"""Scan orchestration: parse, build the import table, walk, record."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional
from tree_sitter import Node

from component_census.config import ScanConfig
from component_census.utils.safe_console import report_diagnostic
from .extractor import InstanceExtractor
from .filters import should_report_component
from .import_table import build_import_table
from .parser import ParseFailure, get_parser
from .report import ReportTree, add_instance, merge_reports
from .resolver import resolve_component_name
from .syntax import UnrecognizedSyntaxShape
from .walker import VisitAction, walk

# Tag-opening nodes: <X ...> and <X ... />
TAG_NODE_TYPES = ('jsx_opening_element', 'jsx_self_closing_element')


def scan(code: str | bytes, file_path: str, report: ReportTree, config: Optional[ScanConfig] = None) -> None:
    """Record every accepted component usage of one file into ``report``.

    Unparsable code prints ``Failed to parse: <file_path>`` to stderr and
    leaves the report untouched.

    Args:
        code: Source text
        file_path: Path recorded in instance locations and diagnostics
        report: Shared report root, mutated in place
        config: Scan configuration; defaults to ScanConfig()

    Raises:
        UnrecognizedSyntaxShape: If a tag name, attribute or import has a
            shape the scanner cannot read. Instances recorded earlier in the
            same file stay in the report.
    """
    _scan_file(code, file_path, report, config or ScanConfig())


def _scan_file(code: str | bytes, file_path: str, report: ReportTree, config: ScanConfig) -> bool:
    """Scan one file; returns False when it could not be parsed."""
    source_code = code.encode('utf-8') if isinstance(code, str) else code

    try:
        tree = get_parser().parse_source(source_code)
    except ParseFailure:
        report_diagnostic(f"Failed to parse: {file_path}")
        return False

    import_table = build_import_table(tree.root_node)
    extractor = InstanceExtractor(source_code, file_path)

    def visit_tag(node: Node) -> Optional[VisitAction]:
        name_node = node.child_by_field_name('name')
        if name_node is None:
            # Fragment: <>...</>
            return VisitAction.CONTINUE

        name = resolve_component_name(name_node)
        if not should_report_component(name, config, import_table):
            return VisitAction.SKIP_CHILDREN

        add_instance(report, name, extractor.extract(node))
        return VisitAction.CONTINUE

    walk(tree.root_node, {node_type: visit_tag for node_type in TAG_NODE_TYPES})
    return True


@dataclass
class ScanSummary:
    """Outcome of a batch scan."""
    files_scanned: int = 0
    failed_files: List[str] = field(default_factory=list)


def scan_files(paths: Iterable[Path], report: ReportTree, config: Optional[ScanConfig] = None,
               root: Optional[Path] = None,
               on_file: Optional[Callable[[Path], None]] = None) -> ScanSummary:
    """Scan many files into one report.

    Each file is scanned into a private report that is merged into
    ``report`` only once the file completed, so a file aborted by
    UnrecognizedSyntaxShape leaves no partial entries behind.

    Args:
        paths: Files to scan, in report order
        report: Shared report root, mutated in place
        config: Scan configuration
        root: When given, locations are recorded relative to it
        on_file: Called with each path before it is scanned

    Returns:
        ScanSummary with counts of scanned and failed files

    Raises:
        UnrecognizedSyntaxShape: Propagated from the failing file, with
            its ``file_path`` attribute set
    """
    config = config or ScanConfig()
    summary = ScanSummary()

    for path in paths:
        display_path = _display_path(path, root)
        if on_file is not None:
            on_file(path)

        try:
            code = path.read_bytes().decode('utf-8-sig')
        except (OSError, UnicodeDecodeError):
            report_diagnostic(f"Failed to read: {display_path}")
            summary.failed_files.append(display_path)
            continue

        file_report: ReportTree = {}
        try:
            parsed = _scan_file(code, display_path, file_report, config)
        except UnrecognizedSyntaxShape as e:
            e.file_path = display_path
            raise

        if not parsed:
            summary.failed_files.append(display_path)
            continue

        merge_reports(report, file_report)
        summary.files_scanned += 1

    return summary


def _display_path(path: Path, root: Optional[Path]) -> str:
    if root is not None:
        try:
            return path.resolve().relative_to(root.resolve()).as_posix()
        except ValueError:
            pass
    return path.as_posix()
