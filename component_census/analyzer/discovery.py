"""Source file discovery for project-wide scans."""
import re
from pathlib import Path
from typing import Iterable, List, Optional

from .parser import SourceParser

# Vendored code, build artifacts and tooling directories
EXCLUDED_DIRS = {
    'node_modules', 'bower_components', 'vendor', 'third_party',
    'dist', 'build', 'out', 'coverage', 'storybook-static',
    '.git', '.hg', '.svn', '.next', '.nuxt', '.cache', '.turbo',
    'venv', '.venv', '__pycache__',
}

TEST_FILE_PATTERN = re.compile(r'\.(test|spec)\.[cm]?[jt]sx?$', re.IGNORECASE)


def discover_files(root: str | Path, exclude: Optional[Iterable[str]] = None,
                   include_tests: bool = False) -> List[Path]:
    """Find scannable source files under a root.

    Args:
        root: Directory to crawl, or a single file
        exclude: Extra directory names to skip
        include_tests: Also return ``*.test.*`` / ``*.spec.*`` files

    Returns:
        Sorted list of file paths
    """
    root = Path(root)
    if root.is_file():
        return [root]

    excluded_dirs = EXCLUDED_DIRS | set(exclude or ())

    files = []
    for file_path in root.rglob('*'):
        relative_parts = file_path.relative_to(root).parts[:-1]
        if any(part in excluded_dirs for part in relative_parts):
            continue
        if not file_path.is_file() or not SourceParser.is_supported(file_path):
            continue
        if not include_tests and TEST_FILE_PATTERN.search(file_path.name):
            continue
        files.append(file_path)

    return sorted(files)
