"""Source file discovery."""

from pathlib import Path
from component_census.analyzer.discovery import discover_files


FIXTURES_DIR = Path(__file__).parent / 'fixtures' / 'project'


def relative(paths, root=FIXTURES_DIR):
    return [path.relative_to(root).as_posix() for path in paths]


def test_default_discovery():
    """Vendored code, declaration files and tests are skipped."""
    assert relative(discover_files(FIXTURES_DIR)) == [
        'src/App.jsx',
        'src/components/Header.tsx',
    ]


def test_include_tests():
    assert 'src/App.test.jsx' in relative(discover_files(FIXTURES_DIR, include_tests=True))


def test_extra_excludes():
    assert relative(discover_files(FIXTURES_DIR, exclude=['components'])) == ['src/App.jsx']


def test_single_file_root():
    target = FIXTURES_DIR / 'src' / 'App.jsx'

    assert discover_files(target) == [target]


def test_unsupported_extensions_ignored(tmp_path):
    (tmp_path / 'readme.md').write_text('<Box />')
    (tmp_path / 'styles.css').write_text('a {}')
    (tmp_path / 'widget.mjs').write_text('<Box />')

    assert relative(discover_files(tmp_path), tmp_path) == ['widget.mjs']


def test_excluded_dir_only_matches_below_root(tmp_path):
    """A root that itself lives under e.g. build/ is still crawled."""
    root = tmp_path / 'build' / 'app'
    root.mkdir(parents=True)
    (root / 'index.jsx').write_text('<Box />')

    assert relative(discover_files(root), root) == ['index.jsx']
