"""Scan configuration and environment defaults."""

import os
import re
import pytest
from component_census.config import Config, ScanConfig, build_scan_config, parse_name_list


class TestBuildScanConfig:
    """Raw option strings -> ScanConfig."""

    def test_defaults_allow_everything(self):
        assert build_scan_config() == ScanConfig()

    def test_components_are_split_and_stripped(self):
        config = build_scan_config(components=['Box, Text', 'Header.Logo', ' '])

        assert config.components == {'Box', 'Text', 'Header.Logo'}

    def test_pattern_takes_precedence(self):
        config = build_scan_config(imported_from='exact', imported_from_pattern=r'^@acme/')

        assert isinstance(config.imported_from, re.Pattern)
        assert config.imported_from.search('@acme/ui')

    def test_exact_imported_from(self):
        assert build_scan_config(imported_from='basis').imported_from == 'basis'

    def test_invalid_pattern(self):
        with pytest.raises(ValueError, match="Invalid --imported-from-pattern"):
            build_scan_config(imported_from_pattern='(')


def test_parse_name_list():
    assert parse_name_list(None) == []
    assert parse_name_list(['a,b', 'c']) == ['a', 'b', 'c']


class TestEnvironmentConfig:
    """COMPONENT_CENSUS_* environment variables."""

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv('COMPONENT_CENSUS_COMPONENTS', 'Box,Text')
        monkeypatch.setenv('COMPONENT_CENSUS_INCLUDE_SUBCOMPONENTS', 'yes')
        monkeypatch.setenv('COMPONENT_CENSUS_IMPORTED_FROM', '@acme/ui')
        monkeypatch.setenv('COMPONENT_CENSUS_EXCLUDE', 'stories, fixtures')

        config = Config(env_path=tmp_path / '.env')

        assert config.components == ['Box', 'Text']
        assert config.include_sub_components is True
        assert config.imported_from == '@acme/ui'
        assert config.imported_from_pattern is None
        assert config.exclude == ['stories', 'fixtures']

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv('COMPONENT_CENSUS_IMPORTED_FROM_PATTERN', raising=False)
        env_file = tmp_path / '.env'
        env_file.write_text('COMPONENT_CENSUS_IMPORTED_FROM_PATTERN=^@acme/\n')

        config = Config(env_path=env_file)
        try:
            assert config.imported_from_pattern == '^@acme/'
        finally:
            os.environ.pop('COMPONENT_CENSUS_IMPORTED_FROM_PATTERN', None)

    def test_unset_environment(self, monkeypatch, tmp_path):
        for name in ('COMPONENTS', 'INCLUDE_SUBCOMPONENTS', 'IMPORTED_FROM', 'EXCLUDE'):
            monkeypatch.delenv(f'COMPONENT_CENSUS_{name}', raising=False)

        config = Config(env_path=tmp_path / '.env')

        assert config.components == []
        assert config.include_sub_components is False
        assert config.imported_from is None
        assert config.exclude == []
