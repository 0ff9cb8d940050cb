"""Configuration management for Component Census.

Loads environment variables and provides the scan configuration consumed by
the usage-extraction engine.
"""
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Collection, List, Optional, Union
from dotenv import load_dotenv

__version__ = "1.0.0"

ENV_PREFIX = "COMPONENT_CENSUS_"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ScanConfig:
    """Options controlling which tag usages are recorded.

    Attributes:
        components: Allowed component names (simple or dotted). Any container
            supporting ``in`` works: a set, a dict keyed by name, a list.
            ``None`` allows every component.
        include_sub_components: Record usages such as ``Header.Logo``.
        imported_from: Module the top-level name must be imported from, as
            an exact string or a compiled pattern (matched with ``search``).
    """
    components: Optional[Collection[str]] = None
    include_sub_components: bool = False
    imported_from: Optional[Union[str, re.Pattern]] = None


def parse_name_list(values: Optional[List[str]]) -> List[str]:
    """Flatten repeated and comma separated option values.

    Args:
        values: Raw values, e.g. ``["Box,Text", "Header"]``

    Returns:
        Stripped non-empty names in their original order
    """
    names = []
    for value in values or []:
        for part in value.split(","):
            part = part.strip()
            if part:
                names.append(part)
    return names


def build_scan_config(components: Optional[List[str]] = None,
                      include_sub_components: bool = False,
                      imported_from: Optional[str] = None,
                      imported_from_pattern: Optional[str] = None) -> ScanConfig:
    """Build a ScanConfig from raw string options.

    Args:
        components: Component names; empty or None allows everything
        include_sub_components: Whether dotted names are recorded
        imported_from: Exact module specifier filter
        imported_from_pattern: Regular expression module filter, takes
            precedence over ``imported_from``

    Returns:
        ScanConfig instance

    Raises:
        ValueError: If ``imported_from_pattern`` is not a valid regex
    """
    names = parse_name_list(components)

    provenance: Optional[Union[str, re.Pattern]] = imported_from or None
    if imported_from_pattern:
        try:
            provenance = re.compile(imported_from_pattern)
        except re.error as e:
            raise ValueError(f"Invalid --imported-from-pattern '{imported_from_pattern}': {e}") from e

    return ScanConfig(
        components=set(names) if names else None,
        include_sub_components=include_sub_components,
        imported_from=provenance,
    )


class Config:
    """Environment-backed defaults for the CLI."""

    def __init__(self, env_path: Optional[Path] = None):
        """Initialize config by loading a .env file.

        Args:
            env_path: Explicit .env location; defaults to ./.env
        """
        load_dotenv(env_path or Path.cwd() / ".env")

    @staticmethod
    def _get(name: str, default: Optional[str] = None) -> Optional[str]:
        return os.getenv(ENV_PREFIX + name, default)

    @property
    def components(self) -> List[str]:
        """Component names from COMPONENT_CENSUS_COMPONENTS (comma separated)."""
        return parse_name_list([self._get("COMPONENTS", "")])

    @property
    def include_sub_components(self) -> bool:
        """Flag from COMPONENT_CENSUS_INCLUDE_SUBCOMPONENTS."""
        return (self._get("INCLUDE_SUBCOMPONENTS", "") or "").strip().lower() in TRUTHY

    @property
    def imported_from(self) -> Optional[str]:
        """Exact module filter from COMPONENT_CENSUS_IMPORTED_FROM."""
        return self._get("IMPORTED_FROM") or None

    @property
    def imported_from_pattern(self) -> Optional[str]:
        """Regex module filter from COMPONENT_CENSUS_IMPORTED_FROM_PATTERN."""
        return self._get("IMPORTED_FROM_PATTERN") or None

    @property
    def exclude(self) -> List[str]:
        """Extra excluded directory names from COMPONENT_CENSUS_EXCLUDE."""
        return parse_name_list([self._get("EXCLUDE", "")])


# Singleton instance
_config = None


def get_config() -> Config:
    """Get or create singleton Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
