"""Accept/reject policy for component usages."""
from typing import List

from component_census.config import ScanConfig
from .import_table import ImportTable


def should_report_component(name: str, config: ScanConfig, import_table: ImportTable) -> bool:
    """Decide whether a tag usage is recorded.

    Checks run in order and the first failing one rejects:

    1. Allow-set: ``name`` itself or its first segment must be listed.
    2. Sub-components: dotted names are rejected unless enabled.
    3. Provenance: the first segment must be imported from the configured
       module (exact string, or pattern matched with ``search``).

    Args:
        name: Qualified component name, e.g. ``"Header.Logo"``
        config: Scan configuration
        import_table: Local name -> module map of the current file

    Returns:
        True if the usage should be recorded
    """
    parts: List[str] = name.split('.')

    if config.components is not None:
        if name not in config.components and parts[0] not in config.components:
            return False

    if not config.include_sub_components and len(parts) > 1:
        return False

    if config.imported_from is not None:
        actual_imported_from = import_table.get(parts[0])
        if actual_imported_from is None:
            return False

        if isinstance(config.imported_from, str):
            if actual_imported_from != config.imported_from:
                return False
        elif config.imported_from.search(actual_imported_from) is None:
            return False

    return True
