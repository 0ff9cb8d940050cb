"""Report processors: reduce a report tree to an output document."""
from collections import Counter
from typing import Any, Callable, Dict

from .report import ReportTree, iterate_components, report_to_dict

Processor = Callable[[ReportTree], Dict[str, Any]]


def raw_report(report: ReportTree) -> Dict[str, Any]:
    """The full report as nested dicts."""
    return report_to_dict(report)


def count_components(report: ReportTree) -> Dict[str, int]:
    """Instance count per qualified name, most used first.

    Example:
        {"Text": 12, "Header": 3, "Header.Logo": 3}
    """
    counts = {
        name: len(node.instances)
        for name, node in iterate_components(report)
        if node.instances
    }
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def count_components_and_props(report: ReportTree) -> Dict[str, Dict[str, Any]]:
    """Instance count and per-prop usage count per qualified name.

    Example:
        {"Text": {"instances": 12, "props": {"color": 7, "size": 2}}}
    """
    result = {}
    for name, node in iterate_components(report):
        if not node.instances:
            continue

        prop_counts = Counter()
        for instance in node.instances:
            prop_counts.update(instance.props.keys())

        result[name] = {
            "instances": len(node.instances),
            "props": dict(sorted(prop_counts.items(), key=lambda item: (-item[1], item[0]))),
        }

    return dict(sorted(result.items(), key=lambda item: (-item[1]["instances"], item[0])))


PROCESSORS: Dict[str, Processor] = {
    'raw-report': raw_report,
    'count-components': count_components,
    'count-components-and-props': count_components_and_props,
}


def get_processor(name: str) -> Processor:
    """Look up a processor by name.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return PROCESSORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown processor '{name}'. Choose from: {', '.join(PROCESSORS)}"
        ) from None
