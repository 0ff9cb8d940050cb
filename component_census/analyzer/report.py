"""Hierarchical usage report: qualified names -> instances.

``Header.Logo`` lives at ``report['Header'].components['Logo']``; every dot
in a qualified name descends one ``components`` level. Nodes are created on
first use and only ever grow: instances are appended, never replaced.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass
class Position:
    line: int
    column: int


@dataclass
class Location:
    file: str
    start: Position


@dataclass
class InstanceInfo:
    """One recorded usage of a component."""
    location: Location
    props: Dict[str, Any] = field(default_factory=dict)
    props_spread: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "props": dict(self.props),
            "propsSpread": self.props_spread,
            "location": {
                "file": self.location.file,
                "start": {
                    "line": self.location.start.line,
                    "column": self.location.start.column,
                },
            },
        }


@dataclass
class ComponentNode:
    """Usages of one qualified name plus its sub-components.

    Both fields stay None until something is stored in them, so an empty
    list or map never appears in the report.
    """
    instances: Optional[List[InstanceInfo]] = None
    components: Optional[Dict[str, 'ComponentNode']] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.instances:
            data["instances"] = [instance.to_dict() for instance in self.instances]
        if self.components:
            data["components"] = report_to_dict(self.components)
        return data


# Caller-owned root of the report, shared by every file of a run
ReportTree = Dict[str, ComponentNode]


def get_or_create_node(report: ReportTree, name: str) -> ComponentNode:
    """Navigate to the node for a qualified name, creating missing levels.

    Args:
        report: Report root, mutated in place
        name: Dot-separated qualified name

    Returns:
        The existing or newly created node for ``name``
    """
    level = report
    node = None
    for segment in name.split('.'):
        if node is not None:
            if node.components is None:
                node.components = {}
            level = node.components

        node = level.get(segment)
        if node is None:
            node = ComponentNode()
            level[segment] = node

    return node


def add_instance(report: ReportTree, name: str, instance: InstanceInfo) -> ComponentNode:
    """Append a usage to the node of its qualified name.

    Returns:
        The node the instance was appended to
    """
    node = get_or_create_node(report, name)
    if node.instances is None:
        node.instances = []
    node.instances.append(instance)
    return node


def merge_reports(target: ReportTree, source: ReportTree) -> ReportTree:
    """Merge ``source`` into ``target`` using the same create-then-append rule.

    Instances from ``source`` land after the ones already in ``target``, in
    their original order. ``source`` is left untouched.

    Returns:
        ``target``
    """
    for name, source_node in source.items():
        target_node = target.get(name)
        if target_node is None:
            target_node = ComponentNode()
            target[name] = target_node

        if source_node.instances:
            if target_node.instances is None:
                target_node.instances = []
            target_node.instances.extend(source_node.instances)

        if source_node.components:
            if target_node.components is None:
                target_node.components = {}
            merge_reports(target_node.components, source_node.components)

    return target


def iterate_components(report: ReportTree, prefix: str = "") -> Iterator[Tuple[str, ComponentNode]]:
    """Yield ``(qualified_name, node)`` pairs in pre-order."""
    for name, node in report.items():
        qualified_name = f"{prefix}.{name}" if prefix else name
        yield qualified_name, node
        if node.components:
            yield from iterate_components(node.components, qualified_name)


def report_to_dict(report: ReportTree) -> Dict[str, Any]:
    """Convert a report into JSON-ready nested dicts."""
    return {name: node.to_dict() for name, node in report.items()}
