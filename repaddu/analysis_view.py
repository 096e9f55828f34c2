"""Named views that turn an analysis graph into nodes and labelled edges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .analysis_graph import AnalysisGraph, EdgeKind, SymbolKind, SymbolNode


@dataclass(frozen=True, order=True)
class ViewNode:
    """A node of a rendered view."""

    id: str
    label: str = ""
    group: str = ""


@dataclass(frozen=True, order=True)
class ViewEdge:
    """A labelled edge of a rendered view."""

    source: str
    target: str
    label: str = ""


@dataclass
class AnalysisViewResult:
    """The output of rendering one view."""

    name: str
    nodes: list[ViewNode] = field(default_factory=list)
    edges: list[ViewEdge] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class AnalysisViewOptions:
    """Settings that shape a rendered view."""

    collapse_mode: str = "none"


AnalysisViewFunc = Callable[[AnalysisGraph], AnalysisViewResult]

_EDGE_LABELS = {
    EdgeKind.INHERITS: "inherits",
    EdgeKind.OVERRIDES: "overrides",
    EdgeKind.IMPLEMENTED_BY: "implemented_by",
}


def _edge_label(kind: EdgeKind) -> str:
    return _EDGE_LABELS.get(kind, "unknown")


def _edge_sort_key(edge: ViewEdge) -> tuple[str, str, str]:
    return (edge.source, edge.target, edge.label)


def _sorted_public_symbols(graph: AnalysisGraph) -> list[SymbolNode]:
    symbols = (graph.symbol(symbol_id) for symbol_id in graph.public_symbols())
    return sorted(symbols, key=lambda symbol: symbol.qualified_name)


def _public_edge_pairs(graph: AnalysisGraph, skip_methods: bool):
    for edge in graph.edges():
        source = graph.symbol(edge.source)
        target = graph.symbol(edge.target)
        if not source.is_public or not target.is_public:
            continue
        if skip_methods and SymbolKind.METHOD in (source.kind, target.kind):
            continue
        yield source, target, _edge_label(edge.kind)


def _build_symbol_view(graph: AnalysisGraph) -> AnalysisViewResult:
    nodes = [
        ViewNode(symbol.qualified_name, symbol.name, symbol.container_name)
        for symbol in _sorted_public_symbols(graph)
    ]
    edges = sorted(
        (
            ViewEdge(source.qualified_name, target.qualified_name, label)
            for source, target, label in _public_edge_pairs(graph, skip_methods=False)
        ),
        key=_edge_sort_key,
    )
    return AnalysisViewResult("symbols", nodes, edges)


def _node_group(symbol: SymbolNode, collapse_mode: str) -> str:
    if collapse_mode == "folder" and symbol.source_path:
        path = symbol.source_path
        last_slash = max(path.rfind("/"), path.rfind("\\"))
        return path if last_slash < 0 else path[:last_slash]
    if collapse_mode == "target" and symbol.target_name:
        return symbol.target_name
    return symbol.container_name


def _build_dependency_view(
    graph: AnalysisGraph, options: AnalysisViewOptions
) -> AnalysisViewResult:
    mode = options.collapse_mode
    nodes = [
        ViewNode(symbol.qualified_name, symbol.name, _node_group(symbol, mode))
        for symbol in _sorted_public_symbols(graph)
        if symbol.kind is not SymbolKind.METHOD
    ]
    edges: list[ViewEdge] = []

    if mode == "none":
        edges = [
            ViewEdge(source.qualified_name, target.qualified_name, label)
            for source, target, label in _public_edge_pairs(graph, skip_methods=True)
        ]
    else:
        node_groups = {node.id: node.group for node in nodes}
        seen: set[ViewEdge] = set()
        for source, target, label in _public_edge_pairs(graph, skip_methods=True):
            source_group = node_groups.get(source.qualified_name, "")
            target_group = node_groups.get(target.qualified_name, "")
            if not source_group or not target_group or source_group == target_group:
                continue
            edge = ViewEdge(source_group, target_group, label)
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
        groups = sorted({node.group for node in nodes if node.group})
        nodes = [ViewNode(group, group, "") for group in groups]

    nodes.sort(key=lambda node: (node.group, node.id))
    edges.sort(key=_edge_sort_key)
    return AnalysisViewResult("dependencies", nodes, edges)


class AnalysisViewRegistry:
    """A set of named view builders."""

    def __init__(self) -> None:
        self._views: dict[str, AnalysisViewFunc] = {}

    def register_view(self, name: str, func: AnalysisViewFunc) -> None:
        """Register or replace the view with this name."""
        self._views[name] = func

    def has_view(self, name: str) -> bool:
        """Whether a view with this name is registered."""
        return name in self._views

    def render(
        self,
        name: str,
        graph: AnalysisGraph,
        options: AnalysisViewOptions | None = None,
    ) -> AnalysisViewResult:
        """Render a view; an unknown name yields a result with an error in its metadata."""
        func = self._views.get(name)
        if func is None:
            return AnalysisViewResult(name, metadata={"error": "unknown view"})
        if name == "dependencies":
            return _build_dependency_view(graph, options or AnalysisViewOptions())
        return func(graph)

    def view_names(self) -> list[str]:
        """Registered view names in sorted order."""
        return sorted(self._views)


def build_default_view_registry() -> AnalysisViewRegistry:
    """A registry holding the built-in symbols and dependencies views."""
    registry = AnalysisViewRegistry()
    registry.register_view("symbols", _build_symbol_view)
    registry.register_view(
        "dependencies",
        lambda graph: _build_dependency_view(graph, AnalysisViewOptions()),
    )
    return registry