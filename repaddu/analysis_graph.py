"""Symbol graph built from code analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SymbolKind(Enum):
    """Kind of a symbol in the graph."""

    MODULE = "module"
    NAMESPACE = "namespace"
    CLASS = "class"
    METHOD = "method"


class EdgeKind(Enum):
    """Relationship between two symbols."""

    INHERITS = "inherits"
    OVERRIDES = "overrides"
    IMPLEMENTED_BY = "implemented_by"


@dataclass(frozen=True)
class SymbolNode:
    """A symbol stored in the graph."""

    id: int
    kind: SymbolKind
    name: str
    qualified_name: str
    container_name: str = ""
    source_path: str = ""
    target_name: str = ""
    is_public: bool = True


@dataclass(frozen=True)
class SymbolEdge:
    """A directed relationship between two symbol ids."""

    source: int
    target: int
    kind: EdgeKind


class AnalysisGraph:
    """Symbols keyed by qualified name, with de-duplicated edges."""

    def __init__(self) -> None:
        self._symbols: list[SymbolNode] = []
        self._edges: list[SymbolEdge] = []
        self._by_qualified_name: dict[str, int] = {}
        self._edge_set: set[SymbolEdge] = set()

    def add_symbol(
        self,
        qualified_name: str,
        name: str = "",
        kind: SymbolKind = SymbolKind.CLASS,
        container_name: str = "",
        source_path: str = "",
        target_name: str = "",
        is_public: bool = True,
    ) -> int:
        """Add a symbol, or return the id of the one with the same qualified name."""
        existing = self._by_qualified_name.get(qualified_name)
        if existing is not None:
            return existing
        symbol_id = len(self._symbols)
        self._symbols.append(
            SymbolNode(
                id=symbol_id,
                kind=kind,
                name=name,
                qualified_name=qualified_name,
                container_name=container_name,
                source_path=source_path,
                target_name=target_name,
                is_public=is_public,
            )
        )
        self._by_qualified_name[qualified_name] = symbol_id
        return symbol_id

    def add_edge(self, source: int, target: int, kind: EdgeKind) -> bool:
        """Add an edge; return False if an id is unknown or the edge exists."""
        count = len(self._symbols)
        if not (0 <= source < count and 0 <= target < count):
            return False
        edge = SymbolEdge(source, target, kind)
        if edge in self._edge_set:
            return False
        self._edge_set.add(edge)
        self._edges.append(edge)
        return True

    def find(self, qualified_name: str) -> SymbolNode | None:
        """Return the symbol with this qualified name, if any."""
        symbol_id = self._by_qualified_name.get(qualified_name)
        return None if symbol_id is None else self._symbols[symbol_id]

    def symbol(self, symbol_id: int) -> SymbolNode:
        """Return the symbol with this id; raise IndexError if there is none."""
        if not 0 <= symbol_id < len(self._symbols):
            raise IndexError("SymbolId out of range")
        return self._symbols[symbol_id]

    def symbols(self) -> list[SymbolNode]:
        """All symbols in insertion order."""
        return list(self._symbols)

    def edges(self) -> list[SymbolEdge]:
        """All edges in insertion order."""
        return list(self._edges)

    def public_symbols(self) -> list[int]:
        """Ids of public symbols in insertion order."""
        return [symbol.id for symbol in self._symbols if symbol.is_public]