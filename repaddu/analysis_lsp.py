"""Language Server Protocol framing, a minimal client and response parsers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, BinaryIO

from .analysis_graph import AnalysisGraph, EdgeKind, SymbolKind
from .core_types import ExitCode, RepadduError

_SPACE = " \t\n\v\f\r"
_CONTENT_LENGTH = b"Content-Length:"

_KIND_MAP = {
    2: SymbolKind.NAMESPACE,  # Module
    3: SymbolKind.NAMESPACE,  # Namespace
    4: SymbolKind.NAMESPACE,  # Package
    5: SymbolKind.CLASS,  # Class
    11: SymbolKind.CLASS,  # Interface
    23: SymbolKind.CLASS,  # Struct
    6: SymbolKind.METHOD,  # Method
    9: SymbolKind.METHOD,  # Constructor
    12: SymbolKind.METHOD,  # Function
}


class LspError(RepadduError):
    """A malformed or unsupported language-server message."""

    def __init__(self, message: str, code: ExitCode = ExitCode.INVALID_USAGE) -> None:
        super().__init__(message, code)


@dataclass
class LspRelationshipOptions:
    """Whether relationship responses should be turned into graph edges."""

    deep_enabled: bool = False
    capability_supported: bool = False


def write_message(out: BinaryIO, payload: str) -> None:
    """Write one framed message to a binary stream."""
    body = payload.encode("utf-8")
    out.write(b"Content-Length: " + str(len(body)).encode("ascii") + b"\r\n\r\n")
    out.write(body)
    out.flush()


def read_message(stream: BinaryIO) -> str | None:
    """Read one framed message; return None when no complete message is available."""
    content_length = 0
    while True:
        line = stream.readline()
        if not line:
            break
        if line.endswith(b"\n"):
            line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
        if not line:
            break
        if line.startswith(_CONTENT_LENGTH):
            value = line[len(_CONTENT_LENGTH):].decode("latin-1").strip(_SPACE)
            try:
                content_length = int(value)
            except ValueError as exc:
                raise LspError(f"Invalid Content-Length header: {value!r}") from exc
            if content_length < 0:
                raise LspError(f"Invalid Content-Length header: {value!r}")

    if content_length == 0:
        return None
    body = stream.read(content_length)
    if body is None or len(body) < content_length:
        return None
    return body.decode("utf-8", errors="replace")


def _json_escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class LspClient:
    """Sends JSON-RPC requests and notifications over a pair of binary streams."""

    def __init__(self, reader: BinaryIO, writer: BinaryIO) -> None:
        self._reader = reader
        self._writer = writer
        self._next_id = 1

    def send_request(self, method: str, params_json: str = "") -> int:
        """Send a request and return the id it was given."""
        request_id = self._next_id
        self._next_id += 1
        payload = f'{{"jsonrpc":"2.0","id":{request_id},"method":"{method}"'
        if params_json:
            payload += f',"params":{params_json}'
        payload += "}"
        write_message(self._writer, payload)
        return request_id

    def send_notification(self, method: str, params_json: str = "") -> None:
        """Send a notification, which carries no id."""
        payload = f'{{"jsonrpc":"2.0","method":"{method}"'
        if params_json:
            payload += f',"params":{params_json}'
        payload += "}"
        write_message(self._writer, payload)

    def read_message(self) -> str | None:
        """Read the next message payload from the server."""
        return read_message(self._reader)

    def send_initialize(self, root_uri: str) -> int:
        """Send the initialize request for a workspace root."""
        params = f'{{"rootUri":"{_json_escape(root_uri)}"}}'
        return self.send_request("initialize", params)

    def request_document_symbols(self, document_uri: str) -> int:
        """Request the symbols of one document."""
        params = f'{{"textDocument":{{"uri":"{_json_escape(document_uri)}"}}}}'
        return self.send_request("textDocument/documentSymbol", params)

    def send_shutdown_and_exit(self) -> None:
        """Ask the server to shut down, then tell it to exit."""
        self.send_request("shutdown", "{}")
        self.send_notification("exit", "")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _has_name_and_kind(obj: dict) -> bool:
    return isinstance(obj.get("name"), str) and _is_number(obj.get("kind"))


def _is_public_access(obj: dict) -> bool:
    access = obj.get("access")
    if not isinstance(access, str):
        return True
    return access == "public"


def _symbol_kind(value: Any) -> SymbolKind:
    return _KIND_MAP.get(int(value), SymbolKind.METHOD)


def _qualify(container: str, name: str) -> str:
    return f"{container}::{name}" if container else name


def _add_document_symbol(obj: dict, graph: AnalysisGraph, container: str) -> None:
    if not _has_name_and_kind(obj) or not _is_public_access(obj):
        return
    name = obj["name"]
    qualified = _qualify(container, name)
    graph.add_symbol(
        qualified,
        name=name,
        kind=_symbol_kind(obj["kind"]),
        container_name=container,
        is_public=True,
    )
    children = obj.get("children")
    if isinstance(children, list):
        for child in children:
            if isinstance(child, dict):
                _add_document_symbol(child, graph, qualified)


def _add_symbol_information(items: list, graph: AnalysisGraph) -> None:
    for entry in items:
        if not isinstance(entry, dict):
            continue
        if not _has_name_and_kind(entry) or not _is_public_access(entry):
            continue
        name = entry["name"]
        container = entry.get("containerName")
        if not isinstance(container, str):
            container = ""
        graph.add_symbol(
            _qualify(container, name),
            name=name,
            kind=_symbol_kind(entry["kind"]),
            container_name=container,
            is_public=True,
        )


def _load_object(payload: str) -> dict:
    try:
        root = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise LspError(f"Invalid JSON: {exc}") from exc
    if not isinstance(root, dict):
        raise LspError("LSP response must be an object.")
    return root


def _add_hierarchy_edges(
    items: list, origin_qualified_name: str, graph: AnalysisGraph, kind: EdgeKind
) -> None:
    for entry in items:
        if not isinstance(entry, dict) or not _has_name_and_kind(entry):
            continue
        name = entry["name"]
        detail = entry.get("detail")
        container = detail.strip(_SPACE) if isinstance(detail, str) else ""
        target_id = graph.add_symbol(
            _qualify(container, name),
            name=name,
            kind=SymbolKind.CLASS,
            container_name=container,
        )
        origin = graph.find(origin_qualified_name)
        if origin is None:
            continue
        graph.add_edge(origin.id, target_id, kind)


def parse_document_symbols(payload: str, graph: AnalysisGraph) -> None:
    """Add the public symbols of a documentSymbol response to the graph."""
    root = _load_object(payload)
    if "result" not in root:
        raise LspError("LSP response missing result.")
    result = root["result"]
    if not isinstance(result, list):
        raise LspError("Unsupported LSP documentSymbol result format.")
    if result and isinstance(result[0], dict) and "children" in result[0]:
        for entry in result:
            if isinstance(entry, dict):
                _add_document_symbol(entry, graph, "")
        return
    _add_symbol_information(result, graph)


def _parse_relationships(
    payload: str,
    origin_qualified_name: str,
    graph: AnalysisGraph,
    options: LspRelationshipOptions | None,
    kind: EdgeKind,
) -> None:
    options = options or LspRelationshipOptions()
    if not options.deep_enabled or not options.capability_supported:
        return
    root = _load_object(payload)
    result = root.get("result")
    if not isinstance(result, list):
        raise LspError("LSP response missing result array.")
    _add_hierarchy_edges(result, origin_qualified_name, graph, kind)


def parse_type_hierarchy_supertypes(
    payload: str,
    origin_qualified_name: str,
    graph: AnalysisGraph,
    options: LspRelationshipOptions | None = None,
) -> None:
    """Add inheritance edges from a supertypes response, when enabled."""
    _parse_relationships(payload, origin_qualified_name, graph, options, EdgeKind.INHERITS)


def parse_implementation_items(
    payload: str,
    origin_qualified_name: str,
    graph: AnalysisGraph,
    options: LspRelationshipOptions | None = None,
) -> None:
    """Add implemented-by edges from an implementation response, when enabled."""
    _parse_relationships(
        payload, origin_qualified_name, graph, options, EdgeKind.IMPLEMENTED_BY
    )