# repaddu

Building blocks for inspecting a code repository: a symbol graph with
inheritance and override edges, sorted views over that graph, extraction of
`TODO`/`FIXME`-style tags, rough token estimates, parsing of Language Server
Protocol symbol replies, and parsing of the command-line options that describe
a repository dump.

The package has no dependencies outside the standard library.

## Modules

| Module | What it holds |
| --- | --- |
| `repaddu.core_types` | Option set (`CliOptions`), the `FileEntry`, `Group`, `OutputChunk` and `OutputContent` records, the `ExitCode`, `GroupingMode`, `MarkerMode`, `FileClass` and `OutputFormat` enums, and `RepadduError`, which carries an `ExitCode`. |
| `repaddu.analysis_graph` | `AnalysisGraph`: symbols keyed by qualified name, de-duplicated edges of kind `EdgeKind`. |
| `repaddu.analysis_view` | `AnalysisViewRegistry` and `build_default_view_registry()` with the `symbols` and `dependencies` views. |
| `repaddu.analysis_tags` | `TagExtractor`, which finds `TODO`, `FIXME`, `BUG` and `HACK` (or your own tags) line by line. |
| `repaddu.analysis_tokens` | `estimate_tokens()`, a four-bytes-per-token heuristic. |
| `repaddu.analysis_lsp` | `LspClient`, `write_message`/`read_message` framing, and parsers that feed LSP replies into a graph. |
| `repaddu.cli_parse` | `parse_args()`, which turns an argument list into `CliOptions` and raises `UsageError` on bad input. |

## Tags

```python
from repaddu.analysis_tags import TagExtractor

extractor = TagExtractor()
matches = extractor.extract("// TODO: implement this\nint x = 1;\n", "main.cpp")
for match in matches:
    print(match.file_path, match.line_number, match.tag, match.content)
# main.cpp 1 TODO implement this
```

Each tag is matched at most once per line; the text after the tag, with leading
colons and spaces removed, becomes `content`. `add_tag_pattern()` adds one more
tag. `load_tag_patterns()` reads tags from a text file, one per line, skipping
blank lines and lines starting with `#`; with `replace_existing=True` the
current tags are dropped first. It raises `OSError` if the file cannot be read.
`extract_from_file()` scans a file on disk the same way and returns an empty
list if the file cannot be read. The `tags` property shows the current tags.

## Token estimates

```python
from repaddu.analysis_tokens import estimate_tokens

estimate_tokens("")          # 0
estimate_tokens("abc")       # 1
estimate_tokens("abcdefgh")  # 2
```

Strings are measured by their UTF-8 length; bytes are accepted as well.

## Symbol graphs and views

```python
from repaddu.analysis_graph import AnalysisGraph, EdgeKind, SymbolKind
from repaddu.analysis_view import AnalysisViewOptions, build_default_view_registry

graph = AnalysisGraph()
base = graph.add_symbol(
    "sample::Base", name="Base", kind=SymbolKind.CLASS,
    container_name="sample", source_path="src/base.h",
)
derived = graph.add_symbol(
    "sample::Derived", name="Derived", kind=SymbolKind.CLASS,
    container_name="sample", source_path="src/derived.h",
)
graph.add_edge(derived, base, EdgeKind.INHERITS)

registry = build_default_view_registry()
view = registry.render("dependencies", graph, AnalysisViewOptions(collapse_mode="none"))
for edge in view.edges:
    print(edge.source, "->", edge.target, edge.label)
# sample::Derived -> sample::Base inherits
```

Adding a symbol whose qualified name is already known returns the existing id;
`add_edge()` returns `False` for an unknown id or an edge that already exists.
`find()` looks a symbol up by qualified name, `symbol()` by id (raising
`IndexError` for an unknown id).

The `symbols` view lists every public symbol and the edges between public
symbols. The `dependencies` view leaves out methods; with `collapse_mode`
`"folder"` (the directory of the source path) or `"target"` (the target name)
it collapses nodes into their groups and keeps only edges between different
groups. Rendering an unregistered name returns a result whose `metadata` holds
`{"error": "unknown view"}`. `view_names()` lists the registered views in
sorted order.

## LSP replies

```python
from repaddu.analysis_graph import AnalysisGraph
from repaddu.analysis_lsp import parse_document_symbols

payload = (
    '{"jsonrpc":"2.0","id":1,"result":['
    '{"name":"core","kind":3,"children":['
    '{"name":"Widget","kind":5,"children":[{"name":"run","kind":6}]}]}]}'
)
graph = AnalysisGraph()
parse_document_symbols(payload, graph)
graph.find("core::Widget::run")
```

Both hierarchical `DocumentSymbol` replies and flat `SymbolInformation` replies
are understood; entries whose `access` is a string other than `"public"` are
skipped. Malformed or unsupported replies raise `LspError`.
`parse_type_hierarchy_supertypes()` and `parse_implementation_items()` add
`inherits` and `implemented_by` edges, and do nothing unless the
`LspRelationshipOptions` have both `deep_enabled` and `capability_supported`
set.

`LspClient` writes `Content-Length`-framed JSON-RPC requests and notifications
to a binary writer and reads framed replies from a binary reader;
`send_request()` returns the id it assigned, counting from 1.
`read_message()` returns the payload as a string, or `None` when no complete
message is available.

## Command-line options

```python
from repaddu.cli_parse import UsageError, parse_args

try:
    options = parse_args(["-i", "project", "-o", "out", "--format", "jsonl"])
except UsageError as error:
    print(error.code, error)
```

The list holds the arguments only, without a program name. Options are applied
on top of a copy of `base_options` when one is given. `--input` is required
unless `--init` is given, and `--output` is required unless `--scan-languages`,
`--analyze-only` or `--init` is given. When `-h`/`--help` or `--version` is
present, the returned options have `show_help` or `show_version` set and the
required-option checks are skipped. Every invalid use raises `UsageError`,
whose `code` is `ExitCode.INVALID_USAGE` and whose `options` holds the options
parsed so far.

## What the package does not do

It provides no command to run. It does not walk a repository, group or chunk
files, write output documents, produce help or version text, or read
configuration files; `CliOptions`, `FileEntry`, `Group` and `OutputChunk` are
plain records for code that does those things.