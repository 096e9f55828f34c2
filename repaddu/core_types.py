"""Shared option, entry and error types used across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit codes reported by the tool."""

    SUCCESS = 0
    INVALID_USAGE = 1
    IO_FAILURE = 2
    TRAVERSAL_FAILURE = 3
    OUTPUT_CONSTRAINTS = 4


class GroupingMode(Enum):
    """How files are gathered into groups."""

    DIRECTORY = "directory"
    COMPONENT = "component"
    TYPE = "type"
    SIZE = "size"


class MarkerMode(Enum):
    """How file contents are delimited in the output."""

    FENCED = "fenced"
    SENTINEL = "sentinel"


class FileClass(Enum):
    """Broad classification of a source file."""

    HEADER = "header"
    SOURCE = "source"
    OTHER = "other"


class OutputFormat(Enum):
    """Output document format."""

    MARKDOWN = "markdown"
    JSONL = "jsonl"
    HTML = "html"


@dataclass
class CliOptions:
    """All settings that control a run."""

    input_path: Path | None = None
    output_path: Path | None = None
    max_files: int = 0
    max_bytes: int = 0
    number_width: int = 3
    include_headers: bool = False
    include_sources: bool = True
    extensions: list[str] = field(default_factory=list)
    exclude_extensions: list[str] = field(default_factory=list)
    include_hidden: bool = False
    follow_symlinks: bool = False
    include_binaries: bool = False
    group_by: GroupingMode = GroupingMode.DIRECTORY
    group_depth: int = 1
    component_map_path: Path | None = None
    headers_first: bool = False
    emit_tree: bool = True
    emit_cmake: bool = True
    emit_build_files: bool = False
    emit_links: bool = True
    markers: MarkerMode = MarkerMode.FENCED
    emit_frontmatter: bool = False
    format: OutputFormat = OutputFormat.MARKDOWN
    show_help: bool = False
    show_version: bool = False
    scan_languages: bool = False
    language: str = ""
    build_system: str = ""
    max_file_size: int = 1024 * 1024
    force_large_files: bool = False
    redact_pii: bool = False
    analyze_only: bool = False
    analysis_enabled: bool = False
    analysis_views: list[str] = field(default_factory=list)
    analysis_deep: bool = False
    analysis_collapse: str = "none"
    extract_tags: bool = False
    tag_patterns_path: Path | None = None
    isolate_docs: bool = False
    dry_run: bool = False
    generate_config: bool = False
    config_path: Path = field(default_factory=lambda: Path(".repaddu.json"))
    parallel_traversal: bool = True


@dataclass
class FileEntry:
    """A file discovered while walking a repository."""

    absolute_path: Path = field(default_factory=Path)
    relative_path: Path = field(default_factory=Path)
    extension_lower: str = ""
    size_bytes: int = 0
    token_count: int = 0
    is_binary: bool = False
    file_class: FileClass = FileClass.OTHER


@dataclass
class Group:
    """A named set of file indices."""

    name: str = ""
    file_indices: list[int] = field(default_factory=list)


@dataclass
class OutputChunk:
    """One output document's worth of files."""

    category: str = ""
    title: str = ""
    file_indices: list[int] = field(default_factory=list)


@dataclass
class OutputContent:
    """Rendered output ready to be written."""

    filename: str = ""
    content: str = ""
    content_bytes: int = 0


class RepadduError(Exception):
    """A failure carrying the exit code the tool should report."""

    def __init__(self, message: str, code: ExitCode = ExitCode.INVALID_USAGE) -> None:
        super().__init__(message)
        self.message = message
        self.code = ExitCode(code)