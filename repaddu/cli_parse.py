"""Command-line argument parsing into run options."""

from __future__ import annotations

import copy
import re
from collections.abc import Sequence
from pathlib import Path

from .core_types import (
    CliOptions,
    ExitCode,
    GroupingMode,
    MarkerMode,
    OutputFormat,
    RepadduError,
)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT64_MAX = 2**64 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

_LANGUAGES = ("c", "cpp", "rust", "python")
_BUILD_SYSTEMS = ("cmake", "make", "meson", "bazel", "cargo", "npm", "python")
_COLLAPSE_MODES = ("none", "folder", "target")

_GROUPING_MODES = {
    "directory": GroupingMode.DIRECTORY,
    "component": GroupingMode.COMPONENT,
    "type": GroupingMode.TYPE,
    "size": GroupingMode.SIZE,
}
_MARKER_MODES = {"fenced": MarkerMode.FENCED, "sentinel": MarkerMode.SENTINEL}
_FORMATS = {
    "markdown": OutputFormat.MARKDOWN,
    "jsonl": OutputFormat.JSONL,
    "html": OutputFormat.HTML,
}

# Flags that take no value, mapped to the option attribute and the value they set.
_SWITCHES = {
    "--include-hidden": ("include_hidden", True),
    "--follow-symlinks": ("follow_symlinks", True),
    "--single-thread": ("parallel_traversal", False),
    "--parallel-traversal": ("parallel_traversal", True),
    "--include-binaries": ("include_binaries", True),
    "--headers-first": ("headers_first", True),
    "--emit-tree": ("emit_tree", True),
    "--emit-cmake": ("emit_cmake", True),
    "--frontmatter": ("emit_frontmatter", True),
    "--scan-languages": ("scan_languages", True),
    "--emit-build-files": ("emit_build_files", True),
    "--no-links": ("emit_links", False),
    "--force-large": ("force_large_files", True),
    "--redact-pii": ("redact_pii", True),
    "--analyze-only": ("analyze_only", True),
    "--analysis": ("analysis_enabled", True),
    "--analysis-deep": ("analysis_deep", True),
    "--extract-tags": ("extract_tags", True),
    "--isolate-docs": ("isolate_docs", True),
    "--dry-run": ("dry_run", True),
    "--init": ("generate_config", True),
    "--generate-config": ("generate_config", True),
    "-h": ("show_help", True),
    "--help": ("show_help", True),
    "--version": ("show_version", True),
}

# Flags whose value is stored as a path.
_PATH_OPTIONS = {
    "-i": ("--input", "input_path"),
    "--input": ("--input", "input_path"),
    "-o": ("--output", "output_path"),
    "--output": ("--output", "output_path"),
    "--config": ("--config", "config_path"),
    "--component-map": ("--component-map", "component_map_path"),
    "--tag-patterns": ("--tag-patterns", "tag_patterns_path"),
}


class UsageError(RepadduError):
    """Invalid command-line usage."""

    def __init__(self, message: str, options: CliOptions | None = None) -> None:
        super().__init__(message, ExitCode.INVALID_USAGE)
        self.options = options


def _split_csv(value: str) -> list[str]:
    return [part for part in value.split(",") if part]


def _parse_integer(value: str, low: int, high: int) -> int | None:
    match = _INTEGER.fullmatch(value)
    if match is None:
        return None
    parsed = int(match.group(1))
    if not low <= parsed <= high:
        return None
    return parsed


def _optional_path(value: str) -> Path | None:
    return Path(value) if value else None


def _choose(value: str, choices: dict, message: str, options: CliOptions):
    try:
        return choices[value]
    except KeyError:
        raise UsageError(message, options) from None


def parse_args(args: Sequence[str], base_options: CliOptions | None = None) -> CliOptions:
    """Parse arguments (without the program name) on top of base options.

    When help or version is requested, the returned options have show_help or
    show_version set and no further validation is done. Raises UsageError on
    any invalid usage.
    """
    options = copy.deepcopy(base_options) if base_options is not None else CliOptions()
    include_headers_flag = False
    include_sources_flag = False

    remaining = iter(args)

    def require_value(flag: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise UsageError(f"{flag} requires a value.", options) from None

    for arg in remaining:
        if arg in _SWITCHES:
            attribute, value = _SWITCHES[arg]
            setattr(options, attribute, value)
        elif arg in _PATH_OPTIONS:
            flag, attribute = _PATH_OPTIONS[arg]
            setattr(options, attribute, _optional_path(require_value(flag)))
        elif arg == "--include-headers":
            options.include_headers = True
            include_headers_flag = True
        elif arg == "--include-sources":
            options.include_sources = True
            include_sources_flag = True
        elif arg == "--max-files":
            parsed = _parse_integer(require_value(arg), _INT32_MIN, _INT32_MAX)
            if parsed is None or parsed < 0:
                raise UsageError("--max-files must be a non-negative integer.", options)
            options.max_files = parsed
        elif arg in ("--max-bytes", "--max-file-size"):
            parsed = _parse_integer(require_value(arg), 0, _UINT64_MAX)
            if parsed is None:
                raise UsageError(f"{arg} must be a non-negative integer.", options)
            if arg == "--max-bytes":
                options.max_bytes = parsed
            else:
                options.max_file_size = parsed
        elif arg in ("--number-width", "--group-depth"):
            parsed = _parse_integer(require_value(arg), _INT32_MIN, _INT32_MAX)
            if parsed is None or parsed <= 0:
                raise UsageError(f"{arg} must be a positive integer.", options)
            if arg == "--number-width":
                options.number_width = parsed
            else:
                options.group_depth = parsed
        elif arg == "--extensions":
            options.extensions = _split_csv(require_value(arg))
        elif arg == "--exclude-extensions":
            options.exclude_extensions = _split_csv(require_value(arg))
        elif arg == "--analysis-views":
            options.analysis_views = _split_csv(require_value(arg))
        elif arg == "--group-by":
            options.group_by = _choose(
                require_value(arg),
                _GROUPING_MODES,
                "--group-by must be one of: directory, component, type, size.",
                options,
            )
        elif arg == "--markers":
            options.markers = _choose(
                require_value(arg),
                _MARKER_MODES,
                "--markers must be one of: fenced, sentinel.",
                options,
            )
        elif arg == "--format":
            options.format = _choose(
                require_value(arg),
                _FORMATS,
                "--format must be one of: markdown, jsonl, html.",
                options,
            )
        elif arg == "--analysis-collapse":
            value = require_value(arg)
            if value not in _COLLAPSE_MODES:
                raise UsageError(
                    "--analysis-collapse must be one of: none, folder, target.", options
                )
            options.analysis_collapse = value
        elif arg == "--language":
            value = require_value(arg)
            if value != "auto" and value.lower() not in _LANGUAGES:
                raise UsageError(
                    "--language must be one of: auto, c, cpp, rust, python.", options
                )
            options.language = "" if value == "auto" else value
        elif arg == "--build-system":
            value = require_value(arg)
            if value != "auto" and value.lower() not in _BUILD_SYSTEMS:
                raise UsageError(
                    "--build-system must be one of: auto, cmake, make, meson, bazel, "
                    "cargo, npm, python.",
                    options,
                )
            options.build_system = "" if value == "auto" else value
        else:
            raise UsageError(f"Unknown argument: {arg}", options)

    if include_headers_flag and not include_sources_flag:
        options.include_sources = False
    if not include_headers_flag and not include_sources_flag:
        options.include_sources = True

    if options.show_help or options.show_version:
        return options

    if options.input_path is None and not options.generate_config:
        raise UsageError("--input is required.", options)
    if (
        not options.scan_languages
        and not options.analyze_only
        and not options.generate_config
        and options.output_path is None
    ):
        raise UsageError(
            "--output is required unless --scan-languages, --analyze-only, or --init is used.",
            options,
        )
    if options.group_by is GroupingMode.COMPONENT and options.component_map_path is None:
        raise UsageError("--group-by component requires --component-map.", options)

    return options