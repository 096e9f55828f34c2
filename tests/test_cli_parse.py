from pathlib import Path

import pytest

from repaddu.cli_parse import UsageError, parse_args
from repaddu.core_types import (
    CliOptions,
    ExitCode,
    GroupingMode,
    MarkerMode,
    OutputFormat,
    RepadduError,
)

IO = ["-i", "input", "-o", "out"]


def test_analysis_flags():
    options = parse_args(
        [
            "--analysis",
            "--analysis-views",
            "symbols,dependencies",
            "--analysis-deep",
            "--analysis-collapse",
            "folder",
            "--extract-tags",
            "--tag-patterns",
            "tags.txt",
            "--frontmatter",
            "--no-links",
            *IO,
        ]
    )
    assert options.analysis_enabled is True
    assert options.analysis_deep is True
    assert options.analysis_collapse == "folder"
    assert options.extract_tags is True
    assert options.tag_patterns_path == Path("tags.txt")
    assert options.emit_frontmatter is True
    assert options.emit_links is False
    assert options.analysis_views == ["symbols", "dependencies"]


def test_invalid_collapse():
    with pytest.raises(UsageError) as info:
        parse_args(["--analysis-collapse", "weird", *IO])
    assert info.value.code == ExitCode.INVALID_USAGE


def test_parallel_flags():
    assert parse_args(["--single-thread", *IO]).parallel_traversal is False
    options = parse_args(["--single-thread", "--parallel-traversal", *IO])
    assert options.parallel_traversal is True


@pytest.mark.parametrize(
    "value, expected", [("jsonl", OutputFormat.JSONL), ("html", OutputFormat.HTML)]
)
def test_format_flag_accepts_known_values(value, expected):
    assert parse_args(["--format", value, *IO]).format is expected


def test_format_flag_rejects_unknown_value():
    with pytest.raises(UsageError) as info:
        parse_args(["--format", "pdf", *IO])
    assert info.value.code == ExitCode.INVALID_USAGE
    assert "--format must be one of: markdown, jsonl, html." in info.value.message


def test_usage_error_is_repaddu_error():
    with pytest.raises(RepadduError):
        parse_args(["--bogus", *IO])


def test_unknown_argument_message():
    with pytest.raises(UsageError, match="Unknown argument: --bogus"):
        parse_args(["--bogus", *IO])


def test_missing_value():
    with pytest.raises(UsageError, match="--max-files requires a value."):
        parse_args([*IO, "--max-files"])


def test_input_required():
    with pytest.raises(UsageError, match="--input is required."):
        parse_args(["-o", "out"])


def test_output_required():
    with pytest.raises(UsageError, match="--output is required"):
        parse_args(["-i", "input"])


@pytest.mark.parametrize("flag", ["--scan-languages", "--analyze-only"])
def test_output_not_required_for_some_modes(flag):
    options = parse_args(["-i", "input", flag])
    assert options.output_path is None
    assert options.input_path == Path("input")


def test_init_needs_no_input():
    assert parse_args(["--init"]).generate_config is True


def test_help_skips_validation():
    options = parse_args(["--help"])
    assert options.show_help is True
    assert parse_args(["--version"]).show_version is True


def test_include_headers_only_disables_sources():
    options = parse_args(["--include-headers", *IO])
    assert options.include_headers is True
    assert options.include_sources is False
    both = parse_args(["--include-headers", "--include-sources", *IO])
    assert both.include_headers is True
    assert both.include_sources is True


def test_sources_forced_on_without_flags():
    base = CliOptions(include_sources=False)
    assert parse_args(IO, base).include_sources is True


@pytest.mark.parametrize("value", ["-1", "abc", "3x", "99999999999"])
def test_max_files_rejects_bad_values(value):
    with pytest.raises(UsageError, match="--max-files must be a non-negative integer."):
        parse_args(["--max-files", value, *IO])


def test_numeric_options():
    options = parse_args(
        [
            "--max-files", "5",
            "--max-bytes", "1000",
            "--number-width", "4",
            "--group-depth", "2",
            "--max-file-size", "42",
            *IO,
        ]
    )
    assert options.max_files == 5
    assert options.max_bytes == 1000
    assert options.number_width == 4
    assert options.group_depth == 2
    assert options.max_file_size == 42


@pytest.mark.parametrize("flag", ["--number-width", "--group-depth"])
def test_positive_integers_reject_zero(flag):
    with pytest.raises(UsageError, match=f"{flag} must be a positive integer."):
        parse_args([flag, "0", *IO])


def test_extensions_drop_empty_parts():
    options = parse_args(["--extensions", ".c,,.h,", "--exclude-extensions", ".md", *IO])
    assert options.extensions == [".c", ".h"]
    assert options.exclude_extensions == [".md"]


def test_group_by_and_markers():
    options = parse_args(["--group-by", "type", "--markers", "sentinel", *IO])
    assert options.group_by is GroupingMode.TYPE
    assert options.markers is MarkerMode.SENTINEL


def test_component_grouping_needs_map():
    with pytest.raises(UsageError, match="--group-by component requires --component-map."):
        parse_args(["--group-by", "component", *IO])
    options = parse_args(["--group-by", "component", "--component-map", "m.json", *IO])
    assert options.component_map_path == Path("m.json")


def test_language_and_build_system():
    options = parse_args(["--language", "CPP", "--build-system", "cargo", *IO])
    assert options.language == "CPP"
    assert options.build_system == "cargo"
    auto = parse_args(["--language", "auto", "--build-system", "auto", *IO])
    assert auto.language == ""
    assert auto.build_system == ""


def test_unknown_language_rejected():
    with pytest.raises(UsageError, match="--language must be one of"):
        parse_args(["--language", "cobol", *IO])
    with pytest.raises(UsageError, match="--build-system must be one of"):
        parse_args(["--build-system", "ant", *IO])


def test_base_options_not_mutated():
    base = CliOptions(extensions=[".c"])
    options = parse_args(["--extensions", ".h", *IO], base)
    assert options.extensions == [".h"]
    assert base.extensions == [".c"]
    assert base.input_path is None