from pathlib import Path

import pytest

from repaddu.core_types import (
    CliOptions,
    ExitCode,
    FileClass,
    FileEntry,
    Group,
    GroupingMode,
    MarkerMode,
    OutputChunk,
    OutputContent,
    OutputFormat,
    RepadduError,
)


@pytest.mark.parametrize(
    "value, member",
    [
        (0, "SUCCESS"),
        (1, "INVALID_USAGE"),
        (2, "IO_FAILURE"),
        (3, "TRAVERSAL_FAILURE"),
        (4, "OUTPUT_CONSTRAINTS"),
    ],
)
def test_exit_code_values(value, member):
    code = ExitCode(value)
    assert code.name == member
    assert int(code) == value


def test_cli_options_defaults():
    options = CliOptions()
    assert options.input_path is None
    assert options.number_width == 3
    assert options.max_file_size == 1024 * 1024
    assert options.group_by is GroupingMode.DIRECTORY
    assert options.markers is MarkerMode.FENCED
    assert options.format is OutputFormat.MARKDOWN
    assert options.include_sources is True
    assert options.include_headers is False
    assert options.analysis_collapse == "none"
    assert options.config_path == Path(".repaddu.json")
    assert options.parallel_traversal is True


def test_cli_options_lists_are_independent():
    first = CliOptions()
    second = CliOptions()
    first.extensions.append(".cpp")
    first.analysis_views.append("symbols")
    assert second.extensions == []
    assert second.analysis_views == []


def test_file_entry_defaults():
    entry = FileEntry()
    assert entry.file_class is FileClass.OTHER
    assert entry.is_binary is False
    assert entry.size_bytes == 0


def test_group_and_chunk_hold_indices():
    group = Group(name="src", file_indices=[2, 5])
    chunk = OutputChunk(category="src", title="src", file_indices=list(group.file_indices))
    assert chunk.file_indices == [2, 5]
    assert Group().file_indices == []
    assert OutputContent().content == ""


def test_enum_lookup_by_value():
    assert OutputFormat("jsonl") is OutputFormat.JSONL
    assert GroupingMode("component") is GroupingMode.COMPONENT
    with pytest.raises(ValueError):
        OutputFormat("pdf")


def test_repaddu_error_carries_code_and_message():
    error = RepadduError("--input is required.", ExitCode.INVALID_USAGE)
    assert error.message == "--input is required."
    assert error.code is ExitCode.INVALID_USAGE
    assert str(error) == "--input is required."
    with pytest.raises(RepadduError) as info:
        raise error
    assert info.value.code is ExitCode.INVALID_USAGE


def test_repaddu_error_accepts_int_code():
    error = RepadduError("boom", 2)
    assert error.code is ExitCode.IO_FAILURE