from __future__ import annotations

import pytest

from shortcuts_mcp.utils.validation import (
    ExistsArguments,
    RunArguments,
    SearchArguments,
    ToolArgumentError,
    parse_arguments,
)


def test_parse_run_arguments() -> None:
    args = parse_arguments(RunArguments, {"name": "Resize", "input": "hi", "extra": 1})

    assert args.name == "Resize"
    options = args.to_options()
    assert options.input == "hi"
    assert options.input_file is None
    assert options.output_type is None


@pytest.mark.parametrize("arguments", [None, {}, {"name": None}, {"name": ""}])
def test_missing_name_is_required(arguments) -> None:
    with pytest.raises(ToolArgumentError, match="^name is required$"):
        parse_arguments(ExistsArguments, arguments)


def test_missing_query_is_required() -> None:
    with pytest.raises(ToolArgumentError, match="^query is required$"):
        parse_arguments(SearchArguments, {})


def test_non_string_argument() -> None:
    with pytest.raises(ToolArgumentError, match="^name must be a string$"):
        parse_arguments(RunArguments, {"name": 42})
