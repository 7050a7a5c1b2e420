"""Tests for CLI output formatters."""

from __future__ import annotations

import io
import json

import pytest

from stockwatch.cli.formatters import JSONLFormatter, TableFormatter, create_formatter


class TestFormatters:
    def test_jsonl_keeps_only_requested_columns(self):
        stream = io.StringIO()

        JSONLFormatter().render([{"code": "NVDA", "price": 120.5, "extra": 1}], stream=stream, columns=["code", "price"])

        assert json.loads(stream.getvalue()) == {"code": "NVDA", "price": 120.5}

    def test_empty_table_prints_header_and_notice(self):
        stream = io.StringIO()

        TableFormatter(no_color=True).render([], stream=stream, columns=["index", "code"])

        output = stream.getvalue()
        assert "code" in output
        assert "Watchlist is empty." in output

    def test_percent_change_is_signed(self):
        stream = io.StringIO()

        TableFormatter(no_color=True).render([{"percent_change": 1.5}], stream=stream, columns=["percent_change"])

        assert "+1.50%" in stream.getvalue()

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError):
            create_formatter("csv")
