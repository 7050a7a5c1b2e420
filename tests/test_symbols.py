from __future__ import annotations

import pytest

from stockwatch.core.services.symbols import is_manual, match_key, resolve, resolve_many


class TestResolve:
    """Symbol to secid resolution."""

    def test_manual_prefix_passes_rest_through(self):
        assert resolve("x105.NVDA") == "105.NVDA"

    def test_manual_prefix_is_case_insensitive(self):
        assert resolve("X1.600519") == "1.600519"

    def test_manual_marker_consumes_one_character(self):
        assert resolve("xx105.NVDA") == "x105.NVDA"

    @pytest.mark.parametrize("code", ["600519", "00700", "1"])
    def test_numeric_codes_probe_cn_and_hk(self, code):
        assert resolve(code) == f"1.{code},0.{code},116.{code}"

    @pytest.mark.parametrize("code", ["NVDA", "aapl", "BRK.B"])
    def test_alpha_codes_probe_us_and_uk(self, code):
        assert resolve(code) == f"105.{code},106.{code},107.{code},155.{code}"

    def test_uk_trailing_dot_is_not_numeric(self):
        assert resolve("RR.") == "105.RR.,106.RR.,107.RR.,155.RR."

    def test_non_ascii_digits_are_not_numeric(self):
        assert resolve("６００５１９").startswith("105.")

    def test_resolve_many_joins_batches(self):
        assert resolve_many(["600519", "x105.NVDA"]) == "1.600519,0.600519,116.600519,105.NVDA"


class TestMatchKey:
    """Normalization used to correlate entries with fetched quotes."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("600519", "600519"),
            ("x1.600519", "600519"),
            ("X105.nvda", "NVDA"),
            ("nvda", "NVDA"),
            ("RR.", "RR."),
            ("x155.RR.", "RR."),
            ("BRK.B", "BRK.B"),
        ],
    )
    def test_user_codes(self, code, expected):
        assert match_key(code) == expected

    def test_provider_codes_keep_leading_x(self):
        assert match_key("XOM", manual_marker=False) == "XOM"

    def test_is_manual(self):
        assert is_manual("x105.NVDA")
        assert is_manual("X105.NVDA")
        assert not is_manual("NVDA")
        assert not is_manual("")
