"""Tests for board formatting and rendering."""

from __future__ import annotations

import re

import pytest

from presentation.web.board import (
    NO_VALUE,
    format_rank,
    format_record,
    format_win_rate,
    render_board,
    sort_records,
)


def rec(name: str, lp, **extra) -> dict:
    base = {
        "region": "na1", "game_name": name, "tag_line": "NA1", "riotId": f"{name}#NA1",
        "tier": None, "division": None, "lp": lp, "wins": None, "losses": None,
        "live": False, "updated_at": None, "last_attempt_at": None, "error": None,
    }
    base.update(extra)
    return base


class TestFormatting:
    @pytest.mark.parametrize("wins, losses, expected", [
        (70, 65, "52%"),
        (0, 0, NO_VALUE),
        (None, None, NO_VALUE),
        (1, 1, "50%"),
        (1, 7, "13%"),
        (10, 0, "100%"),
    ])
    def test_win_rate(self, wins, losses, expected) -> None:
        assert format_win_rate(wins, losses) == expected

    def test_rank(self) -> None:
        assert format_rank("GOLD", "IV") == "GOLD IV"
        assert format_rank("CHALLENGER", None) == "CHALLENGER"
        assert format_rank(None, None) == "Unranked"

    def test_record(self) -> None:
        assert format_record(70, 65) == "70W-65L"
        assert format_record(None, None) == NO_VALUE


class TestSorting:
    def test_lp_descending_missing_last(self) -> None:
        rows = sort_records([rec("A", 72), rec("B", None), rec("C", 34)])
        assert [r["game_name"] for r in rows] == ["A", "C", "B"]

    def test_zero_lp_ranks_above_missing(self) -> None:
        rows = sort_records([rec("B", None), rec("Z", 0)])
        assert [r["game_name"] for r in rows] == ["Z", "B"]

    def test_ties_keep_input_order(self) -> None:
        rows = sort_records([rec("X", 10), rec("Y", 10), rec("N1", None), rec("N2", None)])
        assert [r["game_name"] for r in rows] == ["X", "Y", "N1", "N2"]


class TestRender:
    def test_rows_rendered_in_sorted_order(self) -> None:
        html = render_board([rec("A", 72), rec("B", None), rec("C", 34)])
        positions = [html.index(f"{n}#NA1") for n in ("A", "C", "B")]
        assert positions == sorted(positions)

    def test_row_contents(self) -> None:
        html = render_board([rec("ElielaNoix", 72, tier="GOLD", division="IV", wins=70, losses=65, live=True)])
        assert "<td>GOLD IV</td>" in html
        assert "<td>70W-65L</td>" in html
        assert "<td>52%</td>" in html
        assert "🟢 Live" in html

    def test_error_shown_and_escaped(self) -> None:
        html = render_board([rec("<b>x</b>", 1, error="503 <Service>")])
        assert "<b>x</b>" not in html
        assert "&lt;b&gt;x&lt;/b&gt;#NA1" in html
        assert "503 &lt;Service&gt;" in html

    def test_embeds_refresh_script(self) -> None:
        html = render_board([], refresh_ms=15_000)
        assert 'fetch("/api/players"' in html
        assert re.search(r"setInterval\(refresh, 15000\)", html)

    def test_empty_board_is_valid_page(self) -> None:
        html = render_board([])
        assert html.startswith("<!doctype html>")
        assert '<tbody id="rows">' in html
