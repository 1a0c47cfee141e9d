"""HTML leaderboard rendering."""
from __future__ import annotations

from html import escape
from typing import Iterable, List, Optional

NO_VALUE = "—"
LIVE_LABEL = "🟢 Live"
OFFLINE_LABEL = "⚫︎ Offline"

_COLUMNS = ("Riot ID", "Platform", "Rank", "LP", "W-L", "Win %", "Status", "Updated")


def format_win_rate(wins: Optional[int], losses: Optional[int]) -> str:
    """``70, 65`` -> ``"52%"``; no games -> ``"—"``."""
    games = (wins or 0) + (losses or 0)
    if games == 0:
        return NO_VALUE
    # round() is banker's rounding; the board script uses Math.round
    return f"{int((wins or 0) / games * 100 + 0.5)}%"


def format_rank(tier: Optional[str], division: Optional[str]) -> str:
    if not tier:
        return "Unranked"
    return f"{tier} {division}" if division else tier


def format_record(wins: Optional[int], losses: Optional[int]) -> str:
    if wins is None and losses is None:
        return NO_VALUE
    return f"{wins or 0}W-{losses or 0}L"


def format_status(record: dict) -> str:
    if record.get("error"):
        return f"⚠ {record['error']}"
    return LIVE_LABEL if record.get("live") else OFFLINE_LABEL


def sort_records(records: Iterable[dict]) -> List[dict]:
    """League points descending; records without LP go last, ties keep input order."""
    return sorted(
        records,
        key=lambda r: (r.get("lp") is None, -(r.get("lp") or 0)),
    )


def _row(record: dict) -> str:
    lp = record.get("lp")
    cells = (
        record.get("riotId") or "",
        record.get("region") or "",
        format_rank(record.get("tier"), record.get("division")),
        NO_VALUE if lp is None else str(lp),
        format_record(record.get("wins"), record.get("losses")),
        format_win_rate(record.get("wins"), record.get("losses")),
        format_status(record),
        record.get("updated_at") or NO_VALUE,
    )
    return "<tr>" + "".join(f"<td>{escape(str(c))}</td>" for c in cells) + "</tr>"


_SCRIPT = """
const NO_VALUE = "\\u2014";
function esc(s) {
  return String(s).replace(/[&<>"']/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;","'":"&#x27;"}[c]));
}
function winRate(w, l) {
  const games = (w || 0) + (l || 0);
  return games === 0 ? NO_VALUE : Math.round((w || 0) / games * 100) + "%";
}
function rank(p) {
  if (!p.tier) return "Unranked";
  return p.division ? p.tier + " " + p.division : p.tier;
}
function record(p) {
  if (p.wins == null && p.losses == null) return NO_VALUE;
  return (p.wins || 0) + "W-" + (p.losses || 0) + "L";
}
function status(p) {
  if (p.error) return "\\u26a0 " + p.error;
  return p.live ? "LIVE_LABEL" : "OFFLINE_LABEL";
}
function lpKey(p) {
  return p.lp == null ? -Infinity : p.lp;
}
async function refresh() {
  try {
    const res = await fetch("/api/players", {cache: "no-store"});
    if (!res.ok) return;
    const players = await res.json();
    players.sort((a, b) => lpKey(b) - lpKey(a));
    document.getElementById("rows").innerHTML = players.map(p => "<tr>" + [
      p.riotId, p.region, rank(p), p.lp == null ? NO_VALUE : p.lp,
      record(p), winRate(p.wins, p.losses), status(p),
      p.updated_at ? new Date(p.updated_at).toLocaleTimeString() : NO_VALUE
    ].map(c => "<td>" + esc(c) + "</td>").join("") + "</tr>").join("");
    document.getElementById("stamp").textContent = new Date().toLocaleTimeString();
  } catch (e) {
    console.warn("board refresh failed", e);
  }
}
setInterval(refresh, REFRESH_MS);
"""


def render_board(records: Iterable[dict], refresh_ms: int = 15_000, title: str = "leagueTracker001 — Board") -> str:
    """Self-contained page: server-rendered rows plus a script that re-polls ``/api/players``."""
    rows = "\n".join(_row(r) for r in sort_records(records))
    head = "".join(f"<th>{escape(c)}</th>" for c in _COLUMNS)
    script = (
        _SCRIPT.replace("REFRESH_MS", str(int(refresh_ms)))
        .replace("LIVE_LABEL", LIVE_LABEL)
        .replace("OFFLINE_LABEL", OFFLINE_LABEL)
    )
    return f"""<!doctype html>
<html lang="en">
<meta charset="utf-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>{escape(title)}</title>
<style>
  body{{font-family:system-ui;margin:0;padding:24px}}
  table{{width:100%;border-collapse:collapse}}
  th,td{{padding:8px;border-bottom:1px solid #eee;text-align:left}}
  .muted{{color:#888;font-size:0.85em}}
</style>
<h1>League of Legends Live Tracker — Leaderboard</h1>
<p class="muted">Refreshes every {int(refresh_ms) // 1000}s. Last refresh: <span id="stamp">page load</span></p>
<table><thead><tr>{head}</tr></thead>
<tbody id="rows">
{rows}
</tbody></table>
<script>{script}</script>
</html>
"""
