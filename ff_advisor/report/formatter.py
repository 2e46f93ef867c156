"""Render an AnalysisReport as an HTML email body or plain text."""

from html import escape
from typing import Any, List

from ..models.player import Position
from ..models.report import AnalysisReport
from ..utils.constants import PRIORITY_HIGH, PRIORITY_MEDIUM

_STYLE = """
    body { font-family: Arial, sans-serif; color: #333; }
    h1 { color: #00aa66; }
    h2 { color: #0066ff; border-bottom: 2px solid #0066ff; padding-bottom: 5px; }
    .priority-high { background-color: #ffeeee; padding: 10px; border-left: 4px solid #ff0000; }
    .priority-medium { background-color: #fff8e1; padding: 10px; border-left: 4px solid #ffa500; }
    .priority-low { background-color: #e8f5e9; padding: 10px; border-left: 4px solid #4caf50; }
    table { border-collapse: collapse; width: 100%; margin: 15px 0; }
    th, td { padding: 10px; text-align: left; border-bottom: 1px solid #ddd; }
    th { background-color: #f5f5f5; font-weight: bold; }
    .positive { color: #4caf50; font-weight: bold; }
    .negative { color: #ff0000; font-weight: bold; }
"""

# Positions listed in the summary; K and DEF depth rarely matters
SUMMARY_POSITIONS = [Position.QB, Position.RB, Position.WR, Position.TE]

WAIVER_ROWS = 5


def priority_label(score: float) -> str:
    if score > PRIORITY_HIGH:
        return "HIGH"
    if score > PRIORITY_MEDIUM:
        return "MEDIUM"
    return "LOW"


def _e(value: Any) -> str:
    return escape("" if value is None else str(value))


class ReportFormatter:
    """Turns the structured report into display formats."""

    def __init__(self, waiver_rows: int = WAIVER_ROWS):
        self.waiver_rows = waiver_rows

    def render_html(self, report: AnalysisReport) -> str:
        parts: List[str] = [
            "<html>",
            f"<head><style>{_STYLE}</style></head>",
            "<body>",
            "<h1>Fantasy Football Weekly Report</h1>",
            f"<p><strong>League:</strong> {_e(report.league_info.name)}</p>",
            f"<p><strong>Scoring:</strong> {_e(report.league_info.scoring)} PPR</p>",
            f"<p><strong>Generated:</strong> {_e(report.timestamp.strftime('%Y-%m-%d %H:%M'))}</p>",
        ]
        parts.extend(self._waiver_section(report))
        parts.extend(self._drop_section(report))
        parts.extend(self._sit_start_section(report))
        parts.extend(self._position_section(report))
        parts.extend(
            [
                "<hr>",
                '<p style="color: #888; font-size: 12px;">This report was generated automatically '
                "from Sleeper and r/fantasyfootball data.</p>",
                "</body>",
                "</html>",
            ]
        )
        return "\n".join(parts)

    def _waiver_section(self, report: AnalysisReport) -> List[str]:
        parts = ["<h2>Top Waiver Wire Pickups</h2>"]
        if not report.waiver_recommendations:
            parts.append("<p>No strong waiver recommendations at this time.</p>")
            return parts

        parts.append(
            "<table><tr><th>Player</th><th>Position</th><th>Team</th><th>Trending</th>"
            "<th>Reddit Sentiment</th><th>Priority</th></tr>"
        )
        for rec in report.waiver_recommendations[: self.waiver_rows]:
            priority = priority_label(rec.priority_score)
            sentiment_text = "N/A"
            if rec.sentiment is not None:
                label = rec.sentiment.sentiment_label.value
                css = label if label in ("positive", "negative") else ""
                sentiment_text = (
                    f'<span class="{css}">{_e(label.upper())}</span> '
                    f"({rec.discussion_count} posts)"
                )
            position = rec.position.value if rec.position else "N/A"
            parts.append(
                f'<tr class="priority-{priority.lower()}">'
                f"<td><strong>{_e(rec.name)}</strong></td>"
                f"<td>{_e(position)}</td>"
                f"<td>{_e(rec.team or 'FA')}</td>"
                f"<td>+{rec.trending_count} adds</td>"
                f"<td>{sentiment_text}</td>"
                f"<td>{priority}</td></tr>"
            )
        parts.append("</table>")
        return parts

    def _drop_section(self, report: AnalysisReport) -> List[str]:
        parts = ["<h2>Drop Candidates</h2>"]
        if not report.drop_candidates:
            parts.append("<p>No obvious drop candidates on your roster.</p>")
            return parts

        parts.append("<table><tr><th>Player</th><th>Position</th><th>Status</th><th>Reason</th></tr>")
        for candidate in report.drop_candidates:
            position = candidate.position.value if candidate.position else "N/A"
            parts.append(
                f"<tr><td><strong>{_e(candidate.name)}</strong></td>"
                f"<td>{_e(position)}</td>"
                f"<td>{_e(candidate.injury_status)}</td>"
                f"<td>{_e(candidate.reason)}</td></tr>"
            )
        parts.append("</table>")
        return parts

    def _sit_start_section(self, report: AnalysisReport) -> List[str]:
        parts = ["<h2>Sit/Start Recommendations</h2>"]
        if not report.sit_start_recommendations:
            parts.append("<p>Your current lineup looks good! No major concerns.</p>")
            return parts

        for alert in report.sit_start_recommendations:
            position = alert.position.value if alert.position else "N/A"
            parts.append('<div class="priority-high">')
            parts.append(
                f"<p><strong>{_e(alert.type.upper())}: {_e(alert.player_name)}</strong> ({_e(position)})</p>"
            )
            parts.append(f"<p>Reason: {_e(alert.reason)}</p>")
            parts.append("<p>Consider starting:</p><ul>")
            for alt in alert.alternatives:
                parts.append(f"<li>{_e(alt.name)} ({_e(alt.team or 'FA')}) - {_e(alt.status)}</li>")
            parts.append("</ul></div>")
        return parts

    def _position_section(self, report: AnalysisReport) -> List[str]:
        parts = ["<h2>Position Summary</h2>", "<ul>"]
        for position in SUMMARY_POSITIONS:
            entry = report.position_analysis.get(position)
            if entry is None:
                continue
            flag = "Need depth" if entry.need else "OK"
            parts.append(f"<li>{position.value}: {entry.count} {flag}</li>")
        parts.append("</ul>")
        return parts

    def render_text(self, report: AnalysisReport) -> str:
        """Plain-text summary for terminals and logs."""
        lines = [
            f"League: {report.league_info.name} ({report.league_info.scoring} PPR)",
            f"Generated: {report.timestamp.isoformat(timespec='seconds')}",
            "",
            "Waiver pickups:",
        ]
        if report.waiver_recommendations:
            for rec in report.waiver_recommendations:
                position = rec.position.value if rec.position else "N/A"
                lines.append(
                    f"  {rec.priority_score:5.1f} [{priority_label(rec.priority_score)}] "
                    f"{rec.name} ({position} - {rec.team or 'FA'}) +{rec.trending_count} adds"
                )
        else:
            lines.append("  none")

        lines.append("Drop candidates:")
        if report.drop_candidates:
            for candidate in report.drop_candidates:
                lines.append(f"  {candidate.name}: {candidate.reason}")
        else:
            lines.append("  none")

        lines.append("Sit/start alerts:")
        if report.sit_start_recommendations:
            for alert in report.sit_start_recommendations:
                alternatives = ", ".join(a.name for a in alert.alternatives)
                lines.append(f"  SIT {alert.player_name} ({alert.reason}); start {alternatives}")
        else:
            lines.append("  none")
        return "\n".join(lines)
