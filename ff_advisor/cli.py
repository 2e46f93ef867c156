#!/usr/bin/env python3
"""
Command line entry point: run one analysis and write the report.

    ff-advisor --owner myname --league 123456789 --html report.html
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.table import Table

from config.settings import Settings
from .agents.analysis_engine import AnalysisEngine
from .api.errors import FantasyAdvisorError
from .models.report import AnalysisReport
from .report.formatter import ReportFormatter, priority_label
from .utils.logging import setup_logging

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ff-advisor",
        description="Waiver, drop and sit/start recommendations for a Sleeper roster",
    )
    parser.add_argument("--owner", help="Sleeper username or user_id (default: from settings)")
    parser.add_argument("--league", help="Sleeper league ID (default: from settings)")
    parser.add_argument("--html", type=Path, help="Write the HTML report to this file")
    parser.add_argument("--json", type=Path, help="Write the report as JSON to this file")
    parser.add_argument(
        "--no-reddit", action="store_true", help="Skip forum sentiment (much faster)"
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def print_summary(report: AnalysisReport) -> None:
    console.print(
        f"[bold]{report.league_info.name}[/bold] "
        f"({report.league_info.scoring} PPR) - {report.timestamp:%Y-%m-%d %H:%M}"
    )

    table = Table(title="Waiver Pickups")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Team")
    table.add_column("Adds", justify="right")
    table.add_column("Need")
    table.add_column("Sentiment")
    table.add_column("Score", justify="right")
    for rec in report.waiver_recommendations:
        table.add_row(
            rec.name,
            rec.position.value if rec.position else "N/A",
            rec.team or "FA",
            str(rec.trending_count),
            "yes" if rec.position_need else "",
            rec.sentiment.sentiment_label.value if rec.sentiment else "N/A",
            f"{rec.priority_score:.1f} {priority_label(rec.priority_score)}",
        )
    console.print(table)

    if report.drop_candidates:
        drops = Table(title="Drop Candidates")
        drops.add_column("Player")
        drops.add_column("Status")
        drops.add_column("Reason")
        for candidate in report.drop_candidates:
            drops.add_row(candidate.name, candidate.injury_status, candidate.reason)
        console.print(drops)

    for alert in report.sit_start_recommendations:
        alternatives = ", ".join(a.name for a in alert.alternatives)
        console.print(
            f"[red]SIT[/red] {alert.player_name} ({alert.reason}) - consider {alternatives}"
        )


async def run(settings: Settings, owner: str, league_id: str) -> AnalysisReport:
    async with AnalysisEngine(settings) as engine:
        return await engine.analyze_team(owner, league_id)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.no_reddit:
        overrides["include_reddit_analysis"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = Settings(**overrides)
    setup_logging(settings)

    owner = args.owner or settings.owner
    league_id = args.league or settings.sleeper_league_id
    if not owner or not league_id:
        console.print("[red]An owner and a league are required (flags or SLEEPER_* settings)[/red]")
        return 2

    try:
        report = asyncio.run(run(settings, owner, league_id))
    except FantasyAdvisorError as e:
        logger.error(f"Analysis failed: {e}")
        console.print(f"[red]Analysis failed:[/red] {e}")
        return 1

    print_summary(report)

    formatter = ReportFormatter()
    if args.html:
        args.html.write_text(formatter.render_html(report), encoding="utf-8")
        console.print(f"HTML report written to {args.html}")
    if args.json:
        args.json.write_text(json.dumps(report.model_dump(mode="json"), indent=2), encoding="utf-8")
        console.print(f"JSON report written to {args.json}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
