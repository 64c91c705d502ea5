"""Command-line reports over a farm data export.

Reads a JSON export (entities, weather, financial entries, goals, budgets)
and prints sustainability and financial summaries.
"""

import argparse
import json
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path

from farmmetrics.core import format_money, format_volume, settings
from farmmetrics.data import FarmData, FarmDataError, load_farm_data
from farmmetrics.finance import (
    budget_statuses,
    summarize_financials,
    total_budget,
    total_spent,
    update_goal_progress,
)
from farmmetrics.scoring import (
    aggregate_sustainability,
    build_sustainability_report,
    display_score,
    filter_by_crop,
    rate_score,
    score_entity,
)

METRIC_LABELS = {
    "water_efficiency": "Water Efficiency",
    "organic_score": "Organic Practices",
    "harvest_efficiency": "Harvest Efficiency",
    "soil_quality": "Soil Quality",
    "rotation": "Crop Rotation",
}


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _format_metric(value: float | None) -> str:
    return "n/a" if value is None else f"{display_score(value)}%"


def _format_roi(roi: float | None) -> str:
    return "N/A" if roi is None else f"{roi:.1f}%"


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------


def cmd_sustainability(args: argparse.Namespace, data: FarmData) -> int:
    """Overall and per-metric sustainability scores."""
    score = aggregate_sustainability(data.entities, data.weather, crop=args.crop, as_of=args.as_of)

    if args.json:
        _print_json(None if score is None else {**asdict(score), "display": score.display})
        return 0

    print("=" * 60)
    print("Sustainability Score")
    print("=" * 60)

    if score is None:
        print("\nUnavailable: no matching entities or no weather data")
        return 0

    rating = rate_score(score.overall)
    print(f"\nOverall: {score.display}/100 ({rating.value}) across {score.entity_count} entities")
    print(rating.description)

    print(f"\n{'Metric':<22} {'Score':>6}")
    print("-" * 30)
    for metric, value in score.metrics.items():
        print(f"{METRIC_LABELS[metric]:<22} {_format_metric(value):>6}")

    print(f"\n{'Entity':<20} {'Water':>6} {'Organic':>8} {'Harvest':>8} {'Soil':>6} {'Rotation':>9}")
    print("-" * 62)
    for entity in filter_by_crop(data.entities, args.crop):
        s = score_entity(entity, data.weather)
        print(
            f"{(entity.name or str(entity.id)):<20} "
            f"{_format_metric(s.water_efficiency):>6} "
            f"{_format_metric(s.organic_score):>8} "
            f"{_format_metric(s.harvest_efficiency):>8} "
            f"{_format_metric(s.soil_quality):>6} "
            f"{_format_metric(s.rotation):>9}"
        )
    return 0


def cmd_report(args: argparse.Namespace, data: FarmData) -> int:
    """Sustainability report figures and recommendations."""
    report = build_sustainability_report(data.entities, data.weather, crop=args.crop, as_of=args.as_of)

    if args.json:
        _print_json(None if report is None else {**asdict(report), "rating": report.rating.value})
        return 0

    print("=" * 60)
    print("Sustainability Report")
    print("=" * 60)

    if report is None:
        print("\nUnavailable: no matching entities or no weather data")
        return 0

    print(f"\nOverall score:        {report.score.display}/100 - {report.rating.description}")
    print(f"Water savings:        {format_volume(report.water_savings)}")
    print(f"Chemical reduction:   {report.chemical_reduction}%")
    print(f"Organic adoption:     {report.organic_practices_adoption}%")

    if report.recommendations:
        print("\nRecommendations:")
        for i, recommendation in enumerate(report.recommendations, 1):
            print(f"  {i}. {recommendation}")
    return 0


def cmd_finance(args: argparse.Namespace, data: FarmData) -> int:
    """Income, expenses and profit for a year."""
    summary = summarize_financials(data.financial_entries, year=args.year, entities=data.entities or None)

    if args.json:
        _print_json({**asdict(summary), "net_profit": summary.net_profit})
        return 0

    print("=" * 60)
    print(f"Financial Summary {args.year}")
    print("=" * 60)
    print(f"\nIncome:      {format_money(summary.total_income):>14}")
    print(f"Expenses:    {format_money(summary.total_expenses):>14}")
    print(f"Net profit:  {format_money(summary.net_profit):>14}")
    print(f"ROI:         {_format_roi(summary.roi):>14}")

    print(f"\n{'Month':<6} {'Income':>14} {'Expenses':>14} {'Profit':>14}")
    print("-" * 51)
    for m in summary.by_month:
        print(
            f"{m.month_name:<6} {format_money(m.income):>14} "
            f"{format_money(m.expenses):>14} {format_money(m.profit):>14}"
        )

    print(f"\n{'Entity':<20} {'Income':>14} {'Expenses':>14} {'Profit':>14}")
    print("-" * 65)
    for e in summary.by_entity:
        print(
            f"{(e.entity_name or str(e.entity_id)):<20} {format_money(e.income):>14} "
            f"{format_money(e.expenses):>14} {format_money(e.profit):>14}"
        )

    for title, totals in (("Income by type", summary.income_by_type), ("Expenses by type", summary.expense_by_type)):
        if totals:
            print(f"\n{title}:")
            for t in totals:
                print(f"  {t.name:<24} {format_money(t.value):>14}")
    return 0


def cmd_goals(args: argparse.Namespace, data: FarmData) -> int:
    """Goal progress for a year."""
    summary = summarize_financials(data.financial_entries, year=args.year)
    goals = update_goal_progress(data.goals, summary, args.year)

    print("=" * 60)
    print(f"Financial Goals {args.year}")
    print("=" * 60)

    if not goals:
        print("\nNo goals recorded")
        return 0

    print(f"\n{'Goal':<30} {'Target':>14} {'Deadline':>12} {'Progress':>9}")
    print("-" * 68)
    for goal in goals:
        deadline = goal.deadline.isoformat() if goal.deadline else "-"
        print(f"{goal.title[:30]:<30} {format_money(goal.target_amount):>14} {deadline:>12} {goal.progress:>8.0f}%")
    return 0


def cmd_budget(args: argparse.Namespace, data: FarmData) -> int:
    """Budget vs actual for a year."""
    statuses = budget_statuses(data.financial_entries, data.budgets, args.year)
    budgeted = total_budget(data.budgets)
    spent = total_spent(data.financial_entries, args.year)

    print("=" * 60)
    print(f"Budget {args.year}")
    print("=" * 60)
    print(
        f"\nTotal budget: {format_money(budgeted)} | Spent: {format_money(spent)} | "
        f"Remaining: {format_money(budgeted - spent)}"
    )

    if not statuses:
        print("\nNo budget categories")
        return 0

    print(f"\n{'Category':<20} {'Allocated':>14} {'Spent':>14} {'Remaining':>14} {'Used':>6}")
    print("-" * 72)
    for s in statuses:
        flag = "  OVER" if s.over_budget else ""
        print(
            f"{s.category:<20} {format_money(s.allocated):>14} {format_money(s.spent):>14} "
            f"{format_money(s.remaining):>14} {s.progress:>5.0f}%{flag}"
        )
    return 0


# -----------------------------------------------------------------------------
# CLI Entry Point
# -----------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="farmmetrics",
        description="Sustainability and financial metrics for farm data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  farmmetrics sustainability                  Overall and per-metric scores
  farmmetrics sustainability --crop corn      Only fields growing corn
  farmmetrics report --json                   Report figures as JSON
  farmmetrics finance --year 2024             Income/expense rollup
  farmmetrics goals --year 2024               Goal progress
  farmmetrics budget --year 2024              Budget vs actual
""",
    )
    parser.add_argument("--data", type=Path, default=None, help="Farm data JSON file (default: settings/cache)")
    parser.add_argument("--units", choices=["imperial", "metric"], default=None, help="Display units override")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    this_year = date.today().year

    for name, help_text in (
        ("sustainability", "Sustainability scores"),
        ("report", "Sustainability report figures"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("--crop", default=None, help="Only include entities growing this crop")
        p.add_argument(
            "--as-of",
            type=date.fromisoformat,
            default=None,
            help="Day whose weather adjusts the score (default: first day of the feed)",
        )
        p.add_argument("--json", action="store_true", help="Output as JSON")

    finance_parser = subparsers.add_parser("finance", help="Financial summary")
    finance_parser.add_argument("--year", type=int, default=this_year, help=f"Year (default: {this_year})")
    finance_parser.add_argument("--json", action="store_true", help="Output as JSON")

    goals_parser = subparsers.add_parser("goals", help="Financial goal progress")
    goals_parser.add_argument("--year", type=int, default=this_year, help=f"Year (default: {this_year})")

    budget_parser = subparsers.add_parser("budget", help="Budget vs actual")
    budget_parser.add_argument("--year", type=int, default=this_year, help=f"Year (default: {this_year})")

    return parser


COMMANDS = {
    "sustainability": cmd_sustainability,
    "report": cmd_report,
    "finance": cmd_finance,
    "goals": cmd_goals,
    "budget": cmd_budget,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 0

    try:
        data = load_farm_data(args.data)
    except FileNotFoundError as e:
        print(f"Error: farm data file not found: {e.filename}", file=sys.stderr)
        return 1
    except FarmDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # --units applies to this invocation only
    saved_units = settings.display_units
    if args.units:
        settings.display_units = args.units
    try:
        return COMMANDS[args.command](args, data)
    finally:
        settings.display_units = saved_units


def cli() -> None:
    """CLI entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
