"""
AIOps Review Dashboard - command line

Headless access to the dashboard's operations: KPI report over the
filtered reviews, CSV export, and the backend's ask endpoint.
"""

import argparse
import logging
import sys
from datetime import datetime

from aiops_dashboard.client.api_client import ReviewApiClient
from aiops_dashboard.dashboard import DashboardController
from aiops_dashboard.models.filters import FilterCriteria, SentimentFilter
from aiops_dashboard.models.review import AspectKey
from aiops_dashboard.models.summary import FilterResult
from aiops_dashboard.state import view_state
from aiops_dashboard.state.view_state import AskStatus, LoadStatus
from aiops_dashboard.utils.export import aspect_table, export_filtered_reviews
from aiops_dashboard.utils.logging_setup import setup_logging
import config.settings as settings

logger = logging.getLogger(__name__)


def _parse_date(value: str):
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="AIOps Review Dashboard - sentiment KPIs and AI answers from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # KPI report over all reviews
  python main.py report

  # Negative reviews mentioning "driver" in June, focused on driver behavior
  python main.py report --sentiment Negative --search driver \\
                        --date-from 2024-06-01 --date-to 2024-06-30 \\
                        --aspect driver_behavior

  # Export the filtered reviews to CSV
  python main.py report --sentiment Negative --export output/

  # Ask the backend a question
  python main.py ask "Which aspects have the most negative sentiment?"

Note: Set AIOPS_API_BASE_URL (or pass --base-url) to reach the backend.
The interactive dashboard is started with: streamlit run app.py
        """
    )

    parser.add_argument(
        "--base-url",
        default=settings.API_BASE_URL,
        help=f"Backend base URL (default: {settings.API_BASE_URL})"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.REQUEST_TIMEOUT_SECONDS,
        help="Request timeout in seconds (default: none)"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Print KPIs for the filtered reviews")
    report.add_argument(
        "--sentiment",
        default=SentimentFilter.ALL.value,
        choices=[s.value for s in SentimentFilter],
        help="Overall sentiment filter (default: All)"
    )
    report.add_argument("--search", default="", help="Case-insensitive text search")
    report.add_argument("--date-from", type=_parse_date, help="First day to include (YYYY-MM-DD)")
    report.add_argument("--date-to", type=_parse_date, help="Last day to include (YYYY-MM-DD)")
    report.add_argument(
        "--aspect",
        choices=[k.value for k in AspectKey],
        help="Aspect whose breakdown is charted instead of the overall one"
    )
    report.add_argument(
        "--export",
        metavar="DIR",
        nargs="?",
        const=str(settings.OUTPUT_ROOT),
        help=f"Write the filtered reviews to CSV in DIR (default DIR: {settings.OUTPUT_ROOT})"
    )

    ask = subparsers.add_parser("ask", help="Ask the backend a question about the reviews")
    ask.add_argument("question", help="Question text")

    return parser


def criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        sentiment=SentimentFilter(args.sentiment),
        search=args.search,
        date_from=args.date_from,
        date_to=args.date_to,
        focused_aspect=AspectKey(args.aspect) if args.aspect else None,
    )


def print_report(result: FilterResult) -> None:
    """Print KPI tiles, chart counts and the aspect breakdown."""
    print("=" * 60)
    print(settings.DASHBOARD_TITLE)
    print("=" * 60)

    for kpi in result.kpis:
        print(f"{kpi.label:<16} {kpi.value:>8}   {kpi.helper}")

    print()
    print(result.chart_title)
    for name, value in result.chart_counts.as_pairs():
        print(f"  {name:<10} {value}")

    print()
    print(aspect_table(result).to_string(index=False))
    print("=" * 60)


def run_report(controller: DashboardController, args: argparse.Namespace) -> int:
    state = controller.load_reviews()
    if state.load_status is LoadStatus.ERRORED:
        print(f"❌ {state.load_error}")
        return 1

    controller.apply(view_state.set_criteria, criteria_from_args(args))
    result = controller.view()
    print_report(result)

    if args.export:
        output_path = export_filtered_reviews(result, args.export)
        print(f"Exported {len(result.reviews)} reviews: {output_path}")

    return 0


def run_ask(controller: DashboardController, args: argparse.Namespace) -> int:
    if not args.question.strip():
        print("Nothing to ask: question is empty")
        return 1

    state = controller.ask(args.question)
    if state.ask_status is AskStatus.ERRORED:
        print(f"❌ {state.ask_error}")
        return 1

    print(state.answer)
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    client = ReviewApiClient(base_url=args.base_url, timeout=args.timeout)
    controller = DashboardController(client=client)

    commands = {
        "report": run_report,
        "ask": run_ask,
    }

    try:
        return commands[args.command](controller, args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n⚠️  Interrupted")
        return 1


if __name__ == "__main__":
    sys.exit(main())
