"""
CSAT Pulse - Restaurant Review Quality Dashboard

CLI entry point for loading review data and printing the report.
"""

import argparse
import logging
import sys

from src.orchestrator import DashboardPipeline
from src.agents.ingestion import IngestionAgent, IngestionError
from src.models.restaurant import DatasetError, ViewState, RISK_LEVELS, ALL_RISK_LEVELS
from src.utils.report import format_report, export_report
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("csat_pulse.log")
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CSAT Pulse - Restaurant Review Quality Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a Google Sheet (first sheet, read as CSV)
  python main.py --sheet-id 1AbCdEfGhIjK

  # Analyze a local export, only critical restaurants
  python main.py --csv reviews.csv --risk Critical

  # Demo with mock data, search and export
  python main.py --mock --search grill --output-dir output

Note: The sheet must have columns like "restaurant" (name) and "rating" (1-5).
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--sheet-id",
        default=settings.GOOGLE_SHEET_ID,
        help="Google Sheet ID, not the full URL (default: $GOOGLE_SHEET_ID)"
    )
    source.add_argument(
        "--csv",
        help="Path to a local CSV file"
    )
    source.add_argument(
        "--mock",
        action="store_true",
        default=settings.USE_MOCK_DATA,
        help="Use generated mock reviews"
    )

    # View filters
    parser.add_argument(
        "--search",
        default="",
        help="Only show restaurants whose name contains this text"
    )

    parser.add_argument(
        "--risk",
        default=ALL_RISK_LEVELS,
        choices=[ALL_RISK_LEVELS] + list(RISK_LEVELS),
        help="Only show restaurants at this risk level (default: All)"
    )

    parser.add_argument(
        "--low-volume-only",
        action="store_true",
        help=f"Only show restaurants with fewer than {settings.LOW_VOLUME_THRESHOLD} reviews"
    )

    parser.add_argument(
        "--output-dir",
        help="Also export the report as CSV + metadata JSON to this directory"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        ingestion = IngestionAgent(use_mock_data=args.mock)
        if args.csv:
            rows = ingestion.load_csv(args.csv)
        else:
            rows = ingestion.fetch_sheet(args.sheet_id)

        pipeline = DashboardPipeline()
        result = pipeline.analyze(rows)

        if isinstance(result, DatasetError):
            print(f"\n❌ {result.error}")
            return 1

        view = ViewState(
            search=args.search,
            risk_filter=args.risk,
            show_low_volume=args.low_volume_only
        )

        print("=" * 60)
        print("CSAT Intelligence Dashboard")
        print("=" * 60)
        print(format_report(result, pipeline.visible(view)))
        print("=" * 60)

        if args.output_dir:
            output_path = export_report(result, args.output_dir)
            print(f"Report: {output_path}")

        logger.info("CSAT Pulse completed successfully")
        return 0

    except IngestionError as e:
        logger.error(f"Ingestion failed: {e}")
        print(f"\n❌ {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n⚠️  Interrupted")
        return 1

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        print(f"\n❌ Pipeline failed: {e}")
        print("Check csat_pulse.log for details")
        return 1


if __name__ == "__main__":
    sys.exit(main())
