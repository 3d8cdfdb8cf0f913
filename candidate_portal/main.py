"""CLI entry point for browsing, exporting and serving the candidate dataset."""

import argparse
import logging
import sys
from pathlib import Path

from candidate_portal.config import AppConfig, load_config, validate_config
from candidate_portal.export.csv_export import write_csv
from candidate_portal.rendering.console import ConsoleRenderer, render_detail
from candidate_portal.storage.dataset import DatasetStore
from candidate_portal.utils.logging_config import setup_logging
from candidate_portal.view import ViewSynchronizer

logger = logging.getLogger("candidate_portal")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Candidate Portal - filter, inspect and export candidate profiles",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )

    filters = parser.add_argument_group("filters")
    filters.add_argument(
        "--skill", action="append", default=[], metavar="SKILL",
        help="Require a skill (repeatable; all must match)",
    )
    filters.add_argument("--ug-degree", help="Undergraduate degree substring, or 'all'")
    filters.add_argument("--min-ug-cgpa", help="Minimum undergraduate CGPA")
    filters.add_argument("--min-pg-cgpa", help="Minimum postgraduate CGPA")
    filters.add_argument(
        "--require-pg", action="store_true",
        help="Only candidates with a postgraduate degree",
    )
    filters.add_argument("--min-exp", help="Minimum number of experience entries")

    parser.add_argument("--suggest", metavar="QUERY", help="List skills matching QUERY and exit")
    parser.add_argument("--show", type=int, metavar="ID", help="Print one candidate's profile and exit")
    parser.add_argument(
        "--export", nargs="?", const="", metavar="PATH",
        help="Export the full dataset as CSV (default file name from config)",
    )
    parser.add_argument("--stats", action="store_true", help="Print dataset statistics and exit")
    parser.add_argument("--serve", action="store_true", help="Run the web UI")
    return parser.parse_args(argv)


def filter_inputs(args: argparse.Namespace) -> dict:
    """Collect only the filter flags the user actually passed."""
    raw = {}
    if args.ug_degree is not None:
        raw["ug_degree"] = args.ug_degree
    if args.min_ug_cgpa is not None:
        raw["min_ug_cgpa"] = args.min_ug_cgpa
    if args.min_pg_cgpa is not None:
        raw["min_pg_cgpa"] = args.min_pg_cgpa
    if args.require_pg:
        raw["require_pg"] = True
    if args.min_exp is not None:
        raw["min_exp"] = args.min_exp
    return raw


def print_stats(store: DatasetStore):
    """Print dataset statistics."""
    stats = store.get_stats()
    print("\n=== Candidate Portal Statistics ===")
    print(f"Total candidates: {stats['total_records']}")
    print(f"Distinct skills: {stats['distinct_skills']}")
    print(f"With postgraduate degree: {stats['with_postgraduate']}")
    print(f"With doctorate: {stats['with_doctorate']}")

    if stats["by_ug_degree"]:
        print("\nCandidates by undergraduate degree:")
        for degree, count in stats["by_ug_degree"].items():
            print(f"  {degree}: {count}")
    print()


def serve(config: AppConfig):
    import uvicorn

    from candidate_portal.web.app import create_app

    uvicorn.run(create_app(config), host=config.web.host, port=config.web.port)


def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute one CLI command. Returns the process exit code."""
    if args.serve:
        serve(config)
        return 0

    view = ViewSynchronizer(defaults=config.filters.to_params())
    if not view.load(config.dataset.source, timeout=config.dataset.timeout):
        # Load errors are already logged; carry on with the empty dataset.
        logger.warning("Continuing with an empty dataset")

    if args.stats:
        print_stats(view.store)
        return 0

    if args.export is not None:
        path = args.export or str(Path(config.export.filename))
        written = write_csv(view.store.records, path)
        if written:
            print(f"Exported {written} candidates to {path}")
        else:
            print("Nothing to export: dataset is empty", file=sys.stderr)
        return 0

    if args.show is not None:
        record = view.detail(args.show)
        if record is None:
            print(f"Candidate {args.show} not found", file=sys.stderr)
            return 1
        print(render_detail(record))
        return 0

    for skill in args.skill:
        view.add_skill(skill)

    if args.suggest is not None:
        for skill in view.suggest(args.suggest):
            print(skill)
        return 0

    view.renderer = ConsoleRenderer()
    view.update_params(**filter_inputs(args))
    return 0


def main(argv=None):
    args = parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Setup logging
    setup_logging(config.log_dir, config.log_level)

    # Validate config and print warnings
    for w in validate_config(config):
        logger.warning("Config: %s", w)

    sys.exit(run(args, config))


if __name__ == "__main__":
    main()
