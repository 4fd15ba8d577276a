"""
FARS Command Line Interface (CLI)
=================================

Run it like:

    python -m fars.cli --data-dir data summarize 2013 2014 2015
    python -m fars.cli --data-dir data map 1 2013 --out alabama_2013.png
    python -m fars.cli --data-dir data report 2013 2014 --out fars.docx

The CLI never modifies the CSV files. It only writes the outputs you ask for.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_DATA_DIR, FarsConfig
from .engine import fars_summarize_years
from .logging_config import setup_logging
from .mapping import MatplotlibStateRenderer, fars_map_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="fars", description="FARS accident summaries and state maps")
    ap.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="Directory holding accident_<year>.csv files")
    ap.add_argument("--workers", type=int, default=None, help="Load years with this many threads")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    sub = ap.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("summarize", help="Accidents per month for the given years")
    s.add_argument("years", nargs="+")
    s.add_argument("--csv", default=None, help="Also write the table to this CSV file")

    m = sub.add_parser("map", help="Plot one state's accidents for one year")
    m.add_argument("state")
    m.add_argument("year")
    m.add_argument("--out", default=None, help="Save the map here instead of showing it")
    m.add_argument("--boundaries", default=None, help="State boundary file (GeoJSON/shapefile, needs geopandas)")
    m.add_argument("--no-basemap", action="store_true", help="Skip the map tiles (works offline)")

    r = sub.add_parser("report", help="DOCX report of the monthly summary")
    r.add_argument("years", nargs="+")
    r.add_argument("--out", required=True, help="Path of the .docx file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the FARS CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)
    config = FarsConfig(
        data_dir=args.data_dir,
        max_workers=args.workers,
        boundaries_path=getattr(args, "boundaries", None),
        basemap=not getattr(args, "no_basemap", False),
    )
    try:
        handle(config, args, argv)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1
    return 0


def handle(config: FarsConfig, args: argparse.Namespace, argv: Optional[List[str]] = None) -> None:
    """Run one parsed subcommand."""
    if args.cmd == "summarize":
        table = fars_summarize_years(args.years, data_dir=config.data_dir, max_workers=config.max_workers)
        if table.empty:
            print("No data for the requested years.")
        else:
            print(table.to_string(index=False))
        if args.csv:
            table.to_csv(args.csv, index=False)
            print(f"Exported CSV to {args.csv}")
        return

    if args.cmd == "map":
        renderer = MatplotlibStateRenderer(
            boundaries_path=config.boundaries_path,
            out_path=args.out,
            basemap=config.basemap,
        )
        fig = fars_map_state(args.state, args.year, data_dir=config.data_dir, renderer=renderer)
        if fig is not None and not args.out:
            import matplotlib.pyplot as plt
            plt.show()
        return

    if args.cmd == "report":
        from .report import DatasetCitation, ReportConfig, generate_docx_report
        table = fars_summarize_years(args.years, data_dir=config.data_dir, max_workers=config.max_workers)
        command = " ".join(["fars"] + list(argv if argv is not None else sys.argv[1:]))
        cfg = ReportConfig(
            citation=DatasetCitation(data_dir=config.data_dir),
            command_log=[command],
        )
        generate_docx_report(table, args.out, config=cfg)
        print(f"Report written to {args.out}")
        return

    raise ValueError(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    sys.exit(main())
