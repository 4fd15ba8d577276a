from __future__ import annotations

"""
FARS report generator
---------------------
This module writes a DOCX report from a monthly summary table (the output
of `fars_summarize_years`).

Design goals:
- Keep the package usable without report dependencies (lazy imports).
- One chart per report: accidents per month, one line per year.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging
import os
import tempfile

import pandas as pd

from .models import MONTH

logger = logging.getLogger(__name__)

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


# -----------------------------
# Configuration / citation types
# -----------------------------

@dataclass
class DatasetCitation:
    """Minimal dataset citation metadata for the DOCX report."""
    database_name: str = "Fatality Analysis Reporting System (FARS)"
    institutional_author: str = "National Highway Traffic Safety Administration"
    website: str = "https://www.nhtsa.gov/research-data/fatality-analysis-reporting-system-fars"
    data_dir: Optional[str] = None


@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    title: str = "FARS Monthly Accident Report"
    subtitle: str = "Accidents per month and year"
    citation: DatasetCitation = field(default_factory=DatasetCitation)

    # Optional: the command line that produced the summary
    command_log: Optional[List[str]] = None


def _month_label(m) -> str:
    try:
        return MONTH_NAMES[int(m) - 1]
    except (ValueError, TypeError, IndexError):
        return str(m)


def generate_docx_report(
    summary: pd.DataFrame,
    out_path: str,
    *,
    config: Optional[ReportConfig] = None,
) -> str:
    """
    Generate a DOCX report + chart for a month x year summary table.

    Returns `out_path`. Raises ValueError if the summary has no year columns.
    """
    config = config or ReportConfig()

    # Lazy imports: only required when a report is written.
    try:
        from docx import Document
        from docx.shared import Pt, Inches
        from docx.enum.text import WD_ALIGN_PARAGRAPH
    except ImportError as e:
        raise ImportError(
            "Missing dependency: python-docx.\n"
            "Install it with: python -m pip install python-docx"
        ) from e

    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib.\n"
            "Install it with: python -m pip install matplotlib"
        ) from e

    year_cols = [c for c in summary.columns if c != MONTH]
    if summary.empty or not year_cols:
        raise ValueError("No data to report on (summary is empty).")

    totals = {y: int(summary[y].sum()) for y in year_cols}

    # -----------------------------
    # 1) Chart
    # -----------------------------
    tmpdir = tempfile.mkdtemp(prefix="fars_report_")
    chart_path = os.path.join(tmpdir, "monthly.png")
    months = summary[MONTH].tolist()

    plt.figure()
    for y in year_cols:
        plt.plot(months, summary[y].tolist(), marker="o", label=str(y))
    plt.xticks(months, [_month_label(m) for m in months])
    plt.title("Accidents per month")
    plt.ylabel("Count")
    plt.legend(title="Year")
    plt.tight_layout()
    plt.savefig(chart_path, dpi=200)
    plt.close()

    # -----------------------------
    # 2) Build DOCX report
    # -----------------------------
    doc = Document()
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    def _center_title(text: str, size: int, bold: bool = False, italic: bool = False) -> None:
        p = doc.add_paragraph()
        r = p.add_run(text)
        r.bold = bold
        r.italic = italic
        r.font.size = Pt(size)
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _kv(key: str, value: str) -> None:
        p = doc.add_paragraph()
        r = p.add_run(f"{key}: ")
        r.bold = True
        p.add_run(value)

    _center_title(config.title, 22, bold=True)
    _center_title(config.subtitle, 12, italic=True)

    doc.add_paragraph("")
    _kv("Years", ", ".join(str(y) for y in year_cols))
    _kv("Total accidents", str(sum(totals.values())))

    doc.add_heading("Dataset citation", level=1)
    cit = config.citation
    doc.add_paragraph(f"{cit.institutional_author}. {cit.database_name}. {cit.website}.")
    if cit.data_dir:
        doc.add_paragraph(f"Data directory: {cit.data_dir}")

    doc.add_heading("Accidents per month", level=1)
    t = doc.add_table(rows=1, cols=len(year_cols) + 1)
    h = t.rows[0].cells
    h[0].text = "Month"
    for i, y in enumerate(year_cols, start=1):
        h[i].text = str(y)
    for r, m in enumerate(months):
        cells = t.add_row().cells
        cells[0].text = _month_label(m)
        for i, y in enumerate(year_cols, start=1):
            cells[i].text = str(int(summary[y].iloc[r]))
    cells = t.add_row().cells
    cells[0].text = "Total"
    for i, y in enumerate(year_cols, start=1):
        cells[i].text = str(totals[y])

    doc.add_paragraph("")
    doc.add_picture(chart_path, width=Inches(6.5))

    if config.command_log:
        doc.add_heading("Command log (reproducibility)", level=1)
        for line in config.command_log:
            doc.add_paragraph(line, style="List Bullet")

    from . import __version__ as fars_version
    from datetime import datetime as _dt
    doc.add_paragraph("")
    doc.add_paragraph(f"fars version: {fars_version}")
    doc.add_paragraph(f"Report generated at: {_dt.now().isoformat(timespec='seconds')}")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    logger.info("Report written to %s", out_path)
    return out_path
