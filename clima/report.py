from __future__ import annotations

"""
CLIMA report generator
----------------------
This module generates a DOCX report from the records of one analysis.

Design goals:
- Keep CLIMA usable even if report dependencies are missing (lazy imports).
- One table with every record (Celsius and Fahrenheit) plus one bar chart
  comparing the temperatures, labelled by country and year.
- A reproducibility footer (version, timestamp, commands used).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import os
import tempfile

from .models import Record


@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    title: str = "CLIMA Analytical Report"
    subtitle: str = "Climate Analyzer (CLI)"
    dataset_name: str = "Monthly country temperatures (CSV)"
    dataset_file: Optional[str] = None

    # How many bars to show in the chart
    top_n: int = 20

    # Optional: list of CLI commands used to create the result
    command_log: Optional[List[str]] = None


def _label(r: Record) -> str:
    if r.is_delta:
        return f"{r.country} ({r.month}, Δ{r.year}y)"
    return f"{r.country} ({r.month} {r.year})"


def generate_docx_report(
    records: Sequence[Record],
    out_path: str,
    *,
    caption: str = "",
    config: Optional[ReportConfig] = None,
) -> str:
    """
    Generate a DOCX report + chart for the records of one analysis.

    Returns the path written.
    """
    config = config or ReportConfig()

    # Lazy imports: only required when "report" is used.
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
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib.\n"
            "Install with: python -m pip install matplotlib"
        ) from e

    if not records:
        raise ValueError("No records to report on (result is empty).")

    is_delta = any(r.is_delta for r in records)

    # -----------------------------
    # Build DOCX report
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
    _kv("Dataset", config.dataset_name)
    if config.dataset_file:
        _kv("Data file", config.dataset_file)
    if caption:
        _kv("Analysis", caption)
    _kv("Records", str(len(records)))

    doc.add_heading("Results", level=1)
    headers = (["Δ°C", "Δ°F", "Years apart"] if is_delta else ["°C", "°F", "Year"]) + ["Month", "Country", "Code"]
    t = doc.add_table(rows=1, cols=len(headers))
    for i, h in enumerate(headers):
        t.rows[0].cells[i].text = h
    for r in records:
        row = t.add_row().cells
        row[0].text = f"{r.temperature_celsius:.2f}"
        row[1].text = f"{r.fahrenheit:.2f}"
        row[2].text = str(r.year)
        row[3].text = r.month
        row[4].text = r.country
        row[5].text = r.country_code

    doc.add_paragraph("")
    doc.add_heading("Visualization", level=1)
    # The chart file only has to live until it is embedded in the document
    with tempfile.TemporaryDirectory(prefix="clima_report_") as tmpdir:
        shown = list(records)[-config.top_n:]
        plt.figure()
        plt.bar([_label(r) for r in shown], [r.temperature_celsius for r in shown],
                edgecolor="black", linewidth=0.8)
        plt.xticks(rotation=45, ha="right")
        plt.title(caption or config.title)
        plt.ylabel("Temperature change (°C)" if is_delta else "Temperature (°C)")
        plt.tight_layout()
        chart_path = os.path.join(tmpdir, "temperatures.png")
        plt.savefig(chart_path, dpi=200)
        plt.close()
        doc.add_picture(chart_path, width=Inches(6.5))

    # -----------------------------
    # Reproducibility footer
    # -----------------------------
    doc.add_paragraph("")
    doc.add_heading("Reproducibility footer", level=1)

    from . import __version__ as clima_version
    from datetime import datetime as _dt
    generated_at = _dt.now().isoformat(timespec="seconds")

    doc.add_paragraph(f"CLIMA version: {clima_version}")
    doc.add_paragraph(f"Report generated at: {generated_at}")

    if config.command_log:
        doc.add_paragraph("Commands used (log):")
        for line in config.command_log:
            doc.add_paragraph(line, style="List Bullet")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    return out_path
