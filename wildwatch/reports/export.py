"""
PDF export of the session's sightings (fpdf2).

One block per marker, oldest first: report title, timestamp, location
and the analysis text. Always renders every marker, never the filtered view.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

from fpdf import FPDF

from wildwatch.errors import ExportFailure, NoReports
from wildwatch.utils.geo import fmt_pair

from .markers import Marker
from .ux import PDF_TITLE, report_title

logger = logging.getLogger(__name__)


def _latin1(text: str) -> str:
    # core fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def build_pdf(markers: Sequence[Marker]) -> FPDF:
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=18)
    pdf.add_page()

    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 12, PDF_TITLE, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    for marker in markers:
        pdf.set_font("Helvetica", "B", 14)
        pdf.cell(0, 8, report_title(marker), new_x="LMARGIN", new_y="NEXT")

        pdf.set_font("Helvetica", "", 11)
        pdf.cell(0, 6, _latin1(f"Time: {marker.timestamp}"), new_x="LMARGIN", new_y="NEXT")
        pdf.cell(
            0, 6,
            f"Location: {fmt_pair(marker.latitude, marker.longitude)}",
            new_x="LMARGIN", new_y="NEXT",
        )
        pdf.multi_cell(0, 6, _latin1(marker.analysis), new_x="LMARGIN", new_y="NEXT")

        # separator
        pdf.ln(2)
        pdf.set_draw_color(204, 204, 204)
        pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
        pdf.ln(6)

    return pdf


def export_pdf(markers: Sequence[Marker], path: str) -> str:
    """
    Render `markers` into a PDF at `path`.

    Raises:
        NoReports: if there is nothing to export (no document is generated).
        ExportFailure: if generation or writing fails.
    """
    if not markers:
        raise NoReports()

    try:
        pdf = build_pdf(markers)
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        pdf.output(path)
    except Exception as e:  # noqa: BLE001
        logger.exception("[EXPORT] failed to export PDF: %s", e)
        raise ExportFailure(details=str(e)) from e

    logger.info("[EXPORT] wrote %d report(s) to %s", len(markers), path)
    return path
