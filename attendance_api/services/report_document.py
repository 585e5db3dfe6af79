"""PDF rendering of the attendance/overtime detail rows.

The document is written to a transient file which is streamed back as a
download and removed once the response is over, whatever the outcome.
"""

import logging
import os
import tempfile
from typing import Optional, Sequence
from xml.sax.saxutils import escape

from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ..models.report import ReportDetailRow

log = logging.getLogger(__name__)

REPORT_FILENAME = "report.pdf"
PDF_MEDIA_TYPE = "application/pdf"


def create_transient_file(suffix: str = ".pdf") -> str:
    fd, path = tempfile.mkstemp(prefix="report-", suffix=suffix)
    os.close(fd)
    return path


def remove_transient_file(path: str) -> None:
    """Delete a transient file. Failures are logged, never raised."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError:
        log.warning("Could not remove transient report file %s", path, exc_info=True)


def _format_hours(hours: Optional[float]) -> str:
    if not hours:
        return "0"
    if float(hours).is_integer():
        return str(int(hours))
    return str(hours)


def _format_value(value: object) -> str:
    return "-" if value is None else str(value)


def render_report_pdf(rows: Sequence[ReportDetailRow], path: str, title: str) -> int:
    """Write the report to ``path`` and return the number of pages."""
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("ReportTitle", parent=styles["Title"], fontSize=18)
    body_style = ParagraphStyle("ReportBody", parent=styles["Normal"], fontSize=12, leading=15)

    story = [Paragraph(escape(title), title_style), Spacer(1, 12)]
    for index, row in enumerate(rows, start=1):
        story.append(Paragraph(f"{index}. {escape(_format_value(row.employee_name))}", body_style))
        story.append(Paragraph(f"Date: {escape(_format_value(row.date))}", body_style))
        story.append(Paragraph(f"Attendance: {escape(_format_value(row.status))}", body_style))
        story.append(Paragraph(f"Overtime Hours: {_format_hours(row.hours)}", body_style))
        story.append(Spacer(1, 12))

    doc = SimpleDocTemplate(path, pagesize=letter, title=title)
    doc.build(story)
    return doc.page


class TransientFileResponse(FileResponse):
    """FileResponse that deletes its file once the response has been sent or has failed."""

    async def __call__(self, scope, receive, send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            remove_transient_file(self.path)


async def build_report_response(rows: Sequence[ReportDetailRow], title: str) -> TransientFileResponse:
    path = create_transient_file()
    try:
        await run_in_threadpool(render_report_pdf, rows, path, title)
    except BaseException:
        remove_transient_file(path)
        raise
    log.info("Rendered report with %d rows to %s", len(rows), path)
    return TransientFileResponse(path, media_type=PDF_MEDIA_TYPE, filename=REPORT_FILENAME)
