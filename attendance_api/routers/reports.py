import logging
from typing import List

from fastapi import APIRouter

from ..core.config import settings
from ..core.errors import DatabaseError, InternalError
from ..models.report import ReportSummaryRow
from ..services.report_document import build_report_response
from ..services.report_service import get_report_details, get_report_summary

router = APIRouter()
log = logging.getLogger(__name__)


@router.get("/report", response_model=List[ReportSummaryRow])
async def report_summary():
    try:
        return await get_report_summary()
    except DatabaseError as exc:
        log.exception("Error fetching reports")
        raise InternalError("Internal Server Error") from exc


@router.get("/download-report")
async def download_report():
    try:
        rows = await get_report_details()
    except DatabaseError as exc:
        log.exception("Error fetching report rows")
        raise InternalError("Internal Server Error") from exc

    try:
        return await build_report_response(rows, settings.report_title)
    except Exception as exc:
        log.exception("Error generating report")
        raise InternalError("Error generating report") from exc
