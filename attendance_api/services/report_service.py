from typing import List

from ..core.database import fetch
from ..models.report import ReportDetailRow, ReportSummaryRow
from .schema_service import ensure_tables

# Attendance counts and overtime sums are aggregated separately before the
# join, otherwise each attendance row would be multiplied by each overtime row.
SUMMARY_QUERY = """
    SELECT
        e.id AS employee_id,
        e.name AS employee_name,
        COALESCE(a.total_present, 0) AS total_present,
        COALESCE(a.total_absent, 0) AS total_absent,
        COALESCE(a.total_leave, 0) AS total_leave,
        COALESCE(o.total_overtime, 0) AS total_overtime
    FROM employees e
    LEFT JOIN (
        SELECT
            employee_id,
            COUNT(CASE WHEN status = 'Present' THEN 1 ELSE NULL END) AS total_present,
            COUNT(CASE WHEN status = 'Absent' THEN 1 ELSE NULL END) AS total_absent,
            COUNT(CASE WHEN status = 'On Leave' THEN 1 ELSE NULL END) AS total_leave
        FROM attendance
        GROUP BY employee_id
    ) a ON e.id = a.employee_id
    LEFT JOIN (
        SELECT employee_id, SUM(hours) AS total_overtime
        FROM overtime
        GROUP BY employee_id
    ) o ON e.id = o.employee_id
    ORDER BY e.name ASC
"""

DETAIL_QUERY = """
    SELECT employees.name AS employee_name, attendance.date, attendance.status, overtime.hours
    FROM employees
    LEFT JOIN attendance ON employees.id = attendance.employee_id
    LEFT JOIN overtime ON employees.id = overtime.employee_id
    ORDER BY attendance.date DESC NULLS LAST
"""


async def get_report_summary() -> List[ReportSummaryRow]:
    await ensure_tables()
    rows = await fetch(SUMMARY_QUERY)
    return [ReportSummaryRow(**r) for r in rows]


async def get_report_details() -> List[ReportDetailRow]:
    """Flat employee x attendance x overtime rows, one per combination, newest first."""
    await ensure_tables()
    rows = await fetch(DETAIL_QUERY)
    return [ReportDetailRow(**r) for r in rows]
