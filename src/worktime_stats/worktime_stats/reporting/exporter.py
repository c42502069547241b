from __future__ import annotations

import io

import pandas as pd

from .service import ReportData

COLUMNS = {
    "employee_id": "Employee",
    "shifts": "Shifts",
    "total": "Worked",
    "night": "Night",
    "holiday": "Holiday",
}


def report_frame(report: ReportData) -> pd.DataFrame:
    df = pd.DataFrame(report.rows, columns=list(COLUMNS))
    return df.rename(columns=COLUMNS)


def export_report_xlsx(report: ReportData) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        report_frame(report).to_excel(writer, index=False, sheet_name="Work time")
    return output.getvalue()
