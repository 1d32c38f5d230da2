"""
Excel report generation for load plans.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

if TYPE_CHECKING:
    from ..models import CargoItem, TruckProfile
    from ..services.compliance import ComplianceEvaluation
    from ..services.weight_distribution import WeightDistribution

_STATUS_FILLS = {
    "OK": "C6EFCE",
    "WARNING": "FFEB9C",
    "OVER LIMIT": "FFC7CE",
}


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body(ws, *, first_col_bold: bool = True) -> None:
    """Zebra striping and a bold, left-aligned first column."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=2, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if first_col_bold and row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if cell.row % 2 == 0 and (cell.fill is None or cell.fill.fill_type is None):
                cell.fill = stripe_fill
            if cell.column == 1:
                cell.alignment = Alignment(horizontal="left", vertical="center", wrap_text=True)


def _summary_rows(profile: "TruckProfile", distribution: "WeightDistribution") -> list[dict]:
    frame = profile.frame
    return [
        {"Parameter": "Truck", "Value": profile.name},
        {"Parameter": "Body type", "Value": frame.body_type.value},
        {"Parameter": "Body length (m)", "Value": round(frame.body_length_m, 3)},
        {"Parameter": "Body width (m)", "Value": round(frame.body_width_m, 3)},
        {"Parameter": "Wheelbase (m)", "Value": round(frame.wheelbase_m, 3)},
        {"Parameter": "Load weight (kg)", "Value": round(distribution.load_weight_kg, 1)},
        {"Parameter": "Load COG x (m)", "Value": round(distribution.load_cog_x_m, 3)},
        {"Parameter": "Load COG y (m)", "Value": round(distribution.load_cog_y_m, 3)},
        {"Parameter": "Front axle (kg)", "Value": round(distribution.front_axle_weight_kg, 1)},
        {"Parameter": "Rear axle (kg)", "Value": round(distribution.rear_axle_weight_kg, 1)},
        {"Parameter": "Gross (kg)", "Value": round(distribution.total_weight_kg, 1)},
        {"Parameter": "Front axle (%)", "Value": round(distribution.front_axle_percentage, 1)},
        {"Parameter": "Rear axle (%)", "Value": round(distribution.rear_axle_percentage, 1)},
        {"Parameter": "GVM (%)", "Value": round(distribution.gvm_percentage, 1)},
        {"Parameter": "Solver iterations", "Value": distribution.iterations},
    ]


def _item_rows(items: Sequence["CargoItem"]) -> list[dict]:
    return [
        {
            "Item": item.name or item.id,
            "Length (m)": round(item.length_m, 3),
            "Width (m)": round(item.width_m, 3),
            "Weight (kg)": round(item.weight_kg, 1),
            "X (m)": round(item.x_m, 3),
            "Y (m)": round(item.y_m, 3),
        }
        for item in items
    ]


def _compliance_rows(compliance: "ComplianceEvaluation") -> list[dict]:
    return [
        {
            "Code": line.code,
            "Name": line.name,
            "Value (kg)": round(line.value_kg, 1),
            "Limit (kg)": round(line.limit_kg, 1),
            "Percentage": round(line.percentage, 1),
            "Margin (kg)": round(line.margin_kg, 1),
            "Status": line.status.value,
        }
        for line in compliance.lines
    ]


def export_load_plan_excel(
    filepath: Path | str,
    profile: "TruckProfile",
    distribution: "WeightDistribution",
    items: Sequence["CargoItem"] = (),
    compliance: "ComplianceEvaluation | None" = None,
) -> Path:
    """Write Summary, Items and (optionally) Compliance sheets to an .xlsx file."""
    filepath = Path(filepath)
    df_summary = pd.DataFrame(_summary_rows(profile, distribution))
    df_items = pd.DataFrame(
        _item_rows(items),
        columns=["Item", "Length (m)", "Width (m)", "Weight (kg)", "X (m)", "Y (m)"],
    )
    df_compliance = pd.DataFrame(_compliance_rows(compliance)) if compliance is not None else None

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Summary", index=False)
        ws_summary = writer.sheets["Summary"]
        ws_summary.column_dimensions["A"].width = 24
        ws_summary.column_dimensions["B"].width = 28
        _style_header(ws_summary)
        _style_body(ws_summary)
        ws_summary.freeze_panes = "A2"

        df_items.to_excel(writer, sheet_name="Items", index=False)
        ws_items = writer.sheets["Items"]
        ws_items.column_dimensions["A"].width = 24
        for col in "BCDEF":
            ws_items.column_dimensions[col].width = 12
        _style_header(ws_items)
        _style_body(ws_items)
        ws_items.freeze_panes = "A2"

        if df_compliance is not None and not df_compliance.empty:
            df_compliance.to_excel(writer, sheet_name="Compliance", index=False)
            ws_comp = writer.sheets["Compliance"]
            ws_comp.column_dimensions["A"].width = 14
            ws_comp.column_dimensions["B"].width = 14
            ws_comp.column_dimensions["G"].width = 14
            _style_header(ws_comp)
            _style_body(ws_comp, first_col_bold=False)
            ws_comp.freeze_panes = "A2"

            status_col_idx = list(df_compliance.columns).index("Status") + 1
            for row_idx in range(2, ws_comp.max_row + 1):
                cell = ws_comp.cell(row=row_idx, column=status_col_idx)
                color = _STATUS_FILLS.get(str(cell.value or ""))
                if color:
                    cell.fill = PatternFill(fill_type="solid", fgColor=color)
                cell.alignment = Alignment(horizontal="center", vertical="center")

    return filepath
