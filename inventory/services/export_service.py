import io
import os
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import select
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from inventory.models.item import Item
from inventory.models.issuance import IssuanceLog
from inventory.services.issuance_service import get_log, to_log_dict


# ── Fonts (Unicode names need a TTF; fall back to Helvetica) ──────────────────
_FONT_REGULAR = "Helvetica"
_FONT_BOLD = "Helvetica-Bold"
_UNICODE_CAPABLE = False

_FONT_PAIRS = [
    (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "InvDejaVu", "InvDejaVuBold",
    ),
    (
        "/usr/share/fonts/ttf-dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/ttf-dejavu/DejaVuSans-Bold.ttf",
        "InvDejaVu", "InvDejaVuBold",
    ),
]


def _init_export_fonts() -> None:
    global _FONT_REGULAR, _FONT_BOLD, _UNICODE_CAPABLE
    if _UNICODE_CAPABLE:
        return
    for reg_path, bold_path, reg_name, bold_name in _FONT_PAIRS:
        if not os.path.exists(reg_path):
            continue
        try:
            pdfmetrics.registerFont(TTFont(reg_name, reg_path))
            _FONT_REGULAR = reg_name
            if os.path.exists(bold_path):
                pdfmetrics.registerFont(TTFont(bold_name, bold_path))
                _FONT_BOLD = bold_name
            else:
                _FONT_BOLD = reg_name
            _UNICODE_CAPABLE = True
            break
        except Exception:
            continue


_init_export_fonts()

_HEADER_FILL = PatternFill(start_color="1C2D42", end_color="1C2D42", fill_type="solid")
_HEADER_FONT = Font(bold=True, color="FFFFFF", size=11)


def _write_header(ws, headers: list[str]) -> None:
    for col, h in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col, value=h)
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="center")
    ws.row_dimensions[1].height = 22
    ws.freeze_panes = "A2"


def _set_widths(ws, widths: list[int]) -> None:
    for i, w in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(i)].width = w


def _fmt_date(value) -> str:
    return value.isoformat() if value else ""


def export_items_excel(db: Session) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Items"
    _write_header(ws, ["ID", "Category", "Serial number", "Brand", "Model", "Specifications",
                       "Vendor", "Purchased", "Warranty end", "Status"])

    items = db.scalars(select(Item).order_by(Item.id)).all()
    for row_num, item in enumerate(items, 2):
        ws.cell(row=row_num, column=1, value=item.id)
        ws.cell(row=row_num, column=2, value=item.category_name or "")
        ws.cell(row=row_num, column=3, value=item.serial_number)
        ws.cell(row=row_num, column=4, value=item.brand)
        ws.cell(row=row_num, column=5, value=item.model)
        ws.cell(row=row_num, column=6, value=item.specifications or "")
        ws.cell(row=row_num, column=7, value=item.vendor or "")
        ws.cell(row=row_num, column=8, value=_fmt_date(item.date_of_purchase))
        ws.cell(row=row_num, column=9, value=_fmt_date(item.warranty_end_date))
        ws.cell(row=row_num, column=10, value=item.status.value)

    _set_widths(ws, [6, 20, 22, 16, 20, 40, 20, 12, 12, 12])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def export_issuance_excel(db: Session) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Issuance log"
    _write_header(ws, ["Log ID", "Serial number", "Brand", "Model", "Employee", "Department",
                       "Issued", "Returned", "Status", "Issued by"])

    logs = db.scalars(select(IssuanceLog).order_by(IssuanceLog.issue_date.desc(), IssuanceLog.id.desc())).all()
    for row_num, log in enumerate(logs, 2):
        row = to_log_dict(db, log)
        ws.cell(row=row_num, column=1, value=row["id"])
        ws.cell(row=row_num, column=2, value=row["serial_number"] or "")
        ws.cell(row=row_num, column=3, value=row["brand"] or "")
        ws.cell(row=row_num, column=4, value=row["model"] or "")
        ws.cell(row=row_num, column=5, value=row["employee_name"] or "")
        ws.cell(row=row_num, column=6, value=row["department_name"] or "")
        ws.cell(row=row_num, column=7, value=_fmt_date(row["issue_date"]))
        ws.cell(row=row_num, column=8, value=_fmt_date(row["return_date"]))
        ws.cell(row=row_num, column=9, value=row["status"].value)
        ws.cell(row=row_num, column=10, value=row["issued_by_username"] or "")

    _set_widths(ws, [8, 22, 16, 20, 28, 22, 12, 12, 10, 16])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def export_handover_pdf(db: Session, log_id: int) -> bytes:
    """Single-page handover protocol for one issuance log, with signature lines."""
    log = get_log(db, log_id)
    row = to_log_dict(db, log)
    item = log.item

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Handover protocol #{log.id}")
    pw, ph = A4
    margin = 20 * mm

    # ── Header ────────────────────────────────────────────────────────────────
    c.setFillColor(colors.HexColor("#1C2D42"))
    c.rect(0, ph - 35 * mm, pw, 35 * mm, fill=True, stroke=False)
    c.setFillColor(colors.white)
    c.setFont(_FONT_BOLD, 18)
    c.drawString(margin, ph - 20 * mm, "EQUIPMENT HANDOVER PROTOCOL")
    c.setFont(_FONT_REGULAR, 10)
    c.drawString(margin, ph - 29 * mm, f"IT Inventory  ·  Issuance log no. {log.id}")

    c.setFillColor(colors.black)
    c.setFont(_FONT_REGULAR, 9)
    c.drawRightString(pw - margin, ph - 40 * mm,
                      f"Printed: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M')} UTC")

    y = ph - 50 * mm
    y = _pdf_section_header(c, "Equipment", y, margin, pw)
    y = _pdf_table(c, [
        ("Category:", (item.category_name or "-") if item else "-"),
        ("Brand / model:", f"{row['brand']} {row['model']}" if item else "-"),
        ("Serial number:", row["serial_number"] or "-"),
        ("Specifications:", (item.specifications or "-") if item else "-"),
    ], y, margin, pw)

    y -= 8 * mm
    y = _pdf_section_header(c, "Issuance", y, margin, pw)
    y = _pdf_table(c, [
        ("Employee:", row["employee_name"] or "-"),
        ("Department:", row["department_name"] or "-"),
        ("Issue date:", _fmt_date(row["issue_date"]) or "-"),
        ("Return date:", _fmt_date(row["return_date"]) or "-"),
        ("Status:", row["status"].value),
        ("Issued by:", row["issued_by_username"] or "-"),
    ], y, margin, pw)

    # ── Signature lines ───────────────────────────────────────────────────────
    sig_y = y - 20 * mm
    sig_w = (pw - 2 * margin - 20 * mm) / 2
    for x, label in ((margin, "Handed over by:"), (pw - margin - sig_w, "Received by:")):
        c.setFillColor(colors.black)
        c.setFont(_FONT_REGULAR, 10)
        c.drawString(x, sig_y, label)
        c.line(x, sig_y - 12 * mm, x + sig_w, sig_y - 12 * mm)
        c.setFont(_FONT_REGULAR, 8)
        c.setFillColor(colors.gray)
        c.drawString(x, sig_y - 15 * mm, "Name, signature, date")

    # ── Footer ────────────────────────────────────────────────────────────────
    c.setFillColor(colors.HexColor("#f0f0f0"))
    c.rect(0, 0, pw, 12 * mm, fill=True, stroke=False)
    c.setFillColor(colors.gray)
    c.setFont(_FONT_REGULAR, 8)
    c.drawString(margin, 4 * mm, "IT Inventory · asset issuance tracker")
    c.drawRightString(pw - margin, 4 * mm, f"Protocol no. {log.id}")

    c.save()
    return buf.getvalue()


def _pdf_section_header(c, title: str, y: float, margin: float, pw: float) -> float:
    c.setFillColor(colors.HexColor("#404040"))
    c.rect(margin, y - 6 * mm, pw - 2 * margin, 7 * mm, fill=True, stroke=False)
    c.setFillColor(colors.white)
    c.setFont(_FONT_BOLD, 10)
    c.drawString(margin + 3 * mm, y - 3.5 * mm, title)
    c.setFillColor(colors.black)
    return y - 10 * mm


def _pdf_table(c, rows: list[tuple], y: float, margin: float, pw: float) -> float:
    col1_w = 45 * mm
    for i, (label, value) in enumerate(rows):
        bg = colors.HexColor("#f8f8f8") if i % 2 == 0 else colors.white
        c.setFillColor(bg)
        c.rect(margin, y - 6 * mm, pw - 2 * margin, 7 * mm, fill=True, stroke=False)
        c.setFillColor(colors.black)
        c.setFont(_FONT_BOLD, 9)
        c.drawString(margin + 2 * mm, y - 3 * mm, label)
        c.setFont(_FONT_REGULAR, 9)
        c.drawString(margin + col1_w, y - 3 * mm, str(value)[:80])
        y -= 7 * mm
    return y
