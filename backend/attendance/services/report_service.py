"""Presence-matrix report: data assembly and PDF layout."""
import io
import logging
import os
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Optional
from xml.sax.saxutils import escape

import pytz
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from attendance.config import settings
from attendance.models.attendee import AttendeeCategory

logger = logging.getLogger(__name__)

AUDIENCE_SUBTITLES = {
    "all": "All Attendees",
    "team": "Team Members Only",
    "participants": "Participants Only",
}

BRAND_BLUE = colors.Color(66 / 255, 133 / 255, 244 / 255)
PRESENT_GREEN = colors.Color(34 / 255, 197 / 255, 94 / 255)
ABSENT_RED = colors.Color(239 / 255, 68 / 255, 68 / 255)
FOOTER_GREY = colors.Color(150 / 255, 150 / 255, 150 / 255)

MARGIN = 14 * mm
LANDSCAPE_AFTER = 5
BODY_FONT = "ReportBody"
FALLBACK_FONT = "Helvetica"

_registered_font_path: Optional[str] = None


@dataclass
class PresenceRow:
    attendee: Any
    presence: list[bool]
    absences: int


@dataclass
class PresenceMatrix:
    audience: str
    sessions: list[Any]
    rows: list[PresenceRow] = field(default_factory=list)


def filter_audience(attendees: Iterable[Any], audience: str) -> list[Any]:
    if audience == "team":
        return [a for a in attendees if a.category == AttendeeCategory.team]
    if audience == "participants":
        return [a for a in attendees if a.category != AttendeeCategory.team]
    return list(attendees)


def build_presence_matrix(
    sessions: Iterable[Any],
    attendees: Iterable[Any],
    logs: Iterable[Any],
    session_ids: Iterable[str],
    audience: str = "all",
) -> PresenceMatrix:
    """One row per attendee in the audience, one column per selected session.

    Columns are ordered by session date. A cell is present iff the given logs
    contain a row for that attendee and session.
    """
    wanted = set(session_ids)
    selected = sorted((s for s in sessions if s.id in wanted), key=lambda s: s.date)

    attended: dict[str, set] = {}
    for log in logs:
        attended.setdefault(log.attendee_id, set()).add(log.session_id)

    matrix = PresenceMatrix(audience=audience, sessions=selected)
    for attendee in filter_audience(attendees, audience):
        seen = attended.get(attendee.id, set())
        presence = [session.id in seen for session in selected]
        matrix.rows.append(PresenceRow(attendee=attendee, presence=presence, absences=presence.count(False)))
    return matrix


def report_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"Attendance-Report-{today.isoformat()}.pdf"


def _column_label(day: date) -> str:
    return f"{day:%b} {day.day}"


def _category_label(category: Any) -> str:
    return category.value if isinstance(category, AttendeeCategory) else str(category)


def _body_font(font_path: str) -> str:
    """Register the TrueType body font and return its name, or Helvetica without one."""
    global _registered_font_path
    if not font_path:
        return FALLBACK_FONT
    if not os.path.exists(font_path):
        logger.warning("Report font %s not found, falling back to %s", font_path, FALLBACK_FONT)
        return FALLBACK_FONT
    if _registered_font_path != font_path:
        pdfmetrics.registerFont(TTFont(BODY_FONT, font_path))
        _registered_font_path = font_path
    return BODY_FONT


def _generated_label(generated_at: datetime) -> str:
    hour = generated_at.hour % 12 or 12
    return (
        f"Generated on {generated_at:%B} {generated_at.day}, {generated_at:%Y} "
        f"at {hour}:{generated_at:%M %p}"
    )


def _footer_canvas(generated_label: str):
    """Canvas class that stamps every page with the generation time and "Page i of N"."""

    class FooterCanvas(canvas.Canvas):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._page_states = []

        def showPage(self):
            self._page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self):
            total = len(self._page_states)
            for state in self._page_states:
                self.__dict__.update(state)
                self._draw_footer(total)
                super().showPage()
            super().save()

        def _draw_footer(self, total: int) -> None:
            width, _ = self._pagesize
            self.saveState()
            self.setFont("Helvetica", 8)
            self.setFillColor(FOOTER_GREY)
            self.drawString(MARGIN, 10 * mm, generated_label)
            self.drawRightString(width - MARGIN, 10 * mm, f"Page {self._pageNumber} of {total}")
            self.restoreState()

    return FooterCanvas


def _header(title: str, audience: str, logo_path: str) -> list:
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle", parent=styles["Title"], fontSize=20, leading=24,
        textColor=BRAND_BLUE, alignment=TA_CENTER, spaceAfter=2,
    )
    subtitle_style = ParagraphStyle(
        "ReportSubtitle", parent=styles["Normal"], fontSize=10,
        textColor=colors.grey, alignment=TA_CENTER,
    )

    elements = []
    if logo_path and os.path.exists(logo_path):
        logo_height = 12 * mm
        img_width, img_height = ImageReader(logo_path).getSize()
        logo = Image(logo_path, width=logo_height * img_width / img_height, height=logo_height)
        logo.hAlign = "LEFT"
        elements.append(logo)
    elif logo_path:
        logger.warning("Report logo %s not found, rendering without it", logo_path)

    elements.append(Paragraph(title, title_style))
    elements.append(Paragraph(AUDIENCE_SUBTITLES.get(audience, audience), subtitle_style))
    elements.append(Spacer(1, 6 * mm))
    return elements


def _column_widths(available: float, session_count: int) -> list[float]:
    category_w, absences_w, min_name_w = 22 * mm, 20 * mm, 30 * mm
    session_w = 14 * mm
    if session_count and available - category_w - absences_w - session_count * session_w < min_name_w:
        session_w = (available - category_w - absences_w - min_name_w) / session_count
    name_w = available - category_w - absences_w - session_count * session_w
    return [name_w, category_w] + [session_w] * session_count + [absences_w]


def _table(matrix: PresenceMatrix, available_width: float, body_font: str = FALLBACK_FONT) -> Table:
    name_style = ParagraphStyle("NameCell", fontName=body_font, fontSize=10, leading=12, alignment=TA_CENTER)
    session_count = len(matrix.sessions)

    data = [["Name", "Category"] + [_column_label(s.date) for s in matrix.sessions] + ["Absences"]]
    for row in matrix.rows:
        cells = ["P" if present else "A" for present in row.presence]
        data.append(
            [Paragraph(escape(row.attendee.full_name), name_style), _category_label(row.attendee.category)]
            + cells
            + [str(row.absences)]
        )

    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), BRAND_BLUE),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3 * mm / 2),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3 * mm / 2),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f5f5f5")]),
    ]
    if matrix.rows:
        commands.append(("FONTNAME", (1, 1), (1, -1), body_font))
    absences_col = 2 + session_count
    for r, row in enumerate(matrix.rows, start=1):
        for c, present in enumerate(row.presence, start=2):
            commands.append(("TEXTCOLOR", (c, r), (c, r), PRESENT_GREEN if present else ABSENT_RED))
            commands.append(("FONTNAME", (c, r), (c, r), "Helvetica-Bold"))
        if row.absences > 0:
            commands.append(("TEXTCOLOR", (absences_col, r), (absences_col, r), ABSENT_RED))
            commands.append(("FONTNAME", (absences_col, r), (absences_col, r), "Helvetica-Bold"))

    table = Table(data, colWidths=_column_widths(available_width, session_count), repeatRows=1)
    table.setStyle(TableStyle(commands))
    return table


def render_report_pdf(
    matrix: PresenceMatrix,
    title: Optional[str] = None,
    generated_at: Optional[datetime] = None,
    logo_path: Optional[str] = None,
    font_path: Optional[str] = None,
) -> bytes:
    """Lay out the presence matrix as a paginated A4 PDF and return its bytes."""
    pagesize = landscape(A4) if len(matrix.sessions) > LANDSCAPE_AFTER else A4
    if generated_at is None:
        generated_at = datetime.now(pytz.timezone(settings.REPORT_TIMEZONE))
    generated_label = _generated_label(generated_at)

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=pagesize,
        leftMargin=MARGIN, rightMargin=MARGIN, topMargin=MARGIN, bottomMargin=MARGIN + 6 * mm,
        title=title or settings.REPORT_TITLE,
    )
    elements = _header(title or settings.REPORT_TITLE, matrix.audience,
                       settings.REPORT_LOGO_PATH if logo_path is None else logo_path)
    body_font = _body_font(settings.REPORT_FONT_PATH if font_path is None else font_path)
    elements.append(_table(matrix, doc.width, body_font))
    doc.build(elements, canvasmaker=_footer_canvas(generated_label))

    logger.info(
        "Rendered attendance report: %d attendees x %d sessions (%s)",
        len(matrix.rows), len(matrix.sessions), matrix.audience,
    )
    return buffer.getvalue()
