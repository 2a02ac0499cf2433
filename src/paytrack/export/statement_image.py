"""Rasterize a StatementView to PNG.

Pillow is an optional dependency (``paytrack[export]``). Without it the
export reports ExportUnavailableError and nothing else is affected: the
renderer only reads the view it is given.
"""
from __future__ import annotations
import io
import logging
from paytrack.api.schemas.months import StatementView
from paytrack.domain.calendar import MonthRef
from paytrack.domain.exceptions import ExportError, ExportUnavailableError
from paytrack.domain.formatting import format_hours, format_money

logger = logging.getLogger(__name__)

HEADERS = ["Date", "Work Hr", "OT Hr", "Regular Pay", "OT Pay", "Extra", "Total"]

_PAD_X = 10
_PAD_Y = 6
_MARGIN = 16
_BG = (28, 33, 40)
_FG = (230, 237, 243)
_GRID = (68, 76, 86)
_HIGHLIGHT = (92, 74, 20)
_HEADER_BG = (44, 197, 177)


def statement_filename(ref: MonthRef) -> str:
    return f"Payroll_Statement_{ref.title.replace(' ', '_')}.png"


def _table_cells(view: StatementView) -> tuple[list[list[str]], list[bool], list[str]]:
    rows = [
        [
            r.label,
            format_hours(r.work_hr),
            format_hours(r.ot_hr),
            format_money(r.regular_pay),
            format_money(r.ot_pay),
            format_money(r.extra),
            format_money(r.daily_total),
        ]
        for r in view.rows
    ]
    flags = [r.flagged for r in view.rows]
    t = view.totals
    footer = [
        "Total",
        format_hours(t.total_work_hr),
        format_hours(t.total_ot_hr),
        format_money(t.total_regular_pay),
        format_money(t.total_ot_pay),
        format_money(t.total_extra_pay),
        format_money(t.grand_total),
    ]
    return rows, flags, footer


def _load_pillow():
    try:
        from PIL import Image, ImageDraw, ImageFont
    except ImportError as exc:
        raise ExportUnavailableError(
            "Image export needs Pillow; install it with `pip install paytrack[export]`."
        ) from exc
    return Image, ImageDraw, ImageFont


def render_statement_png(view: StatementView, *, scale: int = 2) -> bytes:
    """Return PNG bytes of the statement table, upscaled by ``scale``."""
    Image, ImageDraw, ImageFont = _load_pillow()
    rows, flags, footer = _table_cells(view)
    title = f"Payroll Statement - {view.title}"

    try:
        font = ImageFont.load_default()
        measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))

        def width(text: str) -> int:
            return int(measure.textlength(text, font=font))

        line_h = max(measure.textbbox((0, 0), "Ag0", font=font)[3], 10) + 2 * _PAD_Y
        col_w = [
            max(width(cell) for cell in column) + 2 * _PAD_X
            for column in zip(HEADERS, footer, *rows)
        ]
        table_w = sum(col_w)
        img_w = table_w + 2 * _MARGIN
        img_h = _MARGIN * 2 + line_h * (len(rows) + 3)

        image = Image.new("RGB", (img_w, img_h), _BG)
        draw = ImageDraw.Draw(image)
        draw.text((_MARGIN, _MARGIN + _PAD_Y), title, fill=_FG, font=font)

        def draw_row(y: int, cells: list[str], fill=None, text_fill=_FG) -> None:
            if fill is not None:
                draw.rectangle([_MARGIN, y, _MARGIN + table_w, y + line_h], fill=fill)
            x = _MARGIN
            for i, (cell, w) in enumerate(zip(cells, col_w)):
                # numbers right-aligned, date column left-aligned
                tx = x + _PAD_X if i == 0 else x + w - _PAD_X - width(cell)
                draw.text((tx, y + _PAD_Y), cell, fill=text_fill, font=font)
                x += w
            draw.line([_MARGIN, y + line_h, _MARGIN + table_w, y + line_h], fill=_GRID)

        y = _MARGIN + line_h
        draw_row(y, HEADERS, fill=_HEADER_BG, text_fill=_BG)
        for cells, flagged in zip(rows, flags):
            y += line_h
            draw_row(y, cells, fill=_HIGHLIGHT if flagged else None)
        y += line_h
        draw_row(y, footer, fill=_GRID)

        if scale > 1:
            image = image.resize((img_w * scale, img_h * scale), Image.Resampling.NEAREST)

        buf = io.BytesIO()
        image.save(buf, format="PNG")
    except Exception as exc:
        logger.exception("Statement export failed for %s", view.title)
        raise ExportError(f"Could not generate image: {exc}") from exc
    return buf.getvalue()
