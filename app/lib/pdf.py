# app/lib/pdf.py
import io
from typing import Iterable, Optional, Protocol
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas
from app import logger
from app.lib.imaging import open_data_uri

log = logger.get_logger(__name__)

MARGIN = 36
TITLE_SIZE = 20
CAPTION_SIZE = 12
CAPTION_LEADING = 15
CAPTION_BLOCK = 110  # reserved height under each image

# Helvetica only covers Latin-1; CJK captions (ja) go through a CID font
CJK_FONT = "HeiseiKakuGo-W5"
_cjk_registered = False

def _font_for(text: str, bold: bool = False) -> str:
    global _cjk_registered
    if all(ord(ch) <= 0xFF for ch in text or ""):
        return "Helvetica-Bold" if bold else "Helvetica"
    if not _cjk_registered:
        pdfmetrics.registerFont(UnicodeCIDFont(CJK_FONT))
        _cjk_registered = True
    return CJK_FONT

def _wrap(text: str, font: str, size: float, width: float) -> list:
    if " " in text.strip():
        return simpleSplit(text, font, size, width)
    # no word breaks (Japanese): wrap per character
    lines, cur = [], ""
    for ch in text:
        if cur and stringWidth(cur + ch, font, size) > width:
            lines.append(cur)
            cur = ""
        cur += ch
    if cur:
        lines.append(cur)
    return lines

class PanelLike(Protocol):
    image_url: Optional[str]
    caption: Optional[str]
    order_index: int

def _draw_caption(c: canvas.Canvas, text: str, top: float, width: float) -> None:
    font = _font_for(text)
    lines = _wrap(text, font, CAPTION_SIZE, width)
    c.setFont(font, CAPTION_SIZE)
    y = top
    for line in lines:
        if y < MARGIN:
            break
        c.drawCentredString(A4[0] / 2, y, line)
        y -= CAPTION_LEADING

def make_comic_pdf(title: str, panels: Iterable[PanelLike]) -> bytes:
    """
    One A4 page per panel: image scaled to fit and centred, caption underneath.
    The comic title heads the first page.
    """
    panels = list(panels)
    log.info(f"Combining {len(panels)} panels into PDF: {title!r}")
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(title)
    w, h = A4
    box_w = w - 2 * MARGIN

    for i, panel in enumerate(panels):
        top = h - MARGIN
        if i == 0:
            c.setFont(_font_for(title, bold=True), TITLE_SIZE)
            c.drawCentredString(w / 2, top - TITLE_SIZE, title)
            top -= TITLE_SIZE + 16
        box_h = top - MARGIN - CAPTION_BLOCK

        try:
            img = open_data_uri(panel.image_url)
        except ValueError as e:
            log.warning(f"panel {panel.order_index} rendered without image: {e}")
            img = None

        caption_top = top - 10
        if img is not None:
            img_ratio = img.width / img.height
            if box_w / box_h > img_ratio:
                ih = box_h
                iw = ih * img_ratio
            else:
                iw = box_w
                ih = iw / img_ratio
            x = (w - iw) / 2
            y = top - ih
            c.drawImage(ImageReader(img), x, y, iw, ih)
            caption_top = y - 20

        if panel.caption:
            _draw_caption(c, panel.caption, caption_top, box_w)
        c.showPage()

    if not panels:
        c.setFont(_font_for(title, bold=True), TITLE_SIZE)
        c.drawCentredString(w / 2, h - MARGIN - TITLE_SIZE, title)
        c.showPage()
    c.save()
    return buf.getvalue()
