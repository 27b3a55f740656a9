# pdf_handler.py
from io import BytesIO
from typing import List, Optional

from PyPDF2 import PdfReader, PdfWriter
from reportlab.pdfgen import canvas

from config import APP_VERSION, DEFAULT_PAGE_SIZE, DEFAULT_UNITS
from geometry_context import PageSizeSpec
from logger import logger, log_performance, track_error
from models import StampResult
from page import Page
from unit_converter import UnitSpec


class PdfDocument:
    """An ordered collection of pages that can be written out as one PDF."""

    def __init__(self, title: Optional[str] = None, author: Optional[str] = None):
        self.pages: List[Page] = []
        self.title = title
        self.author = author

    def new_page(self, page_size: PageSizeSpec = DEFAULT_PAGE_SIZE, units: UnitSpec = DEFAULT_UNITS) -> Page:
        page = Page(page_size, units)
        self.pages.append(page)
        return page

    def add_page(self, page: Page) -> Page:
        self.pages.append(page)
        return page

    def _render(self, output):
        if not self.pages:
            raise ValueError("Cannot render a document without pages")
        first = self.pages[0].native
        can = canvas.Canvas(output, pagesize=(first.get_width(), first.get_height()))
        can.setCreator(f"SimplePage {APP_VERSION}")
        if self.title:
            can.setTitle(self.title)
        if self.author:
            can.setAuthor(self.author)
        for page in self.pages:
            # each page keeps its own size
            page.native.render(can)
            can.showPage()
        can.save()

    @log_performance("render document", context="PdfDocument")
    def to_bytes(self) -> bytes:
        packet = BytesIO()
        self._render(packet)
        return packet.getvalue()

    @log_performance("save document", context="PdfDocument")
    def save(self, path: str):
        self._render(path)
        logger.info(f"[Document] Saved {len(self.pages)} page(s) to {path}")


def stamp_pdf(document: PdfDocument, input_path: str, output_path: str) -> StampResult:
    """
    Merge the document's pages onto the pages of an existing PDF.

    Page i of the document is merged onto page i of the source; source pages
    beyond the document's page count are copied unchanged, surplus document
    pages are ignored.

    Returns:
        StampResult: success flag, error message if any and stamped page count.
    """
    try:
        overlay = PdfReader(BytesIO(document.to_bytes()))
        reader = PdfReader(input_path)
        writer = PdfWriter()
        stamped = 0

        for i, page in enumerate(reader.pages):
            if i < len(overlay.pages):
                page.merge_page(overlay.pages[i])
                stamped += 1
            writer.add_page(page)

        if len(overlay.pages) > len(reader.pages):
            logger.warning(
                f"[Stamp] {len(overlay.pages) - len(reader.pages)} page(s) have no counterpart in {input_path}"
            )

        with open(output_path, "wb") as f:
            writer.write(f)

        logger.info(f"[Stamp] Stamped {stamped} page(s): {input_path} -> {output_path}")
        return StampResult(input=input_path, output=output_path, pages_stamped=stamped)
    except Exception as e:
        track_error("Stamp", f"Failed to stamp {input_path}: {e}", e)
        return StampResult(input=input_path, success=False, error=str(e))
