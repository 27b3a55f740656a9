# main.py
import sys
import argparse

from config import SAMPLE_OUTPUT_FILE, SAMPLE_TEXT, apply_defaults, load_settings
from logger import logger, get_error_summary
from models import FillMode, PageConfigurationError, LayoutError
from pdf_handler import PdfDocument, stamp_pdf


def build_parser() -> argparse.ArgumentParser:
    settings = apply_defaults(load_settings())
    parser = argparse.ArgumentParser(
        description="Write a word-wrapped, aligned text block inside the page margins"
    )
    parser.add_argument("output", nargs="?", default=SAMPLE_OUTPUT_FILE, help="Output PDF file")
    parser.add_argument("--page-size", default=settings["page_size"], help="Page size preset (A4, letter, ...)")
    parser.add_argument("--units", default=settings["units"], help="Units for margins (point, inch, mm, cm)")
    parser.add_argument("--margin", type=float, default=settings["margin"], help="Margin on every side")
    parser.add_argument("--font", default=settings["font_name"], help="Font name")
    parser.add_argument("--font-size", type=float, default=settings["font_size"], help="Font size (pt)")
    parser.add_argument("--line-spacing", type=float, default=settings["line_spacing"], help="Line spacing factor")
    parser.add_argument("--align", default=settings["align"], help="left, center, right or a fraction")
    parser.add_argument("--text-file", help="Read the text from this file instead of the sample text")
    parser.add_argument("--stamp-onto", help="Merge the page onto the first page of this PDF")
    return parser


def _parse_align(value: str):
    try:
        return float(value)
    except ValueError:
        return value


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    text = SAMPLE_TEXT
    if args.text_file:
        with open(args.text_file, "r", encoding="utf-8") as f:
            text = f.read()

    document = PdfDocument(title="SimplePage example")
    try:
        page = document.new_page(args.page_size, args.units)
        page.set_all_margins(args.margin)

        # Dashed rectangle around the margin box
        page.set_line_width(0.5)
        page.set_line_dashing_pattern([5, 3])
        page.draw_rectangle(0, 0, page.get_inner_width(), page.get_inner_height(), FillMode.STROKE)
        page.set_line_dashing_pattern([])

        page.set_font(args.font, args.font_size)
        page.set_line_spacing(args.line_spacing)
        page.draw_text_block(text, 0, _parse_align(args.align))
    except (PageConfigurationError, LayoutError, ValueError) as e:
        logger.error(f"Invalid layout settings: {e}")
        return 1

    if args.stamp_onto:
        result = stamp_pdf(document, args.stamp_onto, args.output)
        if not result.success:
            logger.error(f"Stamping failed: {result.error}")
            return 1
    else:
        document.save(args.output)

    summary = get_error_summary()
    if summary["total_warnings"]:
        logger.info(f"Finished with {summary['total_warnings']} warning(s): {summary['warning_types']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
