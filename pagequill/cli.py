"""
Command-line interface for PageQuill.

Usage:
    pagequill render input.txt --output output.pdf
    pagequill render input.txt -o out.pdf --page-size A4 --justify left
    pagequill version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .blocks.spacers import SpacerHeight
from .blocks.wrap import WrapFrame
from .config import PAGE_SIZE_NAMES, PageConfig
from .document import PdfDocument
from .engine.layout import Justification
from .engine.quill import FONT_FAMILIES
from .exceptions import PageQuillError
from .utils.logger import LOG_LEVELS, configure_logging

logger = logging.getLogger(__name__)

PARAGRAPH_SPACING = 0.5  # line heights between paragraphs


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pagequill",
        description="PageQuill - paginate text into PDF pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pagequill render notes.txt --output notes.pdf
  pagequill render notes.txt -o notes.pdf --page-size A4 --font helvetica --justify left
  pagequill version
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a text file to PDF")
    render_parser.add_argument("input", help="Input text file; blank lines separate paragraphs")
    render_parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: input name with .pdf extension)"
    )
    render_parser.add_argument(
        "--page-size",
        type=str.upper,
        choices=PAGE_SIZE_NAMES,
        default="LETTER",
        help="Page size (default: LETTER)"
    )
    render_parser.add_argument(
        "--margin",
        type=float,
        default=36.0,
        help="Margin on every side in points (default: 36)"
    )
    render_parser.add_argument(
        "--font",
        choices=sorted(FONT_FAMILIES),
        default="times",
        help="Font family (default: times)"
    )
    render_parser.add_argument(
        "--font-size",
        type=float,
        default=10.0,
        help="Font size in points (default: 10)"
    )
    render_parser.add_argument(
        "--justify",
        choices=[justification.value for justification in Justification],
        default=Justification.FULL.value,
        help="Paragraph justification (default: full)"
    )
    render_parser.add_argument(
        "--max-pages",
        type=int,
        default=1000,
        help="Give up after this many pages (default: 1000)"
    )
    render_parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def read_paragraphs(text: str) -> List[str]:
    """Split text into paragraphs on blank lines, joining wrapped lines."""
    paragraphs = []
    current: List[str] = []
    for line in text.splitlines():
        if line.strip():
            current.append(line.strip())
        elif current:
            paragraphs.append(" ".join(current))
            current = []
    if current:
        paragraphs.append(" ".join(current))
    return paragraphs


def build_document(paragraphs: List[str], config: PageConfig, justification: Justification) -> PdfDocument:
    """One wrap frame per paragraph, half a line apart, in the default stacked pages."""
    document = PdfDocument(config)
    for index, paragraph in enumerate(paragraphs):
        if index > 0:
            document.write(SpacerHeight(PARAGRAPH_SPACING, font_multiple=True))
        frame = WrapFrame(layout_override=lambda layout: layout.copy_justified(justification))
        frame.write_words(paragraph)
        document.write(frame)
    return document


def cmd_render(args) -> int:
    """Handle render command."""
    configure_logging(args.log_level)
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    try:
        text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        print(f"Error: {input_path} is not valid UTF-8 text: {exc}", file=sys.stderr)
        return 1
    output_path = Path(args.output) if args.output else input_path.with_suffix(".pdf")

    try:
        config = PageConfig.from_dict(
            {
                "page_size": args.page_size,
                "margins": args.margin,
                "font_family": args.font,
                "font_size": args.font_size,
                "max_page_count": args.max_pages,
            }
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    paragraphs = read_paragraphs(text)
    document = build_document(paragraphs, config, Justification(args.justify))
    try:
        pages = document.write_file(output_path)
    except PageQuillError as exc:
        logger.error("Rendering %s failed: %s", input_path, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Saved: {output_path} ({len(pages)} page(s), {len(paragraphs)} paragraph(s))")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"PageQuill v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        return cmd_render(args)
    if args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
