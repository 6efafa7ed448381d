"""エントリーポイント: uv run python -m thumb_render"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from thumb_render.application.resize_service import ResizeService
from thumb_render.application.text_renderer import TextRenderer
from thumb_render.domain.errors import ThumbRenderError
from thumb_render.domain.image_model import Hinting, RenderConfig
from thumb_render.infrastructure.output_dir import OutputDirectory

log = logging.getLogger("thumb_render")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thumb_render",
        description="Resize images to JPEG thumbnails or render a text file preview.",
    )
    parser.add_argument(
        "--root", type=Path, default=Path.cwd(),
        help="storage root; output goes to <root>/.images",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    resize = sub.add_parser("resize", help="resize a JPEG/PNG to a square JPEG")
    resize.add_argument("path", type=Path)
    resize.add_argument("--size", type=int, required=True, help="output side length in px")

    text = sub.add_parser("text", help="render a caption and the head of a text file")
    text.add_argument("caption")
    text.add_argument("text_file", type=Path)
    text.add_argument("--dpi", type=float, default=72, help="screen resolution in Dots Per Inch")
    text.add_argument(
        "--fontfile", type=Path, default=None,
        help="filename of the ttf font (default: bundled font)",
    )
    text.add_argument(
        "--hinting", choices=[h.value for h in Hinting], default=Hinting.NONE.value,
        help="none | full",
    )
    text.add_argument("--size", type=float, default=14, help="font size in points")
    text.add_argument(
        "--spacing", type=float, default=1.5,
        help="line spacing (e.g. 2 means double spaced)",
    )
    text.add_argument(
        "--whiteonblack", action="store_true",
        help="white text on a black background",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        font_path=args.fontfile,
        dpi=args.dpi,
        hinting=Hinting(args.hinting),
        size=args.size,
        spacing=args.spacing,
        white_on_black=args.whiteonblack,
    )


def main(argv: list[str] | None = None) -> int:
    debug = os.environ.get("THUMB_RENDER_DEBUG", "").lower() == "true"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = build_parser().parse_args(argv)
    output_dir = OutputDirectory(args.root)

    try:
        if args.command == "resize":
            result = ResizeService(output_dir).resize(args.path, args.size)
            if result.skipped:
                log.warning("%s: %s", result.source, result.status.value)
            else:
                print(result.output)
        else:
            rendered = TextRenderer(output_dir, config_from_args(args)).render(
                args.caption, args.text_file,
            )
            print(rendered.output)
    except ThumbRenderError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
