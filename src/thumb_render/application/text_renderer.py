"""テキスト画像化ユースケース。

300×300 キャンバスに罫線・中央寄せキャプション・テキストファイル先頭
最大12行を描画し、".images/out.jpeg" に保存する。
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from thumb_render.domain.errors import ImageIOError
from thumb_render.domain.image_model import (
    BODY_MARGIN_X,
    CANVAS_SIZE,
    MAX_BODY_LINES,
    TEXT_OUTPUT_NAME,
    DrawnLine,
    RenderConfig,
    TextRenderResult,
)
from thumb_render.infrastructure.canvas import draw_ruler, new_canvas
from thumb_render.infrastructure.font_loader import font_mode, load_font
from thumb_render.infrastructure.image_io import save_jpeg
from thumb_render.infrastructure.output_dir import OutputDirectory

log = logging.getLogger(__name__)


def centered_x(measured_width: float, canvas_width: int = CANVAS_SIZE) -> float:
    """幅 measured_width の文字列を水平中央に置く左端 x 座標。"""
    return (canvas_width - measured_width) / 2


def single_line(text: str) -> str:
    """改行を空白に置き換え、1行として描画できる文字列にする。"""
    return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")


def read_head_lines(text_path: str | Path, limit: int = MAX_BODY_LINES) -> list[str]:
    """テキストファイルの先頭 limit 行を改行を除いて返す。

    行区切りは "\\n" のみ。行末の "\\r" は1つだけ取り除く。
    """
    lines: list[str] = []
    try:
        with open(text_path, encoding="utf-8", errors="replace", newline="\n") as f:
            for line in itertools.islice(f, limit):
                if line.endswith("\n"):
                    line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
                lines.append(line)
    except OSError as e:
        raise ImageIOError(f"cannot open {text_path}: {e}") from e
    return lines


class TextRenderer:
    """キャプションとテキストファイル先頭行を画像化するサービス。"""

    def __init__(self, output_dir: OutputDirectory, config: RenderConfig | None = None) -> None:
        self._output_dir = output_dir
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, caption: str, text_path: str | Path) -> TextRenderResult:
        """キャプションとテキストを描画して JPEG 保存。

        Args:
            caption: 上部中央に描くキャプション
            text_path: 本文として先頭 MAX_BODY_LINES 行を描くテキストファイル

        Returns:
            出力パスと描画した各行の位置

        Raises:
            FontLoadError: フォント読み込み失敗
            ImageIOError: テキストファイルのオープン、または出力の書き込み失敗
            OutputDirError: 出力ディレクトリを用意できない場合
        """
        config = self._config
        font = load_font(config)
        colors = config.colors

        # 背景と罫線
        canvas = new_canvas(colors.background)
        draw_ruler(canvas, colors.ruler)

        img = Image.fromarray(canvas)
        draw = ImageDraw.Draw(img)
        draw.fontmode = font_mode(config.hinting)
        fill = colors.foreground.to_tuple()

        y = config.first_baseline
        dy = config.line_advance

        # キャプション（水平中央、ベースライン基準）
        caption = single_line(caption)
        x = centered_x(draw.textlength(caption, font=font))
        draw.text((x, y), caption, fill=fill, font=font, anchor="ls")
        drawn_caption = DrawnLine(caption, x, y)
        y += dy

        # 本文（折り返しなし。キャンバス外の行は切り捨てられる）
        drawn: list[DrawnLine] = []
        for line in read_head_lines(text_path):
            log.debug("draw line y=%d: %s", y, line)
            draw.text((BODY_MARGIN_X, y), line, fill=fill, font=font, anchor="ls")
            drawn.append(DrawnLine(line, BODY_MARGIN_X, y))
            y += dy

        output = self._output_dir.ensure() / TEXT_OUTPUT_NAME
        save_jpeg(np.array(img, dtype=np.uint8), output)
        log.info("rendered %d lines of %s -> %s", len(drawn), text_path, output)
        return TextRenderResult(output=output, caption=drawn_caption, lines=drawn)
