"""画像ドメインモデル。"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from thumb_render.domain.color import ColorScheme, select_scheme

# --- キャンバス定数 ---

CANVAS_SIZE = 300
RULER_INSET = 10
BODY_MARGIN_X = 20
MAX_BODY_LINES = 12

IMAGE_DIR_NAME = ".images"
TEXT_OUTPUT_NAME = "out.jpeg"
JPG_EXTEND = "jpg"


class ImageFormat(Enum):
    """シグネチャから判定した画像形式。"""

    JPEG = "jpeg"
    PNG = "png"
    OTHER = "other"

    @property
    def pil_format(self) -> str | None:
        """Pillow のデコーダ名。OTHER は None。"""
        if self is ImageFormat.JPEG:
            return "JPEG"
        if self is ImageFormat.PNG:
            return "PNG"
        return None


class Hinting(Enum):
    """フォントのヒンティングモード。"""

    NONE = "none"
    FULL = "full"


class ResizeStatus(Enum):
    """リサイズ処理の結果種別。"""

    WRITTEN = "written"
    SKIPPED_UNSUPPORTED = "skipped: unsupported format"


@dataclass(frozen=True)
class RenderConfig:
    """テキスト描画の設定。呼び出しごとに明示的に渡す。"""

    font_path: Path | None = None
    dpi: float = 72.0
    hinting: Hinting = Hinting.NONE
    size: float = 14.0
    spacing: float = 1.5
    white_on_black: bool = False

    @property
    def colors(self) -> ColorScheme:
        return select_scheme(self.white_on_black)

    @property
    def pixel_size(self) -> float:
        """ポイントサイズをピクセルに換算 (size * dpi / 72)。"""
        return self.size * self.dpi / 72

    @property
    def first_baseline(self) -> int:
        """キャプションのベースライン y 座標。"""
        return RULER_INSET + math.ceil(self.pixel_size)

    @property
    def line_advance(self) -> int:
        """1行あたりの送り量 (px)。"""
        return math.ceil(self.size * self.spacing * self.dpi / 72)


@dataclass(frozen=True)
class ResizeResult:
    """リサイズ処理の結果。"""

    status: ResizeStatus
    source: Path
    detected: ImageFormat
    output: Path | None = None

    @property
    def skipped(self) -> bool:
        return self.status is ResizeStatus.SKIPPED_UNSUPPORTED


@dataclass(frozen=True)
class DrawnLine:
    """描画済みの1行。(x, y) は左端・ベースライン。"""

    text: str
    x: float
    y: int


@dataclass
class TextRenderResult:
    """テキスト描画の結果。"""

    output: Path
    caption: DrawnLine
    lines: list[DrawnLine] = field(default_factory=list)
