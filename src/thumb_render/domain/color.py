"""描画用カラー定義とカラースキーム。

Pure Pythonで実装（外部ライブラリ依存なし）。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """RGB色空間の色。各チャンネル 0-255。"""

    r: int
    g: int
    b: int

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class ColorScheme:
    """文字色・背景色・罫線色の組。"""

    foreground: RGB
    background: RGB
    ruler: RGB


# --- 基本色 ---

WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)
RULER_LIGHT = RGB(0xDD, 0xDD, 0xDD)
RULER_DARK = RGB(0x22, 0x22, 0x22)

# --- スキーム ---

LIGHT_SCHEME = ColorScheme(foreground=BLACK, background=WHITE, ruler=RULER_LIGHT)
DARK_SCHEME = ColorScheme(foreground=WHITE, background=BLACK, ruler=RULER_DARK)


def select_scheme(white_on_black: bool) -> ColorScheme:
    """白黒反転フラグからカラースキームを選択。"""
    return DARK_SCHEME if white_on_black else LIGHT_SCHEME
