"""描画キャンバスの生成と罫線描画（NumPy ベース）。"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from thumb_render.domain.color import RGB
from thumb_render.domain.image_model import CANVAS_SIZE, RULER_INSET


def new_canvas(
    background: RGB,
    width: int = CANVAS_SIZE,
    height: int = CANVAS_SIZE,
) -> npt.NDArray[np.uint8]:
    """背景色で塗りつぶした (H, W, 3) uint8 キャンバスを生成。"""
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = background.to_tuple()
    return canvas


def draw_ruler(
    canvas: npt.NDArray[np.uint8],
    color: RGB,
    inset: int = RULER_INSET,
) -> None:
    """キャンバスの四辺から inset px 内側に罫線を描く（in-place）。

    縦線は x=inset, x=W-inset 上の y∈[inset, H-inset)、
    横線は y=inset, y=H-inset 上の x∈[inset, W-inset)。
    右下隅 (W-inset, H-inset) は塗らない。
    """
    h, w = canvas.shape[:2]
    value = color.to_tuple()
    canvas[inset : h - inset, inset] = value
    canvas[inset : h - inset, w - inset] = value
    canvas[inset, inset : w - inset] = value
    canvas[h - inset, inset : w - inset] = value
