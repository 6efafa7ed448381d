"""画像I/O（Pillow ベース）。

画像のデコード、リサイズ、JPEG保存を担当。
"""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image

from thumb_render.domain.errors import ImageDecodeError, ImageIOError
from thumb_render.domain.image_model import ImageFormat


def read_bytes(path: str | Path) -> bytes:
    """ファイル全体を読み込む。"""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ImageIOError(f"cannot read {path}: {e}") from e


_HIGH_BIT_MODES = ("I;16", "I;16B", "I;16L", "I")
_BLACK_RGBA = (0, 0, 0, 255)


def _to_rgb(img: Image.Image) -> Image.Image:
    """デコード済み画像を 8bit RGB に変換。

    16bit グレースケールは上位8bitに縮小し、透過画像は黒背景に合成する。
    """
    if img.mode in _HIGH_BIT_MODES:
        wide = np.asarray(img).astype(np.uint32) >> 8
        gray = np.clip(wide, 0, 255).astype(np.uint8)
        return Image.fromarray(gray).convert("RGB")

    if img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info:
        rgba = img.convert("RGBA")
        background = Image.new("RGBA", rgba.size, _BLACK_RGBA)
        return Image.alpha_composite(background, rgba).convert("RGB")

    return img.convert("RGB")


def decode_image(data: bytes, image_format: ImageFormat) -> npt.NDArray[np.uint8]:
    """形式に対応するデコーダで画像をデコードし、RGB配列として返す。

    Args:
        data: 画像バイト列
        image_format: detect_signature の判定結果 (JPEG または PNG)

    Returns:
        (H, W, 3) の uint8 配列 (RGB)

    Raises:
        ImageDecodeError: 未対応形式、または壊れたデータ
    """
    pil_format = image_format.pil_format
    if pil_format is None:
        raise ImageDecodeError(f"no decoder for {image_format.value}")

    try:
        with Image.open(io.BytesIO(data), formats=[pil_format]) as img:
            img = _to_rgb(img)
            return np.array(img, dtype=np.uint8)
    except (OSError, ValueError, SyntaxError) as e:
        raise ImageDecodeError(f"cannot decode {pil_format} data: {e}") from e


def resize_image(
    array: npt.NDArray[np.uint8],
    target_width: int,
    target_height: int,
) -> npt.NDArray[np.uint8]:
    """画像を Lanczos で指定サイズにリサイズ（アスペクト比は維持しない）。

    Args:
        array: (H, W, 3) の uint8 配列
        target_width: 目標幅
        target_height: 目標高さ

    Returns:
        (target_height, target_width, 3) の uint8 配列
    """
    img = Image.fromarray(array)
    img = img.resize((target_width, target_height), Image.Resampling.LANCZOS)
    return np.array(img, dtype=np.uint8)


def save_jpeg(array: npt.NDArray[np.uint8], path: str | Path) -> None:
    """RGB配列をデフォルト品質の JPEG として保存（既存ファイルは上書き）。"""
    img = Image.fromarray(array)
    try:
        img.save(path, format="JPEG")
    except OSError as e:
        raise ImageIOError(f"cannot write {path}: {e}") from e
