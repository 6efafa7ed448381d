"""ファイル種別の判定。

拡張子ベースの is_image と、マジックバイトによる detect_signature の2系統。
is_image は "jpeg" 拡張子を受け付けないが、detect_signature は JPEG を受け付ける。
この差異は意図的に残している。
"""

from __future__ import annotations

from pathlib import Path

from thumb_render.domain.errors import ImageIOError
from thumb_render.domain.image_model import ImageFormat, JPG_EXTEND

PNG_EXTEND = "png"

_JPEG_MAGIC = b"\xff\xd8\xff"
_PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
_HEADER_SIZE = len(_PNG_MAGIC)


def file_extend(path: str | Path) -> str:
    """最後の "." 以降の文字列を返す。"." が無ければ全体を返す。"""
    return str(path).rsplit(".", 1)[-1]


def is_image(path: str | Path) -> bool:
    """拡張子が "jpg" または "png" か（大文字小文字を区別）。"""
    return file_extend(path) in (JPG_EXTEND, PNG_EXTEND)


def detect_signature(source: bytes | str | Path) -> ImageFormat:
    """先頭バイトから画像形式を判定。

    Args:
        source: 画像バイト列、またはファイルパス（ヘッダのみ読み込む）

    Returns:
        ImageFormat.JPEG / PNG / OTHER

    Raises:
        ImageIOError: パスの読み込みに失敗した場合
    """
    if isinstance(source, (bytes, bytearray)):
        header = bytes(source[:_HEADER_SIZE])
    else:
        try:
            with open(source, "rb") as f:
                header = f.read(_HEADER_SIZE)
        except OSError as e:
            raise ImageIOError(f"cannot read {source}: {e}") from e

    if header.startswith(_PNG_MAGIC):
        return ImageFormat.PNG
    if header.startswith(_JPEG_MAGIC):
        return ImageFormat.JPEG
    return ImageFormat.OTHER
