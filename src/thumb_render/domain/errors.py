"""例外定義。

未対応フォーマットは例外ではなく ResizeStatus.SKIPPED_UNSUPPORTED で表す。
"""

from __future__ import annotations


class ThumbRenderError(Exception):
    """thumb_render の基底例外。"""


class ImageIOError(ThumbRenderError):
    """ファイルの読み書き・オープン・作成の失敗。"""


class ImageDecodeError(ThumbRenderError):
    """画像バイト列のデコード失敗。"""


class FontLoadError(ThumbRenderError):
    """フォントリソースの読み込み・解析失敗。"""


class OutputDirError(ThumbRenderError):
    """出力ディレクトリの作成失敗、または同名ファイルとの衝突。"""
