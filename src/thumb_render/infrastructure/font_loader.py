"""フォント読み込み（Pillow FreeType）。"""

from __future__ import annotations

from PIL import ImageFont

from thumb_render.domain.errors import FontLoadError
from thumb_render.domain.image_model import Hinting, RenderConfig


def load_font(config: RenderConfig) -> ImageFont.FreeTypeFont:
    """設定のフォントを size * dpi / 72 px で読み込む。

    font_path 未指定時は Pillow 同梱のデフォルトフォントを使う。

    Raises:
        FontLoadError: ファイルが無い、または解析できない場合
    """
    pixel_size = config.pixel_size
    if pixel_size <= 0:
        raise FontLoadError(f"font size must be positive, got {pixel_size}")

    if config.font_path is None:
        font = ImageFont.load_default(size=pixel_size)
        # FreeType 無しの Pillow ではビットマップフォントが返り、サイズ指定できない
        if not isinstance(font, ImageFont.FreeTypeFont):
            raise FontLoadError("bundled font requires Pillow built with FreeType")
        return font

    try:
        return ImageFont.truetype(str(config.font_path), pixel_size)
    except (OSError, ValueError) as e:
        raise FontLoadError(f"cannot load font {config.font_path}: {e}") from e


def font_mode(hinting: Hinting) -> str:
    """ヒンティングモードを ImageDraw.fontmode に対応付ける。

    NONE はアンチエイリアス ("L")、FULL はグリッドフィットした2値 ("1")。
    """
    return "1" if hinting is Hinting.FULL else "L"
