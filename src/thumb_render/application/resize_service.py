"""リサイズ・再圧縮ユースケース。

シグネチャ判定→読み込み→デコード→Lanczosリサイズ→JPEG出力。
"""

from __future__ import annotations

import logging
from pathlib import Path

from thumb_render.domain.image_model import (
    JPG_EXTEND,
    ImageFormat,
    ResizeResult,
    ResizeStatus,
)
from thumb_render.infrastructure.format_classifier import detect_signature
from thumb_render.infrastructure.image_io import (
    decode_image,
    read_bytes,
    resize_image,
    save_jpeg,
)
from thumb_render.infrastructure.output_dir import OutputDirectory

log = logging.getLogger(__name__)

SUPPORTED_FORMATS = (ImageFormat.JPEG, ImageFormat.PNG)


def output_name(image_path: str | Path) -> str:
    """入力のベース名から最後の拡張子だけを除き ".jpg" を付けたファイル名。

    途中の "." は残す (a.b.png → a.b.jpg)。
    """
    return f"{Path(image_path).stem}.{JPG_EXTEND}"


class ResizeService:
    """画像を正方形にリサイズして JPEG で保存するサービス。"""

    def __init__(self, output_dir: OutputDirectory) -> None:
        self._output_dir = output_dir

    def resize(self, image_path: str | Path, target_size: int) -> ResizeResult:
        """画像を target_size × target_size にリサイズし JPEG で保存。

        JPEG/PNG 以外は書き込みを行わず SKIPPED_UNSUPPORTED を返す。

        Args:
            image_path: 入力画像パス
            target_size: 出力の一辺 (px)

        Returns:
            処理結果

        Raises:
            ValueError: target_size が正でない場合
            ImageIOError: 読み書きに失敗した場合
            ImageDecodeError: デコードに失敗した場合
            OutputDirError: 出力ディレクトリを用意できない場合
        """
        if target_size <= 0:
            raise ValueError(f"target_size must be positive, got {target_size}")

        source = Path(image_path)
        detected = detect_signature(source)
        if detected not in SUPPORTED_FORMATS:
            log.debug("skip %s: unsupported format", source)
            return ResizeResult(
                status=ResizeStatus.SKIPPED_UNSUPPORTED,
                source=source,
                detected=detected,
            )

        data = read_bytes(source)
        pixels = decode_image(data, detected)
        resized = resize_image(pixels, target_size, target_size)

        output = self._output_dir.ensure() / output_name(source)
        save_jpeg(resized, output)
        log.info(
            "resized %s (%dx%d) -> %s (%dx%d)",
            source, pixels.shape[1], pixels.shape[0],
            output, target_size, target_size,
        )
        return ResizeResult(
            status=ResizeStatus.WRITTEN,
            source=source,
            detected=detected,
            output=output,
        )
