"""出力ディレクトリ管理。

ストレージルート直下の ".images" を書き込み先とする。
"""

from __future__ import annotations

import logging
from pathlib import Path

from thumb_render.domain.errors import OutputDirError
from thumb_render.domain.image_model import IMAGE_DIR_NAME

log = logging.getLogger(__name__)

# owner rwx, group r-x
IMAGE_DIR_MODE = 0o750


class OutputDirectory:
    """ストレージルート配下の出力ディレクトリ。"""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def path(self) -> Path:
        return self._root / IMAGE_DIR_NAME

    def ensure(self) -> Path:
        """出力ディレクトリを必要なら作成し、そのパスを返す。

        既にディレクトリとして存在する場合は何もしない。

        Raises:
            OutputDirError: 作成失敗、または同名の非ディレクトリが存在する場合
        """
        path = self.path
        if path.is_dir():
            return path
        if path.exists():
            raise OutputDirError(f"{path} exists and is not a directory")

        try:
            path.mkdir(mode=IMAGE_DIR_MODE)
        except FileExistsError:
            # 並行作成
            if not path.is_dir():
                raise OutputDirError(f"{path} exists and is not a directory") from None
        except OSError as e:
            raise OutputDirError(f"cannot create {path}: {e}") from e
        else:
            log.info("created image directory %s", path)
        return path
