"""__main__.py のテスト。"""

import tempfile
from pathlib import Path

import numpy as np
from PIL import Image

from thumb_render.__main__ import build_parser, config_from_args, main
from thumb_render.domain.image_model import Hinting


class TestParser:
    def test_text_defaults(self) -> None:
        args = build_parser().parse_args(["text", "cap", "file.txt"])
        config = config_from_args(args)
        assert config.dpi == 72
        assert config.font_path is None
        assert config.hinting is Hinting.NONE
        assert config.size == 14
        assert config.spacing == 1.5
        assert config.white_on_black is False

    def test_text_options(self) -> None:
        args = build_parser().parse_args([
            "text", "cap", "file.txt", "--dpi", "96", "--hinting", "full",
            "--size", "10", "--spacing", "2", "--whiteonblack",
            "--fontfile", "font.ttf",
        ])
        config = config_from_args(args)
        assert config.dpi == 96
        assert config.hinting is Hinting.FULL
        assert config.size == 10
        assert config.spacing == 2
        assert config.white_on_black is True
        assert config.font_path == Path("font.ttf")


class TestMain:
    def setup_method(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def teardown_method(self) -> None:
        self._tmp.cleanup()

    def test_resize(self) -> None:
        source = self.tmp / "pic.png"
        Image.fromarray(np.zeros((20, 20, 3), dtype=np.uint8)).save(source)
        code = main(["--root", str(self.tmp), "resize", str(source), "--size", "8"])
        assert code == 0
        assert (self.tmp / ".images" / "pic.jpg").exists()

    def test_resize_unsupported(self) -> None:
        source = self.tmp / "doc.txt"
        source.write_text("hello")
        code = main(["--root", str(self.tmp), "resize", str(source), "--size", "8"])
        assert code == 0
        assert not (self.tmp / ".images").exists()

    def test_text(self) -> None:
        text = self.tmp / "notes.txt"
        text.write_text("a\nb\n")
        code = main(["--root", str(self.tmp), "text", "notes", str(text)])
        assert code == 0
        assert (self.tmp / ".images" / "out.jpeg").exists()

    def test_error_exit_code(self) -> None:
        code = main(["--root", str(self.tmp), "text", "x", str(self.tmp / "missing.txt")])
        assert code == 1

    def test_text_multiline_caption(self) -> None:
        text = self.tmp / "notes.txt"
        text.write_text("a\n")
        code = main(["--root", str(self.tmp), "text", "odd\nname", str(text)])
        assert code == 0
        assert (self.tmp / ".images" / "out.jpeg").exists()
