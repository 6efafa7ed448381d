"""color.py のテスト。"""

import pytest

from thumb_render.domain.color import (
    BLACK,
    DARK_SCHEME,
    LIGHT_SCHEME,
    RGB,
    WHITE,
    select_scheme,
)


class TestRGB:
    def test_to_tuple(self) -> None:
        assert RGB(1, 2, 3).to_tuple() == (1, 2, 3)

    def test_frozen(self) -> None:
        color = RGB(0, 0, 0)
        with pytest.raises(AttributeError):
            color.r = 10  # type: ignore[misc]


class TestSelectScheme:
    def test_light_scheme(self) -> None:
        scheme = select_scheme(False)
        assert scheme is LIGHT_SCHEME
        assert scheme.foreground == BLACK
        assert scheme.background == WHITE
        assert scheme.ruler == RGB(0xDD, 0xDD, 0xDD)

    def test_dark_scheme(self) -> None:
        scheme = select_scheme(True)
        assert scheme is DARK_SCHEME
        assert scheme.foreground == WHITE
        assert scheme.background == BLACK
        assert scheme.ruler == RGB(0x22, 0x22, 0x22)
