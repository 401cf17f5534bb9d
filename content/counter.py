"""두 자리 카운터 밈 합성 모듈."""

import logging

from PIL import Image

from renderer.canvas import rotated_180
from renderer.layers import LayerCompositor
from renderer.layout import Box, DigitPairLayout

from .assets import AssetCache

logger = logging.getLogger(__name__)

# heatingup.png 위 숫자 슬롯
DEFAULT_SLOT = Box(x=507, y=182, width=54, height=54)
DEFAULT_GAP = 2

MIN_VALUE = 0
MAX_VALUE = 99


def clamp(value: int) -> int:
    """값을 0~99 범위로 자른다."""
    return max(MIN_VALUE, min(MAX_VALUE, value))


class DigitPairComposer:
    """카운터 값을 두 자리 글리프로 배경 위에 그린다."""

    def __init__(self, assets: AssetCache, slot: Box = DEFAULT_SLOT, gap: int = DEFAULT_GAP):
        self._assets = assets
        self._layout = DigitPairLayout(slot, gap)
        self._compositor = LayerCompositor()

    @property
    def layout(self) -> DigitPairLayout:
        return self._layout

    def render(self, value: int) -> Image.Image:
        """값을 합성한 새 이미지를 반환한다. 크기는 배경과 같다."""
        value = clamp(value)
        tens, ones = divmod(value, 10)

        tens_img = self._assets.glyph(tens)
        ones_img = self._assets.glyph(ones)
        tens_place, ones_place = self._layout.place(tens_img.size, ones_img.size)

        # resize는 새 이미지를 만들므로 캐시 원본은 그대로다
        tens_scaled = tens_img.resize(tens_place.size, Image.Resampling.LANCZOS)
        ones_scaled = ones_img.resize(ones_place.size, Image.Resampling.LANCZOS)

        logger.debug("값 %02d: 배율 %.3f, 십 %s @ %s, 일 %s @ %s", value, tens_place.scale,
                     tens_place.size, tens_place.position, ones_place.size, ones_place.position)

        return self._compositor.compose(
            self._assets.background(),
            overlays=[
                (tens_scaled, tens_place.position),
                (ones_scaled, ones_place.position),
            ],
        )

    def render_mirrored(self, value: int) -> Image.Image:
        """render() 결과 전체를 180° 회전한 이미지."""
        return rotated_180(self.render(value))

    def compose_digit_pair(self, value: int, mirrored: bool = False) -> Image.Image:
        if mirrored:
            return self.render_mirrored(value)
        return self.render(value)
