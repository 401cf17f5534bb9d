"""배치 계산 모듈. 예약된 박스 안에 조각의 배율과 위치를 계산한다."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from errors import InvalidGeometryError

if TYPE_CHECKING:
    from content.template import InputField


@dataclass(frozen=True)
class Box:
    """배경 위에 예약된 슬롯 (좌상단 + 크기)."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_field(cls, field: "InputField") -> "Box":
        return cls(field.x, field.y, field.width, field.height)


@dataclass(frozen=True)
class Placement:
    """배율 적용 후 크기와 그릴 위치."""
    size: tuple[int, int]
    position: tuple[int, int]
    scale: float


def fit_scale(content_w: float, content_h: float, box_w: float, box_h: float) -> float:
    """가로·세로 후보 배율 중 작은 값을 반환한다 (종횡비 유지)."""
    if content_w <= 0 or content_h <= 0:
        raise InvalidGeometryError(f"원본 크기가 0 이하: {content_w}x{content_h}")
    if box_w <= 0 or box_h <= 0:
        raise InvalidGeometryError(f"박스 크기가 0 이하: {box_w}x{box_h}")
    scale = min(box_w / content_w, box_h / content_h)
    if scale <= 0:
        raise InvalidGeometryError(f"배율이 0 이하: {scale}")
    return scale


def scale_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """배율을 적용한 크기를 정수로 버림한다."""
    w = int(width * scale)
    h = int(height * scale)
    if w < 1 or h < 1:
        raise InvalidGeometryError(f"{width}x{height} × {scale:.4f} → {w}x{h}")
    return w, h


def fit_into(box: Box, width: int, height: int) -> Placement:
    """조각 하나를 박스에 맞춰 축소/확대하고 가운데 정렬한다."""
    scale = fit_scale(width, height, box.width, box.height)
    w, h = scale_size(width, height, scale)
    x = box.x + (box.width - w) // 2
    y = box.y + (box.height - h) // 2
    return Placement((w, h), (x, y), scale)


class DigitPairLayout:
    """두 자리 숫자 글리프를 한 박스 안에 나란히 배치한다.

    두 글리프는 같은 배율로 함께 줄어들고, 십의 자리는 박스 왼쪽에서,
    일의 자리는 박스 오른쪽에서 같은 여백만큼 떨어져 놓인다.
    """

    def __init__(self, box: Box, gap: int = 2):
        if box.width <= 0 or box.height <= 0:
            raise InvalidGeometryError(f"박스 크기가 0 이하: {box.width}x{box.height}")
        self._box = box
        self._gap = gap

    def scale_for(self, tens_size: tuple[int, int], ones_size: tuple[int, int]) -> float:
        """두 글리프에 공통으로 적용할 배율."""
        combined_w = tens_size[0] + ones_size[0] + self._gap
        max_h = max(tens_size[1], ones_size[1])
        return fit_scale(combined_w, max_h, self._box.width, self._box.height)

    def place(self, tens_size: tuple[int, int],
              ones_size: tuple[int, int]) -> tuple[Placement, Placement]:
        """(십의 자리, 일의 자리) 배치를 반환한다."""
        box = self._box
        scale = self.scale_for(tens_size, ones_size)
        tens_w, tens_h = scale_size(*tens_size, scale)
        ones_w, ones_h = scale_size(*ones_size, scale)

        combined_w = tens_size[0] + ones_size[0] + self._gap
        final_w = int(combined_w * scale)
        offset = (box.width - final_w) // 2

        tens_x = box.x + offset
        ones_x = box.x + box.width - (offset + ones_w)
        tens_y = box.y + (box.height - tens_h) // 2
        ones_y = box.y + (box.height - ones_h) // 2

        return (
            Placement((tens_w, tens_h), (tens_x, tens_y), scale),
            Placement((ones_w, ones_h), (ones_x, ones_y), scale),
        )
