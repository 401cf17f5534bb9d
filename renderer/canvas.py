"""Pillow 작업 캔버스 모듈 — 원본을 복제한 RGBA 캔버스 위에 조각을 합성한다."""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from errors import AssetLoadError


def load_image(path: str | Path) -> Image.Image:
    """이미지 파일을 RGBA로 로드한다.

    파일 핸들은 with 블록 안에서 픽셀을 모두 읽은 뒤 닫힌다.
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except FileNotFoundError as e:
        raise AssetLoadError(path, "파일 없음") from e
    except UnidentifiedImageError as e:
        raise AssetLoadError(path, "지원하지 않는 형식") from e
    except Image.DecompressionBombError as e:
        raise AssetLoadError(path, str(e)) from e
    except OSError as e:
        raise AssetLoadError(path, str(e)) from e


class Canvas:
    """베이스 이미지를 복제한 RGBA 캔버스. 원본은 건드리지 않는다."""

    def __init__(self, base: Image.Image):
        if base.mode != "RGBA":
            self._image = base.convert("RGBA")
        else:
            self._image = base.copy()

    @property
    def image(self) -> Image.Image:
        return self._image

    def paste(self, layer: Image.Image, position: tuple = (0, 0)) -> None:
        """레이어를 캔버스 위에 합성한다 (알파 블렌딩)."""
        if layer.mode != "RGBA":
            layer = layer.convert("RGBA")
        self._image = Image.alpha_composite(self._image, _place(layer, position, self._image.size))


def rotated_180(image: Image.Image) -> Image.Image:
    """이미지 전체를 180° 회전한 새 이미지를 반환한다."""
    return image.transpose(Image.Transpose.ROTATE_180)


def _place(layer: Image.Image, position: tuple, size: tuple[int, int]) -> Image.Image:
    """레이어를 캔버스 크기의 투명 이미지에 지정 위치로 배치한다. 밖으로 나간 부분은 잘린다."""
    if layer.size == size and tuple(position) == (0, 0):
        return layer
    result = Image.new("RGBA", size, (0, 0, 0, 0))
    result.paste(layer, tuple(position))
    return result
