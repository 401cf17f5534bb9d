"""테스트용 합성 에셋 생성 도우미."""

from pathlib import Path

from PIL import Image

BG_SIZE = (640, 320)


def digit_color(i: int) -> tuple[int, int, int, int]:
    return (20 * i + 30, 255 - 20 * i, (60 * i) % 256, 255)


def make_background() -> Image.Image:
    # 좌우·상하가 비대칭인 배경 (회전 검증용)
    img = Image.new("RGBA", BG_SIZE, (40, 40, 60, 255))
    img.paste(Image.new("RGBA", (100, 50), (250, 10, 10, 255)), (0, 0))
    img.paste(Image.new("RGBA", (30, 200), (10, 250, 10, 255)), (600, 100))
    return img


def make_glyph(i: int, size: tuple[int, int] = (40, 60)) -> Image.Image:
    """투명 테두리 2px 안에 숫자별 단색 사각형."""
    img = Image.new("RGBA", size, (0, 0, 0, 0))
    w, h = size
    inner = Image.new("RGBA", (max(1, w - 4), max(1, h - 4)), digit_color(i))
    img.paste(inner, (2, 2))
    return img


class TrackingLoader:
    """로드 요청 경로를 기록하는 가짜 로더. 파일 이름으로 이미지를 찾는다."""

    def __init__(self, images: dict[str, Image.Image] | None = None):
        self.images = images or {}
        self.calls: list[Path] = []

    def __call__(self, path):
        self.calls.append(Path(path))
        return self.images.get(Path(path).name, Image.new("RGBA", (10, 10)))
