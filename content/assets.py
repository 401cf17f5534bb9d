"""에셋 캐시 모듈. 숫자 글리프 10장과 배경을 프로세스당 한 번만 로드한다."""

import logging
import threading
from pathlib import Path
from typing import Callable

from PIL import Image

from errors import AssetMissingError
from renderer.canvas import load_image

logger = logging.getLogger(__name__)

DIGIT_COUNT = 10


class AssetCache:
    """지연 로드 에셋 캐시.

    처음 요청한 호출자가 로드를 수행하고, 동시에 들어온 다른 호출자는 락에서
    기다렸다가 같은 결과를 본다. 로드가 실패하면 슬롯은 비어 있는 채로 남아
    다음 호출에서 다시 시도한다.

    반환되는 이미지는 공유 원본이므로 호출자가 수정하면 안 된다.
    """

    def __init__(
        self,
        directory: str | Path,
        background_name: str = "heatingup.png",
        digit_pattern: str = "{}.png",
        loader: Callable[[str | Path], Image.Image] = load_image,
    ):
        self._dir = Path(directory)
        self._background_name = background_name
        self._digit_pattern = digit_pattern
        self._loader = loader
        self._lock = threading.Lock()
        self._digits: tuple[Image.Image, ...] | None = None
        self._background: Image.Image | None = None

    @property
    def loaded(self) -> bool:
        return self._digits is not None and self._background is not None

    def digits(self) -> tuple[Image.Image, ...]:
        """숫자 글리프 0~9 (최초 호출 시 로드)."""
        digits = self._digits
        if digits is None:
            with self._lock:
                if self._digits is None:
                    self._digits = self._load_digits()
                digits = self._digits
        return digits

    def glyph(self, index: int) -> Image.Image:
        """숫자 하나의 글리프."""
        digits = self.digits()
        if not 0 <= index < len(digits) or digits[index] is None:
            raise AssetMissingError(f"숫자 글리프 없음: {index}")
        return digits[index]

    def background(self) -> Image.Image:
        """배경 이미지 (최초 호출 시 로드)."""
        background = self._background
        if background is None:
            with self._lock:
                if self._background is None:
                    path = self._dir / self._background_name
                    self._background = self._loader(path)
                    logger.info("배경 로드: %s (%dx%d)", path.name, *self._background.size)
                background = self._background
        return background

    def preload(self) -> None:
        """모든 에셋을 즉시 로드한다."""
        self.background()
        self.digits()

    def _load_digits(self) -> tuple[Image.Image, ...]:
        # 하나라도 실패하면 전체를 버리고 예외를 올린다
        digits = tuple(
            self._loader(self._dir / self._digit_pattern.format(i))
            for i in range(DIGIT_COUNT)
        )
        logger.info("숫자 글리프 %d개 로드: %s", len(digits), self._dir)
        return digits
