"""레이어 합성 모듈 — 배경 + 조각 오버레이."""

from PIL import Image

from .canvas import Canvas


class LayerCompositor:
    """배경 복제본 위에 조각 레이어들을 순서대로 합성한다."""

    def compose(
        self,
        background: Image.Image,
        overlays: list[tuple[Image.Image, tuple[int, int]]] | None = None,
    ) -> Image.Image:
        """배경 위에 오버레이 레이어들을 합성하여 새 RGBA 이미지를 반환한다.

        Args:
            background: 배경 이미지 (복제해서 사용, 크기 유지)
            overlays: [(이미지, (x, y))] 형태의 오버레이 리스트. 뒤의 것이 위에 그려진다.

        Returns:
            배경과 같은 크기의 RGBA 이미지
        """
        canvas = Canvas(background)

        if overlays:
            for layer_img, position in overlays:
                canvas.paste(layer_img, position)

        return canvas.image
