"""밈 템플릿 모듈 — 배경 이미지 + 입력 슬롯 정의와 빌더."""

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from pathlib import Path
from typing import Callable

from PIL import Image

from errors import InvalidArgumentError, InvalidGeometryError
from renderer.canvas import load_image
from renderer.layers import LayerCompositor
from renderer.layout import Box, fit_into

logger = logging.getLogger(__name__)

ImageLoader = Callable[[str | Path], Image.Image]


class FieldKind(StrEnum):
    TEXT = auto()
    IMAGE = auto()


@dataclass(frozen=True)
class InputField:
    """템플릿의 입력 슬롯 하나."""
    field_id: str
    x: int
    y: int
    width: int
    height: int
    kind: FieldKind = FieldKind.IMAGE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometryError(
                f"입력 필드 {self.field_id!r} 크기가 0 이하: {self.width}x{self.height}"
            )

    @property
    def box(self) -> Box:
        return Box.from_field(self)


@dataclass(frozen=True, eq=False)
class MemeTemplate:
    """빌더가 만든 읽기 전용 템플릿. image는 합성 시 복제해서만 사용한다."""
    name: str
    description: str
    image: Image.Image
    fields: tuple[InputField, ...]

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def field(self, field_id: str) -> InputField:
        for f in self.fields:
            if f.field_id == field_id:
                return f
        raise KeyError(field_id)


class MemeTemplateBuilder:
    """템플릿 빌더. 이미지 로드는 build() 시점까지 미룬다.

    같은 빌더로 build()를 여러 번 호출할 수 있다. 매번 이미지를 새로 읽고
    필드 목록을 복사하므로 만들어진 템플릿끼리 상태를 공유하지 않는다.
    """

    def __init__(self, image_path: str | Path, loader: ImageLoader = load_image):
        if image_path is None:
            raise InvalidArgumentError("image_path")
        self._image_path = image_path
        self._loader = loader
        self._fields: list[InputField] = []
        self._name = ""
        self._description = ""

    def with_name(self, name: str) -> "MemeTemplateBuilder":
        if name is None:
            raise InvalidArgumentError("name")
        self._name = name
        return self

    def with_description(self, description: str) -> "MemeTemplateBuilder":
        if description is None:
            raise InvalidArgumentError("description")
        self._description = description
        return self

    def with_input_field(self, input_field: InputField) -> "MemeTemplateBuilder":
        if input_field is None:
            raise InvalidArgumentError("input_field")
        self._fields.append(input_field)
        return self

    def build(self) -> MemeTemplate:
        """이미지를 로드하여 템플릿을 만든다. 로드 실패 시 AssetLoadError."""
        img = self._loader(self._image_path)
        logger.debug("템플릿 이미지 로드: %s (%dx%d)", self._image_path, *img.size)
        return MemeTemplate(self._name, self._description, img, tuple(self._fields))


def build_template(builder: MemeTemplateBuilder) -> MemeTemplate:
    return builder.build()


def compose_template(template: MemeTemplate,
                     fragments: dict[str, Image.Image]) -> Image.Image:
    """템플릿의 각 슬롯에 조각 이미지를 맞춰 넣어 합성한다.

    필드 순서대로 그리므로 뒤에 추가된 필드가 위에 온다. 조각이 없는 필드는
    비워 둔다. 텍스트 필드도 호출자가 미리 그린 이미지를 받는다.
    """
    known = {f.field_id for f in template.fields}
    for field_id in fragments:
        if field_id not in known:
            raise InvalidArgumentError(
                "fragments", f"템플릿 {template.name!r}에 없는 필드: {field_id!r}"
            )

    overlays = []
    for f in template.fields:
        fragment = fragments.get(f.field_id)
        if fragment is None:
            continue
        placement = fit_into(f.box, *fragment.size)
        scaled = fragment.convert("RGBA").resize(placement.size, Image.Resampling.LANCZOS)
        overlays.append((scaled, placement.position))

    return LayerCompositor().compose(template.image, overlays)
