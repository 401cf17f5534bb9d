"""템플릿 레지스트리: 매니페스트(JSON)에 정의된 템플릿을 시작 시 모두 로드한다."""

import json
import logging
from pathlib import Path

from errors import MemeError
from renderer.canvas import load_image

from .template import FieldKind, InputField, MemeTemplate, MemeTemplateBuilder

logger = logging.getLogger(__name__)


def _builder_from_entry(entry: dict, base_dir: Path, loader) -> MemeTemplateBuilder:
    """매니페스트 항목 하나를 빌더로 변환한다."""
    builder = MemeTemplateBuilder(base_dir / entry["image"], loader=loader)
    builder.with_name(entry.get("name", Path(entry["image"]).stem))
    builder.with_description(entry.get("description", ""))
    for field in entry.get("fields", []):
        builder.with_input_field(InputField(
            field_id=field["id"],
            x=field["x"],
            y=field["y"],
            width=field["width"],
            height=field["height"],
            kind=FieldKind(field.get("kind", "image")),
        ))
    return builder


class TemplateRegistry:
    """이름으로 찾을 수 있는 템플릿 모음."""

    def __init__(self, manifest_path: str | Path, loader=load_image):
        self._manifest_path = Path(manifest_path)
        self._loader = loader
        self._templates: dict[str, MemeTemplate] = {}

    def load_all(self) -> int:
        """매니페스트의 템플릿을 모두 로드한다. 실패한 항목은 건너뛴다."""
        self._templates.clear()
        if not self._manifest_path.exists():
            logger.warning("템플릿 매니페스트 없음: %s", self._manifest_path)
            return 0

        try:
            with open(self._manifest_path, encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("템플릿 매니페스트 읽기 실패: %s (%s)", self._manifest_path, e)
            return 0
        if not isinstance(entries, list):
            logger.warning("템플릿 매니페스트 형식 오류 (목록이 아님): %s", self._manifest_path)
            return 0

        base_dir = self._manifest_path.parent
        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning("템플릿 항목 형식 오류: %r", entry)
                continue
            label = entry.get("name") or entry.get("image", "?")
            try:
                template = _builder_from_entry(entry, base_dir, self._loader).build()
            except (MemeError, KeyError, TypeError, ValueError) as e:
                logger.warning("템플릿 로드 실패: %s (%s)", label, e)
                continue
            if template.name in self._templates:
                logger.warning("중복된 템플릿 이름: %s (나중 것 사용)", template.name)
            self._templates[template.name] = template
            logger.info("템플릿 로드: %s (필드 %d개)", template.name, len(template.fields))

        return len(self._templates)

    def get(self, name: str) -> MemeTemplate:
        return self._templates[name]

    def names(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
