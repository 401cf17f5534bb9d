"""테스트 공용 픽스처. tmp_path에 합성용 에셋을 만든다."""

from pathlib import Path

import pytest

from content.assets import AssetCache
from content.counter import DigitPairComposer
from renderer.layout import Box
from test_utils import make_background, make_glyph

SLOT = Box(x=507, y=182, width=54, height=54)


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    make_background().save(tmp_path / "heatingup.png")
    for i in range(10):
        make_glyph(i).save(tmp_path / f"{i}.png")
    return tmp_path


@pytest.fixture
def assets(asset_dir: Path) -> AssetCache:
    return AssetCache(asset_dir)


@pytest.fixture
def composer(assets: AssetCache) -> DigitPairComposer:
    return DigitPairComposer(assets, slot=SLOT, gap=2)
