"""메인 — 카운터 값을 밈 이미지로 렌더링해 파일로 저장한다.

사용법: python main.py <값> [--mirrored]
"""

import asyncio
import logging
import sys

from config import load_config
from content.assets import AssetCache
from content.counter import DigitPairComposer
from content.registry import TemplateRegistry
from errors import MemeError
from renderer.layout import Box

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(message)s")
logging.getLogger("PIL").setLevel(logging.WARNING)


def _parse_args(argv: list[str]) -> tuple[int, bool]:
    args = [a for a in argv if a != "--mirrored"]
    if len(args) != 1:
        raise SystemExit(__doc__)
    try:
        value = int(args[0])
    except ValueError:
        raise SystemExit(f"정수가 아님: {args[0]!r}")
    return value, "--mirrored" in argv


async def main(argv: list[str]) -> int:
    value, mirrored = _parse_args(argv)
    config = load_config()

    # 모듈 초기화
    assets_cfg = config["assets"]
    assets = AssetCache(
        assets_cfg["directory"],
        background_name=assets_cfg["background"],
        digit_pattern=assets_cfg["digit_pattern"],
    )
    slot_cfg = config["digit_slot"]
    composer = DigitPairComposer(
        assets,
        slot=Box(slot_cfg["x"], slot_cfg["y"], slot_cfg["width"], slot_cfg["height"]),
        gap=slot_cfg["gap"],
    )
    # 템플릿은 명령 처리 쪽에서 쓰도록 시작 시 미리 로드해 둔다
    registry = TemplateRegistry(config["templates"]["manifest"])

    # 에셋 로드 (디스크 I/O는 이벤트 루프 밖에서, 제한 시간 적용)
    timeout = config["loading"].get("timeout_sec", 10)
    try:
        await asyncio.wait_for(asyncio.to_thread(assets.preload), timeout=timeout)
        count = await asyncio.to_thread(registry.load_all)
    except asyncio.TimeoutError:
        logging.error("에셋 로드 시간 초과 (%ss)", timeout)
        return 1
    except MemeError as e:
        logging.error("에셋 로드 실패: %s", e)
        return 1
    logging.info("템플릿 %d개 로드됨", count)

    try:
        img = await asyncio.to_thread(composer.compose_digit_pair, value, mirrored)
    except MemeError as e:
        logging.error("렌더링 실패: %s", e)
        return 1

    output = config["output"]["path"]
    img.save(output)
    logging.info("저장: %s (값 %d%s)", output, value, ", 뒤집힘" if mirrored else "")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main(sys.argv[1:])))
    except KeyboardInterrupt:
        logging.info("종료")
