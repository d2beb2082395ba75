#!/usr/bin/env python3
"""
CLI для генерации flat sketch (Claude + Stable Diffusion XL).
Пример запуска:
    python scripts/flat_sketch_cli.py
        --prompt "Design a casual hoodie with kangaroo pocket"
        --out-dir output/hoodie
"""

import argparse
import asyncio
import base64
import sys
from pathlib import Path

from flatsketch.configs.environment import get_environment_settings
from flatsketch.configs.flat_sketch import FlatSketchConfig
from flatsketch.configs.logging import setup_logging
from flatsketch.schemas.pydantic.flat_sketch import (
    GenerationRequest,
    GenerationResponse,
)
from flatsketch.services.flat_sketch_generator import FlatSketchGeneratorService


def save_result(result: GenerationResponse, out_dir: Path) -> list[Path]:
    """Пишет варианты sketch-N.png и construction_details.md в out_dir."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for i, data_uri in enumerate(result.images, start=1):
        _, _, b64 = data_uri.partition(",")
        fpath = out_dir / f"sketch-{i}.png"
        fpath.write_bytes(base64.b64decode(b64))
        written.append(fpath)

    details_path = out_dir / "construction_details.md"
    details_path.write_text(
        f"# Enhanced prompt\n\n{result.enhanced_prompt}\n\n"
        f"# Construction details\n\n{result.construction_details}\n",
        encoding="utf-8",
    )
    written.append(details_path)
    return written


async def main() -> None:
    parser = argparse.ArgumentParser(description="FashionFlat AI flat sketch generator") # noqa
    parser.add_argument("--prompt", type=str, default=None, help="Описание изделия") # noqa
    parser.add_argument("--image-url", type=str, default=None, help="Ссылка на референс (http(s) или data URI)") # noqa
    parser.add_argument("--out-dir", type=str, default="output/flat_sketch", help="Каталог для результатов") # noqa
    parser.add_argument("--log-level", type=str, default="WARNING", help="Уровень логирования") # noqa

    args = parser.parse_args()
    setup_logging(log_level=args.log_level)

    req = GenerationRequest(prompt=args.prompt, image_url=args.image_url)
    config = FlatSketchConfig.from_environment(get_environment_settings())
    service = FlatSketchGeneratorService(config)
    try:
        result = await service.generate(req)
    except Exception as e:
        print(f"❌ Ошибка генерации: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        await service.aclose()

    for path in save_result(result, Path(args.out_dir)):
        print(f"✅ {path}")


if __name__ == "__main__":
    asyncio.run(main())
