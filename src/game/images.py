"""Image resolution for roll results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from src.game.dice import DieSpec

logger = logging.getLogger("dicebot.images")


class ImageSource(Protocol):
    def fetch(self, label: str, value: int) -> bytes:
        ...


@dataclass
class ResolvedImage:
    data: bytes
    file_name: str
    from_asset: bool


def asset_path(assets_root: str | Path, die: DieSpec, value: int) -> Path:
    root = Path(assets_root)
    if die.asset_dir:
        root = root / die.asset_dir
    return root / die.asset_name(value)


def resolve_image(
    die: DieSpec,
    value: int,
    assets_root: str | Path,
    fallback: ImageSource,
) -> ResolvedImage:
    """Load the local asset for a roll, or fetch a placeholder if absent.

    The attachment name is always ``{value}.jpg`` so the embed can
    reference it, whichever source produced the bytes.
    """
    file_name = die.asset_name(value)
    path = asset_path(assets_root, die, value)
    if path.is_file():
        return ResolvedImage(data=path.read_bytes(), file_name=file_name, from_asset=True)

    logger.info("No asset at %s, using placeholder", path)
    data = fallback.fetch(die.label, value)
    return ResolvedImage(data=data, file_name=file_name, from_asset=False)
