from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

from .pegs import EMPTY_CELL, PEG_LABELS, PegSet

PADDING = 16
LABEL_HEIGHT = 16
BASE_HEIGHT = 6
POST_HALF_WIDTH = 2
DISK_COLOURS = ("#d1495b", "#edae49", "#00798c", "#30638e", "#003d5b", "#66a182")


@dataclass(frozen=True, slots=True)
class BoardImage:
    mime_type: str
    data: bytes
    width: int
    height: int

    def save(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(self.data)
        return out


def board_size(n_disks: int, *, unit: int = 12, row_height: int = 20) -> tuple[int, int]:
    """Pixel size of the board drawn by `render_board_image`.

    Each peg gets a column wide enough for the largest disk, and there is one
    spare row above the tallest stack so the post stays visible.
    """

    column_w = (2 * n_disks + 1) * unit
    width = len(PEG_LABELS) * column_w + (len(PEG_LABELS) + 1) * PADDING
    base_bottom = PADDING + (n_disks + 1) * row_height + BASE_HEIGHT
    return (width, base_bottom + 4 + LABEL_HEIGHT + PADDING)


def disk_colour(disk: int) -> str:
    return DISK_COLOURS[(disk - 1) % len(DISK_COLOURS)]


def render_board_image(
    pegs: PegSet,
    *,
    unit: int = 12,
    row_height: int = 20,
    background: str = "white",
) -> BoardImage:
    """Draw the same rows `PegSet.render` yields, one disk per cell."""

    try:
        from PIL import Image, ImageDraw, ImageFont
    except ImportError as exc:  # pragma: no cover
        raise RuntimeError(
            "Missing pillow. Install with: pip install 'hanoi-cli[viz]'"
        ) from exc

    n_disks = pegs.n_disks
    width, height = board_size(n_disks, unit=unit, row_height=row_height)
    column_w = (2 * n_disks + 1) * unit
    centres = [
        PADDING + i * (column_w + PADDING) + column_w // 2
        for i in range(len(PEG_LABELS))
    ]
    base_top = PADDING + (n_disks + 1) * row_height

    img = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    draw.rectangle(
        [PADDING, base_top, width - PADDING - 1, base_top + BASE_HEIGHT - 1],
        fill="#3d3d3d",
    )
    for label, x in zip(PEG_LABELS, centres):
        draw.rectangle(
            [x - POST_HALF_WIDTH, PADDING, x + POST_HALF_WIDTH, base_top - 1],
            fill="#9e9e9e",
        )
        label_w = draw.textlength(label, font=font)
        draw.text(
            (x - label_w / 2, base_top + BASE_HEIGHT + 4),
            label,
            fill="black",
            font=font,
        )

    for row_index, row in enumerate(pegs.render(n_disks)):
        top = PADDING + (row_index + 1) * row_height
        for x, disk in zip(centres, row):
            if disk == EMPTY_CELL:
                continue
            half = (2 * disk + 1) * unit // 2
            draw.rectangle(
                [x - half, top, x + half, top + row_height - 3],
                fill=disk_colour(disk),
                outline="black",
            )

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return BoardImage(
        mime_type="image/png",
        data=buffer.getvalue(),
        width=width,
        height=height,
    )
