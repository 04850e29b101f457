"""Write activity: encode video maps as vice JSON.

The output is a single JSON object keyed by video map name (sorted),
each value an array of DMS coordinate tokens where consecutive pairs
are the two ends of one line segment. The whole document is built in
memory and written in one go.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from vstars2vice.core.constants import DEFAULT_JSON_INDENT, STDIO_PATH
from vstars2vice.core.exceptions import PermanentError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from vstars2vice.models.point import Point2LL

logger = logging.getLogger("vstars2vice.activities.write_video_maps")

# Characters that only occur inside JSON strings here; written as \u escapes.
_HTML_SAFE_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class VideoMapWriteError(PermanentError):
    """Raised when the output file cannot be created or written."""

    default_stage = "write_video_maps"
    default_code = "VIDEO_MAP_WRITE_FAILED"


def encode_video_maps(
    video_maps: Mapping[str, Sequence[Point2LL]],
    *,
    indent: int = DEFAULT_JSON_INDENT,
) -> str:
    """Serialise the name → endpoints mapping to vice JSON text.

    Args:
        video_maps: Endpoint sequences keyed by map name.
        indent: Spaces per indentation level.

    Returns:
        The JSON document, newline terminated.
    """
    document = {name: [point.to_json() for point in points] for name, points in video_maps.items()}
    text = json.dumps(document, indent=indent, sort_keys=True, ensure_ascii=False)
    return text.translate(_HTML_SAFE_ESCAPES) + "\n"


def write_video_maps(
    video_maps: Mapping[str, Sequence[Point2LL]],
    output_path: Path | str,
    *,
    indent: int = DEFAULT_JSON_INDENT,
) -> None:
    """Encode ``video_maps`` and write them to ``output_path``.

    ``-`` writes to standard output.

    Raises:
        VideoMapWriteError: If the file cannot be created or written.
    """
    text = encode_video_maps(video_maps, indent=indent)

    if str(output_path) == STDIO_PATH:
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        try:
            Path(output_path).write_text(text, encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write video map file {output_path}: {exc}"
            raise VideoMapWriteError(msg) from exc

    logger.debug(
        "Video maps written | maps=%d | path=%s",
        len(video_maps),
        output_path,
    )
