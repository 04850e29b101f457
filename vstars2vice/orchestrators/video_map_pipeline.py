"""Conversion pipeline: vSTARS facility XML in, vice video map JSON out.

Coordinates the activities in a single linear pass:

1. Parse facility: read the input and decode it (with the bare
   ``<VideoMaps>`` fallback)
2. Extract segments: build the name → endpoints mapping, reporting
   every kept map on the progress stream
3. Write video maps: create the output only once extraction is done

Any ``ConversionError`` other than a per-segment coordinate problem
propagates to the caller.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from vstars2vice.activities.extract_segments import extract_video_maps
from vstars2vice.activities.parse_facility import parse_facility_file
from vstars2vice.activities.write_video_maps import write_video_maps
from vstars2vice.core.config import ConverterConfig

if TYPE_CHECKING:
    from pathlib import Path

    from vstars2vice.models.point import Point2LL

logger = logging.getLogger("vstars2vice.orchestrators.video_map_pipeline")


def convert_video_maps(
    input_path: Path | str,
    output_path: Path | str,
    *,
    config: ConverterConfig | None = None,
    progress: TextIO | None = None,
) -> dict[str, list[Point2LL]]:
    """Convert a vSTARS facility file to a vice video map file.

    Args:
        input_path: Facility XML path, or ``-`` for standard input.
        output_path: JSON destination, or ``-`` for standard output.
        config: Converter settings. Defaults to ``ConverterConfig()``.
        progress: Stream receiving one line per converted map.
            Defaults to standard output.

    Returns:
        The mapping that was written, keyed by video map name.

    Raises:
        FacilityReadError: If the input cannot be read.
        FacilityParseError: If the input is not well-formed XML.
        VideoMapWriteError: If the output cannot be written.
    """
    if config is None:
        config = ConverterConfig()
    stream = progress if progress is not None else sys.stdout

    logger.debug("Conversion started | input=%s | output=%s", input_path, output_path)

    bundle = parse_facility_file(input_path, huge_tree=config.huge_tree)

    def report(name: str, segment_count: int) -> None:
        stream.write(f'Video map: "{name}" with {segment_count} line segments\n')

    video_maps = extract_video_maps(bundle.video_maps, report=report)

    write_video_maps(video_maps, output_path, indent=config.json_indent)

    segment_count = sum(len(points) for points in video_maps.values()) // 2
    logger.debug(
        "Conversion finished | maps=%d/%d | segments=%d | output=%s",
        len(video_maps),
        bundle.map_count,
        segment_count,
        output_path,
    )
    return video_maps
