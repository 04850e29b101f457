"""Shared pytest fixtures for the vstars2vice test suite."""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample facility file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def facility_bundle_xml(data_dir: Path) -> Path:
    """Facility bundle with two <VideoMaps> groups, three maps, mixed elements."""
    return data_dir / "01_facility_bundle.xml"


@pytest.fixture()
def video_maps_root_xml(data_dir: Path) -> Path:
    """Bare export with <VideoMaps> as the document root."""
    return data_dir / "02_video_maps_root.xml"


# ---------------------------------------------------------------------------
# Edge-case facility file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.xml"


@pytest.fixture()
def unclosed_tags_xml(edge_cases_dir: Path) -> Path:
    """Path to XML with an unclosed <Element>."""
    return edge_cases_dir / "12_malformed_unclosed_tags.xml"


@pytest.fixture()
def no_video_maps_xml(edge_cases_dir: Path) -> Path:
    """Path to well-formed XML without any video maps."""
    return edge_cases_dir / "13_no_video_maps.xml"


@pytest.fixture()
def no_line_elements_xml(edge_cases_dir: Path) -> Path:
    """Path to a facility whose only map has no usable line."""
    return edge_cases_dir / "14_no_line_elements.xml"
