import math

import pytest

from terrain_frames.errors import InvalidBoundingBox
from terrain_frames.models.region import BoundingBox, GeoPoint


def test_bounding_box_properties():
    bbox = BoundingBox(GeoPoint(-122.5, 37.5), GeoPoint(-121.5, 38.0))
    assert (bbox.west, bbox.south, bbox.east, bbox.north) == (-122.5, 37.5, -121.5, 38.0)
    assert bbox.width_deg == 1.0
    assert bbox.height_deg == 0.5
    assert bbox.center == GeoPoint(-122.0, 37.75)
    assert bbox.as_extent() == "-122.5,37.5,-121.5,38.0"
    assert bbox.to_dict() == {"west": -122.5, "south": 37.5, "east": -121.5, "north": 38.0}


def test_from_corners_normalises_order():
    sw = GeoPoint(-122.5, 37.5)
    ne = GeoPoint(-121.5, 38.0)
    assert BoundingBox.from_corners(ne, sw) == BoundingBox(sw, ne)
    assert BoundingBox.from_corners(GeoPoint(-122.5, 38.0), GeoPoint(-121.5, 37.5)) == BoundingBox(sw, ne)


@pytest.mark.parametrize(
    "p1, p2",
    [
        (GeoPoint(1.0, 1.0), GeoPoint(1.0, 1.0)),
        (GeoPoint(0.0, 1.0), GeoPoint(2.0, 1.0)),
        (GeoPoint(2.0, 0.0), GeoPoint(0.0, 1.0)),
        (GeoPoint(0.0, 1.0), GeoPoint(1.0, 0.0)),
        (GeoPoint(0.0, 0.0), GeoPoint(math.nan, 1.0)),
        (GeoPoint(0.0, -91.0), GeoPoint(1.0, 0.0)),
    ],
)
def test_invalid_bounding_boxes_are_rejected(p1, p2):
    with pytest.raises(InvalidBoundingBox):
        BoundingBox(p1, p2)


def test_from_corners_rejects_zero_extent():
    with pytest.raises(ValueError):
        BoundingBox.from_corners(GeoPoint(0.0, 5.0), GeoPoint(3.0, 5.0))


def test_bounding_box_is_immutable():
    bbox = BoundingBox.from_bounds(0.0, 0.0, 1.0, 1.0)
    with pytest.raises(AttributeError):
        bbox.p1 = GeoPoint(-1.0, -1.0)
