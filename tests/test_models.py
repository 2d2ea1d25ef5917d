"""
Unit tests for Pydantic models.
"""
import pytest
from pydantic import ValidationError
from hexindex.models import CellBounds, GeoPoint


@pytest.mark.unit
class TestGeoPointModel:
    """Test suite for GeoPoint model."""

    def test_geopoint_valid_data(self):
        """Test creating GeoPoint with valid data."""
        point = GeoPoint(lat=40.7128, lon=-74.0060)

        assert point.lat == 40.7128
        assert point.lon == -74.0060

    def test_geopoint_accepts_limits(self):
        """Test that the range limits are inclusive."""
        GeoPoint(lat=90, lon=180)
        GeoPoint(lat=-90, lon=-180)

    def test_geopoint_missing_lat(self):
        """Test that lat is required."""
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lon=-74.0060)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("lat",) for error in errors)

    def test_geopoint_lat_out_of_range(self):
        """Test that lat must be within [-90, 90]."""
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat=90.5, lon=0.0)

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("lat",)

    def test_geopoint_lon_out_of_range(self):
        """Test that lon must be within [-180, 180]."""
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat=0.0, lon=-180.5)

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("lon",)

    def test_geopoint_rejects_nan(self):
        """Test that NaN is not a coordinate."""
        with pytest.raises(ValidationError):
            GeoPoint(lat=float("nan"), lon=0.0)

    def test_geopoint_rejects_numeric_string(self):
        """Test that numeric strings are not coerced."""
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat="37.7", lon=-122.4)

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("lat",)

    def test_geopoint_accepts_int(self):
        """Test that integer degrees are accepted."""
        point = GeoPoint(lat=37, lon=-122)
        assert point.lat == 37.0

    def test_geopoint_lat_reported_first(self):
        """Test error order when both fields are invalid."""
        with pytest.raises(ValidationError) as exc_info:
            GeoPoint(lat=100.0, lon=200.0)

        errors = exc_info.value.errors()
        assert [error["loc"] for error in errors] == [("lat",), ("lon",)]

    def test_geopoint_is_frozen(self):
        """Test that points are immutable."""
        point = GeoPoint(lat=1.0, lon=2.0)
        with pytest.raises(ValidationError):
            point.lat = 3.0


@pytest.mark.unit
class TestCellBoundsModel:
    """Test suite for CellBounds model."""

    def test_cellbounds_as_tuple(self):
        """Test tuple order."""
        bounds = CellBounds(min_lat=1.0, max_lat=2.0, min_lon=3.0, max_lon=4.0)
        assert bounds.as_tuple() == (1.0, 2.0, 3.0, 4.0)

    def test_cellbounds_contains(self):
        """Test point containment, edges included."""
        bounds = CellBounds(min_lat=1.0, max_lat=2.0, min_lon=3.0, max_lon=4.0)

        assert bounds.contains(1.5, 3.5)
        assert bounds.contains(1.0, 4.0)
        assert not bounds.contains(2.5, 3.5)
        assert not bounds.contains(1.5, 2.9)

    def test_cellbounds_missing_field(self):
        """Test that all four edges are required."""
        with pytest.raises(ValidationError):
            CellBounds(min_lat=1.0, max_lat=2.0, min_lon=3.0)
