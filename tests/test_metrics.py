"""
Unit tests for Prometheus metrics recorded by the grid API.
"""
import pytest
from prometheus_client import REGISTRY

from hexindex.errors import IndexFormatError, InputRangeError
from hexindex.grid import cell_to_bounds, cell_to_latlon, latlon_to_cell


def _value(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.unit
class TestEncodeMetrics:
    """Test suite for encode counters."""

    def test_success_counted(self):
        """Test that a successful encode increments the success counter."""
        before = _value("hexindex_encode_total", {"status": "success"})
        latlon_to_cell(40.7128, -74.0060)
        assert _value("hexindex_encode_total", {"status": "success"}) == before + 1

    def test_range_error_counted(self):
        """Test that a rejected encode increments the range_error counter."""
        before = _value("hexindex_encode_total", {"status": "range_error"})
        with pytest.raises(InputRangeError):
            latlon_to_cell(95.0, 0.0)
        assert _value("hexindex_encode_total", {"status": "range_error"}) == before + 1

    def test_duration_observed(self):
        """Test that encode latency is recorded."""
        before = _value("hexindex_operation_duration_seconds_count", {"operation": "encode"})
        latlon_to_cell(0.0, 0.0, 3)
        assert _value("hexindex_operation_duration_seconds_count", {"operation": "encode"}) == before + 1

    def test_pentagon_counted(self):
        """Test that encodes landing on a pentagon base cell are counted."""
        before = _value("hexindex_pentagon_cells_total", {"operation": "encode"})
        latlon_to_cell(58.673873878380526, 2.389386851097959, 1)
        assert _value("hexindex_pentagon_cells_total", {"operation": "encode"}) == before + 1


@pytest.mark.unit
class TestDecodeMetrics:
    """Test suite for decode counters."""

    def test_center_success_counted(self):
        """Test that a successful decode increments the center success counter."""
        labels = {"operation": "center", "status": "success"}
        before = _value("hexindex_decode_total", labels)
        cell_to_latlon("8928308280fffff")
        assert _value("hexindex_decode_total", labels) == before + 1

    def test_center_format_error_counted(self):
        """Test that a malformed cell id increments the format_error counter."""
        labels = {"operation": "center", "status": "format_error"}
        before = _value("hexindex_decode_total", labels)
        with pytest.raises(IndexFormatError):
            cell_to_latlon("not-hex")
        assert _value("hexindex_decode_total", labels) == before + 1

    def test_bounds_counted(self):
        """Test that bounds requests are counted separately."""
        labels = {"operation": "bounds", "status": "success"}
        before = _value("hexindex_decode_total", labels)
        cell_to_bounds("8928308280fffff")
        assert _value("hexindex_decode_total", labels) == before + 1

    def test_bounds_format_error_counted(self):
        """Test that malformed bounds requests are counted."""
        labels = {"operation": "bounds", "status": "format_error"}
        before = _value("hexindex_decode_total", labels)
        with pytest.raises(IndexFormatError):
            cell_to_bounds("")
        assert _value("hexindex_decode_total", labels) == before + 1
