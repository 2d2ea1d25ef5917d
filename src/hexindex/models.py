from pydantic import BaseModel, ConfigDict, Field
from typing import Tuple


class GeoPoint(BaseModel):
    """Geographic point in degrees, validated on construction."""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, strict=True, allow_inf_nan=False, description="Latitude in degrees")
    lon: float = Field(..., ge=-180, le=180, strict=True, allow_inf_nan=False, description="Longitude in degrees")


class CellBounds(BaseModel):
    """Latitude/longitude bounding box of a cell's corners, in degrees."""
    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.min_lat, self.max_lat, self.min_lon, self.max_lon

    def contains(self, lat: float, lon: float) -> bool:
        """Whether a point lies inside the box, edges included."""
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon
