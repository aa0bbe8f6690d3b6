from typing import Annotated, Any, Literal
from pydantic import BaseModel, Field

# A Point keeps every number of its literal; any other position is normally a pair
POSITION_TYPE = list[float]
RING_TYPE = list[POSITION_TYPE]

# ----- Geometry Types -----
class Point(BaseModel):
    type: Literal["Point"]
    coordinates: POSITION_TYPE

class LineString(BaseModel):
    type: Literal["LineString"]
    coordinates: list[POSITION_TYPE]

class Multiline(BaseModel):
    type: Literal["Multiline"]
    coordinates: list[POSITION_TYPE]

class MultiPoint(BaseModel):
    type: Literal["MultiPoint"]
    # Wrapped once more than a plain position list
    coordinates: list[RING_TYPE]

class Polygon(BaseModel):
    type: Literal["Polygon"]
    # Outer ring first, then its holes. Closure is not enforced.
    coordinates: list[RING_TYPE]

class MultiPolygon(BaseModel):
    type: Literal["MultiPolygon"]
    coordinates: list[RING_TYPE]

class GeometryCollection(BaseModel):
    type: Literal["GeometryCollection"]
    # Members are flattened into one position stream
    coordinates: list[RING_TYPE]

Geometry = Annotated[
    Point | LineString | Multiline | MultiPoint | Polygon | MultiPolygon | GeometryCollection,
    Field(discriminator="type"),
]

# ----- Core GeoJSON Objects -----
class Feature(BaseModel):
    type: Literal["Feature"]
    geometry: Geometry
    properties: dict[str, Any] = Field(default_factory=dict)

class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"]
    features: list[Feature]
