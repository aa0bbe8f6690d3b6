from pydantic import BaseModel, Field
from typing import Any


class ConvertGeoSparql(BaseModel):
    values: str | list[str] = Field(..., description="One or more texts holding GeoSPARQL literals")
    properties: dict[str, Any] = Field(default_factory=dict, description="Properties attached to every feature")
    reverse: bool | None = Field(None, description="Swap axis order; falls back to the configured default")
