"""Configuration validation using Pydantic (v2)"""
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator, model_validator


class MapSettings(BaseModel):
    gdp_source: str = Field(min_length=1)
    endorser_source: str = Field(min_length=1)
    request_timeout: float = Field(gt=0, le=300, default=30)
    center_lat: float = Field(ge=-90, le=90, default=25)
    center_lon: float = Field(ge=-180, le=180, default=15)
    zoom_start: int = Field(ge=0, le=19, default=3)
    base_tiles_url: str
    label_tiles_url: str
    cluster_base_size: int = Field(gt=0, default=30)
    cluster_size_per_member: int = Field(ge=0, default=2)
    cluster_max_size: int = Field(gt=0, default=100)
    output_path: str = Field(min_length=1, default='index.html')

    @field_validator('base_tiles_url', 'label_tiles_url')
    @classmethod
    def validate_tile_template(cls, v: str):
        for placeholder in ('{z}', '{x}', '{y}'):
            if placeholder not in v:
                raise ValueError(f"Tile URL is missing {placeholder}: {v}")
        return v

    @model_validator(mode='after')
    def _validate_cluster_sizes(self):
        if self.cluster_base_size > self.cluster_max_size:
            raise ValueError('cluster_base_size cannot be greater than cluster_max_size')
        return self

    @classmethod
    def from_config(cls, config) -> "MapSettings":
        """Build settings from a Config class or instance"""
        return cls(
            gdp_source=config.GDP_GEOJSON_SOURCE,
            endorser_source=config.ENDORSER_GEOJSON_SOURCE,
            request_timeout=config.REQUEST_TIMEOUT,
            center_lat=config.MAP_CENTER_LAT,
            center_lon=config.MAP_CENTER_LON,
            zoom_start=config.MAP_ZOOM_START,
            base_tiles_url=config.BASE_TILES_URL,
            label_tiles_url=config.LABEL_TILES_URL,
            cluster_base_size=config.CLUSTER_BASE_SIZE,
            cluster_size_per_member=config.CLUSTER_SIZE_PER_MEMBER,
            cluster_max_size=config.CLUSTER_MAX_SIZE,
            output_path=config.MAP_OUTPUT_PATH,
        )


def validate_map_settings(params: Dict[str, Any]) -> Dict[str, Any]:
    """Validate and normalize map settings"""
    model = MapSettings(**(params or {}))
    return model.model_dump()
