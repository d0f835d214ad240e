from dataclasses import dataclass


@dataclass
class GeoJsonKitConfig:
    """Configuration for the geojsonkit CLI."""

    indent: int = 2
    write_map: bool = False
    open_map: bool = True
    log_level: str = "WARNING"
