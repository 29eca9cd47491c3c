"""METAR Data Model.

Attribute names follow the AWC Text Data Server XML elements, the few camel
case elements get a snake case attribute with the element name as alias.
"""
# pylint: disable=too-few-public-methods

from typing import Optional, Tuple

# third party
from pydantic import BaseModel, ConfigDict, Field


class QualityControlFlags(BaseModel):
    """The quality control flags attached to a METAR."""

    model_config = ConfigDict(frozen=True)

    corrected: bool = False
    auto: bool = False
    auto_station: bool = False
    maintenance_indicator: bool = False
    no_signal: bool = False
    lightning_sensor_off: bool = False
    freezing_rain_sensor_off: bool = False
    present_weather_sensor_off: bool = False


class SkyCondition(BaseModel):
    """The Sky condition, carried as XML attributes."""

    model_config = ConfigDict(frozen=True)

    sky_cover: Optional[str] = None
    cloud_base_ft_agl: Optional[int] = None


class METAR(BaseModel):
    """A single METAR observation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    raw_text: Optional[str] = None
    station_id: Optional[str] = None
    observation_time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    temp_c: Optional[float] = None
    dewpoint_c: Optional[float] = None
    wind_dir_degrees: Optional[int] = None
    wind_speed_kt: Optional[int] = None
    wind_gust_kt: Optional[int] = None
    visibility_statute_mi: Optional[float] = None
    altim_in_hg: Optional[float] = None
    sea_level_pressure_mb: Optional[float] = None
    quality_control_flags: QualityControlFlags = Field(
        default_factory=QualityControlFlags
    )
    wx_string: Optional[str] = None
    sky_conditions: Tuple[SkyCondition, ...] = Field(
        default=(), alias="sky_condition"
    )
    flight_category: Optional[str] = None
    three_hr_pressure_tendency_mb: Optional[float] = None
    max_t_c: Optional[float] = Field(
        default=None,
        alias="maxT_c",
        description="Maximum air temperature over the past 6 hours.",
    )
    min_t_c: Optional[float] = Field(
        default=None,
        alias="minT_c",
        description="Minimum air temperature over the past 6 hours.",
    )
    max_t24hr_c: Optional[float] = Field(default=None, alias="maxT24hr_c")
    min_t24hr_c: Optional[float] = Field(default=None, alias="minT24hr_c")
    precip_in: Optional[float] = None
    pcp3hr_in: Optional[float] = None
    pcp6hr_in: Optional[float] = None
    pcp24hr_in: Optional[float] = None
    snow_in: Optional[float] = None
    vert_vis_ft: Optional[int] = None
    metar_type: Optional[str] = None
    elevation_m: Optional[float] = None


class METARResponse(BaseModel):
    """What the Text Data Server sent back for a METAR query.

    The server reports problems with the request inside of an otherwise
    successful response, so ``errors`` and ``warnings`` need inspection.
    """

    model_config = ConfigDict(frozen=True)

    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    metars: Tuple[METAR, ...] = ()
