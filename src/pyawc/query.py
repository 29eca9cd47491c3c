"""Build a METAR query for the AWC Text Data Server.

A query is made up of a handful of constraint groups.  Members of a group
compete with each other, so each group is a single attribute holding at most
one of the models below and calling a setter swaps out whatever was there.

Keep in mind that the server wants either :meth:`METARQuery.hours_before_now`
or :meth:`METARQuery.between`, nothing here enforces that.  See
https://aviationweather.gov/dataserver/example?datatype=metar
"""
# pylint: disable=too-few-public-methods

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from pyawc.reference import (
    LATITUDE_BOUNDS,
    LONGITUDE_BOUNDS,
    METAR_ENDPOINT,
    RADIUS_BOUNDS,
)
from pyawc.util import keep_in_range


class TimeWindow(BaseModel):
    """Absolute time bounds, unix seconds."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class HoursBeforeNow(BaseModel):
    """Relative time bound."""

    model_config = ConfigDict(frozen=True)

    hours: float


class MostRecent(BaseModel):
    """Only return the most recent METAR."""

    model_config = ConfigDict(frozen=True)

    value: bool


class MostRecentForEachStation(BaseModel):
    """The `mostRecentForEachStation` constraint, ie constraint or postfilter."""

    model_config = ConfigDict(frozen=True)

    value: str


class BoundingRectangle(BaseModel):
    """A latitude / longitude box."""

    model_config = ConfigDict(frozen=True)

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float


class RadialFilter(BaseModel):
    """A radius (statute miles) around a point."""

    model_config = ConfigDict(frozen=True)

    radius: float
    lat: float
    lon: float


def _fmt(value: float) -> str:
    """Fixed six decimal rendering of a float."""
    return f"{value:f}"


class METARQuery:
    """Accumulates the constraints used to fetch METARs.

    Every setter returns the query, so calls can be chained::

        query = METARQuery().station_string("KDSM").hours_before_now(2)
    """

    def __init__(self):
        """Constructor, nothing is set."""
        self.station: Optional[str] = None
        self.timespan: Optional[Union[TimeWindow, HoursBeforeNow]] = None
        self.limit: Optional[Union[MostRecent, MostRecentForEachStation]] = (
            None
        )
        self.area: Optional[Union[BoundingRectangle, RadialFilter]] = None
        self.field_names: List[str] = []

    def station_string(self, value: str) -> "METARQuery":
        """Specify the station string, ie `KDSM` or `KDSM KAMW`."""
        self.station = value
        return self

    def between(self, start: datetime, end: datetime) -> "METARQuery":
        """Specify a timespan to fetch METARs within.

        Replaces any :meth:`hours_before_now` setting.  Naive datetimes are
        taken to be local time.
        """
        self.timespan = TimeWindow(
            start=int(start.timestamp()), end=int(end.timestamp())
        )
        return self

    def hours_before_now(self, value: float) -> "METARQuery":
        """Specify how many hours back from now to fetch METARs from.

        Negative values are taken as their magnitude.  Replaces any
        :meth:`between` setting.
        """
        self.timespan = HoursBeforeNow(hours=abs(value))
        return self

    def most_recent(self, value: bool) -> "METARQuery":
        """Only include the most recent METAR, replaces the per station one."""
        self.limit = MostRecent(value=value)
        return self

    def most_recent_for_each_station(self, value: str) -> "METARQuery":
        """Set the `mostRecentForEachStation` value, replaces most_recent."""
        self.limit = MostRecentForEachStation(value=value)
        return self

    def in_rectangle(
        self, min_lat: float, min_lon: float, max_lat: float, max_lon: float
    ) -> "METARQuery":
        """Limit to a latitude / longitude rectangle.

        Each value is pinned to the valid geographic range on its own.
        Replaces any :meth:`radial_distance` setting.
        """
        self.area = BoundingRectangle(
            min_lat=keep_in_range(min_lat, *LATITUDE_BOUNDS),
            min_lon=keep_in_range(min_lon, *LONGITUDE_BOUNDS),
            max_lat=keep_in_range(max_lat, *LATITUDE_BOUNDS),
            max_lon=keep_in_range(max_lon, *LONGITUDE_BOUNDS),
        )
        return self

    def radial_distance(
        self, radius: float, lat: float, lon: float
    ) -> "METARQuery":
        """Limit to a radius in statute miles around a point.

        The radius is pinned to [0, 500] and a zero radius becomes 1.
        Replaces any :meth:`in_rectangle` setting.
        """
        radius = keep_in_range(radius, *RADIUS_BOUNDS)
        if radius == 0:
            radius = 1
        self.area = RadialFilter(
            radius=radius,
            lat=keep_in_range(lat, *LATITUDE_BOUNDS),
            lon=keep_in_range(lon, *LONGITUDE_BOUNDS),
        )
        return self

    def fields(self, *values: str) -> "METARQuery":
        """Limit the response to the given fields, replacing prior ones."""
        self.field_names = list(values)
        return self

    def build_url(self) -> str:
        """Render the full request URL."""
        params = []
        if self.station is not None:
            params.append(("stationString", self.station))
        if isinstance(self.timespan, TimeWindow):
            params.append(("startTime", str(self.timespan.start)))
            params.append(("endTime", str(self.timespan.end)))
        elif isinstance(self.timespan, HoursBeforeNow):
            params.append(("hoursBeforeNow", _fmt(self.timespan.hours)))
        if isinstance(self.limit, MostRecent):
            params.append(("mostRecent", str(self.limit.value).lower()))
        elif isinstance(self.limit, MostRecentForEachStation):
            params.append(("mostRecentForEachStation", self.limit.value))
        if isinstance(self.area, BoundingRectangle):
            params.append(("minLat", _fmt(self.area.min_lat)))
            params.append(("minLon", _fmt(self.area.min_lon)))
            params.append(("maxLat", _fmt(self.area.max_lat)))
            params.append(("maxLon", _fmt(self.area.max_lon)))
        elif isinstance(self.area, RadialFilter):
            # longitude before latitude, as the server documents it
            params.append(
                (
                    "radialDistance",
                    f"{_fmt(self.area.radius)};{_fmt(self.area.lon)},"
                    f"{_fmt(self.area.lat)}",
                )
            )
        if self.field_names:
            params.append(("fields", ",".join(self.field_names)))
        return METAR_ENDPOINT + "".join(f"&{k}={v}" for k, v in params)

    def __str__(self):
        """Return the request URL."""
        return self.build_url()
