from datetime import datetime, timedelta
from typing import Dict, Optional

import numpy
from pyproj import CRS

from aprsreport.packets.fields import Message, PacketType, Position
from aprsreport.packets.results import DecodingResult

DEFAULT_CRS = CRS.from_epsg(4326)

METERS_PER_FOOT = 0.3048


class PositionReport:
    """ position report decoded from a single APRS packet; read-only once built """

    def __init__(
        self,
        raw: str,
        call: str,
        message: Message,
        timestamp: datetime,
        position: Position,
        altitude: int = None,
        speed: float = 0,
        direction: float = 0,
        results: Dict[str, DecodingResult] = None,
    ):
        """
        :param raw: raw packet text
        :param call: source callsign
        :param message: information field
        :param timestamp: time of the report
        :param position: latitude / longitude of the report
        :param altitude: altitude in feet
        :param speed: speed (not yet decoded)
        :param direction: course (not yet decoded)
        :param results: outcome of decoding each field, keyed by field name
        """

        self.__raw = raw
        self.__call = call
        self.__message = message if message is not None else Message()
        self.__timestamp = timestamp
        self.__position = position if position is not None else Position()
        self.__altitude = altitude
        self.__speed = speed
        self.__direction = direction
        self.__results = dict(results) if results is not None else {}

    @property
    def raw(self) -> str:
        return self.__raw

    @property
    def call(self) -> str:
        return self.__call

    @property
    def message(self) -> Message:
        return self.__message

    @property
    def timestamp(self) -> datetime:
        return self.__timestamp

    @property
    def position(self) -> Position:
        return self.__position

    @property
    def altitude(self) -> Optional[int]:
        """ altitude in feet """
        return self.__altitude

    @property
    def speed(self) -> float:
        return self.__speed

    @property
    def direction(self) -> float:
        return self.__direction

    @property
    def results(self) -> Dict[str, DecodingResult]:
        return dict(self.__results)

    @property
    def packet_type(self) -> PacketType:
        return self.message.packet_type

    @property
    def crs(self) -> CRS:
        return DEFAULT_CRS

    @property
    def coordinates(self) -> numpy.ndarray:
        """ (longitude, latitude, altitude in meters) """
        altitude = self.altitude * METERS_PER_FOOT if self.altitude is not None else 0
        return numpy.array((self.position.longitude, self.position.latitude, altitude))

    def decoded(self, field: str) -> bool:
        """
        whether the given field was decoded from the packet, rather than set to a default

        :param field: one of `call`, `timestamp`, `position`, `altitude`
        """

        result = self.__results.get(field)
        return result is None or result.available

    def overground_distance(self, point: (float, float)) -> float:
        """
        horizontal distance over the WGS84 ellipsoid

        :param point: (longitude, latitude) point
        :return: distance in meters
        """

        geodetic = self.crs.get_geod()
        return geodetic.line_length(
            [self.position.longitude, point[0]], [self.position.latitude, point[1]]
        )

    def __sub__(self, other: 'PositionReport') -> 'Distance':
        return Distance.from_reports(self, other)

    def __eq__(self, other: 'PositionReport') -> bool:
        return isinstance(other, PositionReport) and (
            self.raw,
            self.call,
            self.message,
            self.timestamp,
            self.position,
            self.altitude,
            self.speed,
            self.direction,
            self.__results,
        ) == (
            other.raw,
            other.call,
            other.message,
            other.timestamp,
            other.position,
            other.altitude,
            other.speed,
            other.direction,
            other.results,
        )

    def __gt__(self, other: 'PositionReport') -> bool:
        return self.timestamp > other.timestamp

    def __lt__(self, other: 'PositionReport') -> bool:
        return self.timestamp < other.timestamp

    def __str__(self) -> str:
        altitude = f'{self.altitude}ft' if self.altitude is not None else '-'
        return f'{self.call:<9} {self.timestamp:%Y-%m-%d %H:%M:%S%z} ({self.position}) {altitude}'

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(raw={repr(self.raw)}, call={repr(self.call)}, message={repr(self.message)}, '
            f'timestamp={repr(self.timestamp)}, position={repr(self.position)}, altitude={repr(self.altitude)}, '
            f'speed={repr(self.speed)}, direction={repr(self.direction)}, results={repr(self.__results)})'
        )


class Distance:
    def __init__(self, interval: timedelta, horizontal: float, vertical: float):
        self.__interval = interval
        self.__horizontal = horizontal
        self.__vertical = vertical

    @classmethod
    def from_reports(cls, report_1: PositionReport, report_2: PositionReport) -> 'Distance':
        """
        Get distance between two position reports.

        :param report_1: first position report
        :param report_2: second position report
        """

        for report in (report_1, report_2):
            if not report.decoded('position'):
                raise ValueError(f'position of report from "{report.call}" was not decoded')

        interval = report_1.timestamp - report_2.timestamp
        horizontal_distance = report_1.overground_distance(report_2.coordinates[:2])
        vertical_distance = report_1.coordinates[2] - report_2.coordinates[2]

        return cls(interval, horizontal_distance, vertical_distance)

    @property
    def interval(self) -> timedelta:
        return self.__interval

    @property
    def seconds(self) -> float:
        return self.interval / timedelta(seconds=1)

    @property
    def overground(self) -> float:
        return self.__horizontal

    @property
    def ascent(self) -> float:
        return self.__vertical

    @property
    def ascent_rate(self) -> float:
        return self.__vertical / self.seconds if self.seconds > 0 else 0

    @property
    def ground_speed(self) -> float:
        return self.__horizontal / self.seconds if self.seconds > 0 else 0

    def __str__(self) -> str:
        return f'{self.seconds}s, {self.ascent:6.2f}m vertical, {self.overground:6.2f}m horizontal'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({repr(self.interval)}, {self.overground}, {self.ascent})'
