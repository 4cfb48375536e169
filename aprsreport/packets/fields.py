from datetime import datetime, tzinfo
from enum import Enum
from typing import Optional


class PacketType(Enum):
    """
    kind of APRS information field, keyed by its data type identifier (the first character)

    APRS format reference: http://www.aprs.org/doc/APRS101.PDF (chapter 5)

    each member holds its identifiers and, if the format is not decoded by this package, the error code reported
    when a field of that kind is requested
    """

    POSITION = ('!=', None)
    TIMESTAMPED_POSITION = ('/@', None)
    MIC_E = ('`\'\x1c\x1d', 'mice_inv')
    OBJECT = (';', 'obj_inv')
    ITEM = (')', 'item_inv')
    MESSAGE = (':', 'msg_inv')
    STATUS = ('>', 'unknown')
    TELEMETRY = ('T', 'tlm_unsupp')
    WEATHER = ('_#*', 'wx_unsupp')
    NMEA = ('$', 'nmea_unsupp')
    USER_DEFINED = ('{', 'user_unsupp')
    OTHER = ('<?}%[,', 'exp_unsupp')
    UNKNOWN = ('', 'unknown')

    def __init__(self, identifiers: str, unsupported_reason: Optional[str]):
        self.identifiers = identifiers
        self.unsupported_reason = unsupported_reason

    @property
    def decoded(self) -> bool:
        return self.unsupported_reason is None

    @classmethod
    def from_identifier(cls, identifier: Optional[str]) -> 'PacketType':
        if identifier:
            for packet_type in cls:
                if identifier in packet_type.identifiers:
                    return packet_type
        return cls.UNKNOWN


class Message:
    """ information field of a packet, along with its data type identifier """

    def __init__(self, text: str = None, type: str = None):
        self.__text = text
        self.__type = type

    @property
    def text(self) -> Optional[str]:
        return self.__text

    @property
    def type(self) -> Optional[str]:
        return self.__type

    @property
    def packet_type(self) -> PacketType:
        return PacketType.from_identifier(self.type)

    def __bool__(self) -> bool:
        return self.text is not None

    def __eq__(self, other: 'Message') -> bool:
        return isinstance(other, Message) and (self.text, self.type) == (other.text, other.type)

    def __repr__(self) -> str:
        if not self:
            return f'{self.__class__.__name__}()'
        return f'{self.__class__.__name__}(text={repr(self.text)}, type={repr(self.type)})'


class Position:
    """ geographic position in decimal degrees, with the hemisphere letters it was decoded from """

    def __init__(
        self,
        latitude: float = 0,
        longitude: float = 0,
        parallel: str = None,
        meridian: str = None,
    ):
        self.__latitude = latitude
        self.__longitude = longitude
        self.__parallel = parallel
        self.__meridian = meridian

    @property
    def latitude(self) -> float:
        return self.__latitude

    @property
    def longitude(self) -> float:
        return self.__longitude

    @property
    def parallel(self) -> Optional[str]:
        """ `N` or `S` """
        return self.__parallel

    @property
    def meridian(self) -> Optional[str]:
        """ `E` or `W` """
        return self.__meridian

    def __eq__(self, other: 'Position') -> bool:
        return isinstance(other, Position) and (
            self.latitude,
            self.longitude,
            self.parallel,
            self.meridian,
        ) == (other.latitude, other.longitude, other.parallel, other.meridian)

    def __str__(self) -> str:
        return f'{self.latitude:.5f}, {self.longitude:.5f}'

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(latitude={self.latitude}, longitude={self.longitude}, '
            f'parallel={repr(self.parallel)}, meridian={repr(self.meridian)})'
        )


class PartialTimestamp:
    """
    day, hour and minute of a timestamp, anchored to a reference instant that supplies the year, month and seconds

    A packet only carries the day of the month, so the month is always taken from the reference instant. A packet
    sent on the 31st and decoded on the 1st of the following month resolves to the 31st of the decode month
    (or fails to resolve if that month is shorter).

    :param day: day of the month
    :param hour: hour of the day
    :param minute: minute of the hour
    :param zone: time zone the fields are expressed in
    :param reference: timezone-aware reference instant
    """

    def __init__(self, day: int, hour: int, minute: int, zone: tzinfo, reference: datetime):
        self.day = day
        self.hour = hour
        self.minute = minute
        self.zone = zone
        self.reference = reference

    def resolve(self) -> datetime:
        """
        :return: reference instant with the day, hour and minute replaced in the given zone
        :raises ValueError: if the fields do not form a valid date in the reference month
        """

        return self.reference.astimezone(self.zone).replace(
            day=self.day, hour=self.hour, minute=self.minute, microsecond=0
        )

    def __eq__(self, other: 'PartialTimestamp') -> bool:
        return isinstance(other, PartialTimestamp) and (
            self.day,
            self.hour,
            self.minute,
            self.zone,
            self.reference,
        ) == (other.day, other.hour, other.minute, other.zone, other.reference)

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(day={self.day}, hour={self.hour}, minute={self.minute}, '
            f'zone={repr(self.zone)}, reference={repr(self.reference)})'
        )
