from datetime import datetime, tzinfo
from typing import Optional, TYPE_CHECKING, Union

from dateutil import tz
from dateutil.parser import parse as parse_date

from aprsreport.messages import get_message
from aprsreport.packets.base import PositionReport
from aprsreport.packets.fields import Position
from aprsreport.packets.parsing import (
    extract_altitude,
    extract_callsign,
    extract_message,
    extract_position,
    extract_timestamp,
    validate_callsign,
)
from aprsreport.packets.results import Unavailable
from aprsreport.utilities import ensure_datetime_timezone, LOGGER

if TYPE_CHECKING:
    from aprsreport.configuration import ParserConfiguration


class PacketParser:
    """ decodes raw APRS packets into position reports """

    def __init__(
        self, reference_time: Union[datetime, str] = None, timezone: Union[tzinfo, str] = None
    ):
        """
        :param reference_time: instant that anchors partial timestamps, defaulting to the time of each call to `parse`
        :param timezone: time zone of local timestamps, as a `tzinfo` or IANA name; defaults to the local zone
        """

        self.__reference_time = convert_reference_time(reference_time)
        self.__timezone = convert_timezone(timezone)

    @classmethod
    def from_configuration(cls, configuration: 'ParserConfiguration') -> 'PacketParser':
        return cls(
            reference_time=configuration['reference_time'], timezone=configuration['timezone'],
        )

    @property
    def reference_time(self) -> Optional[datetime]:
        return self.__reference_time

    @property
    def timezone(self) -> tzinfo:
        return self.__timezone

    def parse(
        self, packet: Union[str, bytes], reference_time: Union[datetime, str] = None
    ) -> PositionReport:
        """
        Decode a raw APRS packet. Fields that cannot be decoded take default values, and the reason is recorded in
        `PositionReport.results`; this method does not raise on malformed packets.

        :param packet: raw packet text, i.e. `N0CALL>APRS,WIDE1-1:@092345z4903.50N/07201.75W>`
        :param reference_time: instant that anchors partial timestamps for this packet only
        :return: position report
        """

        if packet is None:
            packet = ''
        elif isinstance(packet, bytes):
            packet = packet.decode('utf-8', errors='replace')
        elif not isinstance(packet, str):
            packet = str(packet)

        if reference_time is not None:
            reference_time = convert_reference_time(reference_time)
        elif self.reference_time is not None:
            reference_time = self.reference_time
        else:
            reference_time = datetime.now(tz.UTC)

        call = extract_callsign(packet)
        if len(packet) == 0:
            call_result = Unavailable('packet_no')
        elif '>' not in packet:
            call_result = Unavailable('dstcall_none')
        else:
            call_result = validate_callsign(call)

        message = extract_message(packet)
        timestamp_result = extract_timestamp(message, reference_time, self.timezone)
        position_result = extract_position(message)
        altitude_result = extract_altitude(message)

        timestamp = reference_time
        if timestamp_result:
            timestamp = timestamp_result.value.resolve()

        report = PositionReport(
            raw=packet,
            call=call,
            message=message,
            timestamp=timestamp,
            position=position_result.value_or(Position()),
            altitude=altitude_result.value_or(None),
            results={
                'call': call_result,
                'timestamp': timestamp_result,
                'position': position_result,
                'altitude': altitude_result,
            },
        )

        LOGGER.debug(f'{report.packet_type.name.lower()} packet - {report}')
        return report

    @staticmethod
    def get_message(code: str) -> Optional[str]:
        """
        :param code: symbolic error code
        :return: description of the error, or `None`
        """

        return get_message(code)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(reference_time={repr(self.reference_time)}, timezone={repr(self.timezone)})'


def convert_reference_time(reference_time: Union[datetime, str, None]) -> Optional[datetime]:
    if reference_time is None:
        return None
    if not isinstance(reference_time, datetime):
        reference_time = parse_date(str(reference_time))
    return ensure_datetime_timezone(reference_time)


def convert_timezone(timezone: Union[tzinfo, str, None]) -> tzinfo:
    if timezone is None:
        return tz.tzlocal()
    if isinstance(timezone, tzinfo):
        return timezone
    zone = tz.gettz(timezone)
    if zone is None:
        raise ValueError(f'unrecognized time zone "{timezone}"')
    return zone


DEFAULT_PARSER = PacketParser()


def parse(packet: Union[str, bytes], reference_time: Union[datetime, str] = None) -> PositionReport:
    """
    Decode a raw APRS packet into a position report, anchoring partial timestamps to the current time.

    :param packet: raw packet text
    :param reference_time: instant that anchors partial timestamps
    :return: position report
    """

    return DEFAULT_PARSER.parse(packet, reference_time)
