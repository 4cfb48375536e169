from datetime import datetime, tzinfo
import re
from typing import Optional

from dateutil import tz

from aprsreport.messages import get_message
from aprsreport.packets.fields import Message, PacketType, PartialTimestamp, Position
from aprsreport.packets.results import Decoded, DecodingResult, Unavailable
from aprsreport.utilities import LOGGER

# character offsets of day / hour / minute timestamps, keyed by the zone indicator character
TIMESTAMP_OFFSETS = {
    'z': {'indicator': 7, 'day': slice(1, 3), 'hour': slice(3, 5), 'minute': slice(5, 7)},
    'l': {'indicator': 7, 'day': slice(1, 3), 'hour': slice(3, 5), 'minute': slice(5, 7)},
}

# start of the position within the information field, after the data type identifier and any timestamp
POSITION_START = {PacketType.POSITION: 1, PacketType.TIMESTAMPED_POSITION: 8}

# uncompressed latitude `DDMM.mmN` and longitude `DDDMM.mmE`
LATITUDE_OFFSETS = {
    'width': 8, 'degrees': slice(0, 2), 'minutes': slice(2, 7), 'point': 4, 'hemisphere': 7,
}
LONGITUDE_OFFSETS = {
    'width': 9, 'degrees': slice(0, 3), 'minutes': slice(3, 8), 'point': 5, 'hemisphere': 8,
}

ALTITUDE_MARKER = '/A='
ALTITUDE_WIDTH = 6

AX25_CALLSIGN_PATTERN = re.compile(r'[A-Z0-9]{1,6}(-(\d|1[0-5]))?', re.IGNORECASE)
CALLSIGN_CHARACTERS_PATTERN = re.compile(r'[A-Z0-9-]+', re.IGNORECASE)

DIGITS_PATTERN = re.compile(r'\d+')
COORDINATE_DIGITS_PATTERN = re.compile(r'[\d ]+')
# position ambiguity replaces up to four trailing digits with spaces
AMBIGUOUS_DIGITS_PATTERN = re.compile(r'\d+ {0,4}')
ALTITUDE_PATTERN = re.compile(r'-?\d+')


class InvalidPacketError(Exception):
    """ packet field could not be decoded; carries the error code from the error message catalog """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f'{code} - {get_message(code)}')


def extract_callsign(packet: str) -> str:
    """
    Retrieve the source callsign (everything before the first `>`) from a raw packet, without validation.

    :param packet: raw APRS packet
    :return: source callsign
    """

    if not packet:
        return ''
    return packet.split('>', 1)[0]


def validate_callsign(callsign: str) -> DecodingResult:
    """
    Check a source callsign against the AX.25 format (1-6 letters or digits, optional SSID from 0 to 15).

    :param callsign: source callsign
    :return: the callsign, or the reason it is not a valid AX.25 call
    """

    try:
        if not callsign:
            raise InvalidPacketError('packet_short')
        if CALLSIGN_CHARACTERS_PATTERN.fullmatch(callsign) is None:
            raise InvalidPacketError('srccall_badchars')
        if AX25_CALLSIGN_PATTERN.fullmatch(callsign) is None:
            raise InvalidPacketError('srccall_noax25')
    except InvalidPacketError as error:
        LOGGER.debug(f'callsign {repr(callsign)} - {error}')
        return Unavailable(error.code)

    return Decoded(callsign)


def extract_message(packet: str) -> Message:
    """
    Retrieve the information field (everything after the first `:`) from a raw packet.

    :param packet: raw APRS packet
    :return: message with text and data type identifier, or an empty message if the packet has no information field
    """

    if not packet or ':' not in packet:
        return Message()

    text = packet.split(':', 1)[1]
    if len(text) == 0:
        return Message()

    return Message(text=text, type=text[0])


def extract_timestamp(
    message: Optional[Message], reference_time: datetime, local_zone: tzinfo = None
) -> DecodingResult:
    """
    Decode the day / hour / minute timestamp of a position report with timestamp (`@DDHHMMz` or `@DDHHMMl`).

    The month, year and seconds are not transmitted and are inherited from the reference instant.

    :param message: information field of the packet
    :param reference_time: timezone-aware instant that anchors the partial timestamp
    :param local_zone: time zone of `l` timestamps, defaulting to the local zone of this machine
    :return: partial timestamp, or the reason it could not be decoded
    """

    if local_zone is None:
        local_zone = tz.tzlocal()

    try:
        if not message:
            raise InvalidPacketError('packet_nobody')
        if message.type != '@':
            raise InvalidPacketError('unknown')

        text = message.text
        for indicator, offsets in TIMESTAMP_OFFSETS.items():
            if text[offsets['indicator'] : offsets['indicator'] + 1] == indicator:
                break
        else:
            # month / day / hour / minute and hour / minute / second forms
            raise InvalidPacketError('unknown')

        fields = {}
        for field in ('day', 'hour', 'minute'):
            value = text[offsets[field]]
            if DIGITS_PATTERN.fullmatch(value) is None:
                raise InvalidPacketError('timestamp_inv_loc')
            fields[field] = int(value)

        timestamp = PartialTimestamp(
            **fields, zone=tz.UTC if indicator == 'z' else local_zone, reference=reference_time,
        )

        try:
            timestamp.resolve()
        except ValueError:
            raise InvalidPacketError('timestamp_inv_loc')
    except InvalidPacketError as error:
        LOGGER.debug(f'timestamp - {error}')
        return Unavailable(error.code)

    return Decoded(timestamp)


def _decode_coordinate(chunk: str, offsets: dict, negative_hemisphere: str) -> float:
    point = offsets['point']
    digits = chunk[:point] + chunk[point + 1 : offsets['hemisphere']]
    if chunk[point] != '.' or COORDINATE_DIGITS_PATTERN.fullmatch(digits) is None:
        raise InvalidPacketError('loc_inv')
    if AMBIGUOUS_DIGITS_PATTERN.fullmatch(digits) is None:
        raise InvalidPacketError('loc_amb_inv')

    # ambiguous digits count as zeros
    chunk = chunk.replace(' ', '0')
    coordinate = int(chunk[offsets['degrees']]) + float(chunk[offsets['minutes']]) / 60
    if chunk[offsets['hemisphere']] == negative_hemisphere:
        coordinate *= -1
    return coordinate


def extract_position(message: Optional[Message]) -> DecodingResult:
    """
    Decode the uncompressed latitude / longitude (`DDMM.mmN/DDDMM.mmW`) of a position report.

    The position (the information field after the data type identifier and timestamp) is split on `/`; the latitude
    is the trailing 8 characters of the first chunk, and the longitude is the leading 9 characters of the second.
    Position ambiguity (up to four trailing digits sent as spaces) is decoded with the missing digits as zeros.

    :param message: information field of the packet
    :return: position, or the reason it could not be decoded
    """

    try:
        if not message:
            raise InvalidPacketError('packet_nobody')

        packet_type = message.packet_type
        if not packet_type.decoded:
            raise InvalidPacketError(packet_type.unsupported_reason)

        chunks = message.text[POSITION_START[packet_type] :].split('/')
        if len(chunks) < 2:
            raise InvalidPacketError('loc_short')
        latitude_chunk, longitude_chunk = chunks[:2]

        if (
            len(latitude_chunk) < LATITUDE_OFFSETS['width']
            or len(longitude_chunk) < LONGITUDE_OFFSETS['width']
        ):
            raise InvalidPacketError('loc_short')

        latitude_chunk = latitude_chunk[-LATITUDE_OFFSETS['width'] :]
        longitude_chunk = longitude_chunk[: LONGITUDE_OFFSETS['width']]

        parallel = latitude_chunk[LATITUDE_OFFSETS['hemisphere']]
        meridian = longitude_chunk[LONGITUDE_OFFSETS['hemisphere']]
        if parallel not in ('N', 'S') or meridian not in ('E', 'W'):
            raise InvalidPacketError('loc_inv')

        latitude = _decode_coordinate(latitude_chunk, LATITUDE_OFFSETS, 'S')
        longitude = _decode_coordinate(longitude_chunk, LONGITUDE_OFFSETS, 'W')

        if abs(latitude) > 90 or abs(longitude) > 180:
            raise InvalidPacketError('loc_large')
    except InvalidPacketError as error:
        LOGGER.debug(f'position - {error}')
        return Unavailable(error.code)

    return Decoded(Position(latitude, longitude, parallel, meridian))


def extract_altitude(message: Optional[Message]) -> DecodingResult:
    """
    Decode the altitude in feet from the `/A=aaaaaa` marker of the information field.

    :param message: information field of the packet
    :return: altitude in feet, or the reason it could not be decoded
    """

    try:
        if not message:
            raise InvalidPacketError('packet_nobody')

        start = message.text.find(ALTITUDE_MARKER)
        # a marker at the very start of the field would be the data type identifier
        if start <= 0:
            raise InvalidPacketError('unknown')

        start += len(ALTITUDE_MARKER)
        # leading digits of the window, so short altitudes may be followed by a comment
        altitude = ALTITUDE_PATTERN.match(message.text[start : start + ALTITUDE_WIDTH])
        if altitude is None:
            raise InvalidPacketError('packet_invalid')
    except InvalidPacketError as error:
        LOGGER.debug(f'altitude - {error}')
        return Unavailable(error.code)

    return Decoded(int(altitude.group()))
