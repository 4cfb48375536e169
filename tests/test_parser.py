from datetime import datetime

import aprslib
from dateutil import tz
import pytest

from aprsreport import PacketParser, PacketType, parse, Position, PositionReport, Unavailable
from tests import REFERENCE_TIME


def test_parse_position_report():
    parser = PacketParser(reference_time=REFERENCE_TIME)
    raw = 'N0CALL>APRS,WIDE1-1:@221854z4903.50N/07201.75W>/A=001234 test'
    report = parser.parse(raw)

    assert report.raw == raw
    assert report.call == 'N0CALL'
    assert report.message.text == '@221854z4903.50N/07201.75W>/A=001234 test'
    assert report.message.type == '@'
    assert report.packet_type is PacketType.TIMESTAMPED_POSITION
    assert report.timestamp == datetime(2019, 2, 22, 18, 54, 16, tzinfo=tz.UTC)
    assert report.position.latitude == pytest.approx(49.0583, abs=1e-4)
    assert report.position.longitude == pytest.approx(-72.0292, abs=1e-4)
    assert report.position.parallel == 'N'
    assert report.position.meridian == 'W'
    assert report.altitude == 1234
    assert report.speed == 0
    assert report.direction == 0
    assert all(report.results.values())


def test_parse_local_timestamp():
    parser = PacketParser(reference_time=REFERENCE_TIME, timezone='America/New_York')
    report = parser.parse('N0CALL>APRS:@221854l4903.50N/07201.75W>')

    local_timestamp = report.timestamp.astimezone(tz.gettz('America/New_York'))

    assert local_timestamp.day == 22
    assert local_timestamp.hour == 18
    assert local_timestamp.minute == 54


def test_parse_without_timestamp():
    parser = PacketParser(reference_time=REFERENCE_TIME)
    report = parser.parse('N0CALL>APRS:!4903.50N/07201.75W>')

    assert report.timestamp == REFERENCE_TIME
    assert report.results['timestamp'] == Unavailable('unknown')
    assert report.altitude is None
    assert report.results['altitude'] == Unavailable('unknown')


def test_parse_reference_time_per_call():
    parser = PacketParser(reference_time=REFERENCE_TIME)
    reference_time = datetime(2020, 6, 1, tzinfo=tz.UTC)

    report = parser.parse('N0CALL>APRS:@221854z4903.50N/07201.75W>', reference_time=reference_time)

    assert report.timestamp == datetime(2020, 6, 22, 18, 54, tzinfo=tz.UTC)


def test_parse_reference_time_string():
    parser = PacketParser(reference_time='2019-02-03T14:36:16Z')
    report = parser.parse('N0CALL>APRS:@221854z4903.50N/07201.75W>')

    assert parser.reference_time == datetime(2019, 2, 3, 14, 36, 16, tzinfo=tz.UTC)
    assert report.timestamp == datetime(2019, 2, 22, 18, 54, 16, tzinfo=tz.UTC)


def test_parse_naive_reference_time():
    parser = PacketParser(reference_time=datetime(2019, 2, 3, 14, 36, 16))

    assert parser.reference_time.tzinfo is not None
    assert parser.parse('N0CALL>APRS:>status').timestamp == parser.reference_time


def test_parse_current_time():
    before = datetime.now(tz.UTC)
    report = parse('N0CALL>APRS:!4903.50N/07201.75W>')
    after = datetime.now(tz.UTC)

    assert before <= report.timestamp <= after
    assert report.call == 'N0CALL'


def test_invalid_timezone():
    with pytest.raises(ValueError):
        PacketParser(timezone='Not/A_Zone')


def test_parse_callsign():
    parser = PacketParser(reference_time=REFERENCE_TIME)

    assert parser.parse('N0CALL>APRS,WIDE1-1:...').call == 'N0CALL'

    report = parser.parse('N0CALL*>APRS:!4903.50N/07201.75W>')
    assert report.call == 'N0CALL*'
    assert report.results['call'] == Unavailable('srccall_badchars')

    report = parser.parse('no separators at all')
    assert report.call == 'no separators at all'
    assert report.results['call'] == Unavailable('dstcall_none')


def test_parse_missing_callsign():
    packets = {
        '': 'packet_no',
        'no separators at all': 'dstcall_none',
        '>APRS:!4903.50N/07201.75W>': 'packet_short',
    }

    for packet, reason in packets.items():
        report = parse(packet, REFERENCE_TIME)

        assert report.results['call'] == Unavailable(reason), packet
        assert not report.decoded('call')


def test_parse_empty():
    report = PacketParser(reference_time=REFERENCE_TIME).parse('')

    assert report.raw == ''
    assert report.call == ''
    assert not report.message
    assert report.timestamp == REFERENCE_TIME
    assert report.position == Position(0, 0, None, None)
    assert report.altitude is None
    assert report.packet_type is PacketType.UNKNOWN
    assert report.results['call'] == Unavailable('packet_no')
    assert report.results['position'] == Unavailable('packet_nobody')


def test_parse_malformed_position():
    report = PacketParser(reference_time=REFERENCE_TIME).parse('N0CALL>APRS:!4903.50N07201.75W-')

    assert report.position.latitude == 0
    assert report.position.longitude == 0
    assert not report.decoded('position')
    assert report.results['position'].reason == 'loc_short'


def test_parse_equator_is_not_failure():
    report = PacketParser(reference_time=REFERENCE_TIME).parse('N0CALL>APRS:!0000.00N/00000.00E-')

    assert report.position.latitude == 0
    assert report.position.longitude == 0
    assert report.decoded('position')


@pytest.mark.parametrize(
    'packet',
    [
        '',
        ':',
        '>',
        '>:',
        ':@',
        '@221854z',
        'N0CALL>APRS:@',
        'N0CALL>APRS:@99',
        'N0CALL>APRS:/A=',
        'N0CALL>APRS:!/',
        'N0CALL>APRS:!////////////',
        'N0CALL>APRS:@999999z9999.99N/99999.99E>/A=999999',
        '\x00\xff\x10>\x7f:\x1c\x1d',
        b'\xff\xfe N0CALL>APRS:!4903.50N/07201.75W-',
        None,
        12345,
    ],
)
def test_parse_is_total(packet):
    report = PacketParser(reference_time=REFERENCE_TIME).parse(packet)

    assert isinstance(report, PositionReport)
    assert -90 <= report.position.latitude <= 90
    assert -180 <= report.position.longitude <= 180


def test_parse_bytes():
    report = PacketParser(reference_time=REFERENCE_TIME).parse(b'N0CALL>APRS:!4903.50N/07201.75W-')

    assert report.raw == 'N0CALL>APRS:!4903.50N/07201.75W-'
    assert report.decoded('position')


def test_idempotence():
    parser = PacketParser(reference_time=REFERENCE_TIME)
    packets = [
        'N0CALL>APRS,WIDE1-1:@221854z4903.50N/07201.75W>/A=001234',
        'N0CALL>APRS:!4903.50N07201.75W-',
        '',
    ]

    for packet in packets:
        assert parser.parse(packet) == parser.parse(packet)


@pytest.mark.parametrize(
    'packet',
    [
        'N0CALL>APRS,WIDE1-1:!4903.50N/07201.75W-Test /A=001234',
        'W3EAX-8>APRS,WIDE1-1,WIDE2-1,qAR,K3DO-11:!3950.00S/07730.25E>/A=026909',
        'KC3FIT-1>APRS,WIDE2-1:=3358.12N/11814.59W#PHG5360',
    ],
)
def test_position_matches_aprslib(packet):
    expected = aprslib.parse(packet)
    report = PacketParser(reference_time=REFERENCE_TIME).parse(packet)

    assert report.call == expected['from']
    assert report.position.latitude == pytest.approx(expected['latitude'], abs=1e-4)
    assert report.position.longitude == pytest.approx(expected['longitude'], abs=1e-4)
    if 'altitude' in expected:
        assert report.altitude * 0.3048 == pytest.approx(expected['altitude'], abs=0.5)
