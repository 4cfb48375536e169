from datetime import datetime
from pathlib import Path
import runpy
import shutil

from dateutil import tz

from aprsreport.connections import RawAPRSTextFile
from aprsreport.packets import PacketType, Unavailable
from aprsreport.parser import PacketParser
from tests import INPUT_DIRECTORY, REFERENCE_TIME

PACKETS_FILENAME = INPUT_DIRECTORY / 'test_connections' / 'packets.txt'


def test_raw_aprs_text_file():
    source = RawAPRSTextFile(PACKETS_FILENAME, parser=PacketParser(reference_time=REFERENCE_TIME))
    reports = source.reports

    assert len(reports) == 3
    assert [report.call for report in reports] == ['W3EAX-13', 'W3EAX-8', 'W3EAX-13']

    # the time at the start of the line anchors the timestamp of the packet
    assert reports[0].timestamp == datetime(2019, 2, 3, 14, 36, 16, tzinfo=tz.UTC)
    assert reports[0].altitude == 53614
    assert reports[1].timestamp == datetime(2019, 2, 3, 14, 38, 23, tzinfo=tz.UTC)
    assert reports[1].position.latitude == 39 + 50.00 / 60

    # lines without a time use the reference time of the parser
    assert reports[2].timestamp == REFERENCE_TIME
    assert reports[2].packet_type is PacketType.STATUS
    assert reports[2].results['position'] == Unavailable('unknown')


def test_new_lines(tmp_path):
    filename = tmp_path / 'packets.txt'
    shutil.copyfile(PACKETS_FILENAME, filename)

    source = RawAPRSTextFile(str(filename))

    assert len(source.reports) == 3
    assert len(source.reports) == 0

    with open(filename, 'a') as output_file:
        output_file.write('2019-02-03T14:39:28Z: W3EAX-13>APRS:!3939.51N/07627.36W>/A=043080\n')

    reports = source.reports

    assert len(reports) == 1
    assert reports[0].altitude == 43080


def test_callsign_filter():
    source = RawAPRSTextFile(PACKETS_FILENAME, callsigns=['W3EAX-8'])
    reports = source.reports

    assert len(reports) == 1
    assert reports[0].call == 'W3EAX-8'


def test_repr():
    source = RawAPRSTextFile(PACKETS_FILENAME, callsigns=['W3EAX-8'])

    assert repr(source) == f"RawAPRSTextFile({repr(str(PACKETS_FILENAME.resolve()))}, ['W3EAX-8'])"


def test_read_text_file_example(capsys):
    example = Path(__file__).parent.parent / 'examples' / 'read_text_file.py'

    runpy.run_path(str(example), run_name='__main__')
    output = capsys.readouterr().out.splitlines()

    assert 'number of reports: 1' in output
    assert 'maximum altitude (ft): 53614' in output
