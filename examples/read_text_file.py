from pathlib import Path

from aprsreport.connections import RawAPRSTextFile

# raw packets in `TIME: RAW` lines, as shipped with the tests
PACKETS_FILENAME = (
    Path(__file__).parent.parent / 'tests' / 'data' / 'input' / 'test_connections' / 'packets.txt'
)

if __name__ == '__main__':
    raw_packet_text_file = RawAPRSTextFile(PACKETS_FILENAME, callsigns=['W3EAX-13'])

    reports = sorted(
        report for report in raw_packet_text_file.reports if report.decoded('position')
    )

    print(f'number of reports: {len(reports)}')
    if len(reports) > 1:
        distances = [reports[index] - reports[index - 1] for index in range(1, len(reports))]
        print(f'distance traveled (m): {sum(distance.overground for distance in distances)}')
        print(f'maximum ascent rate (m/s): {max(distance.ascent_rate for distance in distances)}')
    altitudes = [report.altitude for report in reports if report.altitude is not None]
    if len(altitudes) > 0:
        print(f'maximum altitude (ft): {max(altitudes)}')
