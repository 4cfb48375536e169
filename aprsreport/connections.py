from os import PathLike
from pathlib import Path
from typing import List

from dateutil.parser import parse as parse_date

from aprsreport.packets import PositionReport
from aprsreport.parser import PacketParser
from aprsreport.utilities import LOGGER


class RawAPRSTextFile:
    def __init__(
        self, filename: PathLike, callsigns: List[str] = None, parser: PacketParser = None
    ):
        """
        read APRS packets from a given text file where each line consists of the time received (`YYYY-MM-DDTHH:MM:SS`)
        followed by a colon and a space `: ` and then the raw APRS string

        The time at the start of each line anchors the partial timestamp of that packet; lines without one are decoded
        relative to the reference time of the parser.

        :param filename: path to text file
        :param callsigns: list of callsigns to return from source
        :param parser: packet parser, defaulting to one that reads the current time
        """

        if isinstance(filename, str):
            filename = filename.strip('"')
        if not isinstance(filename, Path):
            filename = Path(filename)
        if callsigns is not None and len(callsigns) == 0:
            callsigns = None

        self.location = filename.expanduser().resolve()
        self.callsigns = callsigns
        self.parser = parser if parser is not None else PacketParser()

        self.__lines_read = 0

    def new_lines(self) -> List[str]:
        with open(self.location, encoding='utf-8', errors='replace') as file_connection:
            lines = file_connection.read().splitlines()

        new_lines = lines[self.__lines_read :]
        self.__lines_read = len(lines)

        return [line for line in new_lines if len(line.strip()) > 0]

    @property
    def reports(self) -> List[PositionReport]:
        """ position reports from lines added to the file since the last access """

        reports = []
        for line in self.new_lines():
            try:
                received_time, raw_aprs = line.split(': ', 1)
                received_time = parse_date(received_time)
            except (ValueError, OverflowError):
                raw_aprs = line
                received_time = None
            report = self.parser.parse(raw_aprs.strip(), reference_time=received_time)
            if not report.decoded('position'):
                LOGGER.warning(f'{self.location.name} - "{report.call}" - {report.results["position"]}')
            reports.append(report)

        if self.callsigns is not None:
            reports = [report for report in reports if report.call in self.callsigns]

        return reports

    def __repr__(self):
        return f'{self.__class__.__name__}({repr(str(self.location))}, {repr(self.callsigns)})'
