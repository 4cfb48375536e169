from pathlib import Path
from typing import List, Optional

import typer

from aprsreport.configuration import ParserConfiguration
from aprsreport.connections import RawAPRSTextFile
from aprsreport.parser import convert_reference_time, PacketParser
from aprsreport.utilities import get_logger, LOGGER

app = typer.Typer(add_completion=False)


@app.command()
def aprsreport_command(
    packets: Optional[List[str]] = typer.Argument(
        None, help='raw APRS packets, i.e. "N0CALL>APRS:@092345z4903.50N/07201.75W>"'
    ),
    filename: Optional[Path] = typer.Option(
        None, '--file', '-f', help='text file of raw packets, one per line, optionally prefixed by `TIME: `',
    ),
    configuration_filename: Optional[Path] = typer.Option(
        None, '--configuration', '-c', help='configuration file in YAML format',
    ),
    reference_time: Optional[str] = typer.Option(
        None, '--reference-time', '-t', help='instant that anchors day / hour / minute timestamps',
    ),
):
    """
    decode APRS position reports and print one line per report
    """

    if configuration_filename is not None:
        configuration = ParserConfiguration.from_file(configuration_filename)
    else:
        configuration = ParserConfiguration()

    if reference_time is not None:
        configuration['reference_time'] = convert_reference_time(reference_time)

    get_logger(
        LOGGER.name,
        log_filename=configuration['log']['filename'],
        console_level=configuration.log_level,
    )

    parser = PacketParser.from_configuration(configuration)
    callsigns = configuration['callsigns'] if len(configuration['callsigns']) > 0 else None

    reports = []
    if packets is not None:
        for packet in packets:
            report = parser.parse(packet)
            if callsigns is None or report.call in callsigns:
                reports.append(report)
    if filename is not None:
        if not filename.exists():
            LOGGER.error(f'file not found: {filename}')
            raise typer.Exit(code=1)
        LOGGER.info(f'reading file {filename}')
        reports.extend(RawAPRSTextFile(filename, callsigns, parser).reports)

    if len(reports) == 0:
        LOGGER.warning('no packets to decode')
        raise typer.Exit(code=1)

    for report in reports:
        typer.echo(str(report))
        for field, result in report.results.items():
            if not result:
                LOGGER.debug(f'{report.call:<9} - {field} not decoded - {result}')

    LOGGER.info(f'decoded {len(reports)} packets')
    return reports


def main():
    app()


if __name__ == '__main__':
    main()
