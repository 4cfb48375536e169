from typer.testing import CliRunner

from aprsreport.__main__ import app
from tests import INPUT_DIRECTORY

runner = CliRunner()


def test_packets():
    result = runner.invoke(
        app,
        [
            'N0CALL>APRS,WIDE1-1:@221854z4903.50N/07201.75W>/A=001234',
            '--reference-time',
            '2019-02-03T14:36:16Z',
        ],
    )

    assert result.exit_code == 0, result.output
    assert 'N0CALL    2019-02-22 18:54:16+0000 (49.05833, -72.02917) 1234ft' in result.output


def test_file():
    result = runner.invoke(
        app, ['--file', str(INPUT_DIRECTORY / 'test_connections' / 'packets.txt')]
    )

    assert result.exit_code == 0, result.output
    assert 'W3EAX-13  2019-02-03 14:36:16+0000 (39.64900, -76.48783) 53614ft' in result.output
    assert 'W3EAX-8 ' in result.output


def test_configuration():
    result = runner.invoke(
        app,
        [
            'W3EAX-13>APRS:@031436z3938.94N/07629.27W>',
            'W3EAX-8>APRS:@031436z3950.00N/07730.25W>',
            '--configuration',
            str(INPUT_DIRECTORY / 'test_cli' / 'configuration.yaml'),
        ],
    )

    report_lines = [line for line in result.output.splitlines() if line.startswith('W3EAX')]

    assert result.exit_code == 0, result.output
    assert len(report_lines) == 1
    assert report_lines[0].startswith('W3EAX-13  2019-02-03 14:36:16')


def test_no_packets():
    result = runner.invoke(app, [])

    assert result.exit_code == 1


def test_missing_file():
    result = runner.invoke(app, ['--file', 'nonexistent_packets.txt'])

    assert result.exit_code == 1
