from datetime import datetime
import logging
from os import PathLike
import sys

from dateutil.tz import tzlocal

LOGGER = logging.getLogger('aprsreport')

DEFAULT_LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'


def get_logger(
    name: str,
    log_filename: PathLike = None,
    file_level: int = None,
    console_level: int = None,
    log_format: str = None,
) -> logging.Logger:
    """
    instantiate logger instance

    :param name: name of logger
    :param log_filename: path to log file
    :param file_level: minimum log level to write to log file
    :param console_level: minimum log level to print to console
    :param log_format: logger message format
    :return: instance of a Logger object
    """

    if file_level is None:
        file_level = logging.DEBUG
    if console_level is None:
        console_level = logging.INFO
    logger = logging.getLogger(name)
    logger.setLevel(min(file_level, console_level) if log_filename is not None else console_level)

    if '.' in name:
        logger.parent = get_logger(name.rsplit('.', 1)[0], console_level=console_level)
    elif console_level != logging.NOTSET:
        for existing_console_handler in [
            handler for handler in logger.handlers if not isinstance(handler, logging.FileHandler)
        ]:
            logger.removeHandler(existing_console_handler)

        console_output = logging.StreamHandler(sys.stdout)
        console_output.setLevel(console_level)
        logger.addHandler(console_output)

    if log_filename is not None:
        file_handler = logging.FileHandler(log_filename)
        file_handler.setLevel(file_level)
        for existing_file_handler in [
            handler for handler in logger.handlers if isinstance(handler, logging.FileHandler)
        ]:
            logger.removeHandler(existing_file_handler)
            existing_file_handler.close()
        logger.addHandler(file_handler)

    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT
    log_formatter = logging.Formatter(log_format)
    for handler in logger.handlers:
        handler.setFormatter(log_formatter)

    return logger


def ensure_datetime_timezone(value: datetime) -> datetime:
    """ assume the local time zone for naive datetimes """
    if value is not None and (value.tzinfo is None or value.tzinfo.utcoffset(value) is None):
        value = value.replace(tzinfo=tzlocal())
    return value
