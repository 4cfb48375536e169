from datetime import datetime
from pathlib import Path

from dateutil import tz

DATA_DIRECTORY = Path(__file__).parent / 'data'
INPUT_DIRECTORY = DATA_DIRECTORY / 'input'

REFERENCE_TIME = datetime(2019, 2, 3, 14, 36, 16, 123456, tzinfo=tz.UTC)
