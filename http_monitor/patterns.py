"""HTTP Monitor - Constants and patterns"""

import re

VERSION = "1.0.0"

METHODS = ('GET', 'POST', 'PUT', 'HEAD', 'DELETE', 'OPTIONS')

MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

MONTH_NUMBERS = {name: i for i, name in enumerate(MONTHS, 1)}

RESPONSE_CLASSES = ('1XX', '2XX', '3XX', '4XX', '5XX')

# Timestamp layout once the month name is replaced by its number,
# e.g. 09/May/2018:16:00:41 +0000 -> 09/05/2018:16:00:41 +0000
TIMESTAMP_FORMAT = '%d/%m/%Y:%H:%M:%S %z'

# Defaults
DEFAULT_WINDOW_SECONDS = 120
DEFAULT_RATE_THRESHOLD = 10.0
DEFAULT_TOP_N = 5
DEFAULT_REPORT_INTERVAL = 10.0
DEFAULT_FILENAME = 'access.log'

# Access log line grammar
LOG_LINE_PATTERN = (
    r'(?P<ip>[^ ]+) '
    r'(?P<identity>-) '
    r'(?P<user>[0-9A-Za-z-]+) '
    r'\[(?P<timestamp>\d{2}/(?:' + '|'.join(MONTHS) + r')/\d{4}:\d{2}:\d{2}:\d{2} [+-]\d{4})\] '
    r'"(?P<method>' + '|'.join(METHODS) + r') '
    r'(?P<section>/[^/ ]*)'
    r'(?P<resource>[^ ]*) '
    r'(?P<protocol>HTTP/\d\.\d)" '
    r'(?P<status>\d{3}) '
    r'(?P<size>[0-9-]+)'
)

LOG_LINE_RE = re.compile(LOG_LINE_PATTERN)
