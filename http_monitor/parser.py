"""HTTP Monitor - Access log line parser"""

from datetime import datetime, timezone

from .models import BadStatusCode, BadTimestamp, LogRecord, MalformedLine, ParseError
from .patterns import LOG_LINE_RE, MONTH_NUMBERS, TIMESTAMP_FORMAT


class LineParser:
    """Turns raw access log lines into LogRecords.

    Failures raise a ParseError subclass; deciding whether to skip the line
    or stop is left to the caller.
    """

    def __init__(self):
        self.parsed = 0
        self.failed = 0

    def parse(self, line: str) -> LogRecord:
        try:
            record = parse_line(line)
        except ParseError:
            self.failed += 1
            raise
        self.parsed += 1
        return record


def parse_line(line: str) -> LogRecord:
    """Parse a single access log line"""
    line = line.rstrip('\r\n')
    match = LOG_LINE_RE.fullmatch(line)
    if not match:
        raise MalformedLine(line)

    groups = match.groupdict()

    # Month names are swapped for numbers so parsing does not depend on LC_TIME
    day, month, rest = groups['timestamp'].split('/', 2)
    numeric = f"{day}/{MONTH_NUMBERS[month]:02d}/{rest}"
    try:
        timestamp = datetime.strptime(numeric, TIMESTAMP_FORMAT).astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise BadTimestamp(line, str(e)) from e

    status_code = int(groups['status'])
    if not 100 <= status_code <= 599:
        raise BadStatusCode(line, f"{status_code} is outside 100-599")

    # Unknown sizes ("-") are not worth dropping the record for
    try:
        size = int(groups['size'])
    except ValueError:
        size = 0
    if size < 0:
        size = 0

    return LogRecord(
        ip=groups['ip'],
        identity=groups['identity'],
        user=groups['user'],
        timestamp=timestamp,
        method=groups['method'],
        section=groups['section'],
        resource=groups['resource'],
        protocol=groups['protocol'],
        status_code=status_code,
        size=size,
    )
