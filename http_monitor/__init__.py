"""HTTP Monitor package"""

from .patterns import VERSION, LOG_LINE_PATTERN
from .models import LogRecord, MonitorSnapshot, ParseError, MalformedLine, BadTimestamp, BadStatusCode
from .parser import LineParser, parse_line
from .monitor import TrafficMonitor
from .config import Settings
from .tail import follow
from .reporter import Reporter
from .output import print_snapshot

__all__ = [
    'VERSION', 'LOG_LINE_PATTERN', 'LogRecord', 'MonitorSnapshot', 'ParseError', 'MalformedLine',
    'BadTimestamp', 'BadStatusCode', 'LineParser', 'parse_line', 'TrafficMonitor', 'Settings',
    'follow', 'Reporter', 'print_snapshot',
]
