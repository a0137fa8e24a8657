"""HTTP Monitor - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class LogRecord:
    """Parsed access log line"""
    ip: str
    identity: str
    user: str
    timestamp: datetime
    method: str
    section: str
    resource: str
    protocol: str
    status_code: int
    size: int

    @property
    def path(self) -> str:
        return self.section + self.resource

    @property
    def status_class(self) -> str:
        return f"{str(self.status_code)[0]}XX"


@dataclass(frozen=True)
class MonitorSnapshot:
    """Consistent view of the monitor state, taken under its lock"""
    response_codes: Dict[str, int]
    top_sections: List[Tuple[str, int]] = field(default_factory=list)
    rate: Optional[float] = None
    alerting: bool = False
    total: int = 0
    window_size: int = 0


class ParseError(ValueError):
    """A log line could not be turned into a LogRecord"""

    reason = "unparsable line"

    def __init__(self, line: str, detail: Optional[str] = None):
        self.line = line
        self.detail = detail
        message = f"{self.reason}: {line!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MalformedLine(ParseError):
    reason = "line does not match the access log format"


class BadTimestamp(ParseError):
    reason = "invalid timestamp"


class BadStatusCode(ParseError):
    reason = "invalid status code"
