from datetime import datetime, timedelta, timezone

import pytest

from http_monitor import LogRecord

START = datetime(2018, 5, 9, 16, 0, 0, tzinfo=timezone.utc)


def make_record(seconds: float = 0, section: str = "/api", status_code: int = 200) -> LogRecord:
    return LogRecord(
        ip="127.0.0.1",
        identity="-",
        user="jill",
        timestamp=START + timedelta(seconds=seconds),
        method="GET",
        section=section,
        resource="/user",
        protocol="HTTP/1.0",
        status_code=status_code,
        size=234,
    )


@pytest.fixture(name="make_record")
def make_record_fixture():
    return make_record
