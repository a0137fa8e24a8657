import threading

import pytest

from http_monitor import TrafficMonitor


def test_response_codes_start_at_zero():
    monitor = TrafficMonitor()
    assert monitor.response_code_counts() == {"1XX": 0, "2XX": 0, "3XX": 0, "4XX": 0, "5XX": 0}


def test_response_code_classes(make_record):
    monitor = TrafficMonitor()
    for status in (101, 200, 204, 302, 404, 404, 500):
        monitor.ingest(make_record(status_code=status))

    assert monitor.response_code_counts() == {"1XX": 1, "2XX": 2, "3XX": 1, "4XX": 2, "5XX": 1}


def test_response_code_counts_is_a_copy(make_record):
    monitor = TrafficMonitor()
    counts = monitor.response_code_counts()
    counts["2XX"] = 100
    assert monitor.response_code_counts()["2XX"] == 0


def test_top_sections_ordering(make_record):
    monitor = TrafficMonitor()
    for section in ["/api", "/api", "/api", "/report", "/report", "/zeta", "/alpha", "/beta"]:
        monitor.ingest(make_record(section=section))

    assert monitor.top_sections(3) == [("/api", 3), ("/report", 2), ("/alpha", 1)]
    assert monitor.top_sections(10) == [
        ("/api", 3), ("/report", 2), ("/alpha", 1), ("/beta", 1), ("/zeta", 1),
    ]


@pytest.mark.parametrize("n", [0, 1, 2, 5, 50])
def test_top_sections_length(make_record, n):
    monitor = TrafficMonitor()
    for i in range(7):
        monitor.ingest(make_record(section=f"/s{i}"))

    assert len(monitor.top_sections(n)) == min(n, 7)


def test_top_sections_empty():
    assert TrafficMonitor().top_sections(5) == []
    assert TrafficMonitor().top_sections(-1) == []


def test_no_rate_without_data(make_record):
    monitor = TrafficMonitor()
    assert monitor.current_rate() is None

    monitor.ingest(make_record(0))
    assert monitor.current_rate() is None
    assert monitor.is_alerting() is False


def test_window_keeps_trailing_span(make_record):
    monitor = TrafficMonitor()
    for i in range(5):
        monitor.ingest(make_record(i * 60))

    assert [(t - monitor.window[0]).total_seconds() for t in monitor.window] == [0, 60, 120]
    assert monitor.current_rate() == pytest.approx(3 / 120)
    assert monitor.is_alerting() is False


def test_window_boundary_is_inclusive(make_record):
    monitor = TrafficMonitor()
    monitor.ingest(make_record(0))
    monitor.ingest(make_record(120))
    assert len(monitor.window) == 2

    monitor.ingest(make_record(120.5))
    assert len(monitor.window) == 2
    assert monitor.current_rate() == pytest.approx(2 / 0.5)


def test_custom_window(make_record):
    monitor = TrafficMonitor(window_seconds=10)
    for i in range(0, 30, 5):
        monitor.ingest(make_record(i))

    assert len(monitor.window) == 3


def test_burst_raises_and_later_traffic_clears_alert(make_record):
    monitor = TrafficMonitor()
    for _ in range(20):
        monitor.ingest(make_record(0))
    assert monitor.is_alerting() is False

    monitor.ingest(make_record(1))
    assert monitor.current_rate() == pytest.approx(21.0)
    assert monitor.is_alerting() is True

    # A lone record leaves a single-entry window with no rate
    monitor.ingest(make_record(3600))
    assert monitor.current_rate() is None
    assert monitor.is_alerting() is True

    monitor.ingest(make_record(3610))
    assert monitor.current_rate() == pytest.approx(0.2)
    assert monitor.is_alerting() is False


def test_rate_equal_to_threshold_does_not_alert(make_record):
    monitor = TrafficMonitor()
    for _ in range(9):
        monitor.ingest(make_record(0))
    monitor.ingest(make_record(1))

    assert monitor.current_rate() == pytest.approx(10.0)
    assert monitor.is_alerting() is False


def test_custom_threshold(make_record):
    monitor = TrafficMonitor(rate_threshold=0.5)
    monitor.ingest(make_record(0))
    monitor.ingest(make_record(2))
    assert monitor.is_alerting() is True

    monitor.ingest(make_record(10))
    assert monitor.current_rate() == pytest.approx(0.3)
    assert monitor.is_alerting() is False


def test_snapshot(make_record):
    monitor = TrafficMonitor()
    monitor.ingest(make_record(0, section="/api", status_code=200))
    monitor.ingest(make_record(4, section="/report", status_code=500))
    monitor.ingest(make_record(4, section="/api", status_code=404))

    snapshot = monitor.snapshot(top_n=1)
    assert snapshot.response_codes == {"1XX": 0, "2XX": 1, "3XX": 0, "4XX": 1, "5XX": 1}
    assert snapshot.top_sections == [("/api", 2)]
    assert snapshot.rate == pytest.approx(0.75)
    assert snapshot.alerting is False
    assert snapshot.total == 3
    assert snapshot.window_size == 3


def test_concurrent_ingest_and_snapshot(make_record):
    monitor = TrafficMonitor()
    torn = []

    def ingest():
        for i in range(2000):
            monitor.ingest(make_record(i * 0.01))

    def read():
        for _ in range(200):
            snapshot = monitor.snapshot()
            if sum(snapshot.response_codes.values()) != snapshot.total:
                torn.append(snapshot)

    threads = [threading.Thread(target=ingest), threading.Thread(target=read)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert torn == []
    assert monitor.snapshot().total == 2000


@pytest.mark.parametrize("window", [0, -5])
def test_window_must_be_positive(window):
    with pytest.raises(ValueError):
        TrafficMonitor(window_seconds=window)
