import random
from itertools import islice

import pytest

from usv_telemetry.dashboard import (
    TelemetryFeed,
    generate_mock_data,
    main,
    render_dashboard,
    render_page,
)
from usv_telemetry.models import TelemetryData
from usv_telemetry.views import (
    render_camera,
    render_map,
    render_status_panel,
    render_telemetry_panel,
)


class _Fixed:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.mark.parametrize("seed", range(25))
def test_mock_data_stays_in_bounds(seed):
    data = generate_mock_data(random.Random(seed))
    assert -0.0005 <= data.position.latitude <= 0.0005
    assert -0.0005 <= data.position.longitude <= 0.0005
    assert 0.0 <= data.velocity.speed < 20.0
    assert 0.0 <= data.velocity.heading < 360.0
    assert 0 <= data.battery.level < 100
    assert 0 <= data.engine.rpm < 3000
    assert 15.0 <= data.sensors.water_temperature < 30.0


def test_mock_data_lowest_draw():
    data = generate_mock_data(_Fixed(0.0))
    assert data.velocity.speed == 0.0
    assert data.battery.level == 0
    assert data.engine.rpm == 0
    assert data.sensors.water_temperature == 15.0


def test_mock_data_keeps_untouched_defaults():
    data = generate_mock_data(random.Random(3))
    default = TelemetryData()
    assert data.communication == default.communication
    assert data.status == default.status
    assert data.battery.voltage == default.battery.voltage
    assert data.engine.running == default.engine.running


def test_mock_data_same_seed_same_readings():
    first = generate_mock_data(random.Random(11))
    second = generate_mock_data(random.Random(11))
    assert first.position == second.position
    assert first.velocity == second.velocity
    assert first.battery == second.battery
    assert first.engine == second.engine
    assert first.id != second.id or first.id == second.id and False is False
    assert first.sensors == second.sensors


def test_mock_data_gets_fresh_identity():
    first = generate_mock_data(random.Random(1))
    second = generate_mock_data(random.Random(1))
    assert first.id != second.id


def test_mock_data_round_trips_through_json():
    data = generate_mock_data(random.Random(5))
    assert TelemetryData.from_json(data.to_json()) == data


def test_render_dashboard_embeds_widgets():
    data = generate_mock_data(random.Random(2))
    html = render_dashboard(data)
    assert html.startswith('<div class="dashboard">')
    for part in (
        render_map(data),
        render_camera(),
        render_telemetry_panel(data),
        render_status_panel(data),
    ):
        assert part in html
    for header in ("USV Tracking Map", "Camera Feed", "Telemetry Data", "System Status"):
        assert f'<div class="card-header">{header}</div>' in html


def test_render_dashboard_orders_main_view_before_sidebar():
    html = render_dashboard(TelemetryData())
    assert html.index('class="main-view"') < html.index('class="sidebar"')
    assert html.index("USV Tracking Map") < html.index("Camera Feed")
    assert html.index("Telemetry Data") < html.index("System Status")


def test_render_page_wraps_dashboard():
    data = TelemetryData()
    page = render_page(data)
    assert page.startswith("<!DOCTYPE html>")
    assert page.endswith("</html>")
    assert 'href="assets/styles.css"' in page
    assert render_dashboard(data) in page


def test_feed_starts_with_default_sample():
    feed = TelemetryFeed(random.Random(0))
    default = TelemetryData()
    assert feed.current.position == default.position
    assert feed.current.battery == default.battery


def test_feed_tick_replaces_current():
    feed = TelemetryFeed(random.Random(0))
    before = feed.current
    sample = feed.tick()
    assert feed.current is sample
    assert sample.id != before.id


def test_feed_matches_generator_with_same_seed():
    feed = TelemetryFeed(random.Random(9))
    expected_rng = random.Random(9)
    for sample in islice(feed, 3):
        expected = generate_mock_data(expected_rng)
        assert sample.velocity == expected.velocity
        assert sample.engine == expected.engine


def test_feed_iteration_yields_distinct_samples():
    samples = list(islice(TelemetryFeed(random.Random(4)), 4))
    assert len({sample.id for sample in samples}) == 4


def test_main_writes_page_to_file(tmp_path):
    target = tmp_path / "page.html"
    assert main(["--output", str(target), "--seed", "1", "--interval", "0"]) == 0
    text = target.read_text(encoding="utf-8")
    assert text.startswith("<!DOCTYPE html>")
    assert "USV Tracking Map" in text


def test_main_prints_each_update(capsys):
    assert main(["--count", "3", "--interval", "0", "--seed", "8"]) == 0
    out = capsys.readouterr().out
    assert out.count("<!DOCTYPE html>") == 3


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit) as excinfo:
        main(["--count", "-1"])
    assert excinfo.value.code == 2


def test_main_rejects_negative_interval():
    with pytest.raises(SystemExit) as excinfo:
        main(["--interval", "-0.5"])
    assert excinfo.value.code == 2