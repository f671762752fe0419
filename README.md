# usv_telemetry

A telemetry data model and an HTML dashboard for an unmanned surface vehicle
(USV). The dashboard has a tracking map, a camera feed panel, a telemetry
readings panel and a system status panel. A mock feed generates random
samples to drive it. There are no third-party dependencies.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
usv-telemetry
```

This generates mock telemetry and writes the dashboard as a complete HTML
document to standard output, once by default.

Options:

- `-n`, `--count N`: number of updates to render (default 1); `0` runs until
  interrupted with Ctrl-C, which exits with status 130.
- `-i`, `--interval SECONDS`: pause between updates (default 1).
- `-o`, `--output FILE`: rewrite this file with the page on every update
  instead of writing to standard output.
- `--seed N`: seed the mock data generator so the output can be repeated.

Example: refresh `dashboard.html` every second until interrupted:

```
usv-telemetry --count 0 --output dashboard.html
```

The page links a stylesheet at `assets/styles.css`, relative to the page.

## Library use

```python
import random

from usv_telemetry.models import TelemetryData
from usv_telemetry.views import render_map, render_status_panel
from usv_telemetry.dashboard import TelemetryFeed, generate_mock_data, render_page

data = TelemetryData()                    # defaults: full battery, 4G link, "Operational"
text = data.to_json()
assert TelemetryData.from_json(text) == data

html = render_map(data)                   # map fragment with coordinates, heading, speed
status = render_status_panel(data)        # engine, power, link, navigation, environment

sample = generate_mock_data(random.Random(1))
page = render_page(sample)                # a full HTML document

feed = TelemetryFeed(random.Random(1))
first = feed.tick()                       # a new mock sample on each tick, also in feed.current
```

### Modules

- `usv_telemetry.models`: the dataclasses `Position`, `Velocity`,
  `BatteryStatus`, `EngineStatus`, `SensorData`, `CommunicationStatus` and
  `TelemetryData`. Field values are checked on construction: numbers, integer
  ranges (for example a battery level from 0 to 255, a signal strength from
  -128 to 127), booleans, strings, a UUID and a timezone-aware timestamp,
  which is stored in UTC. `TelemetryData` converts to and from dictionaries
  (`to_dict`, `from_dict`) and JSON (`to_json`, `from_json`); malformed input
  raises `ValueError`.
- `usv_telemetry.views`: `render_camera`, `render_map`,
  `render_telemetry_panel` and `render_status_panel` return HTML fragments.
  The status panel marks the engine as a warning when it is stopped, power as
  critical at a battery level of 20 or below, the link as critical when
  disconnected, and the environment as a warning when the water temperature
  is above 30.
- `usv_telemetry.dashboard`: `generate_mock_data`, `render_dashboard`,
  `render_page`, the `TelemetryFeed` sample source (iterating over it yields
  samples without end) and the `main` entry point of the command.

## What it does not do

- It receives no real telemetry: every sample comes from the mock generator
  or is built by the caller.
- It serves nothing. The command writes static HTML; the page does not update
  itself in a browser.
- The camera panel is a placeholder with no video stream, and its buttons do
  nothing.
- The stylesheet the page links to is not included.