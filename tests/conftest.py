import pytest

from wins_pool.espn_client import FetchError

CONFIG_URL = "https://pool.test/pool-config.json"


def competitor(name, abbr, home_away, winner=None):
    c = {"homeAway": home_away, "team": {"shortDisplayName": name, "abbreviation": abbr}}
    if winner is not None:
        c["winner"] = winner
    return c


def event(date, away, home):
    return {"date": date, "competitions": [{"date": date, "competitors": [away, home]}]}


def calendar_root(weeks, current=None):
    """Scoreboard root with a calendar list section, like ESPN's current schema."""
    entries = [{"label": "Hall of Fame Weekend", "startDate": "2025-07-31T07:00Z", "endDate": "2025-08-01T06:59Z"}]
    for n, (start, end) in weeks.items():
        entries.append({"label": str(n), "startDate": start, "endDate": end})
    root = {"leagues": [{"calendar": [{"label": "Regular Season", "entries": entries}]}]}
    if current is not None:
        root["week"] = {"number": current}
    return root


class FakeESPNClient:
    """Stands in for ESPNClient; serves canned payloads and records calls."""

    def __init__(self, root, results_by_range=None, config=None, fail_ranges=()):
        self.root = root
        self.results_by_range = results_by_range or {}
        self.config = config
        self.fail_ranges = set(fail_ranges)
        self.calls = []

    def fetch_json(self, url, params=None):
        self.calls.append(("config", url))
        if self.config is None:
            raise FetchError(404, url)
        return self.config

    def scoreboard(self):
        self.calls.append(("scoreboard", None))
        return self.root

    def scoreboard_for_dates(self, date_range):
        self.calls.append(("dates", date_range))
        if date_range in self.fail_ranges:
            raise FetchError(503, f"https://espn.test/scoreboard?dates={date_range}")
        return self.results_by_range.get(date_range, {"events": []})


WEEK_1 = ("2025-09-04T07:00Z", "2025-09-09T06:59Z")
WEEK_2 = ("2025-09-09T07:00Z", "2025-09-16T06:59Z")


@pytest.fixture
def pool_config():
    return {
        "season": 2025,
        "timezone": "America/Chicago",
        "owners": {"Alice": ["Ravens", "Bills"], "Bob": ["Chiefs"]},
        "unowned": ["Bears", "Jets", "Dolphins"],
    }


@pytest.fixture
def season_client(pool_config):
    week1 = {
        "events": [
            event(
                "2025-09-08T00:20Z",
                competitor("Ravens", "BAL", "away", winner=False),
                competitor("Bills", "BUF", "home", winner=True),
            ),
            event(
                "2025-09-05T00:20Z",
                competitor("Chiefs", "KC", "away", winner=True),
                competitor("Bears", "CHI", "home", winner=False),
            ),
            event(
                "2025-09-07T17:00Z",
                competitor("Jets", "NYJ", "away", winner=True),
                competitor("Dolphins", "MIA", "home", winner=False),
            ),
        ]
    }
    week2 = {
        "events": [
            event(
                "2025-09-14T17:00Z",
                competitor("Ravens", "BAL", "home", winner=True),
                competitor("Bears", "CHI", "away", winner=False),
            ),
            # not final yet
            event(
                "2025-09-15T00:20Z",
                competitor("Bills", "BUF", "away"),
                competitor("Chiefs", "KC", "home"),
            ),
        ]
    }
    return FakeESPNClient(
        root=calendar_root({1: WEEK_1, 2: WEEK_2}, current=2),
        results_by_range={"20250904-20250909": week1, "20250909-20250916": week2},
        config=pool_config,
    )
