from wins_pool.ownership import OwnershipConfig
from wins_pool.services.standings_service import build_standings
from wins_pool.models import TeamWins


def test_example_single_owner():
    config = OwnershipConfig.from_dict({"owners": {"Alice": ["Ravens"]}, "unowned": ["Bears"]})
    result = build_standings(config, {"BAL": 3, "CHI": 0})

    assert len(result.standings) == 1
    row = result.standings[0]
    assert row.owner == "Alice"
    assert row.total_wins == 3
    assert list(row.teams) == [TeamWins(team="Ravens", code="BAL", wins=3)]
    assert list(result.unowned) == [TeamWins(team="Bears", code="CHI", wins=0)]


def test_sorted_by_wins_then_owner_name():
    config = OwnershipConfig.from_dict(
        {"owners": {"Zed": ["Ravens"], "Amy": ["Bills"], "Bob": ["Chiefs", "Jets"], "Cat": ["Lions"]}}
    )
    wins = {"BAL": 2, "BUF": 2, "KC": 1, "NYJ": 3, "DET": 0}
    result = build_standings(config, wins)

    assert [(r.owner, r.total_wins) for r in result.standings] == [
        ("Bob", 4),
        ("Amy", 2),
        ("Zed", 2),
        ("Cat", 0),
    ]
    for r in result.standings:
        assert r.total_wins == sum(t.wins for t in r.teams)


def test_unknown_team_uses_name_as_code():
    config = OwnershipConfig.from_dict({"owners": {"Alice": ["Oilers"]}, "unowned": ["Ravens", "Bears"]})
    result = build_standings(config, {"BAL": 5})

    assert result.standings[0].teams[0] == TeamWins(team="Oilers", code="Oilers", wins=0)
    # unowned keeps config order
    assert [t.team for t in result.unowned] == ["Ravens", "Bears"]
