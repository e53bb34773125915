import pytest
from pydantic import ValidationError

from benchcoach.models import HealthStatus, Player, Position

from tests.helpers import make_player


def test_player_is_frozen():
    player = make_player("p1", ["PG"])

    assert player.positions == (Position.POINT_GUARD,)

    with pytest.raises((TypeError, ValidationError)):
        player.player_id = "p2"  # type: ignore[misc]


def test_player_requires_positions():
    with pytest.raises(ValidationError):
        Player(player_id="p1", name="Nobody", positions=())


def test_player_rejects_unknown_position():
    with pytest.raises(ValidationError):
        Player(player_id="p1", name="Nobody", positions=("QB",))


def test_is_playing_follows_opponent():
    assert make_player("p1", ["C"], playing=True).is_playing
    assert not make_player("p2", ["C"], playing=False).is_playing


@pytest.mark.parametrize(
    "mine, theirs, expected",
    [
        ("HEALTHY", "HEALTHY", True),
        ("HEALTHY", "DTD", True),
        ("DTD", "HEALTHY", False),
        ("O", "DTD", False),
        ("O", "SSPD", True),
        ("SSPD", "SSPD", True),
    ],
)
def test_compare_health(mine, theirs, expected):
    player = make_player("p1", ["SF"], health=mine)
    other = make_player("p2", ["SF"], health=theirs)

    assert player.compare_health(other) is expected


def test_health_codes():
    assert HealthStatus("DTD") is HealthStatus.DAY_TO_DAY
    assert HealthStatus("SSPD") is HealthStatus.SUSPENDED
