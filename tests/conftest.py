import pytest

from modechoice.model import Activity, Trip


def make_trips(*stops, person_id="p1"):
    """Chain trips through `stops`, each a (type, location) pair, all by walk."""
    activities = [Activity(t, loc) for t, loc in stops]
    return Trip.chain(activities, ["walk"] * (len(activities) - 1), person_id)


@pytest.fixture
def home_work_shop_home():
    """Three trips: home -> work -> shop -> home."""
    return make_trips(("home", "H"), ("work", "W"), ("shop", "S"), ("home", "H"))


@pytest.fixture
def home_work_lunch_work_home():
    """Four trips, coming back to work after lunch."""
    return make_trips(
        ("home", "H"), ("work", "W"), ("leisure", "L"), ("work", "W"), ("home", "H")
    )
