import pytest


def _tracks():
    return [
        {"name": "Dragon Rider", "album": "Archangel", "year": 2010, "length": 1.53, "composer": "Thomas Bergersen"},
        {"name": "Fire Nation", "album": "Invincible", "year": 2010, "length": 2.59, "composer": "Nick Phoenix"},
        {"name": "Blackheart", "album": "SkyWorld", "year": 2012, "length": 4.32, "composer": "Thomas Bergersen"},
        {"name": "Empire of Angles", "album": "Sun", "year": 2015, "length": 5.16, "composer": "Thomas Bergersen"},
        {"name": "Impossible", "album": "Unleashed", "year": 2017, "length": 8.54, "composer": "Thomas Bergersen"},
        {"name": "Battleborne", "album": "Battlecry", "year": 2015, "length": 5.08, "composer": "Nick Phoenix"},
        {"name": "Orion", "album": "Orion", "year": 2019, "length": 8.07, "composer": "Michal Cielecki"},
        {"name": "Shield of Love", "album": "Songs for Ukraine", "year": 2022, "length": 3.03, "composer": "Thomas Bergersen"},
        {"name": "One Million Voices", "album": "Humanity - Chapter IV", "year": 2021, "length": 8.53, "composer": "Thomas Bergersen"},
        {"name": "Nightwood", "album": "Colin Frake On Fire Mountain", "year": 2014, "length": 3.09, "composer": "Nick Phoenix"},
    ]


@pytest.fixture
def tracks():
    """Ten music tracks, fresh copy per test."""
    return _tracks()
