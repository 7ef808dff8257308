"""
Tests unitaires pour les snapshots SeriesDetails et EpisodeDetails.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from tvcom.core.entities.media import EpisodeDetails, SeriesDetails


class TestEpisodeDetails:
    """Tests pour EpisodeDetails."""

    def test_defaults(self):
        details = EpisodeDetails(id=475567)
        assert details.name is None
        assert details.first_aired is None
        assert details.stars == ()

    def test_frozen(self):
        details = EpisodeDetails(id=475567, name="Pilot")
        with pytest.raises(FrozenInstanceError):
            details.name = "Other"

    def test_to_dict_is_json_serializable(self):
        details = EpisodeDetails(
            id=475567,
            name="Pilot",
            first_aired="2005-08-29",
            writers=("Paul Scheuring",),
        )
        data = json.loads(json.dumps(details.to_dict()))
        assert data["writers"] == ["Paul Scheuring"]
        assert data["first_aired"] == "2005-08-29"


class TestSeriesDetails:
    """Tests pour SeriesDetails."""

    def test_nested_episodes_to_dict(self):
        details = SeriesDetails(
            id=31635,
            name="Prison Break",
            genres=("Drama",),
            episodes=(EpisodeDetails(id=475567, name="Pilot"),),
        )
        data = details.to_dict()
        assert data["episodes"][0]["id"] == 475567
        assert data["episodes"][0]["name"] == "Pilot"
        assert data["genres"] == ("Drama",)
