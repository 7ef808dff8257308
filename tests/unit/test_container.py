"""
Tests unitaires pour le container d'injection de dependances.
"""

import pytest
from dependency_injector import providers

from tests.fixtures.stub_transport import StubTransport
from tests.fixtures.tvcom_pages import PILOT_ID, SERIES_ID
from tvcom.adapters.http.httpx_transport import HttpxTransport
from tvcom.container import Container
from tvcom.services.episode import Episode
from tvcom.services.series import Series


@pytest.fixture
def container(stub_transport: StubTransport):
    container = Container()
    container.transport.override(providers.Object(stub_transport))
    yield container
    container.reset_override()


class TestContainer:
    """Tests pour les providers du Container."""

    def test_default_transport_is_httpx(self):
        container = Container()
        transport = container.transport()
        try:
            assert isinstance(transport, HttpxTransport)
            assert container.transport() is transport
        finally:
            transport.close()

    def test_series_factory(self, container, stub_transport: StubTransport):
        series = container.series(SERIES_ID)
        assert isinstance(series, Series)
        assert series.agent == container.config().user_agent
        assert series.name == "Prison Break"

    def test_series_from_token_resolves_name(self, container):
        series = container.series_from_token("Prison Break", season=1)
        assert series.id == SERIES_ID
        assert series.season == 1

    def test_episode_factory(self, container):
        episode = container.episode(PILOT_ID)
        assert isinstance(episode, Episode)
        assert episode.name == "Pilot"

    def test_factories_build_new_instances(self, container):
        assert container.series(SERIES_ID) is not container.series(SERIES_ID)
