"""
Container d'injection de dependances via dependency-injector.

Fournit le transport HTTP partage et des fabriques de Series/Episode
deja liees au transport et au User-Agent configures.
"""

from dependency_injector import containers, providers

from .adapters.http.httpx_transport import HttpxTransport
from .config import Settings
from .services.episode import Episode
from .services.series import Series
from .services.series_resolver import SeriesResolver


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        series = container.series_from_token(token="Prison Break")
        episode = container.episode(episode_id=475567)
        container.transport().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Transport - Singleton pour partager le connection pooling
    transport = providers.Singleton(
        HttpxTransport,
        timeout=config.provided.request_timeout,
        connect_timeout=config.provided.connect_timeout,
    )

    series_resolver = providers.Factory(
        SeriesResolver,
        transport=transport,
        agent=config.provided.user_agent,
    )

    # Fabriques d'entites - nouvelle instance a chaque appel
    series = providers.Factory(
        Series.by_id,
        transport=transport,
        agent=config.provided.user_agent,
    )
    series_from_token = providers.Factory(
        Series.from_token,
        transport=transport,
        agent=config.provided.user_agent,
        resolver=series_resolver,
    )
    episode = providers.Factory(
        Episode.by_id,
        transport=transport,
        agent=config.provided.user_agent,
    )
