"""
Container d'injection de dependances via dependency-injector.

Assemble le moteur de matching a partir de la configuration : parser,
stores, table d'alias de studios et matcher.
"""

from dependency_injector import containers, providers

from reelmatch.adapters.memory.library_store import InMemoryLibraryStore
from reelmatch.adapters.parsing.release_parser import ReleaseTitleParser
from reelmatch.config import Settings
from reelmatch.logging_config import configure_logging
from reelmatch.services.matcher import CandidateMatcherService
from reelmatch.services.matching_engine import MatchingEngine
from reelmatch.services.studio_aliases import build_studio_alias_table


class Container(containers.DeclarativeContainer):
    """Container DI du moteur.

    Utilisation :
        container = Container()
        container.library_store.override(providers.Object(my_store))
        engine = container.matching_engine()
        entry = engine.identify("Studio.21.01.08.Title")

    Le store par defaut est en memoire et vide : un appelant branche son
    propre store (implementant ILibraryStore et IStudioStore) par override.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Logging - Resource pour initialisation unique (container.init_resources())
    logging = providers.Resource(
        configure_logging,
        log_level=config.provided.log_level,
        log_file=config.provided.log_file,
        rotation_size=config.provided.log_rotation_size,
        retention_count=config.provided.log_retention_count,
    )

    # Stores - le meme objet sert les deux ports
    library_store = providers.Singleton(InMemoryLibraryStore)
    studio_store = library_store

    # Adapters
    title_parser = providers.Singleton(
        ReleaseTitleParser,
        min_year=config.provided.min_year,
        max_year=config.provided.max_year,
        detect_quality_tags=config.provided.detect_quality_tags,
    )

    # Table d'alias construite une fois depuis les studios connus
    studio_alias_table = providers.Singleton(
        build_studio_alias_table,
        studio_store=studio_store,
        extra_aliases=config.provided.studio_aliases,
    )

    # Services (stateless - Singletons)
    matcher_service = providers.Singleton(
        CandidateMatcherService,
        tie_break=config.provided.scene_tie_break,
    )

    matching_engine = providers.Singleton(
        MatchingEngine,
        title_parser=title_parser,
        library_store=library_store,
        studio_store=studio_store,
        alias_table=studio_alias_table,
        matcher=matcher_service,
    )
