from protean.domain import Domain
from sqlalchemy import create_engine

from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

_RDBMS_PROVIDERS = ("sqlite", "postgresql")


def setup_db(domain: Domain):
    """Create tables for every aggregate and entity on relational providers."""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])

                # Touching `_dao` registers the element's model with the provider's metadata
                for _, aggregate_record in domain.registry.aggregates.items():
                    if aggregate_record.cls.meta_.provider == provider.name:
                        domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

                for _, entity_record in domain.registry.entities.items():
                    if entity_record.cls.meta_.provider == provider.name:
                        domain.repository_for(entity_record.cls)._dao  # noqa: B018

                provider._metadata.create_all(engine)
                engine.dispose()
                logger.info("Database schema ready", provider=provider.name)


def drop_db(domain: Domain):
    """Drop tables on relational providers."""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)
                engine.dispose()
                logger.info("Database schema dropped", provider=provider.name)


def close_db(domain: Domain):
    """Release provider connections at shutdown."""
    with domain.domain_context():
        for name, provider in domain.providers.items():
            provider.close()
            logger.info("Database connections closed", provider=name)
