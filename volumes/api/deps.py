from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from volumes.core.config import settings
from volumes.db import SessionLocal
from volumes.domain.config_store import YamlConfigResolver
from volumes.domain.resolution import Resolvers
from volumes.repositories.pool import DatabasePoolResolver
from volumes.repositories.team import DatabaseTeamResolver


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_config_resolver() -> YamlConfigResolver:
    """Load the volume config file once per process."""
    return YamlConfigResolver.from_file(settings.volume_config_file)


def get_resolvers(
    db: Session = Depends(get_db),
    config: YamlConfigResolver = Depends(get_config_resolver),
) -> Resolvers:
    """Build the pool/team/config collaborators used to validate volumes."""
    return Resolvers(
        pools=DatabasePoolResolver(db),
        teams=DatabaseTeamResolver(db),
        config=config,
    )
