from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volumes.db.models.pool import Pool as PoolModel
from volumes.domain.resolution import ResolvedPool
from volumes.errors import StorageError


def get_pool_by_name(db: Session, name: str) -> PoolModel | None:
    """Get a pool by name."""
    try:
        return db.query(PoolModel).filter(PoolModel.name == name).first()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to load pool {name!r}") from exc


def create_pool(db: Session, name: str, provisioner: str | None = None) -> PoolModel:
    """Create a new pool in the database. Pure data access - no business logic."""
    db_pool = PoolModel(name=name, provisioner=provisioner)
    db.add(db_pool)
    db.commit()
    db.refresh(db_pool)
    return db_pool


class DatabasePoolResolver:
    """PoolResolver reading the pools table."""

    def __init__(self, db: Session):
        self.db = db

    def get_pool(self, name: str) -> ResolvedPool:
        pool = get_pool_by_name(self.db, name)
        if pool is None:
            raise LookupError(f"pool {name!r} not found")
        return ResolvedPool(name=pool.name, provisioner=pool.provisioner)
