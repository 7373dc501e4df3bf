import enum

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from volumes.db.models.volume_bind import VolumeBind as VolumeBindModel
from volumes.domain.volume import BindMode, VolumeBind, VolumeBindID
from volumes.errors import StorageError


class InsertResult(enum.Enum):
    CREATED = "created"
    CONFLICT = "conflict"


class DeleteResult(enum.Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"


def to_entity(db_bind: VolumeBindModel) -> VolumeBind:
    """Map a volume_binds row to the domain entity."""
    return VolumeBind(
        id=VolumeBindID(
            app=db_bind.app,
            mount_point=db_bind.mount_point,
            volume=db_bind.volume,
        ),
        mode=BindMode(db_bind.mode),
    )


def insert_bind(db: Session, bind: VolumeBind) -> InsertResult:
    """
    Insert a bind row.

    The composite primary key rejects a second row for the same
    (app, mount_point, volume); that case is reported as CONFLICT and
    nothing is written.
    """
    stmt = insert(VolumeBindModel).values(
        app=bind.id.app,
        mount_point=bind.id.mount_point,
        volume=bind.id.volume,
        mode=bind.mode.value,
    )
    try:
        db.execute(stmt)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        # Only a colliding primary key is a conflict; CHECK and NOT NULL
        # violations leave no existing row behind.
        if _bind_exists(db, bind.id):
            return InsertResult.CONFLICT
        raise StorageError(f"failed to insert bind {bind.id!r}") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to insert bind {bind.id!r}") from exc
    return InsertResult.CREATED


def _bind_exists(db: Session, bind_id: VolumeBindID) -> bool:
    try:
        return (
            db.query(VolumeBindModel.app)
            .filter(
                VolumeBindModel.app == bind_id.app,
                VolumeBindModel.mount_point == bind_id.mount_point,
                VolumeBindModel.volume == bind_id.volume,
            )
            .first()
            is not None
        )
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to load bind {bind_id!r}") from exc


def delete_bind(db: Session, bind_id: VolumeBindID) -> DeleteResult:
    """Delete the bind row identified by ``bind_id``."""
    try:
        deleted = (
            db.query(VolumeBindModel)
            .filter(
                VolumeBindModel.app == bind_id.app,
                VolumeBindModel.mount_point == bind_id.mount_point,
                VolumeBindModel.volume == bind_id.volume,
            )
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to delete bind {bind_id!r}") from exc
    if deleted == 0:
        return DeleteResult.NOT_FOUND
    return DeleteResult.DELETED


def get_binds_by_volume(db: Session, volume_name: str) -> list[VolumeBindModel]:
    """Get every bind of a volume, in whatever order the database returns."""
    try:
        return (
            db.query(VolumeBindModel)
            .filter(VolumeBindModel.volume == volume_name)
            .all()
        )
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to list binds of volume {volume_name!r}") from exc


def get_distinct_volume_names_by_app(db: Session, app: str) -> list[str]:
    """Get the distinct names of the volumes bound to ``app``."""
    try:
        rows = (
            db.query(VolumeBindModel.volume)
            .filter(VolumeBindModel.app == app)
            .distinct()
            .all()
        )
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to list binds of app {app!r}") from exc
    return [row.volume for row in rows]
