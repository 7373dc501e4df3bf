from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volumes.db.models.volume import Volume as VolumeModel
from volumes.domain.volume import Volume, VolumePlan
from volumes.errors import StorageError


def to_entity(db_volume: VolumeModel) -> Volume:
    """Map a volumes row to the domain entity."""
    return Volume(
        name=db_volume.name,
        pool=db_volume.pool,
        plan=VolumePlan(name=db_volume.plan_name, opts=db_volume.plan_opts or {}),
        team_owner=db_volume.team_owner,
        status=db_volume.status or "",
        opts=db_volume.opts,
    )


def get_volume_by_name(db: Session, name: str) -> VolumeModel | None:
    """Get a volume by name."""
    try:
        return db.query(VolumeModel).filter(VolumeModel.name == name).first()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to load volume {name!r}") from exc


def get_volumes_by_names(db: Session, names: list[str]) -> list[VolumeModel]:
    """Get the volumes whose name is in ``names``. Unknown names are skipped."""
    if not names:
        return []
    try:
        return db.query(VolumeModel).filter(VolumeModel.name.in_(names)).all()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError("failed to load volumes") from exc


def upsert_volume(db: Session, volume: Volume) -> VolumeModel:
    """
    Insert or fully replace the volume row keyed by ``volume.name``.

    No concurrency control: concurrent writers of the same name race and
    the last one wins.
    """
    db_volume = VolumeModel(
        name=volume.name,
        pool=volume.pool,
        plan_name=volume.plan.name,
        plan_opts=volume.plan.opts,
        team_owner=volume.team_owner,
        status=volume.status,
        opts=volume.opts or None,
    )
    try:
        db_volume = db.merge(db_volume)
        db.commit()
        db.refresh(db_volume)
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to save volume {volume.name!r}") from exc
    return db_volume
