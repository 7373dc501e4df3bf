import logging

from sqlalchemy.orm import Session

import volumes.repositories.volume as volume_repo
import volumes.repositories.volume_bind as bind_repo
from volumes.domain.resolution import Resolvers, validate_volume
from volumes.domain.volume import BindMode, Volume, VolumeBind, VolumeBindID
from volumes.errors import AlreadyBoundError, BindNotFoundError, VolumeNotFoundError

logger = logging.getLogger(__name__)


def save_volume(db: Session, volume: Volume, resolvers: Resolvers) -> Volume:
    """
    Validate a volume and upsert it by name.

    - Resolves the plan options from the pool's provisioner (domain rule)
    - Replaces any stored volume with the same name

    Validation errors are raised before anything is written.

    Raises:
        EmptyNameError: If the volume name is empty
        ResolutionError: If the pool, team, provisioner or plan config cannot be resolved
        StorageError: If the database write fails
    """
    resolved = validate_volume(volume, resolvers)
    volume_repo.upsert_volume(db, resolved)
    logger.info("Saved volume %s (pool=%s, plan=%s)", resolved.name, resolved.pool, resolved.plan.name)
    return resolved


def load_volume(db: Session, name: str) -> Volume:
    """
    Load a volume by name.

    Raises:
        VolumeNotFoundError: If no volume has that name
    """
    db_volume = volume_repo.get_volume_by_name(db, name)
    if db_volume is None:
        raise VolumeNotFoundError()
    return volume_repo.to_entity(db_volume)


def bind_app(
    db: Session,
    volume: Volume,
    app: str,
    mount_point: str,
    mode: BindMode | str | None = None,
) -> VolumeBind:
    """
    Bind ``volume`` to ``app`` at ``mount_point``.

    An empty mode means read-write.

    Raises:
        InvalidBindModeError: If mode is neither "ro" nor "rw"
        AlreadyBoundError: If the (app, mount_point, volume) bind already exists
        StorageError: If the database write fails
    """
    bind = VolumeBind(
        id=VolumeBindID(app=app, mount_point=mount_point, volume=volume.name),
        mode=BindMode.parse(mode),
    )
    if bind_repo.insert_bind(db, bind) is bind_repo.InsertResult.CONFLICT:
        raise AlreadyBoundError()
    logger.info("Bound volume %s to app %s at %s (%s)", volume.name, app, mount_point, bind.mode.value)
    return bind


def unbind_app(db: Session, volume: Volume, app: str, mount_point: str) -> None:
    """
    Remove the bind of ``volume`` to ``app`` at ``mount_point``.

    Raises:
        BindNotFoundError: If there is no such bind
        StorageError: If the database write fails
    """
    bind_id = VolumeBindID(app=app, mount_point=mount_point, volume=volume.name)
    if bind_repo.delete_bind(db, bind_id) is bind_repo.DeleteResult.NOT_FOUND:
        raise BindNotFoundError()
    logger.info("Unbound volume %s from app %s at %s", volume.name, app, mount_point)


def list_binds(db: Session, volume: Volume) -> list[VolumeBind]:
    """List every bind of ``volume``. No ordering is guaranteed."""
    return [bind_repo.to_entity(b) for b in bind_repo.get_binds_by_volume(db, volume.name)]


def list_volumes_by_app(db: Session, app: str) -> list[Volume]:
    """
    List the volumes bound to ``app`` at least once.

    A volume bound at several mount points appears once. Binds pointing at
    a volume that is no longer stored are skipped.
    """
    names = bind_repo.get_distinct_volume_names_by_app(db, app)
    if not names:
        return []
    return [volume_repo.to_entity(v) for v in volume_repo.get_volumes_by_names(db, names)]
