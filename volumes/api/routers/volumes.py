from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from volumes.api.deps import get_db, get_resolvers
from volumes.domain.resolution import Resolvers
from volumes.domain.volume import Volume, VolumeBind
from volumes.schemas.volume import BindCreate, VolumeCreate
from volumes.services.volume import (
    bind_app,
    list_binds,
    list_volumes_by_app,
    load_volume,
    save_volume,
    unbind_app,
)

router = APIRouter(prefix="/volumes", tags=["volumes"])


@router.post("", response_model=Volume, status_code=status.HTTP_201_CREATED)
def create_or_replace_volume(
    volume_data: VolumeCreate,
    db: Session = Depends(get_db),
    resolvers: Resolvers = Depends(get_resolvers),
):
    """
    Create a volume, or replace the one with the same name.
    Plan options are resolved from the pool's provisioner configuration.
    """
    return save_volume(db, volume_data.to_entity(), resolvers)


@router.get("", response_model=list[Volume])
def get_volumes_by_app(
    app: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    """
    Get the volumes bound to an app. Each volume is listed once.
    """
    return list_volumes_by_app(db, app)


@router.get("/{name}", response_model=Volume)
def get_volume(name: str, db: Session = Depends(get_db)):
    return load_volume(db, name)


@router.get("/{name}/binds", response_model=list[VolumeBind])
def get_volume_binds(name: str, db: Session = Depends(get_db)):
    volume = load_volume(db, name)
    return list_binds(db, volume)


@router.post(
    "/{name}/binds", response_model=VolumeBind, status_code=status.HTTP_201_CREATED
)
def create_volume_bind(
    name: str,
    bind_data: BindCreate,
    db: Session = Depends(get_db),
):
    """
    Bind a volume to an app at a mount point. Mode defaults to "rw".
    """
    volume = load_volume(db, name)
    return bind_app(db, volume, bind_data.app, bind_data.mount_point, bind_data.mode)


@router.delete("/{name}/binds", status_code=status.HTTP_204_NO_CONTENT)
def delete_volume_bind(
    name: str,
    app: str = Query(..., min_length=1),
    mount_point: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    volume = load_volume(db, name)
    unbind_app(db, volume, app, mount_point)
