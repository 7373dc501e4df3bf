from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volumes.db.models.team import Team as TeamModel
from volumes.errors import StorageError


def get_team_by_name(db: Session, name: str) -> TeamModel | None:
    """Get a team by name."""
    try:
        return db.query(TeamModel).filter(TeamModel.name == name).first()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError(f"failed to load team {name!r}") from exc


def create_team(db: Session, name: str) -> TeamModel:
    """Create a new team in the database. Pure data access - no business logic."""
    db_team = TeamModel(name=name)
    db.add(db_team)
    db.commit()
    db.refresh(db_team)
    return db_team


class DatabaseTeamResolver:
    """TeamResolver reading the teams table."""

    def __init__(self, db: Session):
        self.db = db

    def team_exists(self, name: str) -> bool:
        return get_team_by_name(self.db, name) is not None
