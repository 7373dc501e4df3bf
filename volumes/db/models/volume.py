from sqlalchemy import JSON, Column, String

from volumes.db.base import Base


class Volume(Base):
    __tablename__ = "volumes"

    name = Column(String(255), primary_key=True)
    pool = Column(String(255), nullable=False)
    plan_name = Column(String(255), nullable=False)
    plan_opts = Column(JSON, nullable=False, default=dict)
    team_owner = Column(String(255), nullable=False)
    status = Column(String(255), nullable=False, default="")
    # NULL when the volume carries no driver options
    opts = Column(JSON(none_as_null=True), nullable=True)
