from sqlalchemy import Column, String

from volumes.db.base import Base


class Team(Base):
    __tablename__ = "teams"

    name = Column(String(255), primary_key=True)
