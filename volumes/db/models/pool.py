from sqlalchemy import Column, String

from volumes.db.base import Base


class Pool(Base):
    __tablename__ = "pools"

    name = Column(String(255), primary_key=True)
    provisioner = Column(String(255), nullable=True)
