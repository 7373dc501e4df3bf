from sqlalchemy import Column, String

from volumes.db.base import Base


class VolumeBind(Base):
    __tablename__ = "volume_binds"

    # The composite primary key is the bind uniqueness constraint.
    app = Column(String(255), primary_key=True)
    mount_point = Column(String(1024), primary_key=True)
    volume = Column(String(255), primary_key=True, index=True)
    mode = Column(String(2), nullable=False, default="rw")
