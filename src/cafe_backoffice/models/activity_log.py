from sqlalchemy import Column, Integer, String, JSON, DateTime, func
from ..db.base import Base


class ActivityLog(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    actor = Column(String(64), nullable=False)
    action = Column(String(64), nullable=False)
    details = Column(JSON, nullable=False, default=dict)
