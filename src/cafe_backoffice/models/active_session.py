from sqlalchemy import Column, Integer, String, DateTime, func
from ..db.base import Base


class ActiveSession(Base):
    __tablename__ = "active_sessions"

    id = Column(Integer, primary_key=True, index=True)
    login = Column(String(64), nullable=False, unique=True)
    since = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
