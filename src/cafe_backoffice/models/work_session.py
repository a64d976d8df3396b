from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from ..db.base import Base


class WorkSession(Base):
    __tablename__ = "work_sessions"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=True)  # None, пока смена открыта
    total_hours = Column(Float, nullable=True)

    employee = relationship("Employee", back_populates="work_sessions")


# не больше одной открытой смены на сотрудника
Index(
    "uq_work_sessions_open",
    WorkSession.employee_id,
    unique=True,
    postgresql_where=WorkSession.end_time.is_(None),
    sqlite_where=WorkSession.end_time.is_(None),
)
