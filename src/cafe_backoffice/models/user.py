import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Index, func, Enum
from sqlalchemy.orm import relationship
from ..db.base import Base


class RoleEnum(str, enum.Enum):
    admin = "admin"
    manager = "manager"
    employee = "employee"


class Employee(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    login = Column(String(64), nullable=False)
    position = Column(String(64), nullable=False)
    workplace = Column(String(64), nullable=False)
    hourly_rate = Column(Numeric(10, 2), nullable=False)
    role = Column(Enum(RoleEnum, name="user_role"), nullable=False, default=RoleEnum.employee)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # связь со сменами
    work_sessions = relationship("WorkSession", back_populates="employee", cascade="all, delete-orphan")


# логин уникален без учёта регистра
Index("uq_users_login_lower", func.lower(Employee.login), unique=True)
