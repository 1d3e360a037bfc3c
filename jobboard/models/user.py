# user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class User(AuditMixin, Base):
    """Admin user who manages the platform."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), index=True, nullable=False)
    last_name = Column(String(100), index=True, nullable=False)
    email = Column(String(255), index=True, nullable=False)
    password = Column(String(255), nullable=False)
    verified = Column(Boolean, nullable=False, default=False)
    active = Column(Boolean, nullable=False, default=False)
    terms_accepted = Column(Boolean, nullable=False, default=False)
    last_terms_accepted = Column(DateTime(timezone=True), nullable=True)
    last_login_time = Column(DateTime(timezone=True), nullable=True)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
