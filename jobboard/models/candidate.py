# candidate.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class Candidate(AuditMixin, Base):
    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), index=True, nullable=False)
    last_name = Column(String(100), index=True, nullable=False)
    email = Column(String(255), index=True, nullable=False)
    password = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    location = Column(String(255), nullable=True)
    verified = Column(Boolean, nullable=False, default=False)
    active = Column(Boolean, nullable=False, default=False)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
