# application.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class Application(AuditMixin, Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, nullable=False, index=True)
    candidate_id = Column(Integer, nullable=False, index=True)
    status = Column(String(20), nullable=False, index=True)
    recruiter_note = Column(Text, nullable=True)
    applied_time = Column(DateTime(timezone=True), nullable=False, index=True)
