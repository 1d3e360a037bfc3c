# job.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class Job(AuditMixin, Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=False)
    # References are checked by the service layer, not by database constraints.
    recruiter_id = Column(Integer, nullable=False, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    category_id = Column(Integer, nullable=False, index=True)
    location = Column(String(255), nullable=False)
    job_type = Column(String(20), nullable=False)
    salary_min = Column(Integer, nullable=False)
    salary_max = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=False)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
