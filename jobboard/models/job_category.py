# job_category.py
from sqlalchemy import Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class JobCategory(AuditMixin, Base):
    __tablename__ = "jobcategories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), index=True, nullable=False)
    description = Column(String(500), nullable=False)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
