# job_skill.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class JobSkill(AuditMixin, Base):
    __tablename__ = "jobskills"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, nullable=False, index=True)
    skill_id = Column(Integer, nullable=False, index=True)
    proficiency_level_required = Column(String(20), nullable=False)
    is_required = Column(Boolean, nullable=False, default=False)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
