# candidate_skill.py
from sqlalchemy import Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class CandidateSkill(AuditMixin, Base):
    __tablename__ = "candidateskills"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, nullable=False, index=True)
    skill_id = Column(Integer, nullable=False, index=True)
    proficiency_level = Column(String(20), nullable=False)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
