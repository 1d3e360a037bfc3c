# skill.py
from sqlalchemy import Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class Skill(AuditMixin, Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), index=True, nullable=False)
    description = Column(String(500), nullable=True)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
