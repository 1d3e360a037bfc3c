# resume.py
from sqlalchemy import Column, DateTime, Integer, String
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class Resume(AuditMixin, Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, nullable=False, index=True)
    file_url = Column(String(2048), nullable=False)
    file_name = Column(String(255), nullable=False)
    uploaded_time = Column(DateTime(timezone=True), nullable=False, index=True)
