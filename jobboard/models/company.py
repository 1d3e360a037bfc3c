# company.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from jobboard.database import Base
from jobboard.models.base import AuditMixin


class Company(AuditMixin, Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=False)
    website = Column(String(2048), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(String(255), nullable=True)
    city = Column(String(100), index=True, nullable=False)
    postal_code = Column(String(20), nullable=True)
    country = Column(String(100), index=True, nullable=False)
    logo_url = Column(String(2048), nullable=True)
    verified = Column(Boolean, nullable=False, default=False)
    active = Column(Boolean, nullable=False, default=False)
    created_time = Column(DateTime(timezone=True), nullable=False, index=True)
