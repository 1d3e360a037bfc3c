from sqlalchemy import Column, DateTime, String


class AuditMixin:
    """Audit columns shared by every table.

    The creation timestamp is declared per model because a few tables name it
    after the business event (``applied_time``, ``uploaded_time``).
    """

    updated_time = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(100), nullable=False)
    updated_by = Column(String(100), nullable=False)
