"""SQLAlchemy ORM models."""
from sqlalchemy import Column, Float, Integer, String

from payment_server.infrastructure.database.base import Base


class Payment(Base):
    __tablename__ = "payments"
    # AUTOINCREMENT keeps deleted ids from being handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Float)
    currency = Column(String)
