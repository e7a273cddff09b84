from sqlalchemy import Column, Integer, Float, DateTime, Text
from sqlalchemy.sql import func
from core.database import Base


class BmiRecord(Base):
    """
    A caller's last permitted BMI submission.

    One row per owner. A new permitted submission overwrites the row;
    there is no history.
    """
    __tablename__ = "bmi_record"

    owner = Column(Text, primary_key=True)  # Caller identity
    weight = Column(Float, nullable=False)  # kg
    height = Column(Float, nullable=False)  # As submitted (unit per BMI_HEIGHT_UNIT)
    bmi = Column(Float, nullable=False)
    category = Column(Text, nullable=False)  # Underweight, Normal, Overweight, Obese
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class AppUser(Base):
    """Registered application user, one per caller identity."""
    __tablename__ = "app_user"

    id = Column(Integer, primary_key=True, autoincrement=False)  # Sequential, assigned at registration
    uid = Column(Text, unique=True, nullable=False, index=True)  # Caller identity
    u_name = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
