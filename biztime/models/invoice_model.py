from datetime import date

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from biztime.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (CheckConstraint("amt > 0", name="invoices_amt_check"),)

    id = Column(Integer, primary_key=True, autoincrement=True)

    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )

    amt = Column(Float, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)

    # --- Dates ---
    add_date = Column(Date, nullable=False, default=date.today)
    paid_date = Column(Date, nullable=True)   # set only while paid is true

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
