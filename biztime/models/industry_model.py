from sqlalchemy import Column, ForeignKey, String
from biztime.core.db import Base


class Industry(Base):
    __tablename__ = "industries"

    code = Column(String, primary_key=True)
    industry = Column(String, nullable=False, unique=True)


class IndustryCompany(Base):
    """Join row tagging a company with an industry (many-to-many)."""

    __tablename__ = "industry_company"

    company_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        primary_key=True,
    )
    industry_code = Column(
        String,
        ForeignKey("industries.code", ondelete="CASCADE"),
        primary_key=True,
    )
