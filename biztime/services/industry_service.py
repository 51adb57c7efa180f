import logging
from typing import Optional

from sqlalchemy.orm import Session

from biztime.models.industry_model import Industry, IndustryCompany
from biztime.schemas.industry_schema import IndustryCreate

logger = logging.getLogger(__name__)


def list_industry_companies(db: Session):
    return (
        db.query(IndustryCompany.company_code, IndustryCompany.industry_code)
        .order_by(IndustryCompany.company_code, IndustryCompany.industry_code)
        .all()
    )


def get_industry(db: Session, code: str) -> Optional[Industry]:
    return db.query(Industry).filter(Industry.code == code).first()


def create_industry(db: Session, payload: IndustryCreate) -> Industry:
    industry = Industry(code=payload.code, industry=payload.industry)
    db.add(industry)
    db.commit()
    db.refresh(industry)
    logger.info("Created industry %s", industry.code)
    return industry


def add_company(db: Session, industry_code: str, company_code: str) -> IndustryCompany:
    link = IndustryCompany(industry_code=industry_code, company_code=company_code)
    db.add(link)
    db.commit()
    db.refresh(link)
    logger.info("Tagged company %s with industry %s", company_code, industry_code)
    return link
