import logging
from typing import List, Optional

from slugify import slugify
from sqlalchemy.orm import Session

from biztime.models.company_model import Company
from biztime.models.industry_model import IndustryCompany
from biztime.models.invoice_model import Invoice
from biztime.schemas.company_schema import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)


def make_company_code(name: str) -> str:
    """Lowercase `name` and collapse every non-alphanumeric run into one hyphen."""
    return slugify(name, lowercase=True)


def list_companies(db: Session) -> List[Company]:
    return db.query(Company).order_by(Company.name).all()


def get_company(db: Session, code: str) -> Optional[Company]:
    return db.query(Company).filter(Company.code == code).first()


def get_invoice_ids(db: Session, code: str) -> List[int]:
    rows = (
        db.query(Invoice.id)
        .filter(Invoice.comp_code == code)
        .order_by(Invoice.id)
        .all()
    )
    return [row.id for row in rows]


def get_industry_rows(db: Session, code: str):
    return (
        db.query(IndustryCompany.industry_code)
        .filter(IndustryCompany.company_code == code)
        .order_by(IndustryCompany.industry_code)
        .all()
    )


def create_company(db: Session, payload: CompanyCreate) -> Company:
    # Duplicate codes are rejected by the primary key, not checked here
    company = Company(
        code=make_company_code(payload.name),
        name=payload.name,
        description=payload.description,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Optional[Company]:
    company = get_company(db, code)
    if company is None:
        return None

    company.name = payload.name
    company.description = payload.description
    db.commit()
    db.refresh(company)
    logger.info("Updated company %s", code)
    return company


def delete_company(db: Session, code: str) -> bool:
    """Delete the company (its invoices and tags cascade). False when nothing matched."""
    deleted = (
        db.query(Company)
        .filter(Company.code == code)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("Deleted company %s", code)
    return deleted > 0
