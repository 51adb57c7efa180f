from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.core.errors import NotFoundError
from biztime.schemas.industry_schema import (
    IndustryCompanyCreate,
    IndustryCompanyOut,
    IndustryCompanyResponse,
    IndustryCreate,
    IndustryOut,
    IndustryResponse,
)
from biztime.services import company_service, industry_service

router = APIRouter()


@router.get("")
def list_industry_companies(db: Session = Depends(get_db)):
    """
    Industry/company tags.

    Only the first association row is returned (null when there are
    none), wrapped as a single object rather than a list.
    """
    rows = industry_service.list_industry_companies(db)
    first = IndustryCompanyOut.model_validate(rows[0]).model_dump() if rows else None
    return {"Industry / Company": first}


@router.post("", response_model=IndustryResponse)
def create_industry(payload: IndustryCreate, db: Session = Depends(get_db)):
    industry = industry_service.create_industry(db, payload)
    return IndustryResponse(industry=IndustryOut.model_validate(industry))


@router.post(
    "/{code}/companies",
    response_model=IndustryCompanyResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_company_to_industry(
    code: str, payload: IndustryCompanyCreate, db: Session = Depends(get_db)
):
    if industry_service.get_industry(db, code) is None:
        raise NotFoundError(f"No such industry: {code}")
    if company_service.get_company(db, payload.company_code) is None:
        raise NotFoundError(f"No such company: {payload.company_code}")

    link = industry_service.add_company(db, code, payload.company_code)
    return IndustryCompanyResponse(
        industry_company=IndustryCompanyOut.model_validate(link)
    )
