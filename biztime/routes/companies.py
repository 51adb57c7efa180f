from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.core.errors import NotFoundError
from biztime.models.company_model import Company
from biztime.schemas.company_schema import (
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanySummary,
    CompanyUpdate,
    DeletedResponse,
    IndustryCodeRow,
)
from biztime.services import company_service

router = APIRouter()


def _not_found(code: str) -> NotFoundError:
    return NotFoundError(f"No such company: {code}")


def _company_to_out(company: Company) -> CompanyOut:
    return CompanyOut.model_validate(company)


@router.get("", response_model=CompanyListResponse)
def list_companies(db: Session = Depends(get_db)):
    companies = company_service.list_companies(db)
    return CompanyListResponse(
        companies=[CompanySummary.model_validate(c) for c in companies]
    )


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company(code: str, db: Session = Depends(get_db)):
    company = company_service.get_company(db, code)
    if company is None:
        raise _not_found(code)

    invoice_ids = company_service.get_invoice_ids(db, code)
    industries = company_service.get_industry_rows(db, code)

    return CompanyDetailResponse(
        company=CompanyDetail(
            code=company.code,
            name=company.name,
            description=company.description,
            invoices=invoice_ids,
        ),
        industries=[IndustryCodeRow.model_validate(row) for row in industries],
    )


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)):
    company = company_service.create_company(db, payload)
    return CompanyResponse(company=_company_to_out(company))


@router.put("/{code}", response_model=CompanyResponse)
def update_company(code: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    company = company_service.update_company(db, code, payload)
    if company is None:
        raise _not_found(code)
    return CompanyResponse(company=_company_to_out(company))


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company(code: str, db: Session = Depends(get_db)):
    if not company_service.delete_company(db, code):
        raise _not_found(code)
    return DeletedResponse()
