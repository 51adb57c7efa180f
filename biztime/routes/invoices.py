from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.core.errors import NotFoundError
from biztime.models.invoice_model import Invoice
from biztime.schemas.company_schema import CompanyOut, DeletedResponse
from biztime.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
)
from biztime.services.invoice_service import invoice_service

router = APIRouter()


def _not_found(invoice_id: int) -> NotFoundError:
    return NotFoundError(f"No such invoice: {invoice_id}")


def _invoice_to_detail(invoice: Invoice) -> InvoiceDetail:
    return InvoiceDetail(
        id=invoice.id,
        amt=invoice.amt,
        paid=invoice.paid,
        add_date=invoice.add_date,
        paid_date=invoice.paid_date,
        company=CompanyOut.model_validate(invoice.company),
    )


@router.get("", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    invoices = invoice_service.get_all_invoices(db)
    return InvoiceListResponse(
        invoices=[InvoiceSummary.model_validate(i) for i in invoices]
    )


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice = invoice_service.get_invoice(db, invoice_id)
    if not invoice:
        raise _not_found(invoice_id)
    return InvoiceDetailResponse(invoice=_invoice_to_detail(invoice))


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    invoice = invoice_service.create_invoice(db, payload)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    invoice = invoice_service.update_invoice(db, invoice_id, payload)
    if not invoice:
        raise _not_found(invoice_id)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    if not invoice_service.delete_invoice(db, invoice_id):
        raise _not_found(invoice_id)
    return DeletedResponse()
