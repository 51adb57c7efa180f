from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from biztime.schemas.company_schema import CompanyOut


# ============================================================
# Request bodies
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float


class InvoiceUpdate(BaseModel):
    amt: float
    # Omit to leave payment state untouched
    paid: Optional[bool] = None


# ============================================================
# OUT Schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    class Config:
        from_attributes = True


class InvoiceOut(InvoiceSummary):
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None


class InvoiceDetail(BaseModel):
    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: CompanyOut

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
