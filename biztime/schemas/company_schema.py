from pydantic import BaseModel
from typing import Optional, List


class CompanyCreate(BaseModel):
    name: str
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: str
    description: Optional[str] = None


class CompanySummary(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class CompanyOut(CompanySummary):
    description: Optional[str] = None


class CompanyDetail(CompanyOut):
    invoices: List[int] = []


class IndustryCodeRow(BaseModel):
    industry_code: str

    class Config:
        from_attributes = True


# ============================================================
# Response envelopes
# ============================================================
class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
    # Raw association rows, one per tag
    industries: List[IndustryCodeRow]


class DeletedResponse(BaseModel):
    status: str = "deleted"
