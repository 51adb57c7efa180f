from pydantic import BaseModel


class IndustryCreate(BaseModel):
    code: str
    industry: str


class IndustryOut(BaseModel):
    code: str
    industry: str

    class Config:
        from_attributes = True


class IndustryResponse(BaseModel):
    industry: IndustryOut


class IndustryCompanyCreate(BaseModel):
    company_code: str


class IndustryCompanyOut(BaseModel):
    company_code: str
    industry_code: str

    class Config:
        from_attributes = True


class IndustryCompanyResponse(BaseModel):
    industry_company: IndustryCompanyOut
