"""Shared test fixtures for the BizTime API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from biztime.core.db import build_engine, get_db, run_migrations
from biztime.main import create_app
from biztime.models.company_model import Company
from biztime.models.industry_model import Industry, IndustryCompany
from biztime.models.invoice_model import Invoice


@pytest.fixture()
def engine():
    """Fresh in-memory SQLite database per test, schema already created."""
    eng = build_engine("sqlite://", poolclass=StaticPool)
    run_migrations(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def app(session_factory):
    """FastAPI app whose get_db dependency points at the test database."""
    application = create_app()

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db] = _get_test_db
    return application


@pytest.fixture()
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture()
def seeded(db):
    """
    Two companies, three invoices, two industries and three tags:

        apple: invoices 1, 2   industries acct, tech
        ibm:   invoice 3       industries tech
    """
    db.add_all([
        Company(code="apple", name="Apple Computer", description="Maker of OSX."),
        Company(code="ibm", name="IBM", description="Big blue."),
    ])
    db.add_all([
        Industry(code="acct", industry="Accounting"),
        Industry(code="tech", industry="Technology"),
    ])
    db.flush()
    db.add_all([
        Invoice(comp_code="apple", amt=100),
        Invoice(comp_code="apple", amt=200, paid=True),
        Invoice(comp_code="ibm", amt=300),
    ])
    db.add_all([
        IndustryCompany(company_code="apple", industry_code="acct"),
        IndustryCompany(company_code="apple", industry_code="tech"),
        IndustryCompany(company_code="ibm", industry_code="tech"),
    ])
    db.commit()
    return db
