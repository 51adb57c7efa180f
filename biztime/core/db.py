import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from biztime.core.config import settings

logger = logging.getLogger(__name__)


# ----------------------------------------------------
# 1. ENGINE
# ----------------------------------------------------
def build_engine(url: str = settings.DATABASE_URL, **kwargs) -> Engine:
    """
    Create an engine for `url`.

    SQLite gets check_same_thread disabled (FastAPI runs sync handlers in a
    threadpool) and foreign keys switched on for every new connection.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    eng = create_engine(url, echo=settings.SQL_ECHO, **kwargs)

    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)

    return eng


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine()

# ----------------------------------------------------
# 2. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 3. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 4. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency — yields a DB session.

    Handlers never reach for SessionLocal themselves; tests swap this
    dependency out through app.dependency_overrides.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 5. CREATE MISSING TABLES ON STARTUP
# ----------------------------------------------------
def table_exists(table_name: str, bind: Engine = engine) -> bool:
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def run_migrations(bind: Engine = engine) -> None:
    """
    Create any BizTime table that does not exist yet.

    Existing tables are left alone; column changes go through alembic
    (biztime/migrations).
    """
    from biztime.models import company_model, industry_model, invoice_model  # noqa: F401

    missing = [
        name for name in Base.metadata.tables if not table_exists(name, bind)
    ]
    if not missing:
        logger.info("Schema up to date")
        return

    logger.info("Creating tables: %s", ", ".join(missing))
    Base.metadata.create_all(bind=bind)
