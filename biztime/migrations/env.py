from logging.config import fileConfig

from sqlalchemy import pool

from alembic import context

# Load models
from biztime.core.config import settings
from biztime.core.db import Base, build_engine
from biztime.models.company_model import Company  # noqa: F401
from biztime.models.industry_model import Industry, IndustryCompany  # noqa: F401
from biztime.models.invoice_model import Invoice  # noqa: F401

# Alembic Config object
config = context.config

# Interpret alembic.ini for logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

DATABASE_URL = settings.DATABASE_URL


def run_migrations_offline():
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    engine = build_engine(DATABASE_URL, poolclass=pool.NullPool)

    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
