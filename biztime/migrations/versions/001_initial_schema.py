"""Initial schema for companies, invoices and industry tags"""

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa


def upgrade():
    op.create_table(
        "companies",
        sa.Column("code", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "comp_code",
            sa.String(),
            sa.ForeignKey("companies.code", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("add_date", sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column("paid_date", sa.Date(), nullable=True),
        sa.CheckConstraint("amt > 0", name="invoices_amt_check"),
    )

    op.create_table(
        "industries",
        sa.Column("code", sa.String(), primary_key=True),
        sa.Column("industry", sa.String(), nullable=False, unique=True),
    )

    op.create_table(
        "industry_company",
        sa.Column(
            "company_code",
            sa.String(),
            sa.ForeignKey("companies.code", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "industry_code",
            sa.String(),
            sa.ForeignKey("industries.code", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def downgrade():
    op.drop_table("industry_company")
    op.drop_table("industries")
    op.drop_table("invoices")
    op.drop_table("companies")
