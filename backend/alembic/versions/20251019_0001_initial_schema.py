"""Initial schema for the livelihood program backend."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20251019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _document_columns(archive_flag: str = "archived") -> list[sa.Column]:
    return [
        sa.Column("_id", sa.CHAR(length=24), primary_key=True),
        sa.Column("id", sa.String(length=64), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("archived_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(archive_flag, sa.Boolean(), nullable=False, server_default=sa.false()),
    ]


def upgrade() -> None:
    association_status_enum = sa.Enum(
        "active",
        "inactive",
        "pending",
        "suspended",
        "archived",
        name="association_status_enum",
        native_enum=False,
    )
    record_type_enum = sa.Enum(
        "income",
        "expense",
        "savings",
        "investment",
        "loan",
        name="financial_record_type_enum",
        native_enum=False,
    )

    op.create_table(
        "associations",
        *_document_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("status", association_status_enum, nullable=False),
        sa.Column("active_members", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("inactive_members", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("contact_person", sa.String(length=150), nullable=True),
        sa.Column("contact_number", sa.String(length=50), nullable=True),
        sa.Column("email", sa.String(length=150), nullable=True),
        sa.Column("operational_reason", sa.Text(), nullable=True),
        sa.Column("sustainability_score", sa.Float(), nullable=True),
        sa.Column("compliance_rate", sa.Float(), nullable=True),
    )
    op.create_index("associations_status_idx", "associations", ["status"])

    op.create_table(
        "financial_records",
        *_document_columns(),
        sa.Column("project_id", sa.String(length=64), nullable=False),
        sa.Column("association_id", sa.String(length=64), nullable=True),
        sa.Column("record_date", sa.Date(), nullable=False),
        sa.Column("record_type", record_type_enum, nullable=False),
        sa.Column("amount", sa.Float(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("note", sa.Text(), nullable=True),
    )
    op.create_index(
        "financial_records_project_date_idx",
        "financial_records",
        ["project_id", "record_date"],
    )
    op.create_index("financial_records_association_idx", "financial_records", ["association_id"])

    op.create_table(
        "financial_reports",
        *_document_columns(),
        sa.Column("association_id", sa.String(length=64), nullable=False),
        sa.Column("association_name", sa.String(length=200), nullable=False),
        sa.Column("period", sa.String(length=100), nullable=False),
        sa.Column("report_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("caretaker_id", sa.String(length=64), nullable=True),
        sa.Column("caretaker_name", sa.String(length=200), nullable=True),
        *[
            sa.Column(name, sa.Float(), nullable=False, server_default="0")
            for name in (
                "sales",
                "costs",
                "expenses",
                "profit",
                "share80",
                "ass_share20",
                "monitoring2",
                "balance",
            )
        ],
    )
    op.create_index(
        "financial_reports_association_period_idx",
        "financial_reports",
        ["association_id", "period"],
    )
    op.create_index("financial_reports_report_date_idx", "financial_reports", ["report_date"])

    op.create_table(
        "monitoring_records",
        *_document_columns("is_archived"),
        sa.Column("association_id", sa.String(length=64), nullable=True),
        sa.Column("project_id", sa.String(length=64), nullable=True),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("monitoring_type", sa.String(length=50), nullable=False),
        sa.Column("monitored_by", sa.String(length=150), nullable=True),
        sa.Column("findings", sa.Text(), nullable=True),
        sa.Column("recommendations", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
    )
    op.create_index("monitoring_records_association_idx", "monitoring_records", ["association_id"])

    op.create_table(
        "pig_performance",
        *_document_columns(),
        sa.Column("pig_id", sa.String(length=64), nullable=False),
        sa.Column("caretaker_id", sa.String(length=64), nullable=True),
        sa.Column("association_id", sa.String(length=64), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("weight_gain", sa.Float(), nullable=True),
        sa.Column("feed_conversion_ratio", sa.Float(), nullable=True),
        sa.Column("health_score", sa.Float(), nullable=True),
        sa.Column("mortality", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("pig_performance_date_idx", "pig_performance", ["date"])
    op.create_index("pig_performance_pig_idx", "pig_performance", ["pig_id"])

    op.create_table(
        "association_ratings",
        *_document_columns(),
        sa.Column("association_id", sa.String(length=64), nullable=False),
        sa.Column("association_name", sa.String(length=200), nullable=False),
        sa.Column("rating_period", sa.String(length=100), nullable=False),
        sa.Column("overall_rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("adjectival_rating", sa.String(length=50), nullable=True),
        sa.Column("financial_performance", sa.Float(), nullable=True),
        sa.Column("operational_efficiency", sa.Float(), nullable=True),
        sa.Column("member_satisfaction", sa.Float(), nullable=True),
        sa.Column("compliance_score", sa.Float(), nullable=True),
    )
    op.create_index("association_ratings_created_idx", "association_ratings", ["created_at"])


def downgrade() -> None:
    op.drop_index("association_ratings_created_idx", table_name="association_ratings")
    op.drop_table("association_ratings")
    op.drop_index("pig_performance_pig_idx", table_name="pig_performance")
    op.drop_index("pig_performance_date_idx", table_name="pig_performance")
    op.drop_table("pig_performance")
    op.drop_index("monitoring_records_association_idx", table_name="monitoring_records")
    op.drop_table("monitoring_records")
    op.drop_index("financial_reports_report_date_idx", table_name="financial_reports")
    op.drop_index("financial_reports_association_period_idx", table_name="financial_reports")
    op.drop_table("financial_reports")
    op.drop_index("financial_records_association_idx", table_name="financial_records")
    op.drop_index("financial_records_project_date_idx", table_name="financial_records")
    op.drop_table("financial_records")
    op.drop_index("associations_status_idx", table_name="associations")
    op.drop_table("associations")
