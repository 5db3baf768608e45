"""Map free-text submission statuses onto new / read / closed."""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "9b4e6d2a7c10"
down_revision = "3f1c9a0d2b71"
branch_labels = None
depends_on = None


SUBMISSION_TABLES = ("applications", "contacts", "inquiries")
SUBMISSION_STATUS_ENUM = "submission_status"


def _status_enum() -> sa.Enum:
    return sa.Enum(
        "new",
        "read",
        "closed",
        name=SUBMISSION_STATUS_ENUM,
        native_enum=False,
        length=16,
    )


def upgrade() -> None:
    """Normalize existing values, then make status a non-null enumeration."""

    for table in SUBMISSION_TABLES:
        op.execute(f"UPDATE {table} SET status = LOWER(TRIM(status)) WHERE status IS NOT NULL")
        op.execute(f"UPDATE {table} SET status = 'new' WHERE status IS NULL OR status IN ('', 'open')")
        op.execute(f"UPDATE {table} SET status = 'read' WHERE status NOT IN ('new', 'closed')")

        with op.batch_alter_table(table) as batch_op:
            batch_op.alter_column(
                "status",
                existing_type=sa.String(length=32),
                type_=_status_enum(),
                nullable=False,
                server_default=sa.text("'new'"),
            )


def downgrade() -> None:
    """Revert status to nullable free text. Values are kept as they are."""

    for table in SUBMISSION_TABLES:
        with op.batch_alter_table(table) as batch_op:
            batch_op.alter_column(
                "status",
                existing_type=_status_enum(),
                type_=sa.String(length=32),
                nullable=True,
                server_default=None if table == "applications" else sa.text("'new'"),
            )
