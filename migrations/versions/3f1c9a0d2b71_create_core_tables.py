"""create accounts, applications, contacts and inquiries tables"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a0d2b71"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("is_tutor", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("atar", sa.String(length=16), nullable=True),
        sa.Column("degree", sa.String(length=255), nullable=True),
        sa.Column("experience", sa.String(length=120), nullable=True),
        sa.Column("availability", sa.String(length=255), nullable=True),
        sa.Column("price_y9", sa.Integer(), nullable=True),
        sa.Column("price_y10_12", sa.Integer(), nullable=True),
        sa.Column("subjects", sa.Text(), nullable=True),
        sa.Column("photo", sa.String(length=512), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
    )

    op.create_table(
        "applications",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("mobile", sa.String(length=64), nullable=True),
        sa.Column("atar", sa.String(length=16), nullable=True),
        sa.Column("high_school", sa.String(length=255), nullable=True),
        sa.Column("graduation_year", sa.String(length=16), nullable=True),
        sa.Column("university", sa.String(length=255), nullable=True),
        sa.Column("degree", sa.String(length=255), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("status", sa.String(length=32), nullable=True),
    )

    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=True, server_default=sa.text("'new'")),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "inquiries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("tutor_id", sa.Integer(), nullable=True),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("mobile", sa.String(length=64), nullable=True),
        sa.Column("relation", sa.String(length=64), nullable=True),
        sa.Column("year_level", sa.String(length=32), nullable=True),
        sa.Column("school", sa.String(length=255), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=True, server_default=sa.text("'new'")),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_inquiries_tutor_id", "inquiries", ["tutor_id"])


def downgrade():
    op.drop_index("ix_inquiries_tutor_id", table_name="inquiries")
    op.drop_table("inquiries")
    op.drop_table("contacts")
    op.drop_table("applications")
    op.drop_table("accounts")
