# alembic/versions/0001_job_portal_schema.py
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "0001_job_portal_schema"
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum("student", "faculty", "admin", name="user_role")
job_type = sa.Enum("full-time", "internship", "part-time", name="job_type")
application_status = sa.Enum("pending", "accepted", "rejected", name="application_status")
notification_type = sa.Enum("job_alert", "application_update", "general", name="notification_type")

ENUMS = (user_role, job_type, application_status, notification_type)


def _string_list():
    return sa.JSON().with_variant(postgresql.ARRAY(sa.Text()), "postgresql")


def _created_at(name):
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String()),
        sa.Column("role", user_role, nullable=False),
        sa.Column("department", sa.String()),
        sa.Column("roll_number", sa.String()),
        sa.Column("cgpa", sa.String()),
        sa.Column("skills", _string_list()),
        _created_at("created_at"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("company", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("type", job_type, nullable=False),
        sa.Column("experience", sa.String()),
        sa.Column("salary", sa.String()),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("requirements", _string_list()),
        sa.Column("skills", _string_list()),
        sa.Column("eligibility", sa.Text()),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true()),
        sa.Column("posted_by", sa.Integer(), sa.ForeignKey("users.id")),
        _created_at("created_at"),
    )
    op.create_index("ix_jobs_posted_by", "jobs", ["posted_by"])

    op.create_table(
        "resumes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("file_path", sa.String(), nullable=False),
        sa.Column("is_default", sa.Boolean(), server_default=sa.false()),
        _created_at("uploaded_at"),
    )
    op.create_index("ix_resumes_student_id", "resumes", ["student_id"])

    op.create_table(
        "applications",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("job_id", sa.Integer(), sa.ForeignKey("jobs.id"), nullable=False),
        sa.Column("resume_id", sa.Integer(), sa.ForeignKey("resumes.id")),
        sa.Column("cover_letter", sa.Text()),
        sa.Column("motivation", sa.Text()),
        sa.Column("status", application_status, server_default="pending", nullable=False),
        sa.Column("rejection_reason", sa.Text()),
        _created_at("applied_at"),
    )
    op.create_index("ix_applications_student_id", "applications", ["student_id"])
    op.create_index("ix_applications_job_id", "applications", ["job_id"])

    op.create_table(
        "saved_jobs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("job_id", sa.Integer(), sa.ForeignKey("jobs.id"), nullable=False),
        _created_at("saved_at"),
    )
    op.create_index("ix_saved_jobs_student_id", "saved_jobs", ["student_id"])
    op.create_index("ix_saved_jobs_job_id", "saved_jobs", ["job_id"])

    op.create_table(
        "notifications",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("type", notification_type, nullable=False),
        sa.Column("is_read", sa.Boolean(), server_default=sa.false()),
        _created_at("created_at"),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])


def downgrade():
    # children first
    for table in ("notifications", "saved_jobs", "applications", "resumes", "jobs", "users"):
        op.drop_table(table)

    # Drop types if unused
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        for enum_type in ENUMS:
            enum_type.drop(bind, checkfirst=True)
