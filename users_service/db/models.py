from sqlalchemy import CheckConstraint, Column, Index, UniqueConstraint, text
from sqlalchemy.dialects import postgresql as pg
from sqlalchemy.orm import declarative_base

from users_service.models.user import OTP_LENGTH, UserRole

Base = declarative_base()

user_roles = ", ".join(f"'{role.value}'" for role in UserRole)


class UsersTable(Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="users_email_key"),
        CheckConstraint(f"role IN ({user_roles})", name="check_users_role"),
        CheckConstraint(
            f"otp IS NULL OR LENGTH(otp) = {OTP_LENGTH}",
            name="check_users_otp_length",
        ),
        Index("idx_users_email", "email"),
        Index("idx_users_created_at", "created_at"),
        Index("idx_users_role", "role"),
        Index("idx_users_is_active", "is_active"),
    )

    id = Column(
        pg.UUID,
        primary_key=True,
        server_default=text("uuid_generate_v4()"),
    )
    email = Column(pg.VARCHAR(255), nullable=False)
    name = Column(pg.VARCHAR(255), nullable=False)
    created_at = Column(
        pg.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    updated_at = Column(
        pg.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    is_email_verified = Column(
        pg.BOOLEAN,
        nullable=False,
        server_default=text("false"),
    )
    is_active = Column(pg.BOOLEAN, nullable=False, server_default=text("true"))
    otp = Column(pg.VARCHAR(OTP_LENGTH), nullable=True)
    otp_expires_at = Column(pg.TIMESTAMP(timezone=True), nullable=True)
    role = Column(
        pg.VARCHAR(20),
        nullable=False,
        server_default=UserRole.user.value,
    )
