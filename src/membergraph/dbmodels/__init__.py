"""
Database models for membergraph (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    Float,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class MemberTypes(Base):
    __tablename__ = "member_types"
    __table_args__ = (PrimaryKeyConstraint("id", name="member_types_pkey"),)

    id: Mapped[str] = mapped_column(String(32))
    discount: Mapped[float] = mapped_column(Float, nullable=False)
    posts_limit_per_month: Mapped[int] = mapped_column(Integer, nullable=False)

    profiles: Mapped[list["Profiles"]] = relationship(
        "Profiles", uselist=True, back_populates="member_type"
    )


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (PrimaryKeyConstraint("id", name="users_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    balance: Mapped[float] = mapped_column(Float, nullable=False)

    profile: Mapped["Profiles | None"] = relationship(
        "Profiles", uselist=False, back_populates="user"
    )
    posts: Mapped[list["Posts"]] = relationship("Posts", uselist=True, back_populates="author")


class Profiles(Base):
    __tablename__ = "profiles"
    __table_args__ = (
        ForeignKeyConstraint(["user_id"], ["users.id"], name="profiles_user_id_fkey"),
        ForeignKeyConstraint(
            ["member_type_id"], ["member_types.id"], name="profiles_member_type_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="profiles_pkey"),
        UniqueConstraint("user_id", name="profiles_user_id_key"),
        Index("idx_profiles_member_type", "member_type_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    is_member: Mapped[bool] = mapped_column(Boolean, nullable=False)
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    member_type_id: Mapped[str] = mapped_column(String(32), nullable=False)

    user: Mapped["Users"] = relationship("Users", back_populates="profile")
    member_type: Mapped["MemberTypes"] = relationship("MemberTypes", back_populates="profiles")


class Posts(Base):
    __tablename__ = "posts"
    __table_args__ = (
        ForeignKeyConstraint(["author_id"], ["users.id"], name="posts_author_id_fkey"),
        PrimaryKeyConstraint("id", name="posts_pkey"),
        Index("idx_posts_author", "author_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    author: Mapped["Users"] = relationship("Users", back_populates="posts")


target_metadata = Base.metadata

__all__ = [
    "Base",
    "MemberTypes",
    "Posts",
    "Profiles",
    "Users",
    "naming_convention",
    "target_metadata",
]
