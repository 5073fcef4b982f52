"""
SQLAlchemy 2.0 ORM models for the Live Blog content schema.

Content tables live in the "direkt" schema, identity and customer tables in
"ifragasatt". Both names are placeholders remapped through the engine's
schema_translate_map (see shared.config.Settings).
Column names are the camelCase names used by the database.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

CONTENT_SCHEMA = "direkt"
IDENTITY_SCHEMA = "ifragasatt"


class Base(DeclarativeBase):
    pass


# ── Identity / customer tables ──────────────────────────────────────────
class CustomerORM(Base):
    __tablename__ = "customers"
    __table_args__ = {"schema": IDENTITY_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    short_name: Mapped[str] = mapped_column("shortName", String(100), nullable=False)


class LanguageORM(Base):
    __tablename__ = "languages"
    __table_args__ = {"schema": IDENTITY_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    short_name: Mapped[Optional[str]] = mapped_column("shortName", String(10))


class CustomerSignupSettingsORM(Base):
    __tablename__ = "customerSignupSettings"
    __table_args__ = {"schema": IDENTITY_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    customer_id: Mapped[int] = mapped_column(
        "customerId", BigInteger, ForeignKey(f"{IDENTITY_SCHEMA}.customers.id"), nullable=False
    )
    language_id: Mapped[int] = mapped_column(
        "languageId", BigInteger, ForeignKey(f"{IDENTITY_SCHEMA}.languages.id"), nullable=False
    )


class AliasORM(Base):
    __tablename__ = "aliases"
    __table_args__ = {"schema": IDENTITY_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(String(200))
    profile_picture: Mapped[Optional[str]] = mapped_column("profilePicture", Text)
    image_rotation: Mapped[Optional[int]] = mapped_column("imageRotation", Integer)


class UserORM(Base):
    __tablename__ = "users"
    __table_args__ = {"schema": IDENTITY_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    first_name: Mapped[Optional[str]] = mapped_column("firstName", String(200))
    last_name: Mapped[Optional[str]] = mapped_column("lastName", String(200))
    email: Mapped[Optional[str]] = mapped_column(String(320))
    profile_picture: Mapped[Optional[str]] = mapped_column("profilePicture", Text)
    image_rotation: Mapped[Optional[int]] = mapped_column("imageRotation", Integer)
    slug: Mapped[Optional[str]] = mapped_column(String(200))
    alias_id: Mapped[Optional[int]] = mapped_column(
        "aliasId", BigInteger, ForeignKey(f"{IDENTITY_SCHEMA}.aliases.id")
    )


# ── Content tables ──────────────────────────────────────────────────────
class CustomerSettingsORM(Base):
    __tablename__ = "customerSettings"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    customer_id: Mapped[int] = mapped_column("customerId", BigInteger, nullable=False)
    archive_after_days: Mapped[Optional[int]] = mapped_column("archiveAfterDays", Integer)


class BroadcastORM(Base):
    __tablename__ = "broadcasts"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    article_id: Mapped[str] = mapped_column("articleId", String(100), nullable=False, unique=True)
    customer_id: Mapped[int] = mapped_column("customerId", BigInteger, nullable=False)
    subject: Mapped[Optional[str]] = mapped_column(Text)
    description: Mapped[Optional[str]] = mapped_column(Text)
    start_time: Mapped[Optional[datetime]] = mapped_column("startTime", DateTime)
    end_time: Mapped[Optional[datetime]] = mapped_column("endTime", DateTime)
    deleted_at: Mapped[Optional[datetime]] = mapped_column("deletedAt", DateTime)
    enable_carousel: Mapped[bool] = mapped_column("enableCarousel", Boolean, default=False)
    auto_collapse: Mapped[bool] = mapped_column("autoCollapse", Boolean, default=False)
    default_order: Mapped[Optional[str]] = mapped_column("defaultOrder", String(20))
    show_description: Mapped[bool] = mapped_column("showDescription", Boolean, default=False)
    has_sports_panel: Mapped[bool] = mapped_column("hasSportsPanel", Boolean, default=False)
    autoscroll: Mapped[bool] = mapped_column(Boolean, default=False)
    has_comments: Mapped[bool] = mapped_column("hasComments", Boolean, default=False)
    allow_ifr_comments: Mapped[bool] = mapped_column("allowIfrComments", Boolean, default=False)
    allow_anon_comments: Mapped[bool] = mapped_column("allowAnonComments", Boolean, default=False)
    anon_comment_require_email: Mapped[bool] = mapped_column("anonCommentRequireEmail", Boolean, default=False)
    anon_comment_accept_terms: Mapped[bool] = mapped_column("anonCommentAcceptTerms", Boolean, default=False)
    user_terms_version: Mapped[Optional[str]] = mapped_column("userTermsVersion", String(20))
    auto_archive: Mapped[bool] = mapped_column("autoArchive", Boolean, default=False)
    embed_js: Mapped[Optional[str]] = mapped_column("embedJS", Text)
    embed_html: Mapped[Optional[str]] = mapped_column("embedHTML", Text)
    expanded_mode: Mapped[bool] = mapped_column("expandedMode", Boolean, default=False)
    posts_to_show: Mapped[Optional[int]] = mapped_column("postsToShow", Integer)
    syndicate: Mapped[bool] = mapped_column(Boolean, default=False)


class InfotextORM(Base):
    __tablename__ = "infotexts"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    broadcast_id: Mapped[int] = mapped_column(
        "broadcastId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.broadcasts.id"), nullable=False
    )
    user_id: Mapped[int] = mapped_column("userId", BigInteger, nullable=False)
    guid: Mapped[str] = mapped_column(String(64), nullable=False)
    text: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = mapped_column("createdAt", DateTime)
    updated_at: Mapped[Optional[datetime]] = mapped_column("updatedAt", DateTime)
    deleted_at: Mapped[Optional[datetime]] = mapped_column("deletedAt", DateTime)


class SportResultORM(Base):
    __tablename__ = "sportResults"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    article_id: Mapped[str] = mapped_column("articleId", String(100), nullable=False)
    guid: Mapped[str] = mapped_column(String(64), nullable=False)
    team_one_name: Mapped[Optional[str]] = mapped_column("teamOneName", String(200))
    team_two_name: Mapped[Optional[str]] = mapped_column("teamTwoName", String(200))
    team_one_logo: Mapped[Optional[str]] = mapped_column("teamOneLogo", Text)
    team_two_logo: Mapped[Optional[str]] = mapped_column("teamTwoLogo", Text)
    team_one_result: Mapped[Optional[int]] = mapped_column("teamOneResult", Integer)
    team_two_result: Mapped[Optional[int]] = mapped_column("teamTwoResult", Integer)
    created_at: Mapped[Optional[datetime]] = mapped_column("createdAt", DateTime)
    deleted_at: Mapped[Optional[datetime]] = mapped_column("deletedAt", DateTime)


class HeaderSortorderORM(Base):
    __tablename__ = "headerSortorder"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    broadcast_id: Mapped[int] = mapped_column(
        "broadcastId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.broadcasts.id"), nullable=False
    )
    guid: Mapped[str] = mapped_column(String(64), nullable=False)
    sortorder: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CommentUserORM(Base):
    """Author record written with each comment; links to a platform user when logged in."""
    __tablename__ = "commentUsers"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    ifr_user_id: Mapped[Optional[int]] = mapped_column("ifrUserId", BigInteger)
    user_name: Mapped[Optional[str]] = mapped_column("userName", String(200))
    email: Mapped[Optional[str]] = mapped_column(String(320))


class CommentORM(Base):
    __tablename__ = "comments"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    broadcast_id: Mapped[int] = mapped_column(
        "broadcastId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.broadcasts.id"), nullable=False
    )
    comment_user_id: Mapped[Optional[int]] = mapped_column(
        "commentUserId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.commentUsers.id")
    )
    comment_guid: Mapped[str] = mapped_column("commentGuid", String(64), nullable=False)
    parent_comment_guid: Mapped[Optional[str]] = mapped_column("parentCommentGuid", String(64))
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    is_pinned: Mapped[bool] = mapped_column("isPinned", Boolean, nullable=False, default=False)
    published_by_user_id: Mapped[Optional[int]] = mapped_column("publishedByUserId", BigInteger)
    written_at: Mapped[Optional[datetime]] = mapped_column("writtenAt", DateTime)
    created_at: Mapped[Optional[datetime]] = mapped_column("createdAt", DateTime)
    updated_at: Mapped[Optional[datetime]] = mapped_column("updatedAt", DateTime)
    deleted_at: Mapped[Optional[datetime]] = mapped_column("deletedAt", DateTime)


class ReportORM(Base):
    __tablename__ = "reports"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    broadcast_id: Mapped[int] = mapped_column(
        "broadcastId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.broadcasts.id"), nullable=False
    )
    guid: Mapped[str] = mapped_column(String(64), nullable=False)
    text: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = mapped_column("createdAt", DateTime)
    updated_at: Mapped[Optional[datetime]] = mapped_column("updatedAt", DateTime)


class ReportCommentORM(Base):
    __tablename__ = "reportsComments"
    __table_args__ = {"schema": CONTENT_SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    report_id: Mapped[int] = mapped_column(
        "reportId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.reports.id"), nullable=False
    )
    comment_id: Mapped[int] = mapped_column(
        "commentId", BigInteger, ForeignKey(f"{CONTENT_SCHEMA}.comments.id"), nullable=False
    )
