"""
Typed intermediates for decoding query rows.

Each model mirrors the labelled columns of one assembler query, with nullable
columns kept Optional. Validation here is the decode boundary: a row whose
columns do not fit raises pydantic.ValidationError, which the assemblers turn
into a DecodeFailure.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict

from content.coalesce import timestamp_text

Timestamp = Annotated[Optional[str], BeforeValidator(timestamp_text)]


def row_mapping(row: Any) -> dict[str, Any]:
    """Column-name dict of a SQLAlchemy Row (or of a plain mapping)."""
    mapping: Mapping[str, Any] = getattr(row, "_mapping", row)
    return dict(mapping)


class RowModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class BroadcastInfoRow(RowModel):
    id: int
    subject: Optional[str] = None
    description: Optional[str] = None
    start_time: Timestamp = None
    language_code: Optional[str] = None
    enable_carousel: bool
    auto_collapse: bool
    default_order: Optional[str] = None
    end_time: Timestamp = None
    deleted_at: Timestamp = None
    show_description: bool
    has_sports_panel: bool
    autoscroll: bool
    has_comments: bool
    allow_ifr_comments: bool
    allow_anon_comments: bool
    anon_comment_require_email: bool
    anon_comment_accept_terms: bool
    user_terms_version: Optional[str] = None
    customer_id: int
    auto_archive: bool
    customer_shortname: Optional[str] = None
    archive_after_days: Optional[int] = None
    embed_js: Optional[str] = None
    embed_html: Optional[str] = None
    expanded_mode: bool
    posts_to_show: Optional[int] = None
    syndicate: bool


class InfotextRow(RowModel):
    text: Optional[str] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    guid: str
    user_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_pic: Optional[str] = None
    slug: Optional[str] = None


class SportResultRow(RowModel):
    team_one_name: Optional[str] = None
    team_two_name: Optional[str] = None
    team_one_logo: Optional[str] = None
    team_two_logo: Optional[str] = None
    team_one_result: Optional[int] = None
    team_two_result: Optional[int] = None
    article_id: str
    guid: str
    created_at: Timestamp = None


class HeaderSortorderRow(RowModel):
    guid: str
    sortorder: int


class CommentAuthorColumns(RowModel):
    """Joined-but-optional identity columns for one comment author."""

    ifr_user_id: Optional[int] = None
    user_name: Optional[str] = None
    email: Optional[str] = None
    profile_pic: Optional[str] = None
    img_rotation: Optional[int] = None
    alias: Optional[str] = None
    alias_profile_pic: Optional[str] = None
    alias_img_rotation: Optional[int] = None
    guest_user_name: Optional[str] = None
    guest_email: Optional[str] = None


class CommentRow(CommentAuthorColumns):
    id: int
    article_id: str
    comment_guid: str
    report_guid: Optional[str] = None
    broadcast_id: int
    text: str
    status: str
    parent_comment_guid: Optional[str] = None
    is_pinned: bool
    published_by_user_id: Optional[int] = None
    created_at: Timestamp = None
    updated_at: Timestamp = None
    written_at: Timestamp = None

    def author(self) -> CommentAuthorColumns:
        return CommentAuthorColumns.model_validate(
            self.model_dump(include=set(CommentAuthorColumns.model_fields))
        )
