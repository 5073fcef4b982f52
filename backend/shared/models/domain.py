"""
Pydantic v2 domain models for the Live Blog content feed.
These are the canonical wire representations returned to clients, NOT ORM models.

Entities are immutable snapshots: nothing here is optional in the null sense,
absent columns arrive as "" or 0 (see content.coalesce). Fields listed in a
model's ``omit_if_empty`` are dropped from serialized output when empty.
"""
from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from shared.models.enums import IdentitySource, MessageType


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == 0 or value == [] or value == {}


# ── Base ────────────────────────────────────────────────────────────────
class DomainModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, frozen=True)

    omit_if_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_if_empty:
            field = type(self).model_fields[name]
            key = field.alias if info.by_alias and field.alias else name
            if key in data and _is_empty(data[key]):
                del data[key]
        return data

    def to_wire(self) -> dict[str, Any]:
        """Serialize with client field names, JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)


# ── Upstream identity records ───────────────────────────────────────────
class User(DomainModel):
    """Platform user as supplied by the session subsystem."""
    omit_if_empty = frozenset({"user_name", "profile_pic", "slug", "role_name"})

    id: int = Field(default=0, alias="userId")
    first_name: str = Field(default="", alias="userFirstName")
    last_name: str = Field(default="", alias="userLastName")
    user_name: str = Field(default="", alias="userName")
    display_name: str = Field(default="", alias="displayName")
    profile_pic: str = Field(default="", alias="userProfilePic")
    image_rotation: int = Field(default=0, alias="imageRotation")
    slug: str = Field(default="", alias="userSlug")
    email: str = Field(default="", alias="email")
    customer_id: int = Field(default=0, alias="userCustomerId")
    role_name: str = Field(default="", alias="roleName")
    role: str = Field(default="", alias="role")
    role_id: int = Field(default=0, alias="roleId")
    invite_date: str = Field(default="", alias="inviteDate")
    accepted: bool = Field(default=False, alias="accepted")
    language: str = Field(default="", alias="language")
    alias_id: int = Field(default=0, alias="aliasId")
    alias_name: str = Field(default="", alias="aliasName")
    alias_pic: str = Field(default="", alias="aliasPic")
    alias_rotation: int = Field(default=0, alias="aliasRotation")
    user_ip: str = Field(default="", alias="userIP")


class GuestProfile(DomainModel):
    omit_if_empty = frozenset({"id"})

    id: int = Field(default=0, alias="id")
    display_name: str = Field(default="", alias="displayName")
    profile_pic: str = Field(default="", alias="profilePicture")
    image_rotation: int = Field(default=0, alias="imageRotation")


# ── Broadcast metadata ──────────────────────────────────────────────────
class BroadcastInfo(DomainModel):
    """Metadata for one broadcast. The default instance is the zero-value record."""

    id: int = Field(default=0, alias="id")
    subject: str = Field(default="", alias="subject")
    description: str = Field(default="", alias="description")
    start_time: str = Field(default="", alias="startTime")
    end_time: str = Field(default="", alias="endTime")
    language_code: str = Field(default="", alias="languageCode")
    enable_carousel: bool = Field(default=False, alias="enableCarousel")
    auto_collapse: bool = Field(default=False, alias="autoCollapse")
    default_order: str = Field(default="", alias="defaultOrder")
    deleted_at: str = Field(default="", alias="deletedAt")
    show_description: bool = Field(default=False, alias="showDescription")
    has_sports_panel: bool = Field(default=False, alias="hasSportsPanel")
    autoscroll: bool = Field(default=False, alias="autoscroll")
    has_comments: bool = Field(default=False, alias="hasComments")
    allow_ifr_comments: bool = Field(default=False, alias="allowIfrComments")
    allow_anon_comments: bool = Field(default=False, alias="allowAnonComments")
    anon_comment_require_email: bool = Field(default=False, alias="anonCommentRequireEmail")
    anon_comment_accept_terms: bool = Field(default=False, alias="anonCommentAcceptTerms")
    user_terms_version: str = Field(default="", alias="userTermsVersion")
    customer_id: int = Field(default=0, alias="customerId")
    auto_archive: bool = Field(default=False, alias="autoArchive")
    customer_shortname: str = Field(default="", alias="customerShortname")
    archive_after_days: int = Field(default=0, alias="archiveAfterDays")
    embed_js: str = Field(default="", alias="embedJS")
    embed_html: str = Field(default="", alias="embedHTML")
    expanded_mode: bool = Field(default=False, alias="expandedMode")
    posts_to_show: int = Field(default=0, alias="postsToShow")
    syndicate: bool = Field(default=False, alias="syndicate")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at != ""


# ── Header content ──────────────────────────────────────────────────────
class Infotext(DomainModel):
    """Free-format announcement displayed in the header carousel."""
    omit_if_empty = frozenset({"text", "guid", "message_type", "created_at", "updated_at"})

    text: str = Field(default="", alias="text")
    guid: str = Field(default="", alias="guid")
    user: User = Field(default_factory=User, alias="user")
    message_type: MessageType = Field(default=MessageType.INFO, alias="messageType")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")


class SportExternal(DomainModel):
    """Client copy of a sport result; results are rendered as text."""
    omit_if_empty = frozenset({
        "article_id", "guid", "created_at", "team_one_name", "team_two_name",
        "team_one_logo", "team_two_logo", "team_one_result", "team_two_result",
    })

    article_id: str = Field(default="", alias="articleId")
    guid: str = Field(default="", alias="guid")
    created_at: str = Field(default="", alias="createdAt")
    team_one_name: str = Field(default="", alias="teamOneName")
    team_two_name: str = Field(default="", alias="teamTwoName")
    team_one_logo: str = Field(default="", alias="teamOneLogo")
    team_two_logo: str = Field(default="", alias="teamTwoLogo")
    team_one_result: str = Field(default="", alias="teamOneResult")
    team_two_result: str = Field(default="", alias="teamTwoResult")


class SportResult(DomainModel):
    """Point-in-time scoreboard snapshot between two competitors."""

    team_one_name: str = Field(default="", alias="teamOneName")
    team_two_name: str = Field(default="", alias="teamTwoName")
    team_one_logo: str = Field(default="", alias="teamOneLogo")
    team_two_logo: str = Field(default="", alias="teamTwoLogo")
    team_one_result: int = Field(default=0, alias="teamOneResult")
    team_two_result: int = Field(default=0, alias="teamTwoResult")
    article_id: str = Field(default="", alias="articleId")
    guid: str = Field(default="", alias="guid")
    created_at: str = Field(default="", alias="createdAt")
    message_type: MessageType = Field(default=MessageType.SPORT_RESULT, alias="messageType")

    def to_external(self) -> SportExternal:
        return SportExternal(
            article_id=self.article_id,
            guid=self.guid,
            created_at=self.created_at,
            team_one_name=self.team_one_name,
            team_two_name=self.team_two_name,
            team_one_logo=self.team_one_logo,
            team_two_logo=self.team_two_logo,
            team_one_result=str(self.team_one_result),
            team_two_result=str(self.team_two_result),
        )


class HeaderSortorder(DomainModel):
    guid: str = Field(default="", alias="itemGuid")
    index: int = Field(default=0, alias="index")
    message_type: MessageType = Field(default=MessageType.HEADER_SORTORDER, alias="messageType")


# ── Discussion ──────────────────────────────────────────────────────────
class CommentUser(DomainModel):
    """
    Normalized display identity of a comment author.

    The raw user, alias and guest columns are carried verbatim for clients
    that render them; ``display_*`` hold the identity picked by the resolver.
    """
    omit_if_empty = frozenset({"token"})

    ifr_user_id: int = Field(default=0, alias="ifrUserId")
    user_name: str = Field(default="", alias="userName")
    email: str = Field(default="", alias="email")
    profile_pic: str = Field(default="", alias="profilePic")
    img_rotation: int = Field(default=0, alias="imgRotation")
    alias: str = Field(default="", alias="alias")
    alias_profile_pic: str = Field(default="", alias="aliasProfilePic")
    alias_img_rotation: int = Field(default=0, alias="aliasImgRotation")
    token: str = Field(default="", alias="token")
    is_ifragasatt_user: bool = Field(default=False, alias="isIfragasattUser")
    guest_user_name: str = Field(default="", alias="guestUserName")
    guest_email: str = Field(default="", alias="guestEmail")
    display_name: str = Field(default="", alias="displayName")
    display_profile_pic: str = Field(default="", alias="displayProfilePic")
    display_img_rotation: int = Field(default=0, alias="displayImgRotation")
    identity_source: IdentitySource = Field(default=IdentitySource.NONE, exclude=True)


class Comment(DomainModel):
    """A published discussion message. Threading is by parent GUID only."""
    omit_if_empty = frozenset({"updated_at", "created_at", "deleted_at"})

    id: int = Field(default=0, alias="id")
    article_id: str = Field(default="", alias="articleId")
    broadcast_id: int = Field(default=0, alias="broadcastId")
    comment_guid: str = Field(default="", alias="guid")
    report_guid: str = Field(default="", alias="reportGuid")
    parent_comment_guid: str = Field(default="", alias="parentCommentGuid")
    status: str = Field(default="", alias="status")
    is_pinned: bool = Field(default=False, alias="isPinned")
    text: str = Field(default="", alias="text")
    user: CommentUser = Field(default_factory=CommentUser, alias="commentUser")
    written_at: str = Field(default="", alias="writtenAt")
    updated_at: str = Field(default="", alias="updatedAt")
    created_at: str = Field(default="", alias="createdAt")
    deleted_at: str = Field(default="", alias="deletedAt")
    message_type: MessageType = Field(default=MessageType.THREAD_COMMENT, alias="messageType")
    published_by_user_id: int = Field(default=0, alias="publishedByUserId")

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_guid != ""


class Report(DomainModel):
    """Editorial summary that may group related comments."""
    omit_if_empty = frozenset({"comment_guid", "user", "guest"})

    id: int = Field(default=0, alias="id")
    broadcast_id: int = Field(default=0, alias="broadcastId")
    guid: str = Field(default="", alias="guid")
    comment_guid: str = Field(default="", alias="commentGuid")
    text: str = Field(default="", alias="text")
    comments: list[Comment] = Field(default_factory=list, alias="comments")
    is_new: bool = Field(default=False, alias="isNew")
    is_appended: bool = Field(default=False, alias="isAppended")
    is_pinned: bool = Field(default=False, alias="isPinned")
    is_prepost: bool = Field(default=False, alias="isPrepost")
    is_changed: bool = Field(default=False, alias="isChanged")
    user: User | None = Field(default=None, alias="user")
    guest: GuestProfile | None = Field(default=None, alias="guest")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    message_type: MessageType = Field(default=MessageType.REPORT, alias="messageType")


# ── Joined feed ─────────────────────────────────────────────────────────
class BroadcastContent(DomainModel):
    """All five aggregates for one broadcast, as joined by the caller."""

    article_id: str = Field(alias="articleId")
    info: BroadcastInfo = Field(default_factory=BroadcastInfo, alias="info")
    infotexts: list[Infotext] = Field(default_factory=list, alias="infotexts")
    sport_results: list[SportResult] = Field(default_factory=list, alias="sportResults")
    header_sortorder: list[HeaderSortorder] = Field(default_factory=list, alias="headerSortorder")
    comments: list[Comment] = Field(default_factory=list, alias="comments")
