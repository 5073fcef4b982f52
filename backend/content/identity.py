"""
Comment author identity resolution.

A comment author is backed by exactly one of three identity records: the
registered platform user, that user's configured alias, or the guest name and
email given when the comment was written. Priority is user > alias > guest.
An author with none of them resolves to an empty, displayable identity.
"""
from __future__ import annotations

from content.coalesce import coalesce_int, coalesce_str
from content.rows import CommentAuthorColumns
from shared.models.domain import CommentUser
from shared.models.enums import IdentitySource


def identity_source(columns: CommentAuthorColumns) -> IdentitySource:
    """Pick the identity record that supplies the displayed name and picture."""
    if columns.user_name is not None:
        return IdentitySource.USER
    if columns.alias is not None:
        return IdentitySource.ALIAS
    if columns.guest_user_name is not None or columns.guest_email is not None:
        return IdentitySource.GUEST
    return IdentitySource.NONE


def resolve_comment_user(columns: CommentAuthorColumns) -> CommentUser:
    source = identity_source(columns)

    if source is IdentitySource.USER:
        display_name = coalesce_str(columns.user_name)
        display_pic = coalesce_str(columns.profile_pic)
        display_rotation = coalesce_int(columns.img_rotation)
    elif source is IdentitySource.ALIAS:
        display_name = coalesce_str(columns.alias)
        display_pic = coalesce_str(columns.alias_profile_pic)
        display_rotation = coalesce_int(columns.alias_img_rotation)
    elif source is IdentitySource.GUEST:
        display_name = coalesce_str(columns.guest_user_name)
        display_pic = ""
        display_rotation = 0
    else:
        display_name = ""
        display_pic = ""
        display_rotation = 0

    # Email is the platform email even when an alias is displayed.
    return CommentUser(
        ifr_user_id=coalesce_int(columns.ifr_user_id),
        user_name=coalesce_str(columns.user_name),
        email=coalesce_str(columns.email),
        profile_pic=coalesce_str(columns.profile_pic),
        img_rotation=coalesce_int(columns.img_rotation),
        alias=coalesce_str(columns.alias),
        alias_profile_pic=coalesce_str(columns.alias_profile_pic),
        alias_img_rotation=coalesce_int(columns.alias_img_rotation),
        is_ifragasatt_user=source.is_platform_user,
        guest_user_name=coalesce_str(columns.guest_user_name),
        guest_email=coalesce_str(columns.guest_email),
        display_name=display_name,
        display_profile_pic=display_pic,
        display_img_rotation=display_rotation,
        identity_source=source,
    )
