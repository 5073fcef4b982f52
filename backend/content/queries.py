"""
Select statements for the content assemblers.

One statement per aggregate, each scoped to a broadcast's public article id.
Column labels match the field names of the row models in content.rows.
Ordering is done here, in storage; the assemblers never re-sort.
"""
from __future__ import annotations

from sqlalchemy import Select, select

from shared.models.enums import CommentStatus
from shared.models.orm import (
    AliasORM,
    BroadcastORM,
    CommentORM,
    CommentUserORM,
    CustomerORM,
    CustomerSettingsORM,
    CustomerSignupSettingsORM,
    HeaderSortorderORM,
    InfotextORM,
    LanguageORM,
    ReportCommentORM,
    ReportORM,
    SportResultORM,
    UserORM,
)


def broadcast_info_query(article_id: str) -> Select:
    b = BroadcastORM
    return (
        select(
            b.id.label("id"),
            b.subject.label("subject"),
            b.description.label("description"),
            b.start_time.label("start_time"),
            LanguageORM.short_name.label("language_code"),
            b.enable_carousel.label("enable_carousel"),
            b.auto_collapse.label("auto_collapse"),
            b.default_order.label("default_order"),
            b.end_time.label("end_time"),
            b.deleted_at.label("deleted_at"),
            b.show_description.label("show_description"),
            b.has_sports_panel.label("has_sports_panel"),
            b.autoscroll.label("autoscroll"),
            b.has_comments.label("has_comments"),
            b.allow_ifr_comments.label("allow_ifr_comments"),
            b.allow_anon_comments.label("allow_anon_comments"),
            b.anon_comment_require_email.label("anon_comment_require_email"),
            b.anon_comment_accept_terms.label("anon_comment_accept_terms"),
            b.user_terms_version.label("user_terms_version"),
            b.customer_id.label("customer_id"),
            b.auto_archive.label("auto_archive"),
            CustomerORM.short_name.label("customer_shortname"),
            CustomerSettingsORM.archive_after_days.label("archive_after_days"),
            b.embed_js.label("embed_js"),
            b.embed_html.label("embed_html"),
            b.expanded_mode.label("expanded_mode"),
            b.posts_to_show.label("posts_to_show"),
            b.syndicate.label("syndicate"),
        )
        .join(CustomerSignupSettingsORM, CustomerSignupSettingsORM.customer_id == b.customer_id)
        .join(LanguageORM, CustomerSignupSettingsORM.language_id == LanguageORM.id)
        .join(CustomerORM, CustomerORM.id == b.customer_id)
        .join(CustomerSettingsORM, CustomerSettingsORM.customer_id == b.customer_id)
        .where(b.article_id == article_id)
        .limit(1)
    )


def infotexts_query(article_id: str) -> Select:
    i = InfotextORM
    return (
        select(
            i.text.label("text"),
            i.created_at.label("created_at"),
            i.updated_at.label("updated_at"),
            i.guid.label("guid"),
            i.user_id.label("user_id"),
            UserORM.first_name.label("first_name"),
            UserORM.last_name.label("last_name"),
            UserORM.profile_picture.label("profile_pic"),
            UserORM.slug.label("slug"),
        )
        .select_from(BroadcastORM)
        .join(i, BroadcastORM.id == i.broadcast_id)
        .join(UserORM, UserORM.id == i.user_id)
        .where(BroadcastORM.article_id == article_id, i.deleted_at.is_(None))
        .order_by(i.created_at.asc(), i.id.asc())
    )


def sport_results_query(article_id: str) -> Select:
    s = SportResultORM
    return (
        select(
            s.team_one_name.label("team_one_name"),
            s.team_two_name.label("team_two_name"),
            s.team_one_logo.label("team_one_logo"),
            s.team_two_logo.label("team_two_logo"),
            s.team_one_result.label("team_one_result"),
            s.team_two_result.label("team_two_result"),
            s.article_id.label("article_id"),
            s.guid.label("guid"),
            s.created_at.label("created_at"),
        )
        .where(s.article_id == article_id, s.deleted_at.is_(None))
        .order_by(s.created_at.asc(), s.id.asc())
    )


def header_sortorder_query(article_id: str) -> Select:
    h = HeaderSortorderORM
    return (
        select(h.guid.label("guid"), h.sortorder.label("sortorder"))
        .join(BroadcastORM, BroadcastORM.id == h.broadcast_id)
        .where(BroadcastORM.article_id == article_id)
        .order_by(h.sortorder.asc(), h.id.asc())
    )


def published_comments_query(article_id: str) -> Select:
    c = CommentORM
    # NULL when either name part is missing, i.e. no registered identity.
    user_name = UserORM.first_name + " " + UserORM.last_name
    return (
        select(
            c.id.label("id"),
            BroadcastORM.article_id.label("article_id"),
            c.comment_guid.label("comment_guid"),
            ReportORM.guid.label("report_guid"),
            c.broadcast_id.label("broadcast_id"),
            c.text.label("text"),
            c.status.label("status"),
            c.parent_comment_guid.label("parent_comment_guid"),
            c.is_pinned.label("is_pinned"),
            c.published_by_user_id.label("published_by_user_id"),
            c.created_at.label("created_at"),
            c.updated_at.label("updated_at"),
            c.written_at.label("written_at"),
            CommentUserORM.ifr_user_id.label("ifr_user_id"),
            user_name.label("user_name"),
            UserORM.email.label("email"),
            UserORM.profile_picture.label("profile_pic"),
            UserORM.image_rotation.label("img_rotation"),
            AliasORM.name.label("alias"),
            AliasORM.profile_picture.label("alias_profile_pic"),
            AliasORM.image_rotation.label("alias_img_rotation"),
            CommentUserORM.user_name.label("guest_user_name"),
            CommentUserORM.email.label("guest_email"),
        )
        .join(BroadcastORM, c.broadcast_id == BroadcastORM.id)
        .outerjoin(CommentUserORM, CommentUserORM.id == c.comment_user_id)
        .outerjoin(UserORM, CommentUserORM.ifr_user_id == UserORM.id)
        .outerjoin(AliasORM, UserORM.alias_id == AliasORM.id)
        .outerjoin(ReportCommentORM, c.id == ReportCommentORM.comment_id)
        .outerjoin(ReportORM, ReportORM.id == ReportCommentORM.report_id)
        .where(
            BroadcastORM.article_id == article_id,
            c.status == CommentStatus.PUBLISHED.value,
            c.deleted_at.is_(None),
        )
        .order_by(c.created_at.asc(), c.id.asc())
    )
