"""Wire-format tests for the domain models: aliases and omit-if-empty rules."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from shared.models.domain import (
    BroadcastInfo,
    Comment,
    CommentUser,
    GuestProfile,
    HeaderSortorder,
    Infotext,
    Report,
    SportResult,
    User,
)
from shared.models.enums import IdentitySource, MessageType


class TestInfotextWire:

    def test_empty_display_fields_are_omitted(self) -> None:
        wire = Infotext().to_wire()
        assert "text" not in wire
        assert "guid" not in wire
        assert "createdAt" not in wire
        assert wire["messageType"] == "info"
        assert wire["user"]["userId"] == 0

    def test_present_fields_use_client_names(self) -> None:
        wire = Infotext(text="Kickoff", guid="g1", user=User(id=5, slug="eva")).to_wire()
        assert wire["text"] == "Kickoff"
        assert wire["user"]["userSlug"] == "eva"
        assert "userProfilePic" not in wire["user"]


class TestCommentWire:

    def test_comment_user_token_and_source(self) -> None:
        user = CommentUser(display_name="Hockeyfan", identity_source=IdentitySource.ALIAS)
        wire = user.to_wire()
        assert "token" not in wire
        assert "identitySource" not in wire
        assert "identity_source" not in wire
        assert wire["displayName"] == "Hockeyfan"
        assert wire["isIfragasattUser"] is False

    def test_comment_keeps_empty_thread_fields(self) -> None:
        wire = Comment(comment_guid="c1", text="Hej").to_wire()
        assert wire["guid"] == "c1"
        assert wire["parentCommentGuid"] == ""
        assert wire["reportGuid"] == ""
        assert wire["messageType"] == "threadComment"
        assert "updatedAt" not in wire
        assert "deletedAt" not in wire
        assert "commentUser" in wire

    def test_python_names_without_alias(self) -> None:
        data = Comment(comment_guid="c1", updated_at="x").model_dump()
        assert data["comment_guid"] == "c1"
        assert data["updated_at"] == "x"
        assert "created_at" not in data


class TestSportResult:

    def test_external_projection_renders_results_as_text(self) -> None:
        result = SportResult(
            team_one_name="AIK", team_two_name="DIF",
            team_one_result=2, team_two_result=0, guid="s2",
        )
        wire = result.to_external().to_wire()
        assert wire["teamOneResult"] == "2"
        assert wire["teamTwoResult"] == "0"
        assert "teamOneLogo" not in wire
        assert "articleId" not in wire

    def test_internal_wire_keeps_zero_scores(self) -> None:
        wire = SportResult().to_wire()
        assert wire["teamOneResult"] == 0
        assert wire["messageType"] == "sportResult"


def test_header_sortorder_wire() -> None:
    assert HeaderSortorder(guid="g", index=4).to_wire() == {
        "itemGuid": "g",
        "index": 4,
        "messageType": "headerSortorder",
    }


def test_report_omits_absent_author() -> None:
    wire = Report(guid="r1", text="Summary").to_wire()
    assert "user" not in wire
    assert "guest" not in wire
    assert "commentGuid" not in wire
    assert wire["comments"] == []
    assert wire["messageType"] == MessageType.REPORT.value


def test_report_with_guest() -> None:
    wire = Report(guest=GuestProfile(display_name="Kalle")).to_wire()
    assert wire["guest"] == {"displayName": "Kalle", "profilePicture": "", "imageRotation": 0}


def test_entities_are_frozen() -> None:
    info = BroadcastInfo(subject="Derby")
    with pytest.raises(ValidationError):
        info.subject = "changed"


def test_alias_input_accepted() -> None:
    info = BroadcastInfo.model_validate({"subject": "Derby", "embedJS": "<script/>"})
    assert info.embed_js == "<script/>"
