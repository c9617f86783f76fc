import logging
import uuid

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from xconfess.api.models import ActingUser, ReactionDetails
from xconfess.database.core.reaction_service import (
    ConfessionNotFoundError,
    ReactionService,
    build_content_preview,
)
from xconfess.database.daos.reaction_dao import ReactionDao

SERVICE_LOGGER = "xconfess.database.core.reaction_service"


class UnavailableReactionDao(ReactionDao):
    def save(self, session, reaction):
        raise OperationalError("INSERT INTO reaction", {}, Exception("database is locked"))


def make_service(notifier, dao=None):
    return ReactionService(reaction_dao=dao or ReactionDao(), notifier=notifier)


def test_anonymous_reaction_notifies_author(make_user, make_confession, stored_reactions, notifier):
    alice = make_user("alice", "u1@example.com")
    c1 = make_confession("I never returned the library book.", author=alice)

    result = make_service(notifier).create_reaction(ReactionDetails(confession_id=str(c1.id), emoji="❤️"))

    assert result.emoji == "❤️"
    assert result.confession_id == c1.id
    assert result.user_id is None
    assert result.created_at is not None
    assert stored_reactions() == [(result.id, "❤️", c1.id, None)]
    assert notifier.calls == [
        ("u1@example.com", "alice", "Anonymous", "I never returned the library book.", "❤️")
    ]


def test_authenticated_reaction_on_authorless_confession(make_user, make_confession, stored_reactions, notifier):
    bob = make_user("bob", "bob@example.com")
    c2 = make_confession("Nobody knows who wrote this.")

    result = make_service(notifier).create_reaction(
        ReactionDetails(confession_id=str(c2.id), emoji="😂"),
        reactor=ActingUser(id=bob.id, username=bob.username),
    )

    assert result.user_id == bob.id
    assert stored_reactions() == [(result.id, "😂", c2.id, bob.id)]
    assert notifier.calls == []


def test_authenticated_reactor_name_is_forwarded(make_user, make_confession, notifier):
    alice = make_user("alice", "u1@example.com")
    bob = make_user("bob")
    confession = make_confession("short", author=alice)

    make_service(notifier).create_reaction(
        ReactionDetails(confession_id=str(confession.id), emoji="👍"),
        reactor=ActingUser(id=bob.id, username="bob"),
    )

    assert notifier.calls == [("u1@example.com", "alice", "bob", "short", "👍")]


@pytest.mark.parametrize("confession_id", ["does-not-exist", str(uuid.uuid4())])
def test_unknown_confession_is_rejected(confession_id, stored_reactions, notifier):
    with pytest.raises(ConfessionNotFoundError):
        make_service(notifier).create_reaction(ReactionDetails(confession_id=confession_id, emoji="❤️"))

    assert stored_reactions() == []
    assert notifier.calls == []


def test_identical_requests_create_distinct_reactions(make_user, make_confession, stored_reactions, notifier):
    alice = make_user("alice", "u1@example.com")
    confession = make_confession("twice", author=alice)
    service = make_service(notifier)
    data = ReactionDetails(confession_id=str(confession.id), emoji="🔥")

    first = service.create_reaction(data)
    second = service.create_reaction(data)

    assert first.id != second.id
    assert len(stored_reactions()) == 2
    assert len(notifier.calls) == 2


@pytest.mark.parametrize("email", [None, "", "   "])
def test_author_without_email_is_not_notified(email, make_user, make_confession, stored_reactions, notifier):
    author = make_user("quiet", email)
    confession = make_confession("no inbox", author=author)

    result = make_service(notifier).create_reaction(ReactionDetails(confession_id=str(confession.id), emoji="😮"))

    assert stored_reactions() == [(result.id, "😮", confession.id, None)]
    assert notifier.calls == []


def test_notification_failure_is_logged_and_absorbed(make_user, make_confession, stored_reactions, failing_notifier, caplog):
    alice = make_user("alice", "u1@example.com")
    confession = make_confession("still counts", author=alice)

    with caplog.at_level(logging.ERROR, logger=SERVICE_LOGGER):
        result = make_service(failing_notifier).create_reaction(
            ReactionDetails(confession_id=str(confession.id), emoji="❤️")
        )

    assert failing_notifier.attempts == 1
    assert stored_reactions() == [(result.id, "❤️", confession.id, None)]
    records = [r for r in caplog.records if r.name == SERVICE_LOGGER and r.levelno == logging.ERROR]
    assert len(records) == 1
    assert records[0].recipient == "u1@example.com"
    assert records[0].reaction_id == str(result.id)
    assert "connection refused" in records[0].getMessage()
    assert records[0].exc_info is not None


def test_persistence_failure_propagates_without_notification(make_user, make_confession, stored_reactions, notifier):
    alice = make_user("alice", "u1@example.com")
    confession = make_confession("unlucky", author=alice)

    with pytest.raises(OperationalError):
        make_service(notifier, dao=UnavailableReactionDao()).create_reaction(
            ReactionDetails(confession_id=str(confession.id), emoji="❤️")
        )

    assert stored_reactions() == []
    assert notifier.calls == []


def test_reactor_that_no_longer_exists_fails_persistence(make_user, make_confession, stored_reactions, notifier):
    alice = make_user("alice", "u1@example.com")
    confession = make_confession("ghost", author=alice)
    ghost = ActingUser(id=uuid.uuid4(), username="ghost")

    with pytest.raises(IntegrityError):
        make_service(notifier).create_reaction(
            ReactionDetails(confession_id=str(confession.id), emoji="👻"), reactor=ghost
        )

    assert stored_reactions() == []
    assert notifier.calls == []


def test_long_confession_is_previewed(make_user, make_confession, notifier):
    alice = make_user("alice", "u1@example.com")
    message = "x" * 150
    confession = make_confession(message, author=alice)

    make_service(notifier).create_reaction(ReactionDetails(confession_id=str(confession.id), emoji="❤️"))

    preview = notifier.calls[0][3]
    assert preview == "x" * 100 + "..."


def test_scheduled_notification_runs_after_commit(make_user, make_confession, stored_reactions, notifier):
    alice = make_user("alice", "u1@example.com")
    confession = make_confession("later", author=alice)
    scheduled = []

    result = make_service(notifier).create_reaction(
        ReactionDetails(confession_id=str(confession.id), emoji="❤️"),
        schedule=lambda fn, *args: scheduled.append((fn, args)),
    )

    assert notifier.calls == []
    assert stored_reactions() == [(result.id, "❤️", confession.id, None)]
    assert len(scheduled) == 1

    fn, args = scheduled[0]
    fn(*args)
    assert notifier.calls == [("u1@example.com", "alice", "Anonymous", "later", "❤️")]


def test_scheduled_notification_failure_does_not_raise(make_user, make_confession, failing_notifier):
    alice = make_user("alice", "u1@example.com")
    confession = make_confession("later", author=alice)
    scheduled = []

    make_service(failing_notifier).create_reaction(
        ReactionDetails(confession_id=str(confession.id), emoji="❤️"),
        schedule=lambda fn, *args: scheduled.append((fn, args)),
    )
    fn, args = scheduled[0]
    fn(*args)

    assert failing_notifier.attempts == 1


def test_no_notification_is_scheduled_without_target(make_confession, notifier):
    confession = make_confession("anonymous")
    scheduled = []

    make_service(notifier).create_reaction(
        ReactionDetails(confession_id=str(confession.id), emoji="❤️"),
        schedule=lambda fn, *args: scheduled.append((fn, args)),
    )

    assert scheduled == []


@pytest.mark.parametrize(
    "content, expected",
    [
        ("", ""),
        (None, ""),
        ("a" * 100, "a" * 100),
        ("a" * 101, "a" * 100 + "..."),
    ],
)
def test_build_content_preview(content, expected):
    assert build_content_preview(content) == expected
