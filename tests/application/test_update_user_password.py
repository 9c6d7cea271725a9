"""Tests for the password action and the adapters that invoke it."""
import io
from unittest.mock import Mock

import pytest

from patterns_demo.application.actions import (
    ActionResponse,
    CommandAdapter,
    ControllerAdapter,
    JobAdapter,
    run,
)
from patterns_demo.application.user import PasswordUpdatedResponse, UpdateUserPassword
from patterns_demo.domain.base.exceptions import ValidationError
from patterns_demo.domain.user import User, UserNotFoundError
from patterns_demo.infrastructure.jobs import JobQueue


@pytest.fixture
def action(user_store, hasher, logger):
    return UpdateUserPassword(user_store, hasher, logger=logger)


def request_data(**overrides):
    data = {
        "username": "alice",
        "current_password": "old-password",
        "password": "new-password",
        "password_confirmation": "new-password",
    }
    data.update(overrides)
    return data


class TestUpdateUserPassword:
    """Direct invocation."""

    def test_changes_stored_hash(self, action, user_store, hasher, alice):
        old_hash = user_store.get_by_name("alice").password_hash

        action.handle(user_store.get_by_name("alice"), "new-password")

        stored = user_store.get_by_name("alice")
        assert stored.password_hash != old_hash
        assert hasher.verify(stored.password_hash, "new-password")

    def test_never_stores_plaintext(self, action, user_store, alice):
        action.handle(user_store.get_by_name("alice"), "new-password")

        assert "new-password" not in user_store.get_by_name("alice").password_hash

    def test_mutates_user_in_place(self, action, user_store, alice):
        user = user_store.get_by_name("alice")

        action.handle(user, "new-password")

        assert user.password_hash == user_store.get_by_name("alice").password_hash

    def test_unknown_user_propagates_from_store(self, action):
        ghost = User(name="ghost", password_hash="original-hash")

        with pytest.raises(UserNotFoundError):
            action.handle(ghost, "new-password")

        assert ghost.password_hash == "original-hash"

    def test_rejected_save_leaves_user_untouched(self, hasher, logger, alice):
        users = Mock()
        users.save.side_effect = UserNotFoundError("alice")
        user = User(name="alice", password_hash=alice.password_hash)

        with pytest.raises(UserNotFoundError):
            UpdateUserPassword(users, hasher, logger=logger).handle(user, "new-password")

        assert user.password_hash == alice.password_hash
        (saved,), _ = users.save.call_args
        assert saved is not user
        assert hasher.verify(saved.password_hash, "new-password")

    def test_empty_password_rejected(self, action, user_store, alice):
        with pytest.raises(ValidationError) as exc:
            action.handle(user_store.get_by_name("alice"), "")
        assert exc.value.fields == ["password"]

    def test_run_helper(self, action, user_store, hasher, alice):
        run(action, user=user_store.get_by_name("alice"), new_password="via-run-1")

        assert hasher.verify(user_store.get_by_name("alice").password_hash, "via-run-1")


class TestControllerAdapter:
    """Request handler invocation."""

    def test_updates_password(self, action, user_store, hasher, alice):
        response = ControllerAdapter(action)(request_data())

        assert isinstance(response, PasswordUpdatedResponse)
        assert response.success is True
        assert response.username == "alice"
        assert hasher.verify(user_store.get_by_name("alice").password_hash, "new-password")

    def test_wrong_current_password(self, action, user_store, alice):
        action.handle = Mock(wraps=action.handle)

        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)(request_data(current_password="guess"))

        assert exc.value.fields == ["current_password"]
        action.handle.assert_not_called()

    def test_confirmation_mismatch(self, action, alice):
        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)(request_data(password_confirmation="different-password"))
        assert exc.value.fields == ["password"]

    def test_all_failures_reported_together(self, action, alice):
        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)(request_data(current_password="guess", password_confirmation="nope-nope"))
        assert sorted(exc.value.fields) == ["current_password", "password"]

    def test_wrong_current_password_with_short_new_password(self, action, user_store, alice):
        action.handle = Mock(wraps=action.handle)
        old_hash = user_store.get_by_name("alice").password_hash

        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)({"username": "alice", "current_password": "guess", "password": "short"})

        assert set(exc.value.fields) == {"current_password", "password"}
        assert exc.value.errors["current_password"] == [
            "The provided password does not match your current password."
        ]
        action.handle.assert_not_called()
        assert user_store.get_by_name("alice").password_hash == old_hash

    def test_short_password_and_confirmation_mismatch_share_field(self, action, alice):
        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)(request_data(password="short", password_confirmation="other"))

        assert exc.value.fields == ["password"]
        assert len(exc.value.errors["password"]) == 2

    def test_malformed_current_password_not_checked(self, action, alice):
        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)(request_data(current_password=12345))

        assert exc.value.fields == ["current_password"]
        assert exc.value.errors["current_password"] != [
            "The provided password does not match your current password."
        ]

    def test_request_shape_validated(self, action, alice):
        with pytest.raises(ValidationError) as exc:
            ControllerAdapter(action)({"username": "alice", "password": "short"})
        assert set(exc.value.fields) == {"current_password", "password"}

    def test_unknown_user(self, action):
        with pytest.raises(UserNotFoundError):
            ControllerAdapter(action)(request_data(username="ghost"))

    def test_default_response_for_plain_action(self):
        class Ping:
            def handle(self):
                return "pong"

            def request_arguments(self, request):
                return {}

        response = ControllerAdapter(Ping(), logger=Mock())({})

        assert isinstance(response, ActionResponse)
        assert response.action == "Ping"

    def test_action_without_request_hook(self):
        class Bare:
            def handle(self):
                pass

        with pytest.raises(TypeError):
            ControllerAdapter(Bare())


class TestCommandAdapter:
    """Command-line invocation."""

    def test_prints_status_line(self, action, user_store, hasher, alice):
        output = io.StringIO()

        exit_code = CommandAdapter(action, stdout=output)(["alice", "from-command"])

        assert exit_code == 0
        assert output.getvalue() == "Password updated for alice.\n"
        assert hasher.verify(user_store.get_by_name("alice").password_hash, "from-command")

    def test_parser_uses_signature(self, action):
        assert CommandAdapter(action).build_parser().prog == "user:update-password"

    def test_missing_arguments_exit(self, action):
        with pytest.raises(SystemExit):
            CommandAdapter(action, stdout=io.StringIO())(["alice"])

    def test_unknown_user(self, action):
        with pytest.raises(UserNotFoundError):
            CommandAdapter(action, stdout=io.StringIO())(["ghost", "whatever"])


class TestJobAdapter:
    """Deferred invocation."""

    def test_runs_when_queue_drained(self, action, user_store, hasher, alice, logger):
        queue = JobQueue(logger=logger)

        job = JobAdapter(action, queue).dispatch(user=user_store.get_by_name("alice"), new_password="queued-pw")

        assert job.name == "user:update-password"
        assert hasher.verify(user_store.get_by_name("alice").password_hash, "old-password")
        (result,) = queue.run_pending()
        assert result.succeeded
        assert hasher.verify(user_store.get_by_name("alice").password_hash, "queued-pw")
