"""
Tests for admin user management.
"""

import pytest

from dentist_booking.core.enums import ErrorCode, UserRole
from dentist_booking.core.models import Err, Ok, User
from dentist_booking.services.user import UserDirectory, UserRoleEditor


def user(uid, role):
    return User.model_validate({"_id": uid, "name": uid.title(), "role": role})


class TestUserDirectory:
    @pytest.mark.asyncio
    async def test_filter_by_role(self, mock_backend, session):
        mock_backend.get_users.return_value = Ok(
            value=[user("ann", "user"), user("bob", "dentist"), user("cy", "banned")]
        )
        directory = UserDirectory(mock_backend, session)

        assert await directory.load() is True

        assert [u.id for u in directory.with_role("dentist")] == ["bob"]
        assert len(directory.with_role(None)) == 3

    @pytest.mark.asyncio
    async def test_load_failure(self, mock_backend, session):
        mock_backend.get_users.return_value = Err(code=ErrorCode.FORBIDDEN, message="admins only")
        directory = UserDirectory(mock_backend, session)

        assert await directory.load() is False
        assert directory.error == "Failed to load users"


class TestUserRoleEditor:
    @pytest.mark.asyncio
    async def test_load_and_save(self, mock_backend, session):
        mock_backend.get_user.return_value = Ok(value=user("u7", "user"))
        editor = UserRoleEditor(mock_backend, session, "u7")

        assert await editor.load() is True
        assert editor.role == UserRole.USER

        editor.set_role("Banned")
        outcome = await editor.save()

        assert outcome.message == "User Edited!"
        assert editor.user.role == UserRole.BANNED
        mock_backend.update_user_role.assert_awaited_once_with("test-token", "u7", UserRole.BANNED)

    @pytest.mark.asyncio
    async def test_role_required(self, mock_backend, session):
        editor = UserRoleEditor(mock_backend, session, "u7")
        editor.set_role("")

        outcome = await editor.save()

        assert outcome.message == "Please select a role."
        mock_backend.update_user_role.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_role_is_rejected(self, mock_backend, session):
        editor = UserRoleEditor(mock_backend, session, "u7")
        editor.set_role(UserRole.ADMIN)

        assert editor.set_role("superuser") is False
        assert editor.role is None
        assert editor.error == "Please select a role."

        outcome = await editor.save()

        assert outcome.message == "Please select a role."
        mock_backend.update_user_role.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_not_logged_in(self, mock_backend):
        editor = UserRoleEditor(mock_backend, None, "u7")

        assert await editor.load() is False
        assert editor.error == "You must be logged in to edit user."

    @pytest.mark.asyncio
    async def test_save_failure(self, mock_backend, session):
        mock_backend.update_user_role.return_value = Err(code=ErrorCode.SERVER_ERROR, message="x")
        editor = UserRoleEditor(mock_backend, session, "u7")
        editor.set_role(UserRole.ADMIN)

        assert (await editor.save()).message == "Failed to edit user."

    @pytest.mark.asyncio
    async def test_load_failure(self, mock_backend, session):
        mock_backend.get_user.return_value = Err(code=ErrorCode.NOT_FOUND, message="x")
        editor = UserRoleEditor(mock_backend, session, "u7")

        assert await editor.load() is False
        assert editor.error == "Failed to load user data"
