"""
Admin user management: list accounts and change roles.
"""

from typing import List, Optional, Union

from ...core.enums import UserRole
from ...core.models import Outcome, Session, User
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.users")

ROLE_OPTIONS: List[UserRole] = [UserRole.USER, UserRole.ADMIN, UserRole.DENTIST, UserRole.BANNED]


class UserDirectory(ScopedFlow):
    """All accounts, optionally narrowed to one role."""

    LOAD_FAILED = "Failed to load users"

    def __init__(self, client: BackendClient, session: Session, scope: Optional[EffectScope] = None):
        super().__init__(scope, name="users")
        self.client = client
        self.session = session
        self.users: List[User] = []
        self.error: Optional[str] = None

    async def load(self) -> bool:
        result = await self._call(self.client.get_users(self.session.token))
        if result is None:
            return False
        if not result.is_ok:
            self.error = self.LOAD_FAILED
            return False
        self.users = result.value
        self.error = None
        return True

    def with_role(self, role: Union[UserRole, str, None]) -> List[User]:
        if not role:
            return list(self.users)
        wanted = UserRole.from_string(role)
        return [u for u in self.users if u.role == wanted]


class UserRoleEditor(ScopedFlow):
    """Role selector for one user."""

    LOAD_FAILED = "Failed to load user data"
    ROLE_REQUIRED = "Please select a role."
    LOGIN_REQUIRED = "You must be logged in to edit user."
    SAVED = "User Edited!"
    SAVE_FAILED = "Failed to edit user."

    def __init__(
        self,
        client: BackendClient,
        session: Optional[Session],
        user_id: str,
        scope: Optional[EffectScope] = None,
    ):
        super().__init__(scope, name="role-editor")
        self.client = client
        self.session = session
        self.user_id = user_id
        self.user: Optional[User] = None
        self.role: Optional[UserRole] = None
        self.error: Optional[str] = None

    async def load(self) -> bool:
        if not self.session:
            self.error = self.LOGIN_REQUIRED
            return False
        result = await self._call(self.client.get_user(self.session.token, self.user_id))
        if result is None:
            return False
        if not result.is_ok:
            self.error = self.LOAD_FAILED
            return False
        self.user = result.value
        self.role = self.user.role
        return True

    def set_role(self, role: Union[UserRole, str, None]) -> bool:
        """Select a role; unknown values clear the selection."""
        if isinstance(role, UserRole):
            self.role = role
            self.error = None
            return True
        try:
            self.role = UserRole((role or "").strip().lower())
        except ValueError:
            logger.warning(f"users: rejected role {role!r} for {self.user_id}")
            self.role = None
            self.error = self.ROLE_REQUIRED
            return False
        self.error = None
        return True

    async def save(self) -> Outcome:
        if self.role is None:
            return Outcome(success=False, message=self.ROLE_REQUIRED)
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)

        result = await self._call(self.client.update_user_role(self.session.token, self.user_id, self.role))
        if result is None or not result.is_ok:
            return Outcome(success=False, message=self.SAVE_FAILED)
        logger.info(f"users: role of {self.user_id} set to {self.role.value}")
        if self.user is not None:
            self.user = self.user.model_copy(update={"role": self.role})
        return Outcome(success=True, message=self.SAVED, data=result.value)
