"""
Profile edit flow for a dentist account.
"""

from typing import Any, Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...core.enums import EXPERTISE_OPTIONS, UserRole
from ...core.exceptions import BackendAPIError, ProfileAccessError, ProfileValidationError
from ...core.models import Dentist, Outcome, Session
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.profile")

MAX_BIO_LENGTH = 150


class ProfileForm(BaseModel):
    """Editable snapshot of a dentist profile."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = ""
    area_expertise: List[str] = Field(default_factory=list)
    year_experience: int = 0
    starting_price: float = 0.0
    picture: str = ""
    bio: str = ""

    @classmethod
    def from_dentist(cls, dentist: Dentist) -> "ProfileForm":
        return cls(
            name=dentist.name,
            area_expertise=list(dentist.area_expertise),
            year_experience=dentist.year_experience,
            starting_price=dentist.starting_price,
            picture=dentist.picture or "",
            bio=dentist.bio or "",
        )

    def update_payload(self) -> dict:
        """Fields sent to the general update endpoint."""
        return {
            "year_experience": self.year_experience,
            "StartingPrice": self.starting_price,
            "picture": self.picture,
            "bio": self.bio,
        }


class ProfileEditFlow(ScopedFlow):
    """
    Load, edit and save the session dentist's profile.

    Saving is split in two calls: expertise (only when it changed) goes to the
    expertise-replace endpoint, the other fields always go to the general
    update endpoint. Either failure is reported as one message.
    """

    NOT_LOGGED_IN = "You must be logged in to update your profile"
    NOT_AUTHORIZED = "You are not authorized to edit this profile"
    LOAD_FAILED = "Failed to load dentist profile"
    SAVED = "Profile updated successfully!"
    NO_CHANGES = "No changes to save"
    EDITABLE_FIELDS = ("year_experience", "starting_price", "picture")

    def __init__(
        self,
        client: BackendClient,
        session: Optional[Session],
        redirect_seconds: float = 2.0,
        redirect_path: str = "/dentist/profile",
        on_navigate: Optional[Callable[[str], Any]] = None,
        scope: Optional[EffectScope] = None,
    ):
        super().__init__(scope, name="profile")
        self.client = client
        self.session = session
        self.redirect_seconds = redirect_seconds
        self.redirect_path = redirect_path
        self.on_navigate = on_navigate

        self.dentist_id: Optional[str] = None
        self.form: Optional[ProfileForm] = None
        self.original: Optional[ProfileForm] = None
        self.loading = False
        self.saving = False
        self.error: Optional[str] = None
        self.success: Optional[str] = None

    async def _authorize(self) -> str:
        """Return the dentist id linked to the session user."""
        if not self.session:
            raise ProfileAccessError(self.NOT_LOGGED_IN)
        if self.session.user_id:
            lookup = self.client.get_user(self.session.token, self.session.user_id)
        else:
            lookup = self.client.get_current_user(self.session.token)
        result = await self._call(lookup)
        if result is None:
            raise ProfileAccessError(self.NOT_AUTHORIZED)
        user = result.unwrap()
        if user.role != UserRole.DENTIST or not user.dentist_id:
            raise ProfileAccessError(self.NOT_AUTHORIZED)
        return user.dentist_id

    async def load(self) -> bool:
        """Authorize the session and prefill the form; False on any failure."""
        self.loading = True
        try:
            dentist_id = await self._authorize()
            result = await self._call(self.client.get_dentist(dentist_id))
            if result is None:
                return False
            dentist = result.unwrap()
        except ProfileAccessError as e:
            self.error = str(e)
            return False
        except BackendAPIError as e:
            logger.error(f"profile: load failed: {e}")
            self.error = self.LOAD_FAILED
            return False
        finally:
            self.loading = False

        self.dentist_id = dentist_id
        self.form = ProfileForm.from_dentist(dentist)
        self.original = self.form.model_copy(deep=True)
        self.error = None
        return True

    def _require_form(self) -> ProfileForm:
        if self.form is None:
            raise ProfileValidationError("Profile is not loaded")
        return self.form

    # Expertise tags

    def available_expertise(self) -> List[str]:
        selected = self._require_form().area_expertise
        return [tag for tag in EXPERTISE_OPTIONS if tag not in selected]

    def add_expertise(self, tag: str) -> bool:
        form = self._require_form()
        if not tag or tag in form.area_expertise:
            return False
        form.area_expertise = form.area_expertise + [tag]
        return True

    def remove_expertise(self, tag: str) -> bool:
        form = self._require_form()
        if tag not in form.area_expertise:
            return False
        form.area_expertise = [t for t in form.area_expertise if t != tag]
        return True

    # Plain fields

    def set_field(self, name: str, value: Any) -> None:
        """Set years of experience, starting price or picture; name is read-only."""
        if name not in self.EDITABLE_FIELDS:
            raise ProfileValidationError(f"{name} cannot be edited")
        try:
            setattr(self._require_form(), name, value)
        except ValidationError:
            label = name.replace("_", " ")
            raise ProfileValidationError(f"Please enter a valid value for {label}")

    def set_bio(self, text: str) -> bool:
        """Input beyond the bio limit is rejected, not truncated."""
        if len(text) > MAX_BIO_LENGTH:
            return False
        self._require_form().bio = text
        return True

    @property
    def bio_remaining(self) -> int:
        return MAX_BIO_LENGTH - len(self._require_form().bio)

    @property
    def can_save(self) -> bool:
        """True when any field differs from the loaded snapshot."""
        if self.form is None or self.original is None or self.saving:
            return False
        return self.form != self.original

    def validate(self) -> Optional[str]:
        form = self._require_form()
        if not form.area_expertise:
            return "Please select at least one area of expertise"
        if form.year_experience < 0:
            return "Years of experience cannot be negative"
        if form.starting_price < 0:
            return "Starting price cannot be negative"
        return None

    def _navigate(self) -> None:
        logger.info(f"profile: navigating to {self.redirect_path}")
        if self.on_navigate is not None:
            self.on_navigate(self.redirect_path)

    async def _save(self, form: ProfileForm) -> Optional[bool]:
        if form.area_expertise != self.original.area_expertise:
            logger.info(f"profile: replacing expertise of {self.dentist_id}")
            result = await self._call(
                self.client.replace_dentist_expertise(
                    self.dentist_id, self.session.token, form.area_expertise
                )
            )
            if result is None:
                return None
            result.unwrap()

        result = await self._call(
            self.client.update_dentist(self.dentist_id, self.session.token, form.update_payload())
        )
        if result is None:
            return None
        result.unwrap()
        return True

    async def submit(self) -> Outcome:
        """Save the changed profile."""
        if self.form is None or not self.session or not self.dentist_id:
            return Outcome(success=False, message=self.NOT_LOGGED_IN)
        if not self.can_save:
            return Outcome(success=False, message=self.NO_CHANGES)

        problem = self.validate()
        if problem:
            self.error = problem
            return Outcome(success=False, message=problem)

        self.saving = True
        self.error = None
        form = self.form.model_copy(deep=True)
        try:
            saved = await self._save(form)
        except BackendAPIError as e:
            logger.error(f"profile: update of {self.dentist_id} failed: {e}")
            self.error = f"Update failed: {e}"
            return Outcome(success=False, message=self.error)
        finally:
            self.saving = False

        if saved is None:
            return Outcome(success=False, message="Update cancelled")

        self.original = form
        self.success = self.SAVED
        self.scope.later(self.redirect_seconds, self._navigate)
        return Outcome(success=True, message=self.SAVED)
