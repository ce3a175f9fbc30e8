"""Invite lifecycle: create, verify by emailed code, complete registration."""

import logging
import secrets

from interntrack.config import settings
from interntrack.db.models.invite import InviteRow
from interntrack.db.models.user import UserRow
from interntrack.errors.exceptions import ConflictError, NotFoundError, ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import InviteStatus, NotificationType, Role, UserStatus
from interntrack.models.workflow import ActionResult, InviteCreate
from interntrack.repositories.invite_repo import InviteRepository
from interntrack.services.audit import record_audit
from interntrack.services.email.rendering import render_verification_email
from interntrack.services.id_generator import generate_id
from interntrack.services.workflows.base import WorkflowService

logger = logging.getLogger(__name__)


def generate_verification_code() -> str:
    """Six-digit numeric code in [100000, 999999]."""
    return str(secrets.randbelow(900000) + 100000)


def codes_match(expected: str | None, given: str) -> bool:
    """Constant-time comparison of ASCII codes; anything else never matches."""
    if not expected or not given.isascii():
        return False
    return secrets.compare_digest(expected.encode(), given.encode())


class InviteService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.invites = InviteRepository(session)

    async def create_invite(self, actor: Actor, payload: InviteCreate) -> InviteRow:
        email = str(payload.email).lower()
        existing = await self.users.get_by_email(email)
        if existing is not None and existing.status != UserStatus.PENDING:
            raise ConflictError(f"A user with email '{email}' already exists")
        if await self.invites.get_pending_by_email(email) is not None:
            raise ConflictError(f"A pending invite for '{email}' already exists")

        is_student = payload.role == Role.STUDENT
        user = await self.users.create(
            user_id=generate_id("usr_"),
            email=email,
            full_name=f"{payload.first_name} {payload.last_name}",
            role=payload.role.value,
            status=UserStatus.PENDING.value,
            index_number=payload.index_number if is_student else None,
            program_of_study=payload.program_of_study if is_student else None,
            faculty_id=payload.faculty_id,
            department_id=payload.department_id,
        )
        invite = await self.invites.create(
            invite_id=generate_id("inv_"),
            email=email,
            role=payload.role.value,
            first_name=payload.first_name,
            last_name=payload.last_name,
            index_number=payload.index_number if is_student else None,
            program_of_study=payload.program_of_study if is_student else None,
            faculty_id=payload.faculty_id,
            department_id=payload.department_id,
            status=InviteStatus.PENDING.value,
            verification_code=generate_verification_code(),
            pending_user_id=user.user_id,
            invited_by_id=actor.uid,
            invited_by_name=actor.name or None,
        )
        await record_audit(
            self.session,
            actor,
            action="Create Invite",
            details=f"Invited {payload.first_name} {payload.last_name} ({email}) as a {payload.role.value}.",
        )
        await self.session.commit()

        await self.notify(
            user.user_id,
            NotificationType.NEW_INVITE,
            title=f"You're invited to {settings.product_name}",
            message=(
                f"Hello {payload.first_name}, you have been invited to join {settings.product_name} as a "
                f"{payload.role.value}. Complete your registration to get started."
            ),
            href="/register",
        )
        return invite

    async def resend_verification(self, email: str) -> ActionResult:
        """Email the invite's verification code again. Not gated by settings."""
        invite = await self.invites.get_pending_by_email(email.lower())
        if invite is None:
            return ActionResult(success=False, message="No pending invite found for this email address.")

        if not invite.verification_code:
            await self.invites.update(invite, verification_code=generate_verification_code())
            await self.session.commit()

        try:
            await self.email_sender.send(render_verification_email(invite.email, invite.verification_code))
        except Exception as exc:
            logger.error("Failed to send verification email to %s: %s", invite.email, exc)
            return ActionResult(
                success=False,
                message="Could not send verification email. Please try again later.",
            )
        return ActionResult(success=True, message="Verification code sent.")

    async def verify_invite(self, email: str, code: str) -> InviteRow:
        invite = await self.invites.get_pending_by_email(email.lower())
        if invite is None:
            raise NotFoundError("Invite", email)
        if not codes_match(invite.verification_code, code):
            raise ValidationError("Invalid verification code")
        return invite

    async def complete_registration(self, invite_id: str, code: str) -> UserRow:
        invite = await self.invites.get(invite_id)
        if invite is None:
            raise NotFoundError("Invite", invite_id)
        if invite.status != InviteStatus.PENDING:
            raise ConflictError(f"Invite '{invite_id}' has already been accepted")
        if not codes_match(invite.verification_code, code):
            raise ValidationError("Invalid verification code")

        user = await self._require_user(invite.pending_user_id)
        await self.users.update(user, status=UserStatus.ACTIVE.value)
        await self.invites.update(invite, status=InviteStatus.ACCEPTED.value)
        await self.session.commit()
        logger.info("Invite %s accepted, user %s is now active", invite_id, user.user_id)
        return user

    async def list_pending(self) -> list[InviteRow]:
        return await self.invites.list_pending()
