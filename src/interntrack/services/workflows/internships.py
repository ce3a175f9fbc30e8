"""Internship terms and per-student internship profiles."""

from interntrack.db.models.internship import InternshipProfileRow, InternshipTermRow
from interntrack.db.models.user import UserRow
from interntrack.errors.exceptions import NotFoundError, ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role, TermStatus
from interntrack.models.workflow import InternshipProfileUpsert, InviteCreate, TermCreate
from interntrack.repositories.internship_repo import InternshipProfileRepository, InternshipTermRepository
from interntrack.services.audit import record_audit
from interntrack.services.id_generator import generate_id
from interntrack.services.workflows.base import WorkflowService
from interntrack.services.workflows.invites import InviteService


def split_name(full_name: str) -> tuple[str, str]:
    """First word, then the rest; a single name is used for both."""
    parts = full_name.split()
    if not parts:
        return full_name, full_name
    return parts[0], " ".join(parts[1:]) or parts[0]


class InternshipService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.terms = InternshipTermRepository(session)
        self.profiles = InternshipProfileRepository(session)

    # ── Terms ────────────────────────────────────────────────────────────

    async def create_term(self, payload: TermCreate) -> InternshipTermRow:
        if payload.end_date <= payload.start_date:
            raise ValidationError("End date must be after start date.")
        term = await self.terms.create(
            term_id=generate_id("term_"),
            name=payload.name,
            start_date=payload.start_date,
            end_date=payload.end_date,
            status=TermStatus.UPCOMING.value,
        )
        await self.session.commit()
        return term

    async def list_terms(self) -> list[InternshipTermRow]:
        return await self.terms.list_newest_first()

    async def update_term_status(self, term_id: str, status: TermStatus) -> InternshipTermRow:
        term = await self.terms.get(term_id)
        if term is None:
            raise NotFoundError("Internship term", term_id)
        await self.terms.update(term, status=TermStatus(status).value)
        await self.session.commit()
        return term


    # ── Profiles ─────────────────────────────────────────────────────────

    async def upsert_profile(self, actor: Actor, payload: InternshipProfileUpsert) -> InternshipProfileRow:
        """Create or update the student's internship profile.

        A supervisor given only by name and email is invited, and the profile
        points at the pending account the invite creates.
        """
        if actor.role == Role.ADMIN:
            if not payload.student_id:
                raise ValidationError("student_id is required")
            student_id = payload.student_id
        else:
            student_id = actor.uid
        student = await self._require_user(student_id)
        supervisor = await self._resolve_supervisor(actor, payload)

        profile = await self.profiles.get_by_student(student_id)
        # Updates only touch the fields the caller sent
        fields = payload.model_dump(
            exclude={"student_id", "supervisor_id", "supervisor_name", "supervisor_email"},
            exclude_unset=profile is not None,
        )
        if supervisor is not None:
            fields.update(
                supervisor_id=supervisor.user_id,
                supervisor_name=supervisor.full_name,
                supervisor_email=supervisor.email,
            )

        if profile is None:
            profile = await self.profiles.create(profile_id=generate_id("prof_"), student_id=student_id, **fields)
            action = "Setup Internship Profile"
            details = f"Student {student.full_name} created an internship profile for {payload.company_name}."
            if supervisor is not None:
                details += f" Supervisor: {supervisor.email}."
        else:
            await self.profiles.update(profile, **fields)
            action = "Update Internship Profile"
            details = f"Updated internship profile for {payload.company_name}."
        await record_audit(self.session, actor, action=action, details=details)
        await self.session.commit()
        return profile

    async def _resolve_supervisor(self, actor: Actor, payload: InternshipProfileUpsert) -> UserRow | None:
        if payload.supervisor_id:
            supervisor = await self._require_user(payload.supervisor_id)
        elif payload.supervisor_email:
            supervisor = await self.users.get_by_email(str(payload.supervisor_email).lower())
            if supervisor is None:
                return await self._invite_supervisor(actor, payload)
        else:
            return None
        if supervisor.role != Role.SUPERVISOR:
            raise ValidationError(f"User '{supervisor.user_id}' is not a supervisor")
        return supervisor

    async def _invite_supervisor(self, actor: Actor, payload: InternshipProfileUpsert) -> UserRow:
        first, last = split_name(payload.supervisor_name or str(payload.supervisor_email).split("@")[0])
        invites = InviteService(self.session, self.email_sender, self.dispatcher)
        invite = await invites.create_invite(
            actor,
            InviteCreate(email=payload.supervisor_email, first_name=first, last_name=last, role=Role.SUPERVISOR),
        )
        return await self._require_user(invite.pending_user_id)

    async def get_profile(self, student_id: str) -> InternshipProfileRow:
        profile = await self.profiles.get_by_student(student_id)
        if profile is None:
            raise NotFoundError("Internship profile", student_id)
        return profile
