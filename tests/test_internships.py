"""Tests for terms, internship profiles and evaluations."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import select

from conftest import actor_for
from interntrack.db.models.audit_log import AuditLogRow
from interntrack.db.models.invite import InviteRow
from interntrack.db.models.notification import NotificationRow
from interntrack.errors.exceptions import NotFoundError, ValidationError
from interntrack.models.enums import NotificationType, Role, TermStatus, UserStatus
from interntrack.models.workflow import EvaluationCreate, InternshipProfileUpsert, TermCreate
from interntrack.services.workflows.evaluations import EvaluationService
from interntrack.services.workflows.internships import InternshipService, split_name

JUNE = datetime(2024, 6, 1, tzinfo=timezone.utc)
AUGUST = datetime(2024, 8, 31, tzinfo=timezone.utc)

METRICS = {
    "technicalSkills": 4,
    "problemSolving": 4,
    "communication": 5,
    "teamwork": 3,
    "proactiveness": 4,
    "overall": 4,
}


async def _audits(session, action: str):
    stmt = select(AuditLogRow).where(AuditLogRow.action == action)
    return list((await session.execute(stmt)).scalars().all())


def test_split_name():
    assert split_name("Yaw Kwame Asante") == ("Yaw", "Kwame Asante")
    assert split_name("Yaw") == ("Yaw", "Yaw")


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


class TestTerms:

    @pytest.mark.asyncio
    async def test_create_and_activate(self, db_session, email_sender):
        service = InternshipService(db_session, email_sender)
        term = await service.create_term(TermCreate(name="Summer 2024", start_date=JUNE, end_date=AUGUST))

        assert term.term_id.startswith("term_")
        assert term.status == TermStatus.UPCOMING
        await service.update_term_status(term.term_id, TermStatus.ACTIVE)
        assert [t.status for t in await service.list_terms()] == [TermStatus.ACTIVE]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("end", [JUNE, datetime(2024, 5, 1, tzinfo=timezone.utc)])
    async def test_end_must_follow_start(self, db_session, email_sender, end):
        service = InternshipService(db_session, email_sender)
        with pytest.raises(ValidationError):
            await service.create_term(TermCreate(name="Broken", start_date=JUNE, end_date=end))
        assert await service.list_terms() == []

    @pytest.mark.asyncio
    async def test_unknown_term(self, db_session, email_sender):
        with pytest.raises(NotFoundError):
            await InternshipService(db_session, email_sender).update_term_status("term_nope", TermStatus.ARCHIVED)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


class TestInternshipProfile:

    @pytest.mark.asyncio
    async def test_setup_with_existing_supervisor(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT, full_name="Kofi Boateng")
        supervisor = await make_user(Role.SUPERVISOR, full_name="Mr. Asante")

        profile = await InternshipService(db_session, email_sender).upsert_profile(
            actor_for(student),
            InternshipProfileUpsert(company_name="Acme Ltd", supervisor_id=supervisor.user_id, start_date=JUNE),
        )

        assert profile.student_id == student.user_id
        assert profile.supervisor_email == supervisor.email
        assert profile.supervisor_name == "Mr. Asante"
        [audit] = await _audits(db_session, "Setup Internship Profile")
        assert audit.details == (
            f"Student Kofi Boateng created an internship profile for Acme Ltd. Supervisor: {supervisor.email}."
        )
        assert await _audits(db_session, "Create Invite") == []

    @pytest.mark.asyncio
    async def test_unknown_supervisor_email_is_invited(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)

        profile = await InternshipService(db_session, email_sender).upsert_profile(
            actor_for(student),
            InternshipProfileUpsert(
                company_name="Acme Ltd",
                supervisor_name="Yaw Asante",
                supervisor_email="Yaw.Asante@Example.com",
            ),
        )

        invite = (await db_session.execute(select(InviteRow))).scalars().one()
        assert invite.email == "yaw.asante@example.com"
        assert invite.role == Role.SUPERVISOR
        assert (invite.first_name, invite.last_name) == ("Yaw", "Asante")
        assert invite.invited_by_id == student.user_id
        assert profile.supervisor_id == invite.pending_user_id

        supervisor = await InternshipService(db_session, email_sender).users.get(invite.pending_user_id)
        assert supervisor.status == UserStatus.PENDING
        note = (await db_session.execute(select(NotificationRow))).scalars().one()
        assert note.type == NotificationType.NEW_INVITE
        assert note.user_id == supervisor.user_id
        assert email_sender.sent[0].to == "yaw.asante@example.com"
        assert len(await _audits(db_session, "Setup Internship Profile")) == 1

    @pytest.mark.asyncio
    async def test_supervisor_must_be_a_supervisor(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)
        lecturer = await make_user(Role.LECTURER)
        service = InternshipService(db_session, email_sender)

        with pytest.raises(ValidationError):
            await service.upsert_profile(
                actor_for(student),
                InternshipProfileUpsert(company_name="Acme Ltd", supervisor_email=lecturer.email),
            )
        with pytest.raises(NotFoundError):
            await service.get_profile(student.user_id)

    @pytest.mark.asyncio
    async def test_update_only_touches_sent_fields(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)
        supervisor = await make_user(Role.SUPERVISOR)
        service = InternshipService(db_session, email_sender)
        first = await service.upsert_profile(
            actor_for(student),
            InternshipProfileUpsert(
                company_name="Acme Ltd",
                company_address="12 Ring Road, Accra",
                supervisor_id=supervisor.user_id,
                start_date=JUNE,
            ),
        )

        second = await service.upsert_profile(
            actor_for(student), InternshipProfileUpsert(company_name="Acme Holdings", end_date=AUGUST)
        )

        assert second.profile_id == first.profile_id
        assert second.company_name == "Acme Holdings"
        assert second.company_address == "12 Ring Road, Accra"
        assert second.supervisor_id == supervisor.user_id
        assert second.end_date is not None and second.start_date is not None
        [audit] = await _audits(db_session, "Update Internship Profile")
        assert audit.details == "Updated internship profile for Acme Holdings."
        assert (await service.get_profile(student.user_id)).company_name == "Acme Holdings"

    @pytest.mark.asyncio
    async def test_admin_names_the_student(self, db_session, make_user, email_sender):
        admin = await make_user(Role.ADMIN)
        student = await make_user(Role.STUDENT)
        service = InternshipService(db_session, email_sender)

        with pytest.raises(ValidationError):
            await service.upsert_profile(actor_for(admin), InternshipProfileUpsert(company_name="Acme Ltd"))

        profile = await service.upsert_profile(
            actor_for(admin), InternshipProfileUpsert(company_name="Acme Ltd", student_id=student.user_id)
        )
        assert profile.student_id == student.user_id
        [audit] = await _audits(db_session, "Setup Internship Profile")
        assert audit.user_id == admin.user_id


# ---------------------------------------------------------------------------
# Evaluations
# ---------------------------------------------------------------------------


class TestEvaluations:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.SUPERVISOR, Role.LECTURER])
    async def test_submit_records_audit(self, db_session, make_user, email_sender, role):
        evaluator = await make_user(role, full_name="Dr. Mensah")
        student = await make_user(Role.STUDENT)
        service = EvaluationService(db_session, email_sender)

        evaluation = await service.create_evaluation(
            actor_for(evaluator),
            EvaluationCreate(student_id=student.user_id, metrics=METRICS, comments="Solid month"),
        )

        assert evaluation.evaluator_role == role.value
        assert evaluation.evaluator_name == "Dr. Mensah"
        assert evaluation.metrics["communication"] == 5
        [audit] = await _audits(db_session, "Submit Evaluation")
        assert audit.details == f"Submitted a {role.value} evaluation for student ID {student.user_id}."
        assert [e.evaluation_id for e in await service.list_for_student(student.user_id)] == [
            evaluation.evaluation_id
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.STUDENT, Role.ADMIN, Role.HOD])
    async def test_other_roles_rejected(self, db_session, make_user, email_sender, role):
        actor = await make_user(role)
        student = await make_user(Role.STUDENT)
        service = EvaluationService(db_session, email_sender)

        with pytest.raises(ValidationError):
            await service.create_evaluation(
                actor_for(actor), EvaluationCreate(student_id=student.user_id, metrics=METRICS)
            )
        assert await service.list_for_student(student.user_id) == []
        assert await _audits(db_session, "Submit Evaluation") == []

    @pytest.mark.asyncio
    async def test_unknown_student(self, db_session, make_user, email_sender):
        supervisor = await make_user(Role.SUPERVISOR)
        with pytest.raises(NotFoundError):
            await EvaluationService(db_session, email_sender).create_evaluation(
                actor_for(supervisor), EvaluationCreate(student_id="usr_ghost", metrics=METRICS)
            )
