"""Admin-triggered reminder runs tied to the active internship term."""

import logging

from interntrack.models.common import Actor
from interntrack.models.enums import NotificationType
from interntrack.models.workflow import ActionResult
from interntrack.repositories.evaluation_repo import EvaluationRepository
from interntrack.repositories.internship_repo import InternshipProfileRepository, InternshipTermRepository
from interntrack.services.audit import record_audit
from interntrack.services.workflows.base import WorkflowService

logger = logging.getLogger(__name__)


class ReminderService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.terms = InternshipTermRepository(session)
        self.profiles = InternshipProfileRepository(session)
        self.evaluations = EvaluationRepository(session)

    async def send_evaluation_reminders(self, actor: Actor) -> ActionResult:
        """Remind each supervisor that still owes at least one intern evaluation.

        A supervisor with several unevaluated interns gets a single reminder.
        """
        term = await self.terms.get_active()
        if term is None:
            return ActionResult(
                success=False,
                message="No active internship term found. Please set an active term first.",
            )

        evaluated = await self.evaluations.supervisor_evaluated_pairs()
        supervisors: dict[str, None] = {}
        for profile in await self.profiles.list_with_supervisor():
            if (profile.student_id, profile.supervisor_id) not in evaluated:
                supervisors.setdefault(profile.supervisor_id, None)

        sent = 0
        for supervisor_id in supervisors:
            result = await self.notify(
                supervisor_id,
                NotificationType.EVALUATION_REMINDER,
                title="Evaluation Reminder",
                message="You have pending intern evaluations to complete. Please submit them as soon as possible.",
                href="/supervisor/evaluate-student",
            )
            if result is not None:
                sent += 1

        await record_audit(
            self.session,
            actor,
            action="Send Evaluation Reminders",
            details=f'Sent {sent} evaluation reminders to supervisors for the active term "{term.name}".',
        )
        await self.session.commit()
        logger.info("Sent %d evaluation reminders for term %s", sent, term.term_id)
        return ActionResult(success=True, message="Reminders sent successfully.", count=sent)

    async def send_term_ending_reminders(self, actor: Actor) -> ActionResult:
        term = await self.terms.get_active()
        if term is None:
            return ActionResult(success=False, message="No active internship term found.")

        recipients = await self.users.list_active()
        for user in recipients:
            await self.notify(
                user.user_id,
                NotificationType.TERM_ENDING_REMINDER,
                title="Internship Term Ending Soon",
                message=(
                    f"The current internship term '{term.name}' is ending. "
                    "Please ensure all reports and evaluations are finalized."
                ),
                href="/dashboard",
            )

        await record_audit(
            self.session,
            actor,
            action="Send End-of-Term Reminders",
            details=f'Sent {len(recipients)} end-of-term reminders for the active term "{term.name}".',
        )
        await self.session.commit()
        return ActionResult(
            success=True,
            message="End-of-term reminders sent successfully.",
            count=len(recipients),
        )
