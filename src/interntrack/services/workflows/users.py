"""User administration: lecturer assignment and account activation."""

import logging

from interntrack.db.models.user import UserRow
from interntrack.errors.exceptions import ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import NotificationType, Role, UserStatus
from interntrack.services.audit import record_audit
from interntrack.services.workflows.base import WorkflowService
from interntrack.services.workflows.reports import REVIEWER_ROLES

logger = logging.getLogger(__name__)


class UserAdminService(WorkflowService):
    async def assign_lecturer(self, actor: Actor, student_id: str, lecturer_id: str) -> UserRow:
        student = await self._require_user(student_id)
        if student.role != Role.STUDENT:
            raise ValidationError(f"User '{student_id}' is not a student")
        lecturer = await self._require_user(lecturer_id)
        if lecturer.role not in REVIEWER_ROLES:
            raise ValidationError(f"User '{lecturer_id}' is not a lecturer")

        await self.users.update(student, lecturer_id=lecturer.user_id)
        await record_audit(
            self.session,
            actor,
            action="Assign Lecturer",
            details=f"Assigned lecturer {lecturer.full_name} to student {student.full_name}.",
        )
        await self.session.commit()

        await self.notify(
            student.user_id,
            NotificationType.LECTURER_ASSIGNED,
            title="Lecturer Assigned",
            message=f"{lecturer.full_name} has been assigned as your lecturer.",
            href="/student/dashboard",
        )
        return student

    async def update_user_status(self, actor: Actor, user_id: str, status: UserStatus | str) -> UserRow:
        """Activate or deactivate an account.

        Only active users receive announcements and reminders. Pending accounts
        are activated by completing their invite, not here.
        """
        new_status = UserStatus(status)
        if new_status == UserStatus.PENDING:
            raise ValidationError("A user cannot be moved back to pending")
        user = await self._require_user(user_id)
        if user.status == UserStatus.PENDING:
            raise ValidationError(f"User '{user_id}' has not completed registration yet")
        if user.status == new_status:
            return user

        await self.users.update(user, status=new_status.value)
        await record_audit(
            self.session,
            actor,
            action="Update User Status",
            details=f"Set {user.full_name} ({user.email}) to {new_status.value}.",
        )
        await self.session.commit()
        logger.info("User %s is now %s", user_id, new_status.value)
        return user
