"""Daily attendance check-ins, at most one per student per UTC day."""

from datetime import datetime, timezone

from interntrack.db.models.check_in import CheckInRow
from interntrack.errors.exceptions import ConflictError
from interntrack.models.common import Actor
from interntrack.models.workflow import CheckInCreate
from interntrack.repositories.check_in_repo import CheckInRepository
from interntrack.services.audit import record_audit
from interntrack.services.id_generator import generate_id
from interntrack.services.workflows.base import WorkflowService


def describe_location(latitude: float, longitude: float) -> str:
    # No reverse geocoding yet; coordinates only
    return f"Location at {latitude:.4f}, {longitude:.4f}"


class CheckInService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.check_ins = CheckInRepository(session)

    async def create_check_in(self, actor: Actor, payload: CheckInCreate, now: datetime | None = None) -> CheckInRow:
        student = await self._require_user(actor.uid)
        now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
        if await self.check_ins.get_for_day(student.user_id, now.date()) is not None:
            raise ConflictError("You have already checked in for today.")

        gps = payload.is_gps_verified
        check_in = await self.check_ins.create(
            check_in_id=generate_id("chk_"),
            student_id=student.user_id,
            check_in_date=now.date(),
            timestamp=now,
            is_gps_verified=gps,
            latitude=payload.latitude if gps else None,
            longitude=payload.longitude if gps else None,
            address_resolved=describe_location(payload.latitude, payload.longitude) if gps else None,
            manual_reason=None if gps else payload.manual_reason,
        )
        await record_audit(
            self.session,
            Actor(uid=student.user_id, name=student.full_name, email=student.email),
            action="Daily Check-in",
            details=f"Student {student.full_name} checked in {'with GPS' if gps else 'manually'}.",
        )
        await self.session.commit()
        return check_in

    async def get_today_check_in(self, student_id: str, now: datetime | None = None) -> CheckInRow | None:
        now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
        return await self.check_ins.get_for_day(student_id, now.date())

    async def list_for_student(self, student_id: str, limit: int | None = None) -> list[CheckInRow]:
        return await self.check_ins.list_for_student(student_id, limit=limit)
