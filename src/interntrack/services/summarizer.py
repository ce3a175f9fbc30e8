"""Daily report summarization through an external HTTP endpoint."""

import logging

import httpx

from interntrack.config import Settings

logger = logging.getLogger(__name__)


class ReportSummarizer:
    """Posts a report to the summarization endpoint and returns its summary.

    Summaries are optional: when no endpoint is configured, or the call fails,
    ``summarize`` returns an empty string and submission carries on.
    """

    def __init__(self, url: str | None, api_key: str | None = None, timeout: float = 20.0):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReportSummarizer":
        return cls(
            url=settings.summarizer_url,
            api_key=settings.summarizer_api_key,
            timeout=settings.summarizer_timeout_seconds,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    async def summarize(
        self,
        daily_report: str,
        declared_tasks: str,
        student_name: str,
        internship_company: str,
    ) -> str:
        if not self.enabled:
            return ""

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        payload = {
            "dailyReport": daily_report,
            "declaredTasks": declared_tasks,
            "studentName": student_name,
            "internshipCompany": internship_company,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(self.url, json=payload, headers=headers)
                resp.raise_for_status()
                return str(resp.json().get("summary", "")).strip()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Report summarization failed: %s", exc)
            return ""
