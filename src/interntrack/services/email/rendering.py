"""Renders transactional emails from the Jinja2 templates next to this module."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from interntrack.config import settings
from interntrack.services.email.sender import EmailMessage

_TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.globals["product_name"] = settings.product_name


def build_link(base_url: str, href: str | None) -> str:
    """Absolute in-app link; falls back to the landing page."""
    path = href or "/"
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base_url.rstrip('/')}{path}"


def render_notification_email(
    to: str, title: str, message: str, href: str | None, base_url: str
) -> EmailMessage:
    link = build_link(base_url, href)
    html = _env.get_template("notification.html").render(title=title, message=message, link=link)
    return EmailMessage(to=to, subject=title, text=message, html=html)


def render_announcement_email(
    to: str, recipient_name: str, title: str, message: str, base_url: str
) -> EmailMessage:
    link = build_link(base_url, "/dashboard")
    paragraphs = [p for p in message.split("\n") if p.strip()] or [message]
    html = _env.get_template("announcement.html").render(
        recipient_name=recipient_name or "there",
        title=title,
        paragraphs=paragraphs,
        link=link,
    )
    text = f"Hello {recipient_name or 'there'},\n\n{message}\n\n{link}"
    return EmailMessage(to=to, subject=f"Announcement: {title}", text=text, html=html)


def render_verification_email(to: str, code: str) -> EmailMessage:
    html = _env.get_template("verification_code.html").render(code=code)
    text = (
        f"Your verification code is {code}. "
        "Please use this code to complete your registration."
    )
    return EmailMessage(to=to, subject=f"Verify Your {settings.product_name} Account", text=text, html=html)
