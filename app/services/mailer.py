"""Notification emails: template selection and delivery through a Resend-style API."""
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import httpx
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from app.core.config import Settings, get_settings
from app.models import NotificationType
from app.models.submission import MAX_GRADE
from app.schemas.notification import EmailData

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"

templates = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)

SUBJECTS = {
    NotificationType.submission_received: "📝 New submission - {course_name}",
    NotificationType.submission_graded: "🎓 Your work has been graded - {course_name}",
    NotificationType.new_course: "📖 New course - {course_name}",
    NotificationType.comment_added: "💬 New comment - {course_name}",
}


def render_email(type: str, data: EmailData, to_name: str) -> Tuple[str, str]:
    """Return ``(subject, html)`` for a notification type, falling back to a generic message."""
    settings = get_settings()
    try:
        kind = NotificationType(type)
    except ValueError:
        template = templates.get_template("default.html")
        return f"{settings.project_name} notification", template.render(app_name=settings.project_name)

    subject = SUBJECTS[kind].format(course_name=data.course_name or "")
    template = templates.get_template(f"{kind.value}.html")
    html = template.render(
        app_name=settings.project_name,
        to_name=to_name,
        data=data,
        max_grade=MAX_GRADE,
    )
    return subject, html


def send_notification_email(
    to: str,
    to_name: str,
    type: str,
    data: EmailData,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> Dict:
    settings = settings or get_settings()
    if not settings.resend_api_key:
        logger.info("Email API key not configured, skipping %s email to %s", type, to)
        return {"success": True, "skipped": True}

    logger.info("Sending %s notification to %s", type, to)
    try:
        subject, html = render_email(type, data, to_name)
    except TemplateError as exc:
        logger.error("Email template for %s failed: %s", type, exc)
        return {"success": False, "error": str(exc)}

    payload = {
        "from": settings.mail_from,
        "to": [to],
        "subject": subject,
        "html": html,
    }
    headers = {"Authorization": f"Bearer {settings.resend_api_key}"}

    try:
        if client is None:
            with httpx.Client(timeout=settings.mail_timeout_seconds) as own_client:
                response = own_client.post(settings.resend_api_url, json=payload, headers=headers)
        else:
            response = client.post(settings.resend_api_url, json=payload, headers=headers)
        response.raise_for_status()
        result = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Email to %s failed: %s", to, exc)
        return {"success": False, "error": str(exc)}

    logger.debug("Email result: %s", result)
    return {"success": True, "data": result}
