import json

import httpx
from fastapi import status
from jinja2 import TemplateError

from app.core.config import Settings, get_settings
from app.schemas.notification import EmailData
from app.services.mailer import render_email, send_notification_email


def test_graded_email_shows_grade_and_feedback():
    subject, html = render_email(
        "submission_graded",
        EmailData(course_name="Sorting", grade=16, feedback="<b>Nice</b>"),
        "Lucas",
    )
    assert subject == "🎓 Your work has been graded - Sorting"
    assert "16/20" in html
    assert "Hello Lucas" in html
    assert "&lt;b&gt;Nice&lt;/b&gt;" in html


def test_graded_email_without_feedback():
    _, html = render_email("submission_graded", EmailData(course_name="Sorting", grade=9.5), "Lucas")
    assert "9.5/20" in html
    assert "Feedback" not in html


def test_each_type_has_its_template():
    data = EmailData(
        course_name="Sorting",
        subject_name="Algorithms",
        student_name="Lucas",
        professor_name="Claire",
        comment_author="Emma",
    )
    _, received = render_email("submission_received", data, "Claire")
    assert "Lucas" in received and "Algorithms" in received
    _, new_course = render_email("new_course", data, "Lucas")
    assert "Claire" in new_course
    _, comment = render_email("comment_added", data, "Claire")
    assert "Emma" in comment


def test_unknown_type_falls_back_to_generic_email():
    subject, html = render_email("something_else", EmailData(), "Lucas")
    assert subject == "EduPlatform notification"
    assert "new notification" in html


def test_send_skipped_without_api_key():
    settings = Settings(resend_api_key=None)
    result = send_notification_email("a@example.com", "A", "new_course", EmailData(), settings=settings)
    assert result == {"success": True, "skipped": True}


def test_send_posts_to_provider():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email-1"})

    settings = Settings(resend_api_key="re_test")
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = send_notification_email(
            "lucas@example.com",
            "Lucas",
            "new_course",
            EmailData(course_name="Graphs"),
            settings=settings,
            client=client,
        )

    assert result == {"success": True, "data": {"id": "email-1"}}
    assert captured["auth"] == "Bearer re_test"
    assert captured["body"]["to"] == ["lucas@example.com"]
    assert captured["body"]["from"] == settings.mail_from
    assert captured["body"]["subject"] == "📖 New course - Graphs"


def test_send_reports_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "invalid from"})

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = send_notification_email(
            "lucas@example.com",
            "Lucas",
            "new_course",
            EmailData(),
            settings=Settings(resend_api_key="re_test"),
            client=client,
        )

    assert result["success"] is False
    assert "422" in result["error"]


def test_send_notification_function(client, seed_data, headers_for):
    response = client.post(
        "/functions/send-notification",
        json={
            "to": "lucas@example.com",
            "toName": "Lucas",
            "type": "submission_graded",
            "data": {"courseName": "Sorting", "grade": 12},
        },
        headers=headers_for(seed_data["professor"]),
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["success"] is True
    assert response.json()["skipped"] is True


def test_send_notification_template_error(client, seed_data, headers_for, monkeypatch):
    def broken_render(type, data, to_name):
        raise TemplateError("template missing")

    monkeypatch.setenv("RESEND_API_KEY", "re_test")
    get_settings.cache_clear()
    monkeypatch.setattr("app.services.mailer.render_email", broken_render)

    response = client.post(
        "/functions/send-notification",
        json={"to": "lucas@example.com", "toName": "Lucas", "type": "new_course", "data": {}},
        headers=headers_for(seed_data["professor"]),
    )
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"success": False, "error": "template missing"}


def test_notifications_inbox(client, seed_data, headers_for, sent_emails):
    client.put(
        f"/courses/{seed_data['course'].id}/submission",
        json={"content": "Answer"},
        headers=headers_for(seed_data["student"]),
    )

    headers = headers_for(seed_data["professor"])
    inbox = client.get("/notifications", headers=headers).json()
    assert len(inbox) == 1
    assert inbox[0]["type"] == "submission_received"
    assert inbox[0]["read"] is False
    assert inbox[0]["data"]["studentName"] == "Lucas Bernard"

    marked = client.post(f"/notifications/{inbox[0]['id']}/read", headers=headers)
    assert marked.json()["read"] is True

    other = client.post(f"/notifications/{inbox[0]['id']}/read", headers=headers_for(seed_data["student"]))
    assert other.status_code == status.HTTP_404_NOT_FOUND
