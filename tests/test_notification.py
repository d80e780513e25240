"""Tests for notification channels."""
from solid_demo.application.services.notification import Notification
from solid_demo.domain.interfaces.notification_service import INotificationService
from solid_demo.infrastructure.providers.notification_services import EmailService, SmsService


def test_email_channel(capsys):
    Notification(EmailService()).send("Hello via Email!")
    assert capsys.readouterr().out == "Email sent: Hello via Email!\n"


def test_sms_channel(capsys):
    Notification(SmsService()).send("Hello via SMS!")
    assert capsys.readouterr().out == "SMS sent: Hello via SMS!\n"


def test_channels_produce_distinct_output_for_same_message(capsys):
    Notification(EmailService()).send("ping")
    email_output = capsys.readouterr().out
    Notification(SmsService()).send("ping")
    sms_output = capsys.readouterr().out

    assert email_output != sms_output
    assert "ping" in email_output and "ping" in sms_output


def test_notification_delegates_to_any_service():
    class RecordingService(INotificationService):
        def __init__(self):
            self.sent = []

        def send(self, message: str) -> None:
            self.sent.append(message)

    service = RecordingService()
    Notification(service).send("first")
    Notification(service).send("second")

    assert service.sent == ["first", "second"]
