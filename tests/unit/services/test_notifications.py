import logging

import pytest

from codevault.app.services.notifications import AccountNotifier
from tests.fixtures.email_sender import RecordingEmailSender


@pytest.mark.asyncio
async def test_welcome_email_is_sent():
    sender = RecordingEmailSender()
    notifier = AccountNotifier(sender)

    delivered = await notifier.send_welcome("ada@example.com", "ada")

    assert delivered is True
    assert len(sender.sent) == 1
    assert sender.sent[0].to == "ada@example.com"
    assert "ada" in sender.sent[0].text
    assert sender.sent[0].html is not None


@pytest.mark.asyncio
async def test_login_alert_is_sent():
    sender = RecordingEmailSender()
    notifier = AccountNotifier(sender)

    delivered = await notifier.send_login_alert("ada@example.com", "ada")

    assert delivered is True
    assert sender.sent[0].subject == "New sign-in to your CodeVault account"


@pytest.mark.asyncio
async def test_delivery_failure_is_logged_not_raised(caplog):
    notifier = AccountNotifier(RecordingEmailSender(fail=True))

    with caplog.at_level(logging.WARNING):
        delivered = await notifier.send_welcome("ada@example.com", "ada")

    assert delivered is False
    assert "welcome" in caplog.text
    assert "EMAIL_DELIVERY_FAILED" in caplog.text
