"""Email bodies sent by the account service."""

from codevault.app.services.email_sender import EmailMessage

PASSWORD_RESET_SUBJECT = "Password Reset Link"

PASSWORD_RESET_TEXT = """Hello {username},

You requested a password reset for your CodeVault account.

Reset your password using this link (valid for {ttl_minutes} minutes):

{reset_url}

If you didn't request this, you can safely ignore this email.

-- CodeVault
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;">
    <h2>Password Reset Request</h2>
    <p>Hello {username},</p>
    <p>You requested a password reset for your CodeVault account.
       This link is valid for {ttl_minutes} minutes.</p>
    <p><a href="{reset_url}">Reset Password</a></p>
    <p>Or copy and paste this link into your browser:</p>
    <p style="word-break: break-all;">{reset_url}</p>
    <p style="color: #9ca3af; font-size: 13px;">If you didn't request this, you can safely ignore this email.</p>
</body>
</html>
"""

WELCOME_SUBJECT = "Welcome to CodeVault"

WELCOME_TEXT = """Hello {username},

Your CodeVault account has been created. Start saving your snippets!

-- CodeVault
"""

WELCOME_HTML = """
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body>
    <h2>Welcome to CodeVault</h2>
    <p>Hello {username}, your account has been created. Start saving your snippets!</p>
</body>
</html>
"""

LOGIN_ALERT_SUBJECT = "New sign-in to your CodeVault account"

LOGIN_ALERT_TEXT = """Hello {username},

Your CodeVault account was just signed in to.

If this wasn't you, reset your password right away.

-- CodeVault
"""


def password_reset_email(to: str, username: str, reset_url: str, ttl_minutes: int) -> EmailMessage:
    values = {"username": username, "reset_url": reset_url, "ttl_minutes": ttl_minutes}
    return EmailMessage(
        to=to,
        subject=PASSWORD_RESET_SUBJECT,
        text=PASSWORD_RESET_TEXT.format(**values),
        html=PASSWORD_RESET_HTML.format(**values),
    )


def welcome_email(to: str, username: str) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject=WELCOME_SUBJECT,
        text=WELCOME_TEXT.format(username=username),
        html=WELCOME_HTML.format(username=username),
    )


def login_alert_email(to: str, username: str) -> EmailMessage:
    return EmailMessage(
        to=to,
        subject=LOGIN_ALERT_SUBJECT,
        text=LOGIN_ALERT_TEXT.format(username=username),
    )

