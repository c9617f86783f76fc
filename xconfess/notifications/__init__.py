"""
The `notifications` package delivers messages to users outside the request cycle.

Contents
--------
- base
    `ReactionNotifier`, the interface the reaction workflow depends on.
- email_service
    `EmailService`, an SMTP implementation built on `smtplib` and `email.mime`,
    and `EmailDeliveryError`.
"""
