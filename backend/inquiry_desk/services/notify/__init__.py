"""Outbound SMS and email notifications."""
from inquiry_desk.services.notify.notifier import Notifier, get_notifier
from inquiry_desk.services.notify.sms import TwilioSMSSender
from inquiry_desk.services.notify.email import MailgunEmailSender

__all__ = ["Notifier", "get_notifier", "TwilioSMSSender", "MailgunEmailSender"]
