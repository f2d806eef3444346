"""Email delivery adapter."""

from .client import HttpEmailSender, MockEmailSender, SentEmail

__all__ = ["HttpEmailSender", "MockEmailSender", "SentEmail"]
