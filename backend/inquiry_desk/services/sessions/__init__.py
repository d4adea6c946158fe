"""Login session lifecycle and cleanup."""
from inquiry_desk.services.sessions.manager import SessionManager, SessionIdentity
from inquiry_desk.services.sessions.sweeper import SessionSweeper

__all__ = ["SessionManager", "SessionIdentity", "SessionSweeper"]
