"""Services module"""
from .focus_session_service import FocusSessionService, SessionOutcome

__all__ = ['FocusSessionService', 'SessionOutcome']
