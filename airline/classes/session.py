from enum import Enum


class SessionState(str, Enum):
    LOGGED_OUT = 'LoggedOut'
    LOGGED_IN = 'LoggedIn'


class Session:
    """
    Who is at the console: nobody (LoggedOut) or one Principal (LoggedIn).
    """

    def __init__(self):
        self.principal = None

    @property
    def state(self):
        return SessionState.LOGGED_IN if self.principal else SessionState.LOGGED_OUT

    @property
    def is_authenticated(self):
        return self.principal is not None

    @property
    def role(self):
        return self.principal.role if self.principal else None

    @property
    def user_id(self):
        return self.principal.user_id if self.principal else None

    def start(self, principal):
        self.principal = principal

    def end(self):
        self.principal = None
