"""
Session model for KhojVerse.

A session is the record of an authenticated-or-guest user. It is created on
the first entry to the dashboard and discarded when the user returns to the
landing screen. Credentials are never checked: every login succeeds.
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_GUEST_NAME = "Guest Explorer"
DEFAULT_GUEST_EMAIL = "guest@khojverse.io"
DEFAULT_AVATAR_URL_TEMPLATE = "https://picsum.photos/seed/{seed}/100/100"

# Shown in the header when no session exists
ANONYMOUS_NAME = "Explorer"
ANONYMOUS_AVATAR_SEED = "anon"


@dataclass(frozen=True)
class Session:
    """
    An active user session.

    Attributes:
        name: Display name.
        email: Contact identifier.
        avatar: Avatar image URL.
    """
    name: str
    email: str
    avatar: str

    def to_dict(self) -> dict:
        return {"name": self.name, "email": self.email, "avatar": self.avatar}


@dataclass(frozen=True)
class SessionSettings:
    """Identity stamped onto every new session."""
    name: str = DEFAULT_GUEST_NAME
    email: str = DEFAULT_GUEST_EMAIL
    avatar_template: str = DEFAULT_AVATAR_URL_TEMPLATE

    def avatar_url(self, seed: str) -> str:
        return self.avatar_template.format(seed=seed)


DEFAULT_SESSION_SETTINGS = SessionSettings()


def login_session(settings: SessionSettings = DEFAULT_SESSION_SETTINGS) -> Session:
    """Session created by submitting the login form."""
    return Session(name=settings.name, email=settings.email, avatar=settings.avatar_url("user"))


def guest_session(settings: SessionSettings = DEFAULT_SESSION_SETTINGS) -> Session:
    """Session created by "Continue as Guest" or any landing-screen bypass."""
    return Session(name=settings.name, email=settings.email, avatar=settings.avatar_url("guest"))


def display_identity(
    session: Optional[Session],
    settings: SessionSettings = DEFAULT_SESSION_SETTINGS,
) -> tuple[str, str]:
    """
    Return the (name, avatar) pair to show in the dashboard header.

    Falls back to an anonymous explorer identity when there is no session.
    """
    anonymous_avatar = settings.avatar_url(ANONYMOUS_AVATAR_SEED)
    if session is None:
        return ANONYMOUS_NAME, anonymous_avatar
    return session.name or ANONYMOUS_NAME, session.avatar or anonymous_avatar
