from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from supabase import Client, create_client

from ..config.settings import SupabaseSettings

logger = logging.getLogger(__name__)


class SupabaseNotInitializedError(RuntimeError):
    """Raised when accessing the Supabase client before initialization."""


class SupabaseSessionMissingError(RuntimeError):
    """Raised when a session-specific action is attempted without a session."""


@dataclass
class SupabaseGateway:
    """Thin wrapper around the Supabase Python client with session awareness.

    The first call that needs a session signs in with the configured email
    and password.
    """

    settings: SupabaseSettings
    _client: Optional[Client] = None
    _session: Optional[Any] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase is not configured; set {missing}.")
        self._client = create_client(self.settings.url, self.settings.anon_key)
        return self._client

    def sign_in(self) -> Any:
        if not self.settings.has_credentials:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseSessionMissingError(f"Supabase sign-in needs credentials; set {missing}.")
        response = self.ensure_client().auth.sign_in_with_password(
            {"email": self.settings.email, "password": self.settings.password}
        )
        session = getattr(response, "session", None)
        if session is None:
            raise SupabaseSessionMissingError("Supabase sign-in returned no session.")
        logger.info("Signed in to Supabase as %s", self.settings.email)
        self._session = session
        return session

    def session(self) -> Any:
        if self._session is None:
            return self.sign_in()
        return self._session

    def current_user_id(self) -> str:
        session = self.session()
        user = getattr(session, "user", None)
        identifier = getattr(user, "id", None)
        if not identifier:
            raise SupabaseSessionMissingError("Supabase session has no user id.")
        return identifier

    def table(self, name: str):
        return self.ensure_client().table(name)
