"""Authorize command: obtain and store an OAuth token."""

from typing import Optional

from .. import auth
from ..logging_config import get_logger
from .base import YouTubeCommand

logger = get_logger(__name__)


class AuthorizeCommand(YouTubeCommand):
    """Command that runs the consent flow ahead of a build."""

    def __init__(
        self,
        store: Optional[auth.TokenStore] = None,
        redirect_uri: Optional[str] = None,
        open_browser: bool = True,
    ) -> None:
        super().__init__()
        self.store = store or auth.FileTokenStore()
        self.redirect_uri = redirect_uri
        self.open_browser = open_browser

    def validate(self) -> None:
        """No API client is needed before authorizing."""
        self._validated = True

    def _run(self) -> bool:
        creds = auth.get_credentials(
            store=self.store,
            redirect_uri=self.redirect_uri,
            open_browser=self.open_browser,
        )
        logger.info("Authorized with scopes: %s", ", ".join(creds.scopes or []))
        return True
