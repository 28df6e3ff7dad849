"""YouTube API authentication handling."""

import os
import time
import webbrowser
import wsgiref.simple_server
from typing import List, Optional
from urllib.parse import parse_qs, urlparse

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from . import config
from .errors import AuthorizationError, YouTubeError
from .logging_config import get_logger

logger = get_logger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
SUCCESS_MESSAGE = "Authentication complete. You can close this window."


class TokenStore:
    """Where the OAuth credential record lives between runs."""

    def load(self) -> Optional[Credentials]:
        """Return stored credentials, or None if there are none."""
        raise NotImplementedError

    def save(self, credentials: Credentials) -> None:
        """Persist credentials for the next run."""
        raise NotImplementedError


class FileTokenStore(TokenStore):
    """Keeps the credential record as a JSON file."""

    def __init__(self, path: Optional[str] = None, scopes: Optional[List[str]] = None):
        """Initialize store.

        Args:
            path: Token file location, defaults to config.TOKEN_FILE
            scopes: Scopes the stored token must carry
        """
        self.path = path or config.TOKEN_FILE
        self.scopes = scopes or config.YOUTUBE_SCOPES

    def load(self) -> Optional[Credentials]:
        if not os.path.exists(self.path):
            return None
        try:
            return Credentials.from_authorized_user_file(self.path, self.scopes)
        except ValueError as e:
            logger.warning("Ignoring unreadable token file %s: %s", self.path, str(e))
            return None

    def save(self, credentials: Credentials) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as token:
            token.write(credentials.to_json())
        logger.info("Saved OAuth tokens to %s", self.path)


class _QuietHandler(wsgiref.simple_server.WSGIRequestHandler):
    """Request handler that logs through the package logger."""

    def log_message(self, format, *args):  # pylint: disable=redefined-builtin
        logger.debug(format, *args)


class CallbackApp:
    """WSGI app that captures the authorization redirect.

    Requests to other paths get a 404 and requests without a code get a 400;
    neither ends the wait. A request carrying ``code`` or ``error`` does.
    """

    def __init__(self, path: str = "/"):
        self.path = path
        self.code: Optional[str] = None
        self.state: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def done(self) -> bool:
        return self.code is not None or self.error is not None

    def __call__(self, environ, start_response):
        headers = [("Content-type", "text/plain; charset=utf-8")]

        if environ.get("PATH_INFO", "") != self.path:
            start_response("404 Not Found", headers)
            return [b"Not found"]

        params = parse_qs(environ.get("QUERY_STRING", ""))
        error = params.get("error", [None])[0]
        if error:
            self.error = error
            start_response("400 Bad Request", headers)
            return [f"OAuth error: {error}".encode("utf-8")]

        code = params.get("code", [None])[0]
        if not code:
            start_response("400 Bad Request", headers)
            return [b"Missing code"]

        self.code = code
        self.state = params.get("state", [None])[0]
        start_response("200 OK", headers)
        return [SUCCESS_MESSAGE.encode("utf-8")]


def wait_for_callback(redirect_uri: str, timeout_seconds: Optional[float] = None) -> CallbackApp:
    """Serve the redirect URI on the loopback interface until the redirect arrives.

    Args:
        redirect_uri: Registered redirect URI, e.g. http://127.0.0.1:5173/oauth2callback
        timeout_seconds: Give up after this long. None waits forever.

    Returns:
        The callback app holding the received code or error

    Raises:
        AuthorizationError: If the timeout expires
    """
    parsed = urlparse(redirect_uri)
    app = CallbackApp(parsed.path or "/")
    server = wsgiref.simple_server.make_server(
        parsed.hostname or "127.0.0.1",
        parsed.port or 80,
        app,
        handler_class=_QuietHandler,
    )
    deadline = time.monotonic() + timeout_seconds if timeout_seconds else None

    try:
        while not app.done:
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise AuthorizationError("Timed out waiting for OAuth callback")
                server.timeout = remaining
            server.handle_request()
    finally:
        server.server_close()

    return app


def authorize(
    client_id: str,
    client_secret: str,
    redirect_uri: Optional[str] = None,
    scopes: Optional[List[str]] = None,
    open_browser: bool = True,
    timeout_seconds: Optional[float] = None,
) -> Credentials:
    """Run the OAuth consent round trip through a loopback redirect.

    Args:
        client_id: OAuth client ID
        client_secret: OAuth client secret
        redirect_uri: Redirect URI registered for the client
        scopes: Requested scopes
        open_browser: Open the consent page in the default browser
        timeout_seconds: Limit on the wait for the redirect

    Returns:
        Fresh credentials

    Raises:
        AuthorizationError: If consent is refused or the code exchange fails
    """
    redirect_uri = redirect_uri or config.REDIRECT_URI
    client_config = {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
            "redirect_uris": [redirect_uri],
        }
    }
    flow = Flow.from_client_config(
        client_config, scopes=scopes or config.YOUTUBE_SCOPES, redirect_uri=redirect_uri
    )
    auth_url, state = flow.authorization_url(access_type="offline", prompt="consent")

    print(f"\nAuthorize this app by visiting:\n{auth_url}\n")
    if open_browser:
        webbrowser.open(auth_url, new=1, autoraise=True)

    logger.info("Waiting for OAuth callback at %s ...", redirect_uri)
    callback = wait_for_callback(redirect_uri, timeout_seconds)

    if callback.error:
        raise AuthorizationError(f"OAuth error: {callback.error}")
    if callback.state != state:
        raise AuthorizationError("OAuth state mismatch")

    try:
        flow.fetch_token(code=callback.code)
    except Exception as e:
        raise AuthorizationError(f"OAuth exchange failed: {str(e)}") from e

    return flow.credentials


def get_credentials(
    store: Optional[TokenStore] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    redirect_uri: Optional[str] = None,
    open_browser: bool = True,
) -> Credentials:
    """Get usable credentials, reusing the stored token when possible.

    Args:
        store: Credential store, defaults to the token file
        client_id: OAuth client ID, defaults to config.CLIENT_ID
        client_secret: OAuth client secret, defaults to config.CLIENT_SECRET
        redirect_uri: Redirect URI, defaults to config.REDIRECT_URI
        open_browser: Open the consent page in the default browser

    Returns:
        Valid credentials

    Raises:
        AuthorizationError: If a new authorization is needed and fails
    """
    store = store or FileTokenStore()
    creds = store.load()

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
            store.save(creds)
            return creds
        except RefreshError as e:
            logger.warning("Stored token could not be refreshed: %s", str(e))

    creds = authorize(
        client_id or config.CLIENT_ID,
        client_secret or config.CLIENT_SECRET,
        redirect_uri=redirect_uri,
        open_browser=open_browser,
    )
    store.save(creds)
    return creds


def get_youtube_service(credentials: Credentials):
    """Build an authenticated YouTube service object.

    Raises:
        YouTubeError: If the client cannot be built
    """
    try:
        return build("youtube", "v3", credentials=credentials, cache_discovery=False)
    except Exception as e:
        raise YouTubeError(f"Failed to build YouTube service: {str(e)}") from e
