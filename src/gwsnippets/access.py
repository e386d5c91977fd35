from collections.abc import Iterable
from pathlib import Path
import copy
import json
import logging
import os
from functools import wraps

import google.auth
import google.auth.exceptions
import google_auth_httplib2
import httplib2
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
import googleapiclient.discovery_cache as gws_discovery_cache

logger = logging.getLogger(__name__)

class GWSAccessError(RuntimeError):
    """No usable credentials for the requested service."""
    pass

class __GWSAccess():
    """
    Class encapsulating authenticated access to Google Workspace
    See https://developers.google.com/workspace/guides/create-credentials#choose_the_access_credential_that_is_right_for_you
    for an overview of what you'll need.  With a client secrets file the installed app
    OAuth flow is used (user credentials, which is what the Chat membership calls need).
    Without one we fall back to Application Default Credentials.
    Sessions are cached and refreshed so confirmation does not need to happen repeatedly.
    Scopes are expected to be added by snippets as needed and may trigger a refresh.

    It makes no sense to have multiple authenticated sessions for a set of samples so do this
    as a module singleton.
    """

    __SCOPES = {
        "sheets": "https://www.googleapis.com/auth/spreadsheets",
        "sheets-ro": "https://www.googleapis.com/auth/spreadsheets.readonly",
        "drive-file": "https://www.googleapis.com/auth/drive.file",
        "drive": "https://www.googleapis.com/auth/drive",
        "drive-ro": "https://www.googleapis.com/auth/drive.readonly",
        "presentations": "https://www.googleapis.com/auth/presentations",
        "presentations-ro": "https://www.googleapis.com/auth/presentations.readonly",
        "chat-memberships": "https://www.googleapis.com/auth/chat.memberships",
        "chat-memberships-ro": "https://www.googleapis.com/auth/chat.memberships.readonly",
        "openid": "openid",
        "email": "email",
        "profile": "profile",
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/"

    __DEFAULT_AUTH_PROMPT_MSG = "Please visit this URL to authorize the snippets: {url}"
    __DEFAULT_AUTH_FLOW_SUCCESS_MSG = "Authorization complete, you may close this window."
    __DEFAULT_SECRETS = str((Path.home() / "gws_client_secrets.json").absolute())
    __DEFAULT_CACHE = str((Path.home() / "gws_tokens.json").absolute())

    # environment overrides for the file locations
    SECRETS_ENV = "GWS_CLIENT_SECRETS"
    CACHE_ENV = "GWS_TOKEN_CACHE"

    def __init__(self) -> None:
        self.reset()

    def __bool__(self) -> bool:
        """True is we are connected and authenticated"""
        return self.connected

    def __str__(self) -> str:
        if self.connected:
            return f"Connected:{str(self.session_scopes)}"
        return f"Disconnected:{str(self.__scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be expected.
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIX):
            sc = s
        return sc

    @classmethod
    def resolve_scopes(cls, value: None|str|Iterable) -> list[str]:
        """Labels or URLs to a list of scope URLs, unknowns dropped."""
        if value is None:
            return []
        vals = [value] if isinstance(value, str) or not isinstance(value, Iterable) else value
        slist = []
        for v in vals:
            s = cls.get_scope(str(v))
            if s and s not in slist:
                slist.append(s)
        return slist

    def _set_location(self, attr: str, value: Path|str) -> None:
        """
        Moving the secrets or token cache invalidates the session, reconnect if we had one.
        """
        val = Path(str(value))
        if val != getattr(self, attr):
            setattr(self, attr, val)
            if self.connected:
                self.connect()

    # OAuth client secrets as downloaded from the cloud console
    client_secrets = property(lambda self: self.__secrets,
                              lambda self, v: self._set_location('_GWSAccess__secrets', v))
    # where refreshable user tokens are kept between runs
    cred_cache = property(lambda self: self.__cache,
                          lambda self, v: self._set_location('_GWSAccess__cache', v))

    def clear(self):
        """Drop credentials and services but keep the configuration."""
        self.__creds = None
        self.__services = {}

    @property
    def connected(self) -> bool:
        return bool(self.__creds) and bool(self.__creds.valid)

    @property
    def session_scopes(self) -> list[str]:
        """
        Scopes granted for the current session, as opposed to scopes which is
        what will be asked for on the next connect.
        """
        if self.connected:
            return list(self.__creds.scopes or [])
        return []

    @property
    def scopes(self) -> list[str]:
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|list[str]|str) -> None:
        """
        Replace the requested scopes.  A live session is refreshed if it
        doesn't already cover them, otherwise credentials are dropped.
        """
        self.__scopes = self.resolve_scopes(value)
        if self.__scopes and self.connected:
            self.refresh()
        else:
            self.clear()

    def append_scopes(self, *args) -> bool:
        """
        Snippets and the helpers add the scopes they need before their first call.
        Each arg can be a label, a URL or a list of either.
        """
        for a in args:
            for s in self.resolve_scopes(a):
                if s not in self.__scopes:
                    self.__scopes.append(s)
        return self.refresh()

    def scope_in_session(self, scope: str) -> bool:
        s = self.get_scope(scope)
        return bool(s) and s in self.session_scopes

    @property
    def creds(self) -> Credentials|None:
        return self.__creds

    @property
    def config(self) -> dict:
        """
        All configuration state as a dict, for stashing in a json/toml/etc file.
        """
        return {
            'secrets': str(self.__secrets),
            'cache': str(self.__cache),
            'scopes': list(self.__scopes),
            'server': self.auth_server,
            'port': self.auth_port,
            'auth_prompt_msg': self.auth_prompt_msg,
            'flow_success_msg': self.auth_flow_success_msg
        }

    # config key -> (attribute, converter, whether a change means reconnecting)
    __CONFIG_KEYS = {
        'port': ('auth_port', int, False),
        'server': ('auth_server', str, False),
        'auth_prompt_msg': ('auth_prompt_msg', str, False),
        'flow_success_msg': ('auth_flow_success_msg', str, False),
        'cache': ('_GWSAccess__cache', Path, True),
        'secrets': ('_GWSAccess__secrets', Path, True),
    }

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict, any key can be left out.
        """
        reconnect = False
        for key, (attr, convert, needs_reconnect) in self.__CONFIG_KEYS.items():
            v = config.get(key, None)
            if v is not None:
                setattr(self, attr, convert(v))
                reconnect = reconnect or needs_reconnect
        if config.get('scopes'):
            self.__scopes = self.resolve_scopes(config['scopes'])
            reconnect = True
        if reconnect and self.connected:
            self.connect()

    def reset(self) -> None:
        """
        Reset all connection state to defaults, honouring the environment overrides.
        """
        self.__secrets = Path(os.environ.get(self.SECRETS_ENV) or self.__DEFAULT_SECRETS)
        self.__cache = Path(os.environ.get(self.CACHE_ENV) or self.__DEFAULT_CACHE)
        self.__discovery_cache = gws_discovery_cache.autodetect()
        self.__creds = None
        self.__scopes = []
        self.__services = {}
        self.auth_server = 'localhost'
        self.auth_port = 0
        self.auth_prompt_msg = self.__DEFAULT_AUTH_PROMPT_MSG
        self.auth_flow_success_msg = self.__DEFAULT_AUTH_FLOW_SUCCESS_MSG

    def refresh(self) -> bool:
        """
        Check the current scopes and if new requested ones are not present
        in the current session_scopes, refresh the access.
        """
        scopes_accounted = all(s in self.session_scopes for s in self.__scopes)
        if self.connected and not scopes_accounted:
            return self.connect()
        return True

    def _load_cache(self, requested_scopes: list[str]) -> None:
        """
        Pull user credentials out of the token cache if it covers the requested scopes,
        otherwise the cache is stale and goes.
        """
        if not (self.__cache.exists() and self.__cache.is_file()):
            return
        cf = self.__cache.resolve()
        with open(cf, 'r', encoding='utf-8') as f:
            scopes = json.load(f).get('scopes', [])
        if all(s in scopes for s in requested_scopes):
            self.__creds = Credentials.from_authorized_user_file(str(cf), requested_scopes)
        else:
            logger.info("token cache %s missing requested scopes, discarding", cf)
            self.__cache.unlink()

    def _save_cache(self, requested_scopes: list[str]) -> None:
        # ADC credentials don't have a refresh token worth keeping
        refresh_token = getattr(self.__creds, 'refresh_token', None)
        if not refresh_token:
            return
        user_info = {'refresh_token': refresh_token, 'client_id': self.__creds.client_id,
                     'client_secret': self.__creds.client_secret, 'scopes': requested_scopes}
        with open(self.__cache.resolve(), 'w', encoding='utf-8') as f:
            json.dump(user_info, f, ensure_ascii=False, indent=2)

    def connect(self) -> bool:
        """
        Establish a new authentication session.
        Order of attempts: token cache (refreshing if expired), installed app flow
        from the client secrets, then Application Default Credentials.
        """
        self.clear()
        if not self.__scopes:
            return False
        requested_scopes = copy.copy(self.__scopes)
        self._load_cache(requested_scopes)
        if not self.connected and self.__creds and self.__creds.refresh_token:
            try:
                self.__creds.refresh(Request())
            except google.auth.exceptions.RefreshError as e:
                logger.warning("failed to refresh stored creds: %s, re-authorizing", e)
            if not self.connected:
                self.__creds = None
                self.__cache.unlink(missing_ok=True)

        if not self.connected:
            if self.__secrets.exists() and self.__secrets.is_file():
                flow = InstalledAppFlow.from_client_secrets_file(str(self.__secrets), requested_scopes)
                self.__creds = flow.run_local_server(host=self.auth_server, port=self.auth_port,
                                                     authorization_prompt_message=self.auth_prompt_msg,
                                                     success_message=self.auth_flow_success_msg)
            else:
                # this will look at the GOOGLE_APPLICATION_CREDENTIALS envvar and
                # other cloud default locations
                try:
                    self.__creds, _ = google.auth.default(scopes=requested_scopes)
                    if not self.__creds.valid:
                        self.__creds.refresh(Request())
                except google.auth.exceptions.DefaultCredentialsError as e:
                    logger.warning("no client secrets at %s and no default credentials: %s",
                                   self.__secrets, e)
                    self.__creds = None

        if self.connected:
            self._save_cache(requested_scopes)
            logger.debug("connected with scopes %s", requested_scopes)
        return self.connected

    def get_service(self, name: str, version: str) -> Resource|None:
        """
        Build the requested service if not already available, connecting if required.
        Can return None if no connection present.
        """
        if not self.connected:
            self.connect()
        if not self.connected:
            return None
        id = f'{name}:{version}'
        s = self.__services.get(id, None)
        if s is None:
            s = build(name, version, credentials=self.__creds, cache=self.__discovery_cache)
            self.__services[id] = s
        return s

    def new_http(self) -> google_auth_httplib2.AuthorizedHttp:
        """
        A fresh authorized transport.  httplib2 is not thread safe so anything
        executing requests from worker threads needs one of these per request.
        """
        if not self.connected:
            self.connect()
        if not self.connected:
            raise GWSAccessError("Not connected to Google Work Space")
        return google_auth_httplib2.AuthorizedHttp(self.__creds, http=httplib2.Http())

gws = __GWSAccess()

def require_service(name: str, version: str) -> Resource:
    """
    Like gws.get_service() but raise rather than hand back None.
    The API wrappers all come through here.
    """
    s = gws.get_service(name, version)
    if s is None:
        raise GWSAccessError(f"Unable to authenticate for {name}:{version} with scopes {gws.scopes}")
    return s

def service(name: str, version: str):
    """
    Simple decorator to deliver the required service to a function that
    needs access to a GWS service to build a request.
    A service passed in by the caller is used as is, which keeps worker
    threads off the shared session.
    param: name: service name
    param: version: service version
    """
    def _inner_decorator(f):
        @wraps(f)
        def wrapped(*args,**kwargs):
            if kwargs.get('service') is None:
                kwargs['service'] = require_service(name, version)
            return f(*args, **kwargs)
        return wrapped
    return _inner_decorator
