"""
Login gate.

A fixed username/password pair guards the catalog. This is a convenience gate
for a single shop counter, not a security boundary: the "session" is a boolean
kept in a small JSON flag file so it survives restarts.
"""
import json
import logging
from pathlib import Path
from typing import Union

from partshop.core import config
from partshop.core.errors import AuthenticationFailed

log = logging.getLogger(__name__)

# "Username or password is incorrect"
LOGIN_ERROR_MESSAGE = "အသုံးပြုသူအမည် သို့မဟုတ် စကားဝှက် မှားယွင်းနေပါသည်"


class AuthSession:
    def __init__(
        self,
        flag_path: Union[str, Path] = config.AUTH_FLAG_PATH,
        username: str = config.AUTH_USERNAME,
        password: str = config.AUTH_PASSWORD,
    ):
        self.flag_path = Path(flag_path)
        self._username = username
        self._password = password
        self.last_error = ""
        self.is_authenticated = self._read_flag()

    def _read_flag(self) -> bool:
        try:
            data = json.loads(self.flag_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return False
        except (OSError, json.JSONDecodeError) as e:
            log.warning(f"Ignoring unreadable auth flag {self.flag_path}: {e}")
            return False
        return isinstance(data, dict) and data.get("authenticated") is True

    def _write_flag(self) -> None:
        try:
            self.flag_path.write_text(json.dumps({"authenticated": self.is_authenticated}), encoding="utf-8")
        except OSError as e:
            # The in-memory session still works; only persistence across restarts is lost
            log.warning(f"Could not persist auth flag to {self.flag_path}: {e}")

    def check_credentials(self, username: str, password: str) -> None:
        if username != self._username or password != self._password:
            raise AuthenticationFailed(LOGIN_ERROR_MESSAGE)

    def login(self, username: str, password: str) -> bool:
        try:
            self.check_credentials(username, password)
        except AuthenticationFailed as e:
            self.last_error = str(e)
            log.info("Login rejected: wrong credentials.")
            return False

        self.is_authenticated = True
        self.last_error = ""
        self._write_flag()
        return True

    def logout(self) -> None:
        self.is_authenticated = False
        self.last_error = ""
        self._write_flag()
