"""Persisted client settings.

A setting is looked up in its environment variable first, then (developer key
only) in ``~/.netrc`` under the ``hypothes.is`` machine, then in a YAML file
kept in the user config directory.
"""
import logging
import netrc
import os
from pathlib import Path
from typing import Any, NamedTuple
import yaml
from platformdirs import PlatformDirs

_LOGGER = logging.getLogger(__name__)


class Setting(NamedTuple):
    key: str
    env_var: str
    label: str
    secret: bool = False


API_KEY = Setting('api_key', 'HYPOTHESIS_KEY', 'Developer key', secret=True)
USERNAME = Setting('username', 'HYPOTHESIS_NAME', 'Username')
API_URL = Setting('api_url', 'HYPOTHESIS_API_URL', 'API URL')
SETTINGS = (API_KEY, USERNAME, API_URL)

NETRC_MACHINE = 'hypothes.is'
CONFIG_FILENAME = 'settings.yaml'

DIRS = PlatformDirs(appname='hypothesisapi')


class Resolved(NamedTuple):
    value: str
    source: str


def config_path() -> Path:
    return Path(DIRS.user_config_path) / CONFIG_FILENAME


def load_file() -> dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    with path.open('r') as f:
        return yaml.safe_load(f) or {}


def save_value(setting: Setting, value: str) -> None:
    stored = load_file()
    stored[setting.key] = value
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w') as f:
        yaml.safe_dump(stored, f)
    _LOGGER.debug(f"{setting.label} written to {path}.")


def clear_file() -> bool:
    """Delete the settings file. Returns whether there was one."""
    path = config_path()
    if not path.exists():
        return False
    path.unlink()
    return True


def _netrc_password(machine: str) -> str | None:
    try:
        entry = netrc.netrc().authenticators(machine)
    except FileNotFoundError:
        return None
    except (OSError, netrc.NetrcParseError) as e:
        _LOGGER.warning(f"Ignoring unreadable .netrc file: {e}")
        return None
    if entry is None:
        return None
    return entry[2]


def resolve(setting: Setting) -> Resolved | None:
    """Find the effective value of ``setting`` and where it came from."""
    from_env = os.environ.get(setting.env_var)
    if from_env is not None:
        return Resolved(from_env, f'${setting.env_var}')

    if setting is API_KEY:
        from_netrc = _netrc_password(NETRC_MACHINE)
        if from_netrc is not None:
            return Resolved(from_netrc, '~/.netrc')

    stored = load_file().get(setting.key)
    if stored is not None:
        return Resolved(str(stored), str(config_path()))
    return None


def get_value(setting: Setting) -> str | None:
    resolved = resolve(setting)
    return None if resolved is None else resolved.value
