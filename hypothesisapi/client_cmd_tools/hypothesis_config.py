"""``hypothesis-config``: store the developer key, username and API URL used by :class:`hypothesisapi.Api`."""
import argparse
import logging
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table
from hypothesisapi import configs
from hypothesisapi.utils.logging_utils import load_cmdline_logging_config

console = Console()
_LOGGER = logging.getLogger(__name__)

DEVELOPER_PAGE = 'https://hypothes.is/account/developer'


def _mask(value: str) -> str:
    if len(value) <= 8:
        return '*' * len(value)
    return f"{value[:4]}{'*' * (len(value) - 8)}{value[-4:]}"


def settings_table() -> Table:
    """One row per setting: its effective value and the place it was read from."""
    table = Table(title='Hypothesis client settings')
    table.add_column('Setting', style='cyan')
    table.add_column('Value')
    table.add_column('Source', style='dim')
    for setting in configs.SETTINGS:
        resolved = configs.resolve(setting)
        if resolved is None:
            table.add_row(setting.label, '[dim]not set[/dim]', f'${setting.env_var} or {configs.config_path()}')
            continue
        value = _mask(resolved.value) if setting.secret else resolved.value
        table.add_row(setting.label, value, resolved.source)
    return table


def _url_argument(value: str) -> str:
    if not value.startswith(('http://', 'https://')):
        raise argparse.ArgumentTypeError(f"{value!r} is not an http(s) URL")
    return value.rstrip('/')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hypothesis-config',
        description='Save the settings used to reach the Hypothesis API. '
                    'Without arguments, prints the current settings.',
        epilog=f'Developer keys are issued at {DEVELOPER_PAGE}',
    )
    parser.add_argument('--api-key', help='developer key to save')
    parser.add_argument('--username', help='username to save (the part before @ in acct:NAME@hypothes.is)')
    parser.add_argument('--url', type=_url_argument, help='API root to save, e.g. https://hypothes.is/api')
    parser.add_argument('--clear', action='store_true', help='delete the saved settings file')
    parser.add_argument('-y', '--yes', action='store_true', help='do not ask before --clear')
    parser.add_argument('--check', action='store_true', help='run a one-row search with the resulting settings')
    return parser


def check_connection() -> bool:
    from hypothesisapi.api.client import Api
    from hypothesisapi.exceptions import HypothesisException
    try:
        api = Api(check_connection=True)
    except HypothesisException as e:
        console.print(f"[red]Connection failed:[/red] {e}")
        return False
    console.print(f"[green]Connected[/green] to {api.config.server_url} as {api.user or 'an anonymous user'}.")
    return True


def main(argv: list[str] | None = None) -> int:
    load_cmdline_logging_config()
    args = build_parser().parse_args(argv)

    if args.clear:
        if args.yes or Confirm.ask(f"Delete {configs.config_path()}?", default=False):
            if configs.clear_file():
                console.print("Saved settings deleted.")
            else:
                console.print("[dim]No saved settings to delete.[/dim]")

    updates = [(configs.API_KEY, args.api_key),
               (configs.USERNAME, args.username),
               (configs.API_URL, args.url)]
    for setting, value in updates:
        if value is None:
            continue
        configs.save_value(setting, value)
        console.print(f"{setting.label} saved.")
        resolved = configs.resolve(setting)
        if resolved is not None and resolved.value != value:
            _LOGGER.warning(f"{setting.label} is still taken from {resolved.source}, which overrides the saved value.")

    if args.check:
        return 0 if check_connection() else 1
    if not args.clear and all(value is None for _, value in updates):
        console.print(settings_table())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
