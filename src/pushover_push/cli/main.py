"""
Pushover CLI: the `push` command.

  push -t TOKEN -u USER -m "Backup finished"
  push -m "Disk full" -p 2 -r 60 -e 3600 --title "db01"
  push -m "Snapshot" -a ./graph.png --attachment-type image/png

Token, user and device fall back to PUSHOVER_TOKEN / PUSHOVER_USER /
PUSHOVER_DEVICE and then to ~/.pushover/config.json.
"""

import asyncio
import logging
from typing import Any, Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install pushover-push[cli]")

import httpx

from pushover_push import __version__
from pushover_push.builder import build_message
from pushover_push.client import AsyncPushover
from pushover_push.config import ENV_VARS, load_config
from pushover_push.errors import PushoverError
from pushover_push.response import interpret_response, report

console = Console(soft_wrap=True)
logger = logging.getLogger("pushover_push.cli")

PRIORITIES = (-2, -1, 0, 1, 2)


class PriorityType(click.ParamType):
    name = "priority"

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> int:
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            parsed = None
        if parsed not in PRIORITIES:
            self.fail(f"{value!r} must be one of -2, -1, 0, 1, or 2.", param, ctx)
        return parsed


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _run(coro):
    return asyncio.run(coro)


async def _send(fields: dict[str, Any], attachment_path: Optional[str]) -> None:
    message = build_message(attachment_path=attachment_path, **fields)
    async with AsyncPushover() as client:
        resp = await client.push(message)
    result = interpret_response(resp)
    if result.ok:
        logger.info("Message sent (request %s)", result.request or "unknown")
    report(result, console)


@click.command("push", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="push")
@click.option("-t", "--token", envvar=ENV_VARS["token"], help="Application's API token.")
@click.option("-u", "--user", envvar=ENV_VARS["user"], help="User or group key.")
@click.option("-m", "--message", required=True, help="Message body.")
@click.option("-p", "--priority", type=PriorityType(), help="Priority: -2, -1, 0 (default), 1, or 2.")
@click.option("-r", "--retry", type=int, help="How often (in seconds) a priority 2 notification is resent.")
@click.option("-e", "--expire", type=int, help="How many seconds a priority 2 notification keeps retrying.")
@click.option("-c", "--callback", help="URL called when a priority 2 notification is acknowledged.")
@click.option("-d", "--device", envvar=ENV_VARS["device"], help="Device name.")
@click.option("-s", "--sound", help="Notification sound.")
@click.option("--timestamp", type=int, help="UNIX timestamp to display instead of the receive time.")
@click.option("--title", help="Message title.")
@click.option("--ttl", type=int, help="Seconds after which the notification disappears.")
@click.option("--url", help="A supplementary URL to show with the message.")
@click.option("--url-title", "url_title", help="Title for the URL given with --url.")
@click.option("--html", is_flag=True, default=None, help="Parse the message as HTML.")
@click.option("-a", "--attachment", "attachment_path", type=click.Path(dir_okay=False),
              help="Path to an image file.")
@click.option("--attachment-base64", "attachment_base64", help="Base64-encoded image attachment.")
@click.option("--attachment-type", "attachment_type", help="Attachment MIME type.")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None,
              help="Config file (default ~/.pushover/config.json).")
@click.option("-v", "--verbose", is_flag=True, help="Log request details.")
def main(attachment_path: Optional[str], config_file: Optional[str], verbose: bool, **fields: Any):
    """Send Pushover (https://pushover.net/) notifications from the command line."""
    _setup_logging(verbose)

    for key, value in load_config(config_file).items():
        if fields.get(key) is None:
            fields[key] = value
    for key, flag in (("token", "--token"), ("user", "--user")):
        if not fields.get(key):
            raise click.UsageError(
                f"Missing option '{flag}' (or {ENV_VARS[key]}, or '{key}' in the config file)."
            )

    try:
        _run(_send(fields, attachment_path))
    except PushoverError as e:
        console.print(f"Error: {e}", markup=False, highlight=False)
        raise SystemExit(1)
    except httpx.TransportError as e:
        console.print(f"Error: could not reach Pushover ({str(e) or type(e).__name__}).", markup=False, highlight=False)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
