"""Run a user-configured shell command per download."""

import shlex
import subprocess

from ..errors import ClientError
from ..models import Item
from .base import Client


def substitute(template: str, item: Item) -> str:
    """Fill ``{torrent}``, ``{magnet}``, ``{title}`` and ``{file}`` placeholders.

    Values come from the listing, so each one is shell-quoted.
    """
    return (
        template.replace("{torrent}", shlex.quote(item.torrent_link or ""))
        .replace("{magnet}", shlex.quote(item.magnet_link or ""))
        .replace("{title}", shlex.quote(item.title))
        .replace("{file}", shlex.quote(item.file_name or ""))
    )


class CmdClient(Client):
    """Shell command client."""

    name = "Command"

    def send(self, item: Item, state) -> None:
        conf = state.config.clients.cmd
        if not conf.cmd.strip():
            raise ClientError(f"{self.name}: no command configured")
        args = shlex.split(conf.shell_cmd) + [substitute(conf.cmd, item)]
        result = subprocess.run(args, capture_output=True, text=True)
        if result.returncode != 0:
            stderr = result.stderr.strip() or f"exit status {result.returncode}"
            raise ClientError(f"{self.name}: command failed\n{stderr}")
