"""Tests for download clients, with subprocess, HTTP and clipboard patched out."""

from __future__ import annotations

import shlex
import shutil
import subprocess
from unittest.mock import MagicMock, patch

import pyperclip
import pytest
import requests

from core.clients import (
    ClipboardClient,
    CmdClient,
    DefaultAppClient,
    QBittorrentClient,
    TorrentFileClient,
    TransmissionClient,
    get_client,
)
from core.clients.cmd import substitute
from core.errors import ClientError
from core.state import AppState


def response(status: int = 200, text: str = "", json_data=None, headers=None, content: bytes = b"") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    resp.content = content
    resp.headers = headers or {}
    resp.json.return_value = json_data
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return resp


@pytest.fixture
def config_state() -> AppState:
    return AppState()


def test_substitute_fills_placeholders(make_item):
    item = make_item(id=5, title="Show 05")
    assert substitute("{title}|{torrent}|{magnet}|{file}", item) == (
        "'Show 05'|https://nyaa.si/download/5.torrent|'magnet:?xt=urn:btih:"
        f"{5:040x}'|5.torrent"
    )
    assert substitute("{magnet}", make_item(magnet_link=None)) == "''"


def test_substitute_keeps_hostile_titles_as_one_argument(make_item):
    title = 'x"; touch pwned; echo "'
    command = substitute("echo {title}", make_item(title=title))
    assert shlex.split(command) == ["echo", title]


@pytest.mark.asyncio
async def test_cmd_runs_through_configured_shell(config_state, make_item):
    config_state.config.clients.cmd.cmd = "echo {title}"
    config_state.config.clients.cmd.shell_cmd = "bash -c"
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with patch("core.clients.cmd.subprocess.run", return_value=done) as run:
        await CmdClient().download(make_item(title="Show"), config_state)

    assert run.call_args.args[0] == ["bash", "-c", "echo Show"]


@pytest.mark.asyncio
@pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")
async def test_cmd_title_cannot_run_commands(config_state, make_item, tmp_path):
    marker = tmp_path / "pwned"
    config_state.config.clients.cmd.cmd = "echo {title}"
    config_state.config.clients.cmd.shell_cmd = "sh -c"

    await CmdClient().download(make_item(title=f'x"; touch {marker}; echo "'), config_state)

    assert not marker.exists()


@pytest.mark.asyncio
async def test_cmd_failure_reports_stderr(config_state, make_item):
    failed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="curl: (6) no host\n")
    with patch("core.clients.cmd.subprocess.run", return_value=failed):
        with pytest.raises(ClientError, match="command failed\ncurl: \\(6\\) no host"):
            await CmdClient().download(make_item(), config_state)


@pytest.mark.asyncio
async def test_cmd_missing_shell_is_a_client_error(config_state, make_item):
    with patch("core.clients.cmd.subprocess.run", side_effect=FileNotFoundError("sh")):
        with pytest.raises(ClientError, match="Command: sh"):
            await CmdClient().download(make_item(), config_state)


@pytest.mark.asyncio
async def test_default_app_uses_platform_opener(config_state, make_item):
    item = make_item()
    with patch("core.clients.default_app.platform.system", return_value="Linux"), patch(
        "core.clients.default_app.subprocess.run"
    ) as run:
        await DefaultAppClient().download(item, config_state)

    assert run.call_args.args[0] == ["xdg-open", item.magnet_link]


@pytest.mark.asyncio
async def test_default_app_on_windows_skips_the_shell(config_state, make_item):
    item = make_item(magnet_link="magnet:?xt=urn:btih:abc&dn=Show&tr=udp://t.example:80")
    with patch("core.clients.default_app.platform.system", return_value="Windows"), patch(
        "core.clients.default_app.os.startfile", create=True
    ) as startfile, patch("core.clients.default_app.subprocess.run") as run:
        await DefaultAppClient().download(item, config_state)

    startfile.assert_called_once_with(item.magnet_link)
    run.assert_not_called()


@pytest.mark.asyncio
async def test_default_app_failure(config_state, make_item):
    error = subprocess.CalledProcessError(1, "xdg-open")
    with patch("core.clients.default_app.platform.system", return_value="Linux"), patch(
        "core.clients.default_app.subprocess.run", side_effect=error
    ):
        with pytest.raises(ClientError, match="failed to open link"):
            await DefaultAppClient().download(make_item(), config_state)


@pytest.mark.asyncio
async def test_qbittorrent_logs_in_then_adds(config_state, make_item):
    conf = config_state.config.clients.qbit
    conf.base_url = "http://qbit.local:8080/"
    conf.category = "anime"
    item = make_item()

    session = MagicMock()
    session.__enter__.return_value = session
    session.headers = {}
    session.post.side_effect = [response(text="Ok."), response(text="Ok.")]
    with patch("core.clients.qbittorrent.requests.Session", return_value=session):
        await QBittorrentClient().download(item, config_state)

    login, add = session.post.call_args_list
    assert login.args[0] == "http://qbit.local:8080/api/v2/auth/login"
    assert login.kwargs["data"] == {"username": "admin", "password": "adminadmin"}
    assert add.args[0] == "http://qbit.local:8080/api/v2/torrents/add"
    assert add.kwargs["data"] == {"urls": item.magnet_link, "paused": "false", "category": "anime"}
    assert session.headers["Referer"] == "http://qbit.local:8080"


@pytest.mark.asyncio
async def test_qbittorrent_rejected_login(config_state, make_item):
    session = MagicMock()
    session.__enter__.return_value = session
    session.headers = {}
    session.post.return_value = response(text="Fails.")
    with patch("core.clients.qbittorrent.requests.Session", return_value=session):
        with pytest.raises(ClientError, match="login failed"):
            await QBittorrentClient().download(make_item(), config_state)
    assert session.post.call_count == 1


@pytest.mark.asyncio
async def test_qbittorrent_unreachable(config_state, make_item):
    session = MagicMock()
    session.__enter__.return_value = session
    session.headers = {}
    session.post.side_effect = requests.ConnectionError("refused")
    with patch("core.clients.qbittorrent.requests.Session", return_value=session):
        with pytest.raises(ClientError, match="qBittorrent: request failed"):
            await QBittorrentClient().download(make_item(), config_state)


@pytest.mark.asyncio
async def test_transmission_session_handshake(config_state, make_item):
    client = TransmissionClient()
    conflict = response(status=409, headers={"X-Transmission-Session-Id": "abc123"})
    ok = response(json_data={"result": "success", "arguments": {"torrent-added": {"id": 1}}})
    with patch("core.clients.transmission.requests.post", side_effect=[conflict, ok]) as post:
        await client.download(make_item(), config_state)

    first, second = post.call_args_list
    assert first.kwargs["headers"] == {}
    assert second.kwargs["headers"] == {"X-Transmission-Session-Id": "abc123"}
    assert second.kwargs["json"]["method"] == "torrent-add"
    assert second.kwargs["auth"] is None

    # the session id is reused for the next request
    with patch("core.clients.transmission.requests.post", return_value=ok) as post:
        await client.download(make_item(), config_state)
    assert post.call_count == 1


@pytest.mark.asyncio
async def test_transmission_errors(config_state, make_item):
    duplicate = response(json_data={"result": "success", "arguments": {"torrent-duplicate": {"id": 1}}})
    with patch("core.clients.transmission.requests.post", return_value=duplicate):
        with pytest.raises(ClientError, match="already added"):
            await TransmissionClient().download(make_item(), config_state)

    with patch("core.clients.transmission.requests.post", return_value=response(status=401)):
        with pytest.raises(ClientError, match="authentication failed"):
            await TransmissionClient().download(make_item(), config_state)

    refused = response(json_data={"result": "invalid or corrupt torrent file"})
    with patch("core.clients.transmission.requests.post", return_value=refused):
        with pytest.raises(ClientError, match="invalid or corrupt"):
            await TransmissionClient().download(make_item(), config_state)


@pytest.mark.asyncio
async def test_torrent_file_is_written(config_state, make_item, tmp_path):
    conf = config_state.config.clients.download
    conf.save_dir = str(tmp_path / "torrents")
    with patch("core.clients.torrent_file.requests.get", return_value=response(content=b"d8:announce")) as get:
        await TorrentFileClient().download(make_item(id=9), config_state)

    assert get.call_args.args[0] == "https://nyaa.si/download/9.torrent"
    assert (tmp_path / "torrents" / "9.torrent").read_bytes() == b"d8:announce"


@pytest.mark.asyncio
async def test_torrent_file_respects_overwrite(config_state, make_item, tmp_path):
    conf = config_state.config.clients.download
    conf.save_dir = str(tmp_path)
    conf.overwrite = False
    (tmp_path / "9.torrent").write_bytes(b"old")
    with patch("core.clients.torrent_file.requests.get") as get:
        with pytest.raises(ClientError, match="already exists"):
            await TorrentFileClient().download(make_item(id=9), config_state)
    get.assert_not_called()


@pytest.mark.asyncio
async def test_torrent_file_needs_a_torrent_link(config_state, make_item):
    with pytest.raises(ClientError, match="has no torrent file"):
        await TorrentFileClient().download(make_item(torrent_link=None), config_state)


@pytest.mark.asyncio
async def test_clipboard_copies_preferred_link(config_state, make_item):
    item = make_item()
    config_state.config.clients.clipboard.use_magnet = False
    with patch("core.clients.clipboard.pyperclip.copy") as copy:
        await ClipboardClient().download(item, config_state)
    copy.assert_called_once_with(item.torrent_link)


@pytest.mark.asyncio
async def test_clipboard_unavailable(config_state, make_item):
    with patch("core.clients.clipboard.pyperclip.copy", side_effect=pyperclip.PyperclipException("no xclip")):
        with pytest.raises(ClientError, match="failed to copy"):
            await ClipboardClient().download(make_item(), config_state)


@pytest.mark.asyncio
async def test_item_without_links(config_state, make_item):
    with pytest.raises(ClientError, match="no download link"):
        await ClipboardClient().download(make_item(torrent_link=None, magnet_link=None), config_state)


def test_client_registry_order():
    assert get_client("Download").name == "Download"
    assert get_client("uTorrent") is None
