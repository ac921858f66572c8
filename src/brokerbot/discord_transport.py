from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence

import requests  # runtime dep

from .config import get_settings
from .embeds import create_message_embed, create_multi_message_embed, message_prefix
from .errors import DiscordSendError
from .logging_utils import get_logger
from .models import TickerValue

log = get_logger("discord_transport")


class ChannelSender(Protocol):
    """Anything that can post to a Discord channel.

    Both methods return the created message payload and raise on failure.
    """

    def send_text(self, channel_id: str, text: str) -> Dict[str, Any]:
        ...

    def send_embed(self, channel_id: str, embed: Dict[str, Any]) -> Dict[str, Any]:
        ...


class DiscordRestSender:
    """ChannelSender backed by the Discord REST API.

    Posts to ``{api_base}/channels/{channel_id}/messages`` using bot-token
    auth. Values not passed in are read from settings.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        self.token = token if token is not None else settings.discord_bot_token
        self.api_base = (api_base or settings.discord_api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.discord_timeout_secs
        self.session = session or requests.Session()

    def _post(self, channel_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_base}/channels/{channel_id}/messages"
        headers = {"Authorization": f"Bot {self.token}"}
        try:
            resp = self.session.post(
                url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise DiscordSendError(None, str(exc)) from exc
        status = getattr(resp, "status_code", None)
        if status is None or not 200 <= status < 300:
            raise DiscordSendError(status, getattr(resp, "text", "") or "")
        try:
            return resp.json()
        except ValueError as exc:
            raise DiscordSendError(status, getattr(resp, "text", "") or "") from exc

    def send_text(self, channel_id: str, text: str) -> Dict[str, Any]:
        return self._post(channel_id, {"content": text})

    def send_embed(self, channel_id: str, embed: Dict[str, Any]) -> Dict[str, Any]:
        return self._post(channel_id, {"embeds": [embed]})


def send_message(
    sender: ChannelSender,
    channel_id: str,
    msg: str,
    test_prefix: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Send a plain-text message. Returns the message, or None on failure."""
    msg = f"{message_prefix(test_prefix)}{msg}"
    try:
        return sender.send_text(channel_id, msg)
    except Exception as exc:
        log.warning(
            "discord_send_failed kind=text channel=%s msg=%r err=%s",
            channel_id,
            msg,
            exc,
        )
        return None


def send_message_embed(
    sender: ChannelSender, channel_id: str, embed: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """Send a rich embed. Returns the message, or None on failure."""
    try:
        return sender.send_embed(channel_id, embed)
    except Exception as exc:
        log.warning(
            "discord_send_failed kind=embed channel=%s embed=%r err=%s",
            channel_id,
            embed,
            exc,
        )
        return None


def send_quotes(
    sender: ChannelSender,
    channel_id: str,
    ticker_values: Sequence[TickerValue],
    test_prefix: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    Post quotes for one or more tickers.

    A single quote gets the full single-ticker embed; several are grouped
    into one multi-field embed. Nothing is sent for an empty sequence.
    """
    if not ticker_values:
        return None
    if len(ticker_values) == 1:
        embed = create_message_embed(ticker_values[0], test_prefix)
    else:
        embed = create_multi_message_embed(ticker_values, test_prefix)
    if embed is None:
        return None
    return send_message_embed(sender, channel_id, embed)
