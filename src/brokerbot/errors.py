"""Exceptions raised inside BrokerBot.

Only the transport layer raises these; the dispatch wrappers in
``brokerbot.discord_transport`` catch and log them so callers see a
``None`` result instead.
"""

from typing import Optional


class BrokerBotError(Exception):
    """Base class for BrokerBot errors."""


class DiscordSendError(BrokerBotError):
    """A Discord REST call did not return a 2xx status.

    Parameters
    ----------
    status : int or None
        HTTP status code, or None when no response was received
    body : str
        Response body, truncated to 500 characters
    """

    def __init__(self, status: Optional[int], body: str = "") -> None:
        self.status = status
        self.body = body[:500]
        super().__init__(f"discord http_status={status} body={self.body!r}")
