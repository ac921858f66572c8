"""BrokerBot package.

Formats ticker quotes into Discord messages: alias expansion and token
clean-up, quote embeds for one or many tickers, and thin wrappers for
posting them to a channel.
"""

__all__: list[str] = []
