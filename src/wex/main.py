"""Entry point for ``wex-info``: print the account summary for the configured key.

Reads credentials from WEX_API_KEY / WEX_API_SECRET (environment or .env),
calls getInfo once and prints balances, key rights and counters.
"""

import asyncio
import sys

from wex.config import AppSettings
from wex.exceptions import MissingCredentialsError, TradeError
from wex.exchange.trade_api import TradeAPI
from wex.exchange.types import AccountInfo
from wex.logging import get_logger, setup_logging

logger = get_logger(__name__)


def format_account(info: AccountInfo) -> str:
    """Render an AccountInfo as a short plain-text report."""
    lines = [f"server_time: {info.server_time}"]
    lines.append(
        "rights: "
        + ", ".join(
            f"{name}={'yes' if allowed else 'no'}"
            for name, allowed in (
                ("info", info.rights.info),
                ("trade", info.rights.trade),
                ("withdraw", info.rights.withdraw),
            )
        )
    )
    lines.append(f"transaction_count: {info.transaction_count}")
    lines.append(f"open_orders: {info.open_orders}")
    lines.append("funds:")
    for currency, balance in sorted(info.funds.items()):
        if balance:
            lines.append(f"  {currency}: {balance}")
    return "\n".join(lines)


async def run(settings: AppSettings) -> int:
    """Fetch and print account info. Returns the process exit code."""
    async with TradeAPI(settings.wex) as api:
        try:
            info = await api.get_info()
        except (TradeError, MissingCredentialsError) as e:
            logger.error("account_info_failed", error=str(e))
            return 1
    print(format_account(info))
    return 0


def main() -> None:
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
