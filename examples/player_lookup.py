"""Example: look up a player and list their faction's online members.

Usage:
    DEPSCIAN_API_KEY=... python examples/player_lookup.py 1 Nick_Name
"""

import asyncio
import logging
import sys

from depscian import ClientConfig, DepscianClient, NotFoundError

logger = logging.getLogger(__name__)


async def online_faction_members(
    client: DepscianClient, server_id: int, nickname: str
) -> list[str] | None:
    """Return the online members of ``nickname``'s faction.

    Returns None when the player, their faction or its roster is not found.
    """
    try:
        player = await client.player.find(server_id, nickname)
    except NotFoundError:
        logger.info("Player %s not found on server %d", nickname, server_id)
        return None

    logger.info("Found %s (level %s)", player.name, player.level)
    if not player.fraction:
        return None

    # The player record carries the faction display name, while /fraction
    # expects the faction id from /fractions.
    fractions = await client.fractions.list(server_id)
    fraction_id = next(
        (f.id for f in fractions.fractions if player.fraction in (f.name, f.id)),
        None,
    )
    if fraction_id is None:
        logger.info("Faction %s not listed on server %d", player.fraction, server_id)
        return None

    try:
        members = await client.fractions.get_members(server_id, fraction_id)
    except NotFoundError:
        logger.info("No roster for faction %s", fraction_id)
        return None

    online = [member.name for member in members.members if member.is_online]
    logger.info("%d members of %s online: %s", len(online), player.fraction, online)
    return online


async def main(server_id: int, nickname: str) -> None:
    config = ClientConfig.from_env()

    async with DepscianClient.from_config(config) as client:
        await online_faction_members(client, server_id, nickname)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if len(sys.argv) != 3:
        print(f"usage: {sys.argv[0]} SERVER_ID NICKNAME")
        sys.exit(2)
    asyncio.run(main(int(sys.argv[1]), sys.argv[2]))
