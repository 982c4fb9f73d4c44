"""Twitter API client (v1.1 endpoints, app-only bearer token).

Provides access to the follower list of an account:
- Follower ids (one page, up to 5000 per call)
- User hydration (100 ids per call)

API Documentation: https://developer.twitter.com/en/docs/twitter-api/v1

Usage:
    from sightline.clients.twitter import TwitterClient

    with TwitterClient(bearer_token="your_token") as client:
        users = client.get_followers("some_handle")
"""

import logging
from typing import Any

from sightline.clients.base import BaseClient

logger = logging.getLogger(__name__)

# Service caps per call
MAX_FOLLOWER_IDS = 5000
LOOKUP_BATCH_SIZE = 100


class TwitterClient(BaseClient):
    """Client for Twitter follower endpoints.

    Args:
        bearer_token: App-only bearer token
        rate_limit: Max requests per second (default: 1)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(self, bearer_token: str, rate_limit: int = 1, timeout: float = 30.0) -> None:
        super().__init__(
            base_url="https://api.twitter.com/1.1",
            headers={"Authorization": f"Bearer {bearer_token}"},
            rate_limit=rate_limit,
            timeout=timeout,
        )

    def get_follower_ids(self, screen_name: str, count: int = MAX_FOLLOWER_IDS) -> list[str]:
        """Get follower ids for an account (single call, no pagination).

        Accounts with more followers than ``count`` are truncated: the next
        cursor is logged but not followed.

        Args:
            screen_name: Account handle, without the @
            count: Max ids to return (capped at 5000)

        Returns:
            List of follower ids as strings, most recent followers first
        """
        params: dict[str, Any] = {
            "screen_name": screen_name,
            "count": min(count, MAX_FOLLOWER_IDS),
            "stringify_ids": "true",
        }
        result = self.get("/followers/ids.json", params=params)
        ids = [str(i) for i in result.get("ids", [])]

        next_cursor = result.get("next_cursor_str") or str(result.get("next_cursor", 0))
        if next_cursor not in ("0", ""):
            logger.warning(
                "@%s has more than %d followers, only the first page is used",
                screen_name, len(ids),
            )
        return ids

    def lookup_users(self, user_ids: list[str]) -> list[dict[str, Any]]:
        """Hydrate user ids into full user objects.

        Args:
            user_ids: Ids to look up; sent in batches of 100

        Returns:
            List of user objects. Each has: id_str, screen_name, description,
            location, followers_count, statuses_count, favourites_count and,
            when the account has tweeted, an embedded ``status``.
        """
        users: list[dict[str, Any]] = []
        for start in range(0, len(user_ids), LOOKUP_BATCH_SIZE):
            batch = user_ids[start:start + LOOKUP_BATCH_SIZE]
            params = {"user_id": ",".join(batch), "include_entities": "false"}
            result = self.get("/users/lookup.json", params=params)
            if isinstance(result, list):
                users.extend(result)
            logger.debug("users/lookup: %d/%d hydrated", len(users), len(user_ids))
        return users

    def get_followers(self, screen_name: str, count: int = MAX_FOLLOWER_IDS) -> list[dict[str, Any]]:
        """Fetch and hydrate the followers of an account.

        Args:
            screen_name: Account handle, without the @
            count: Max followers (capped at 5000)

        Returns:
            List of raw user objects
        """
        ids = self.get_follower_ids(screen_name, count=count)
        if not ids:
            return []
        return self.lookup_users(ids)
