from __future__ import annotations

import asyncio
from typing import Any, Dict

import aiohttp
from slack_sdk.errors import SlackApiError

from base_client import UserProfile
from errors import UserLookupError


def profile_from_user(user_id: str, user_info: Dict[str, Any]) -> UserProfile:
    """Build a UserProfile from a users.info ``user`` object

    Prefer display name, fall back to real name, then the account name, then
    just the ID.
    """
    profile = user_info.get("profile") or {}
    display_name = profile.get("display_name")
    real_name = profile.get("real_name") or user_info.get("real_name")
    display_name = display_name or real_name or user_info.get("name") or user_id
    return UserProfile(
        user_id=user_id,
        display_name=display_name,
        real_name=real_name or display_name,
    )


class SlackUtilitiesMixin:
    async def get_user_info(self, user_id: str) -> UserProfile:
        """Fetch a user's profile from the Slack API (never cached)"""
        if not user_id:
            raise UserLookupError(user_id, "missing user id")

        try:
            result = await self.web_client.users_info(user=user_id)
        except SlackApiError as e:
            raise UserLookupError(user_id, e.response.get("error", str(e))) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UserLookupError(user_id, str(e) or e.__class__.__name__) from e

        if not result.get("ok", False) or not result.get("user"):
            raise UserLookupError(user_id, result.get("error", "user_not_found"))

        profile = profile_from_user(user_id, result["user"])
        self.log_debug(f"Fetched user info for {user_id}: display_name={profile.display_name}, real_name={profile.real_name}")
        return profile
