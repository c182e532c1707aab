"""Dialog stack inspection routes."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...bot import Bot
from ...dialogs import DIALOGS_KEY, LAST_DIALOG_KEY


class DialogStackResponse(BaseModel):
    """Persisted dialog state of a user."""

    user_id: str
    dialogs: list[dict[str, Any]]
    last_dialog: dict[str, Any] | None = None


def create_dialogs_router(bot: Bot) -> APIRouter:
    """Create dialogs router."""
    router = APIRouter(prefix="/api/users", tags=["dialogs"])

    @router.get("/{user_id}/dialogs", response_model=DialogStackResponse)
    async def get_dialogs(user_id: str) -> dict:
        """Get the dialog stack of a user."""
        if not await bot.brain.has_user(user_id):
            raise HTTPException(status_code=404, detail="Unknown user")
        return {
            "user_id": user_id,
            "dialogs": await bot.brain.user_get(user_id, DIALOGS_KEY) or [],
            "last_dialog": await bot.brain.user_get(user_id, LAST_DIALOG_KEY),
        }

    return router
