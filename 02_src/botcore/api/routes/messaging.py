"""Messaging API routes."""

from typing import Any

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ...bot import IBot
from ...errors import DialogNotFoundError
from ...models import BotMessage, PostbackMessage, UserMessage, UserTextMessage


class MessageRequest(BaseModel):
    """Request model for a text message."""

    user_id: str
    text: str


class PostbackRequest(BaseModel):
    """Request model for a button press."""

    user_id: str
    dialog: str
    entities: list[dict[str, Any]] = Field(default_factory=list)


class MessagesResponse(BaseModel):
    """Bot messages produced by one turn."""

    messages: list[dict[str, Any]]


def create_messaging_router(bot: IBot) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api", tags=["messaging"])

    async def run_turn(message: UserMessage) -> dict:
        try:
            responses = await bot.respond(message)
        except DialogNotFoundError as e:
            raise HTTPException(
                status_code=500, detail=f"Dialog not configured: {e.label}"
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
        return {
            "messages": [
                m.to_dict() if isinstance(m, BotMessage) else m for m in responses
            ]
        }

    @router.post("/messages", response_model=MessagesResponse)
    async def send_message(request: MessageRequest) -> dict:
        """Send a text message to the bot."""
        return await run_turn(UserTextMessage(user=request.user_id, text=request.text))

    @router.post("/postbacks", response_model=MessagesResponse)
    async def send_postback(request: PostbackRequest) -> dict:
        """Trigger a dialog directly, as a button press does."""
        return await run_turn(
            PostbackMessage(
                user=request.user_id,
                dialog=request.dialog,
                entities=request.entities,
            )
        )

    return router
