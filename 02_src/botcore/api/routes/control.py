"""Control API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...bot import IBot


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_control_router(bot: IBot) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/reset", response_model=StatusResponse)
    async def reset_bot() -> dict:
        """Forget all users and trace events."""
        try:
            await bot.reset()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
