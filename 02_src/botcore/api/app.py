"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..bot import Bot
from ..demo import SAMPLE_DIALOGS, SAMPLE_INTENTS, SAMPLE_PATTERNS
from .routes import control, dialogs, messaging, observability


# Global bot instance
_bot: Bot | None = None


def get_bot() -> Bot:
    """Get the global bot instance."""
    global _bot
    if not _bot:
        _bot = Bot(
            dialogs=SAMPLE_DIALOGS,
            intents=SAMPLE_INTENTS,
            patterns=SAMPLE_PATTERNS,
        )
    return _bot


def create_fastapi_app(bot: Bot | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    bot = bot or get_bot()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await bot.start()
        yield
        await bot.stop()

    fastapi_app = FastAPI(
        title="botcore API",
        description="Web channel for the botcore dialog orchestrator",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:5174"],  # Vite default
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(messaging.create_messaging_router(bot))
    fastapi_app.include_router(dialogs.create_dialogs_router(bot))
    fastapi_app.include_router(observability.create_observability_router(bot))
    fastapi_app.include_router(control.create_control_router(bot))

    return fastapi_app
