"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from botcore.config import BotConfig  # noqa: E402
from botcore.dialogs import MAX_COMPLEXITY, DialogManager, DialogRegistry  # noqa: E402
from botcore.models import BotMessage  # noqa: E402


class ScriptedDialog:
    """Test dialog with a fixed outcome that records its invocations."""

    def __init__(
        self,
        label: str,
        done: bool,
        complexity: int,
        call_log: list,
        delay: float = 0.0,
        error: Exception | None = None,
    ):
        self.label = label
        self.done = done
        self.complexity = complexity
        self.call_log = call_log
        self.delay = delay
        self.error = error

    async def execute(self, user_id, messages, entities, is_resumed):
        self.call_log.append(
            {
                "label": self.label,
                "user_id": user_id,
                "entities": entities,
                "is_resumed": is_resumed,
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        messages.append(BotMessage.text("test", user_id, self.label))
        return self.done


@pytest.fixture
def config():
    """Bot config for tests: memory brain, pattern classifier."""
    return BotConfig(
        bot_id="test",
        db_path=":memory:",
        brain="memory",
        classifier="pattern",
        default_message="Default answer",
    )


@pytest_asyncio.fixture
async def brain():
    """Create in-memory SQLite brain for testing."""
    from botcore.storage import SqliteBrain

    br = SqliteBrain(":memory:")
    await br.init()
    yield br
    await br.close()


@pytest.fixture
def memory_brain():
    """Create MemoryBrain for testing."""
    from botcore.storage import MemoryBrain

    return MemoryBrain()


@pytest.fixture
def tracker(brain):
    """Create Tracker writing to the SQLite brain."""
    from botcore.tracker import Tracker

    return Tracker(brain)


@pytest.fixture
def call_log():
    """Invocations recorded by scripted dialogs, in call order."""
    return []


@pytest.fixture
def scripted(call_log):
    """Build factories of ScriptedDialog sharing call_log."""

    def build(
        label: str,
        done: bool = True,
        complexity: int = MAX_COMPLEXITY,
        delay: float = 0.0,
        error: Exception | None = None,
    ):
        def factory(config, brain):
            return ScriptedDialog(label, done, complexity, call_log, delay, error)

        return factory

    return build


@pytest.fixture
def make_manager(memory_brain, config):
    """Build a DialogManager over memory_brain with the given bot dialogs."""

    def build(dialogs, tracker=None, manager_config=None):
        cfg = manager_config or config
        registry = DialogRegistry.with_builtins(cfg, memory_brain, dialogs)
        return DialogManager(memory_brain, registry, cfg, tracker)

    return build


@pytest.fixture
def mock_llm():
    """Create mock LLM provider."""
    llm = Mock()
    llm.complete = AsyncMock(return_value="[]")
    return llm
