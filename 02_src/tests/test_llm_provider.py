"""Tests for LLMProvider."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from botcore.llm import LLMProvider


def mock_client_returning(text):
    client = Mock()
    response = Mock()
    response.content = [Mock(text=text)]
    client.messages.create = AsyncMock(return_value=response)
    return client


class TestLLMProviderInit:
    """Tests for LLMProvider initialization."""

    def test_init_with_api_key(self, monkeypatch):
        """Test initialization with API key."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        with patch("botcore.llm.llm_provider.anthropic.AsyncAnthropic"):
            provider = LLMProvider()
            assert provider is not None

    def test_init_without_api_key(self, monkeypatch):
        """Test initialization without API key raises error."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

        with patch("botcore.llm.llm_provider.anthropic.AsyncAnthropic"):
            with pytest.raises(ValueError):
                LLMProvider()


class TestLLMProviderComplete:
    """Tests for LLMProvider.complete() method."""

    async def test_complete_returns_response(self, monkeypatch):
        """Test that complete() returns LLM response."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        with patch(
            "botcore.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client_returning("Test response"),
        ):
            provider = LLMProvider()
            response = await provider.complete(
                messages=[{"role": "user", "content": "Hello"}]
            )

            assert response == "Test response"

    async def test_complete_sends_correct_format(self, monkeypatch):
        """Test that complete() sends correct format to API."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")
        monkeypatch.delenv("LLM_MODEL", raising=False)
        mock_client = mock_client_returning("Response")

        with patch(
            "botcore.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider()
            await provider.complete(
                messages=[
                    {"role": "user", "content": "Hello"},
                    {"role": "assistant", "content": "Hi"},
                ],
                system="You are helpful",
                max_tokens=2048,
            )

            mock_client.messages.create.assert_called_once()
            call_args = mock_client.messages.create.call_args

            assert call_args.kwargs["model"] == "claude-3-5-sonnet-20241022"
            assert call_args.kwargs["max_tokens"] == 2048
            assert call_args.kwargs["system"] == "You are helpful"
            assert len(call_args.kwargs["messages"]) == 2

    async def test_complete_omits_missing_system(self, monkeypatch):
        """Test that no system prompt is sent when none is given."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")
        mock_client = mock_client_returning("Default response")

        with patch(
            "botcore.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider()
            await provider.complete(messages=[{"role": "user", "content": "Test"}])

            call_args = mock_client.messages.create.call_args
            assert "system" not in call_args.kwargs
            assert call_args.kwargs["max_tokens"] == 1024  # default

    async def test_model_from_env(self, monkeypatch):
        """Test that LLM_MODEL overrides the default model."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")
        monkeypatch.setenv("LLM_MODEL", "claude-test")
        mock_client = mock_client_returning("ok")

        with patch(
            "botcore.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider()
            await provider.complete(messages=[{"role": "user", "content": "Test"}])

            assert mock_client.messages.create.call_args.kwargs["model"] == "claude-test"

    async def test_complete_propagates_errors(self, monkeypatch):
        """Test that API errors are propagated."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        mock_client = Mock()
        mock_client.messages.create = AsyncMock(side_effect=Exception("API Error"))

        with patch(
            "botcore.llm.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider()

            with pytest.raises(RuntimeError, match="API Error"):
                await provider.complete(
                    messages=[{"role": "user", "content": "Test"}]
                )
