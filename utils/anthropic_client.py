"""
Anthropic API client utilities for the Campaign Generator.

This module owns the single upstream call of the relay: one Messages request
with the server-side web search tool and extended thinking enabled, retried
once for transient failures.
"""

import logging
from typing import Any, Dict, List

import anthropic
from tenacity import (
    before_sleep_log,
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from analysis_prompt import SYSTEM_PROMPT
from config import settings

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL_TYPE = "web_search_20250305"

# Lazy initialization of Anthropic client
_anthropic_client = None


def get_anthropic_client() -> anthropic.AsyncAnthropic:
    """Get or create the Anthropic client instance."""
    global _anthropic_client
    if _anthropic_client is None:
        _anthropic_client = anthropic.AsyncAnthropic(
            api_key=settings.ANTHROPIC_API_KEY or None,
            timeout=settings.ANTHROPIC_TIMEOUT,
            max_retries=0,  # retries are handled by tenacity below
        )
    return _anthropic_client


def build_request_params(messages: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Build the keyword arguments for messages.create().

    max_tokens covers both budgets: the API counts thinking tokens against
    max_tokens, so the visible output budget is added on top of it.
    """
    params: Dict[str, Any] = {
        "model": settings.ANTHROPIC_MODEL,
        "max_tokens": settings.request_max_tokens,
        "system": SYSTEM_PROMPT,
        "messages": messages,
        "thinking": {
            "type": "enabled",
            "budget_tokens": settings.THINKING_BUDGET_TOKENS,
        },
        "tools": [
            {
                "type": WEB_SEARCH_TOOL_TYPE,
                "name": "web_search",
                "max_uses": settings.WEB_SEARCH_MAX_USES,
            }
        ],
    }
    if settings.ANTHROPIC_TEMPERATURE is not None:
        params["temperature"] = settings.ANTHROPIC_TEMPERATURE
    return params


def extract_text(message) -> str:
    """
    Join the text blocks of a Claude message.

    Thinking, server_tool_use and web_search_tool_result blocks are skipped.

    Raises:
        ValueError: If the message holds no text at all
    """
    parts = [
        block.text
        for block in message.content
        if getattr(block, "type", None) == "text" and block.text
    ]
    if not parts:
        raise ValueError(
            f"Claude returned no text content (stop_reason={message.stop_reason})"
        )
    return "".join(parts).strip()


@retry(
    stop=stop_after_attempt(settings.ANTHROPIC_MAX_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type(
        (anthropic.APIConnectionError, anthropic.RateLimitError)
    ),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def _create_message(messages: List[Dict[str, Any]]):
    """
    One messages.create() call with retry for transient failures.

    Retries for:
    - APIConnectionError (network issues, including APITimeoutError)
    - RateLimitError (rate limit exceeded)

    Does NOT retry for:
    - AuthenticationError (bad API key)
    - BadRequestError (malformed request)
    - Other permanent errors
    """
    client = get_anthropic_client()
    return await client.messages.create(**build_request_params(messages))


async def call_anthropic_api_with_retry(prompt: str) -> str:
    """
    Sends the campaign prompt to Claude and returns the final text.

    A turn paused by the server-side web search (stop_reason "pause_turn") is
    resumed by sending the partial assistant turn back, at most
    MAX_CONTINUATIONS times.

    Args:
        prompt: The fully formatted campaign prompt

    Returns:
        Concatenated text of Claude's final message
    """
    messages: List[Dict[str, Any]] = [{"role": "user", "content": prompt}]
    message = await _create_message(messages)

    continuations = 0
    while (
        message.stop_reason == "pause_turn"
        and continuations < settings.MAX_CONTINUATIONS
    ):
        continuations += 1
        logger.info(f"Resuming paused turn ({continuations}/{settings.MAX_CONTINUATIONS})")
        messages = messages + [{"role": "assistant", "content": message.content}]
        message = await _create_message(messages)

    if message.stop_reason == "max_tokens":
        logger.warning("Claude hit max_tokens; the JSON may be truncated")

    usage = getattr(message, "usage", None)
    if usage is not None:
        logger.info(
            f"Claude usage: input={getattr(usage, 'input_tokens', '?')} "
            f"output={getattr(usage, 'output_tokens', '?')}"
        )

    return extract_text(message)
