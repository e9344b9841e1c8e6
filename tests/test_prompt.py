"""
Unit tests for the demo agent's system prompt (agent/prompt.py).
"""

from datetime import date

from agent.prompt import get_exchange_advisor_prompt


def test_prompt_injects_today():
    assert date.today().isoformat() in get_exchange_advisor_prompt()


def test_prompt_names_every_tool_and_limit():
    prompt = get_exchange_advisor_prompt()

    for tool in ("getCurrencyRate", "getGoldPrice", "getCurrencyHistory"):
        assert tool in prompt
    assert "93 days" in prompt
