"""MCP Prompts: pre-built interaction templates for the daily check-in."""

from __future__ import annotations

from fastmcp import FastMCP


def register_health_prompts(mcp: FastMCP) -> None:
    """Register health domain MCP prompts."""

    @mcp.prompt()
    def daily_check_in_prompt() -> str:
        """Prompt template that walks through today's check-in."""
        return """I'd like to do today's health check-in. Please:

1. Ask how I'm feeling on a 1-5 scale (1 = great, 5 = awful)
2. Ask how many hours I slept, how many minutes I was active,
   how many glasses of water I drank, and my screen time in hours
3. Run a posture scan, or skip it if the camera isn't available
4. Submit the check-in and walk me through my score and risk bands
5. Highlight the top two recommendations I should act on today

Keep it encouraging and brief."""

    @mcp.prompt()
    def results_review_prompt(focus: str = "overall score") -> str:
        """Prompt template for reviewing the latest check-in results."""
        return f"""Let's review my latest check-in results, focusing on {focus}. I'd like to:

1. Understand which factors pulled my score down
2. See where my obesity, cardiovascular and hypertension risk bands sit
3. Get a short, prioritized plan for tomorrow

These are wellness estimates, not a diagnosis. Please say so where it matters."""
