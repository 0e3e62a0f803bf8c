"""Prompt context for the portfolio assistant"""

from typing import Optional, Sequence

from ..data.models import Position
from ..portfolio.holdings import total_market_value

EMPTY_PORTFOLIO_CONTEXT = "The user has no holdings in their portfolio yet."

ADVISOR_INSTRUCTIONS = """You are an expert financial advisor and seasoned trader with 20+ years of experience.

When responding:
1. Keep responses SHORT and FOCUSED - maximum 3-4 key points
2. Use clear, direct language - no excessive markdown or formatting
3. Reference specific metrics only when relevant
4. Give one primary recommendation or insight
5. Mention 1-2 risks or considerations
6. End with a clear actionable suggestion"""


def build_portfolio_context(positions: Sequence[Position]) -> str:
    """
    Plain-text portfolio summary for the assistant prompt

    One line per position ("AAPL: 10 shares @ $150.00 (60.0% of portfolio)")
    followed by the total value.
    """
    if not positions:
        return EMPTY_PORTFOLIO_CONTEXT

    total = total_market_value(positions)
    lines = []
    for position in positions:
        share = position.market_value / total * 100 if total else 0.0
        lines.append(
            f"{position.symbol}: {position.quantity:g} shares @ ${position.price:.2f} "
            f"({share:.1f}% of portfolio)"
        )

    return "Portfolio Summary:\n" + "\n".join(lines) + f"\nTotal Portfolio Value: ${total:.2f}"


def build_system_prompt(positions: Sequence[Position], selected_symbol: Optional[str] = None) -> str:
    """Advisor instructions plus the held symbols and the symbol in focus."""
    held = ", ".join(position.symbol for position in positions) if positions else "Empty"
    prompt = f"{ADVISOR_INSTRUCTIONS}\n\nCurrent Portfolio: {held}"
    if selected_symbol:
        prompt += f"\nCurrent Focus: {selected_symbol}"
    return prompt


def build_focus_context(selected_symbol: Optional[str] = None) -> str:
    if selected_symbol:
        return f"Currently analyzing {selected_symbol} with focus on technical indicators."
    return "No specific stock selected for detailed analysis."
