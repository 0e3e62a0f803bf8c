"""Assistant prompt context built from the user's portfolio"""

from .context import build_focus_context, build_portfolio_context, build_system_prompt

__all__ = ["build_portfolio_context", "build_system_prompt", "build_focus_context"]
