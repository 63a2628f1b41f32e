"""Services"""

from foliogen.services.llm_providers import (
    LLMConfigurationError,
    LLMError,
    LLMResponseParseError,
)
from foliogen.services.portfolio_generator import generate_portfolio
from foliogen.services.recency import filter_by_recency

__all__ = [
    "LLMConfigurationError",
    "LLMError",
    "LLMResponseParseError",
    "filter_by_recency",
    "generate_portfolio",
]
