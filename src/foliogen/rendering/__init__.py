"""Portfolio page rendering."""

from foliogen.rendering.html import render_portfolio_html
from foliogen.rendering.view import PortfolioView, Theme, build_portfolio_view

__all__ = ["PortfolioView", "Theme", "build_portfolio_view", "render_portfolio_html"]
