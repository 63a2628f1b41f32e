"""Utility functions and helpers"""

from foliogen.utils.export import export_portfolio_pdf, portfolio_pdf_filename

__all__ = [
    "export_portfolio_pdf",
    "portfolio_pdf_filename",
]
