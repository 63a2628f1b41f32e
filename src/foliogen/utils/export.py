"""PDF export of a rendered portfolio."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
import unicodedata
from typing import TYPE_CHECKING
from urllib.parse import quote

from fpdf import FPDF

if TYPE_CHECKING:
    from foliogen.rendering.view import PortfolioView

logger = logging.getLogger(__name__)

__all__ = [
    "attachment_header",
    "decode_data_url",
    "export_portfolio_pdf",
    "portfolio_pdf_filename",
]

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.+)$", re.DOTALL)
_AVATAR_SIZE_MM = 40


def _sanitize_filename(name: str, default: str = "portfolio") -> str:
    """Remove or replace characters that are invalid in filenames."""
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", name)
    sanitized = sanitized.strip(". ")
    return sanitized or default


def portfolio_pdf_filename(full_name: str) -> str:
    """Return the download name, e.g. ``Jane_Doe_Portfolio.pdf``."""
    base_name = _sanitize_filename(re.sub(r"\s+", "_", full_name.strip()), default="")
    if not base_name:
        return "Portfolio.pdf"
    return f"{base_name}_Portfolio.pdf"


def attachment_header(full_name: str) -> str:
    """Build a ``Content-Disposition`` value for the PDF of *full_name*.

    Header values must be latin-1, so names outside ASCII get an ASCII
    ``filename`` fallback plus an RFC 5987 ``filename*`` with the real name.
    """
    filename = portfolio_pdf_filename(full_name)
    folded = unicodedata.normalize("NFKD", full_name).encode("ascii", "ignore").decode("ascii")
    fallback = portfolio_pdf_filename(folded)
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def decode_data_url(data_url: str | None) -> tuple[bytes, str] | None:
    """Split a base64 ``data:`` URL into ``(bytes, mime_type)``.

    Returns None for anything that is not a well-formed base64 data URL.
    """
    if not data_url:
        return None
    match = _DATA_URL.match(data_url.strip())
    if match is None:
        return None
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError):
        return None
    if not payload:
        return None
    return payload, match.group("mime")


def _clean_text(text: str) -> str:
    # Built-in fonts are latin-1 only
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _heading(pdf: FPDF, text: str, size: int = 14) -> None:
    pdf.ln(3)
    pdf.set_x(pdf.l_margin)
    pdf.set_font("Helvetica", "B", size)
    pdf.write(h=10, text=_clean_text(text))
    pdf.ln(12)
    pdf.set_font("Helvetica", size=11)


def _paragraph(pdf: FPDF, text: str) -> None:
    pdf.set_x(pdf.l_margin)
    pdf.write(h=6, text=_clean_text(text))
    pdf.ln(8)


def _bullet(pdf: FPDF, text: str) -> None:
    pdf.set_x(pdf.l_margin)
    pdf.write(h=6, text=f"   - {_clean_text(text)}")
    pdf.ln(8)


def _add_avatar(pdf: FPDF, hero_image: str | None) -> None:
    decoded = decode_data_url(hero_image)
    if decoded is None:
        return
    data, _mime = decoded
    try:
        pdf.image(io.BytesIO(data), w=_AVATAR_SIZE_MM, h=_AVATAR_SIZE_MM)
    except Exception:
        logger.warning("Could not embed hero image in PDF, exporting without it", exc_info=True)
    pdf.ln(4)


def export_portfolio_pdf(view: PortfolioView) -> bytes:
    """Lay out *view* as a PDF document and return its bytes.

    The document follows the page sections: profile, skills, projects,
    the experience entries inside the active window, then contact.
    """
    user = view.user
    content = view.portfolio

    pdf = FPDF()
    pdf.set_title(_clean_text(f"{user.full_name} Portfolio"))
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()
    pdf.set_font("Helvetica", size=11)

    _add_avatar(pdf, view.hero_image)

    _heading(pdf, user.full_name, size=18)
    _paragraph(pdf, user.current_role)
    _heading(pdf, content.personal_brand.tagline, size=13)
    _paragraph(pdf, content.personal_brand.professional_summary)
    for strength in content.personal_brand.key_strengths:
        _bullet(pdf, strength)

    if content.skills:
        _heading(pdf, "Skills")
        for group in content.skills:
            _paragraph(pdf, f"{group.category}: {', '.join(group.items)}")

    if content.projects:
        _heading(pdf, "Projects")
        for project in content.projects:
            _heading(pdf, project.title, size=12)
            _paragraph(pdf, project.description)
            _paragraph(pdf, f"Impact: {project.impact}")
            if project.tech_stack:
                _paragraph(pdf, f"Tech: {', '.join(project.tech_stack)}")

    _heading(pdf, "Experience")
    if view.empty_experience_message:
        _paragraph(pdf, view.empty_experience_message)
    for entry in view.experience:
        _heading(pdf, f"{entry.role} - {entry.company}", size=12)
        _paragraph(pdf, entry.duration)
        for achievement in entry.achievements:
            _bullet(pdf, achievement)

    _heading(pdf, "Contact")
    _paragraph(pdf, content.contact.cta_message)
    _paragraph(pdf, user.contact_email)
    for url in (user.github_url, user.linkedin_url):
        if url:
            _paragraph(pdf, url)

    return bytes(pdf.output())
