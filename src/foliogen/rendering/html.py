"""Single-page HTML rendering of a portfolio view."""

from __future__ import annotations

import json
from html import escape

from foliogen.rendering.view import PortfolioView, Theme, empty_window_message, window_label
from foliogen.services.recency import ALL

__all__ = ["render_portfolio_html"]

_STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f8fafc; color: #0f172a; }
.dark body, body.dark { background: #020617; color: #f8fafc; }
nav { display: flex; justify-content: space-between; padding: 1rem 2rem; }
section { max-width: 64rem; margin: 0 auto; padding: 2rem; }
.avatar { width: 16rem; height: 16rem; border-radius: 2rem; object-fit: cover; }
.initials { display: flex; align-items: center; justify-content: center; font-size: 4rem; }
.tag { display: inline-block; padding: .2rem .6rem; margin: .2rem; border-radius: 1rem;
       border: 1px solid currentColor; }
.filter button.active { font-weight: bold; }
@media print { nav, .no-print { display: none; } }
"""


# Theme toggle and client-side recency filter. Entries carry the windows
# that keep them in data-windows; messages maps each window to its empty text.
_SCRIPT = """
(function () {
  var messages = %s;
  document.getElementById("theme-toggle").addEventListener("click", function () {
    document.documentElement.classList.toggle("dark");
  });
  var buttons = document.querySelectorAll("#experience [data-window]");
  var entries = document.querySelectorAll("#experience article");
  var empty = document.getElementById("experience-empty");
  buttons.forEach(function (button) {
    button.addEventListener("click", function () {
      var win = button.dataset.window;
      var shown = 0;
      entries.forEach(function (entry) {
        var keep = win === "all" || entry.dataset.windows.split(" ").indexOf(win) !== -1;
        entry.hidden = !keep;
        if (keep) { shown += 1; }
      });
      buttons.forEach(function (other) { other.classList.toggle("active", other === button); });
      empty.hidden = shown > 0;
      empty.textContent = messages[win];
    });
  });
})();
"""


def _script(view: PortfolioView) -> str:
    messages = {str(option): empty_window_message(option) for option in view.window_options}
    return f"<script>{_SCRIPT % json.dumps(messages)}</script>"


def _tags(items: list[str]) -> str:
    return "".join(f'<span class="tag">{escape(item)}</span>' for item in items)


def _bullets(items: list[str]) -> str:
    if not items:
        return ""
    return "<ul>" + "".join(f"<li>{escape(item)}</li>" for item in items) + "</ul>"


def _hero(view: PortfolioView) -> str:
    user = view.user
    brand = view.portfolio.personal_brand

    if view.hero_image:
        avatar = (
            f'<img class="avatar" src="{escape(view.hero_image)}" '
            f'alt="{escape(user.full_name)}">'
        )
    else:
        avatar = f'<div class="avatar initials">{escape(view.initials)}</div>'

    links = [f'<a href="mailto:{escape(user.contact_email)}">Email</a>']
    if user.github_url:
        links.append(f'<a href="{escape(user.github_url)}" rel="noopener noreferrer">GitHub</a>')
    if user.linkedin_url:
        links.append(
            f'<a href="{escape(user.linkedin_url)}" rel="noopener noreferrer">LinkedIn</a>'
        )

    return (
        '<section id="hero">'
        f"{avatar}"
        f"<p>{escape(user.current_role)}</p>"
        f"<h1>{escape(user.full_name)}</h1>"
        f"<h2>{escape(brand.tagline)}</h2>"
        f"<p>{escape(brand.professional_summary)}</p>"
        f"<div>{_tags(brand.key_strengths)}</div>"
        f"<p>Experience: {view.experience_count}+ &middot; Projects: {view.project_count}</p>"
        f'<p class="no-print">{" ".join(links)} '
        f'<button onclick="window.print()" title="{escape(view.pdf_filename)}">'
        "Download PDF</button></p>"
        "</section>"
    )


def _skills(view: PortfolioView) -> str:
    groups = "".join(
        f"<div><h3>{escape(group.category)}</h3>{_tags(group.items)}</div>"
        for group in view.portfolio.skills
    )
    return f'<section id="skills"><h2>Skills</h2>{groups}</section>'


def _projects(view: PortfolioView) -> str:
    cards = "".join(
        "<article>"
        f"<h3>{escape(project.title)}</h3>"
        f"<p>{escape(project.description)}</p>"
        f"<p><strong>Impact:</strong> {escape(project.impact)}</p>"
        f"<div>{_tags(project.tech_stack)}</div>"
        "</article>"
        for project in view.portfolio.projects
    )
    return f'<section id="projects"><h2>Projects</h2>{cards}</section>'


def _experience(view: PortfolioView) -> str:
    options = []
    for option in view.window_options:
        css = ' class="active"' if option == view.window else ""
        options.append(
            f'<button type="button" data-window="{option}"{css}>{window_label(option)}</button>'
        )
    filter_bar = f'<div class="filter no-print">{" ".join(options)}</div>'

    articles = []
    for entry, windows in view.timeline:
        hidden = "" if view.window == ALL or view.window in windows else " hidden"
        articles.append(
            f'<article data-windows="{" ".join(str(w) for w in windows)}"{hidden}>'
            f"<h3>{escape(entry.role)} &middot; {escape(entry.company)}</h3>"
            f"<p>{escape(entry.duration)}</p>"
            f"{_bullets(entry.achievements)}"
            "</article>"
        )

    message = view.empty_experience_message
    empty = (
        f'<p id="experience-empty"{"" if message else " hidden"}>{escape(message or "")}</p>'
    )
    return (
        f'<section id="experience"><h2>Experience</h2>{filter_bar}{"".join(articles)}{empty}'
        "</section>"
    )


def _contact(view: PortfolioView) -> str:
    email = escape(view.user.contact_email)
    return (
        '<section id="contact">'
        f"<h2>{escape(view.portfolio.contact.cta_message)}</h2>"
        f'<a href="mailto:{email}">{email}</a>'
        "</section>"
    )


def render_portfolio_html(view: PortfolioView) -> str:
    """Render *view* as a complete HTML document."""
    html_class = ' class="dark"' if view.theme is Theme.DARK else ""
    nav = (
        "<nav>"
        f"<strong>{escape(view.brand)}.folio</strong>"
        '<span><a href="#skills">Skills</a> <a href="#projects">Projects</a> '
        '<a href="#experience">Experience</a> '
        '<button type="button" id="theme-toggle" class="no-print">Theme</button></span>'
        "</nav>"
    )
    body = "".join(
        [
            nav,
            _hero(view),
            _skills(view),
            _projects(view),
            _experience(view),
            _contact(view),
            _script(view),
        ]
    )
    return (
        "<!DOCTYPE html>"
        f'<html lang="en"{html_class}>'
        "<head>"
        '<meta charset="utf-8">'
        f"<title>{escape(view.user.full_name)} | Portfolio</title>"
        f"<style>{_STYLE}</style>"
        "</head>"
        f"<body>{body}</body>"
        "</html>"
    )
