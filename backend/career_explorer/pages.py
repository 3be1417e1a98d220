"""Server-rendered HTML pages for the browser frontend.

The pages read through the same service layer as the JSON API and are
plain HTML with one stylesheet from `/static`. Every piece of stored text
goes through `html.escape` before it reaches the markup.
"""

from html import escape
from typing import Iterable, List, Optional, Sequence

from .models import DifficultyLevel, Resource, Role

APP_TITLE = "Career Path Explorer"
FILTER_OPTIONS = ["All"] + [d.value for d in DifficultyLevel]


def _layout(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{escape(title)}</title>
  <link rel="stylesheet" href="/static/styles.css" />
</head>
<body>
{body}
</body>
</html>
"""


def render_role_card(role: Role) -> str:
    return (
        f'<a class="role-card" href="/roles/{role.id}">'
        f'<h3 class="role-card-name">{escape(role.name)}</h3>'
        f'<p class="role-card-description">{escape(role.short_description)}</p>'
        f"</a>"
    )


def render_landing(roles: Sequence[Role], error: Optional[str] = None) -> str:
    """Landing page: title, intro text and one card per role."""
    if error is not None:
        content = f'<div class="role-list-error"><p>Error: {escape(error)}</p></div>'
    elif not roles:
        content = '<div class="role-list"><p class="no-roles-message">No roles available yet</p></div>'
    else:
        cards = "\n".join(render_role_card(r) for r in roles)
        content = f'<div class="role-list">\n{cards}\n</div>'
    body = f"""<div class="landing-page">
  <header class="landing-header">
    <h1>{APP_TITLE}</h1>
    <p class="intro-text">
      Explore different technology career paths and discover learning resources
      to help you get started in your chosen field.
    </p>
  </header>
  <main>
{content}
  </main>
</div>"""
    return _layout(APP_TITLE, body)


def _difficulty_class(level: str) -> str:
    if level in FILTER_OPTIONS[1:]:
        return f"difficulty-{level.lower()}"
    return ""


def render_resource_item(resource: Resource) -> str:
    return (
        '<div class="resource-item">'
        '<div class="resource-item-header">'
        f'<a href="{escape(resource.url)}" target="_blank" rel="noopener noreferrer" '
        f'class="resource-item-link">{escape(resource.title)}</a>'
        "</div>"
        '<div class="resource-badges">'
        f'<span class="resource-badge resource-type-badge">{escape(resource.resource_type)}</span>'
        f'<span class="resource-badge difficulty-badge {_difficulty_class(resource.difficulty)}">'
        f"{escape(resource.difficulty)}</span>"
        "</div>"
        "</div>"
    )


def render_resource_list(role_id: int, resources: Iterable[Resource], selected: str = "All") -> str:
    """Resource list with the difficulty filter form.

    The filter is a GET form on the detail page itself, so the selected
    level round-trips through the `difficulty` query parameter.
    """
    items = [render_resource_item(r) for r in resources]
    options = "".join(
        f'<option value="{opt}"{" selected" if opt == selected else ""}>{opt}</option>'
        for opt in FILTER_OPTIONS
    )
    listing = "\n".join(items) if items else '<p class="no-resources-message">No resources available</p>'
    return f"""<div class="resource-list">
  <div class="resource-list-header">
    <h3>Learning Resources</h3>
    <form class="resource-filter" method="get" action="/roles/{role_id}">
      <label for="difficulty-filter">Filter by difficulty: </label>
      <select id="difficulty-filter" name="difficulty" class="difficulty-filter-select" onchange="this.form.submit()">{options}</select>
      <noscript><button type="submit">Apply</button></noscript>
    </form>
  </div>
  <div class="resource-list-items">
{listing}
  </div>
</div>"""


def _bullet_section(css_class: str, heading: str, entries: List[str], empty_text: str) -> str:
    if entries:
        inner = "<ul>" + "".join(f"<li>{escape(e)}</li>" for e in entries) + "</ul>"
    else:
        inner = f"<p>{empty_text}</p>"
    return f'<section class="{css_class}">\n  <h2>{heading}</h2>\n  {inner}\n</section>'


def render_role_detail(role: Role, resources: Iterable[Resource], selected: str = "All") -> str:
    """Detail page for one role; `resources` is already filtered by `selected`."""
    body = f"""<div class="role-detail-page">
<a href="/" class="back-button">&larr; Back to Roles</a>
<header class="role-detail-header">
  <h1>{escape(role.name)}</h1>
</header>
<section class="role-description">
  <h2>About this Role</h2>
  <p>{escape(role.long_description or "")}</p>
</section>
{_bullet_section("role-responsibilities", "Responsibilities", role.responsibilities or [], "No responsibilities listed")}
{_bullet_section("role-skills", "Required Skills", role.skills or [], "No skills listed")}
<section class="role-resources">
{render_resource_list(role.id, resources, selected)}
</section>
</div>"""
    return _layout(f"{role.name} - {APP_TITLE}", body)


def render_role_error(message: str) -> str:
    body = f"""<div class="role-detail-error">
  <p>Error: {escape(message)}</p>
  <a href="/" class="back-button">Back to Roles</a>
</div>"""
    return _layout(f"Error - {APP_TITLE}", body)


def render_not_found() -> str:
    body = """<div class="not-found-page">
  <h1>404 - Page Not Found</h1>
  <p>The page you're looking for doesn't exist.</p>
  <a href="/" class="home-button">Go to Home</a>
</div>"""
    return _layout(f"Page Not Found - {APP_TITLE}", body)
