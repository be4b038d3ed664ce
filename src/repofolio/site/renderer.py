"""Static HTML generation for the portfolio page.

Single Responsibility: Format projects and their derived views as a
self-contained HTML document with an inline filtering script.
"""

import json
from collections.abc import Iterable, Sequence
from html import escape

from ..models import Project
from .filters import FilterState, PortfolioView, build_view

EMPTY_FILTER_MESSAGE = "No projects match the selected technology."

PAGE_STYLE = """
body { font-family: system-ui, sans-serif; margin: 2rem; }
#buttons-filter { margin-bottom: 1rem; }
.tech-button { margin: 5px; padding: 10px; background-color: white;
  border: 1px solid black; border-radius: 5px; cursor: pointer; }
.tech-button.selected { background-color: gray; }
.project { margin-bottom: 1.5rem; }
.row { display: flex; gap: 0.5rem; }
"""

# Mirrors repofolio.site.filters: OR-match partition, case-insensitive title sort.
PAGE_SCRIPT = """
(function () {
  var projects = JSON.parse(document.getElementById("portfolio-data").textContent);
  var selected = Array.prototype.map.call(
    document.querySelectorAll(".tech-button.selected"),
    function (button) { return button.dataset.tech; }
  );

  var ENTITIES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#x27;"};
  function esc(text) {
    return (text == null ? "" : String(text)).replace(/[&<>"']/g, function (ch) {
      return ENTITIES[ch];
    });
  }
  function byTitle(a, b) {
    var left = a.title.toLowerCase();
    var right = b.title.toLowerCase();
    return left < right ? -1 : left > right ? 1 : 0;
  }
  function matchesAny(project) {
    return selected.some(function (tech) { return project.technologies.indexOf(tech) !== -1; });
  }
  function partition(matching) {
    return projects.filter(function (p) { return matchesAny(p) === matching; }).sort(byTitle);
  }
  function card(project) {
    var links = project.links.map(function (link) {
      return '<span>- <a href="' + esc(link) + '" target="_blank" rel="noopener noreferrer">' +
        esc(link) + "</a><br></span>";
    }).join("");
    return '<div class="project" data-name="' + esc(project.name) + '">' +
      "<h3>" + esc(project.title) + "</h3>" +
      "<p>" + esc(project.description) + "</p>" +
      "<p>Technologies: " + esc(project.technologies.join(", ")) + "</p>" +
      '<div class="row"><div>Links: </div><div>' + links + "</div></div></div>";
  }
  function render() {
    var filtered = partition(true);
    var others = partition(false);
    var filteredSection = document.getElementById("filtered-projects");
    filteredSection.hidden = selected.length === 0;
    filteredSection.innerHTML = "<h2>Filtered Projects (" + filtered.length + ")</h2>" +
      (filtered.length ? filtered.map(card).join("") : "<p>EMPTY_FILTER_MESSAGE</p>");
    document.getElementById("other-projects").innerHTML =
      "<h2>" + (selected.length ? "Other Projects" : "All Projects") +
      " (" + others.length + ")</h2>" + others.map(card).join("");
    document.querySelectorAll(".tech-button").forEach(function (button) {
      button.classList.toggle("selected", selected.indexOf(button.dataset.tech) !== -1);
    });
  }
  document.querySelectorAll(".tech-button").forEach(function (button) {
    button.addEventListener("click", function () {
      var tech = button.dataset.tech;
      var index = selected.indexOf(tech);
      if (index === -1) { selected.push(tech); } else { selected.splice(index, 1); }
      render();
    });
  });
})();
""".replace("EMPTY_FILTER_MESSAGE", EMPTY_FILTER_MESSAGE)


class PortfolioRenderer:
    """Render the portfolio page.

    Single responsibility: turn a project list into one HTML document.
    """

    def __init__(self, site_title: str) -> None:
        self.site_title = site_title

    def render(self, projects: Sequence[Project], selected: Iterable[str] = ()) -> str:
        """Render the full page.

        Args:
            projects: Aggregated projects in listing order
            selected: Technologies pre-selected in the rendered markup

        Returns:
            HTML document as a string
        """
        selected_set = set(selected)
        view = build_view(projects, FilterState(set(selected_set)))

        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1">',
            f"<title>{escape(self.site_title)}</title>",
            f"<style>{PAGE_STYLE}</style>",
            "</head>",
            "<body>",
            f"<h1>{escape(self.site_title)}</h1>",
            "<hr>",
            self._filter_buttons(view, selected_set),
            self._filtered_section(view),
            "<hr>",
            self._other_section(view),
            self._data_block(projects),
            f"<script>{PAGE_SCRIPT}</script>",
            "</body>",
            "</html>",
        ]
        return "\n".join(parts) + "\n"

    def _filter_buttons(self, view: PortfolioView, selected: set[str]) -> str:
        """Generate one toggle button per technology."""
        buttons = []
        for tech in view.technologies:
            css = "tech-button selected" if tech in selected else "tech-button"
            buttons.append(
                f'<button type="button" class="{css}" data-tech="{escape(tech)}">'
                f"{escape(tech)} ({view.counts[tech]})</button>"
            )
        return f'<div id="buttons-filter">{"".join(buttons)}</div>'

    def _filtered_section(self, view: PortfolioView) -> str:
        """Generate the filtered section, hidden when no filter is active."""
        hidden = "" if view.filter_active else " hidden"
        heading = f"<h2>Filtered Projects ({len(view.filtered)})</h2>"
        if view.filtered:
            body = "".join(self._project_card(project) for project in view.filtered)
        else:
            body = f"<p>{EMPTY_FILTER_MESSAGE}</p>" if view.filter_active else ""
        return f'<div id="filtered-projects"{hidden}>{heading}{body}</div>'

    def _other_section(self, view: PortfolioView) -> str:
        """Generate the all/other projects section."""
        heading = f"<h2>{view.others_heading} ({len(view.others)})</h2>"
        body = "".join(self._project_card(project) for project in view.others)
        return f'<div id="other-projects">{heading}{body}</div>'

    def _project_card(self, project: Project) -> str:
        links = "".join(
            f'<span>- <a href="{escape(link)}" target="_blank" rel="noopener noreferrer">'
            f"{escape(link)}</a><br></span>"
            for link in project.links
        )
        return (
            f'<div class="project" data-name="{escape(project.name)}">'
            f"<h3>{escape(project.title)}</h3>"
            f"<p>{escape(project.description or '')}</p>"
            f"<p>Technologies: {escape(', '.join(project.technologies))}</p>"
            f'<div class="row"><div>Links: </div><div>{links}</div></div>'
            "</div>"
        )

    def _data_block(self, projects: Sequence[Project]) -> str:
        """Embed the project list for the page script."""
        payload = json.dumps([project.to_dict() for project in projects], ensure_ascii=False)
        # No raw "<" inside the element: "</script" and "<!--" both change how it is parsed
        payload = payload.replace("<", "\\u003c")
        return f'<script type="application/json" id="portfolio-data">{payload}</script>'
