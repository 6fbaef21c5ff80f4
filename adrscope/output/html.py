"""
Self-contained HTML viewer for ADRs.

The page is rendered from a Jinja2 template. Facet values act as filters
over the record list, and each record links to its related records through
the relationship graph. Records, facets and the graph are also embedded as
JSON so scripts can work with them without a server.
"""

from __future__ import annotations

import json
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from jinja2 import Environment, BaseLoader, StrictUndefined

from .. import __version__
from ..catalog.metadata_parser import Status
from ..catalog.record import Record
from ..views.facets import Facets
from ..views.graph import Graph, Node

SCHEMA_VERSION = "1.0.0"

# Facet name -> data attribute on each record's <article>
FACET_ATTRIBUTES = {
    "statuses": "status",
    "categories": "category",
    "tags": "tags",
    "authors": "author",
    "projects": "project",
    "technologies": "technologies",
}

# Filters on list fields require every selected value; the others any of them
MULTI_VALUED = {"tags", "technologies"}

# Separator for list values inside data attributes
VALUE_SEPARATOR = "|"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: str) -> "Theme":
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"invalid theme: {value}") from None


@dataclass
class RenderConfig:
    title: str = "Architecture Decision Records"
    theme: Theme = Theme.AUTO


@dataclass
class ViewerData:
    """Everything embedded in the viewer page."""
    records: List[Record]
    facets: Facets
    graph: Graph
    source_dir: str
    generated: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec="seconds")
    )

    @classmethod
    def from_records(cls, records: Sequence[Record], source_dir: str) -> "ViewerData":
        records = list(records)
        return cls(
            records=records,
            facets=Facets.from_records(records),
            graph=Graph.from_records(records),
            source_dir=source_dir,
        )

    def to_dict(self) -> Dict:
        return {
            "meta": {
                "generated": self.generated,
                "generator": f"adrscope/{__version__}",
                "schema_version": SCHEMA_VERSION,
                "source_dir": self.source_dir,
            },
            "records": [record.to_dict() for record in self.records],
            "facets": self.facets.to_dict(),
            "graph": self.graph.to_dict(),
        }


def link_index(graph: Graph) -> Tuple[Dict[str, List[Node]], Dict[str, List[Node]]]:
    """Group graph edges into outgoing and incoming neighbours per node id.

    Returns:
        Tuple of (id -> targets, id -> sources), both in edge order
    """
    nodes = {node.id: node for node in graph.nodes}
    outgoing: Dict[str, List[Node]] = defaultdict(list)
    incoming: Dict[str, List[Node]] = defaultdict(list)
    for edge in graph.edges:
        outgoing[edge.source].append(nodes[edge.target])
        incoming[edge.target].append(nodes[edge.source])
    return dict(outgoing), dict(incoming)


VIEWER_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en" data-theme="{{ theme }}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }}</title>
<style>
:root { --bg: #ffffff; --fg: #1f2937; --muted: #6b7280; --border: #e5e7eb; }
[data-theme="dark"] { --bg: #111827; --fg: #f3f4f6; --muted: #9ca3af; --border: #374151; }
@media (prefers-color-scheme: dark) {
  [data-theme="auto"] { --bg: #111827; --fg: #f3f4f6; --muted: #9ca3af; --border: #374151; }
}
body { margin: 0; font-family: system-ui, sans-serif; background: var(--bg); color: var(--fg); }
header { padding: 1rem 2rem; border-bottom: 1px solid var(--border); }
main { display: flex; gap: 2rem; padding: 1rem 2rem; }
aside { min-width: 14rem; }
aside h3 { font-size: .9rem; text-transform: uppercase; color: var(--muted); }
aside ul { list-style: none; padding: 0; }
article { border: 1px solid var(--border); border-radius: 6px; padding: .75rem 1rem; margin-bottom: 1rem; }
.status { color: #fff; border-radius: 4px; padding: 0 .4rem; font-size: .8rem; }
{% for status in statuses %}
.{{ status.css_class }} { background: {{ status.color }}; }
{% endfor %}
.description, .related { color: var(--muted); }
.related-link.placeholder { font-style: italic; text-decoration: none; cursor: default; }
#search { width: 100%; padding: .4rem; margin-bottom: 1rem; }
</style>
</head>
<body>
<header>
  <h1>{{ title }}</h1>
  <p><span id="visible-count">{{ records|length }}</span> of {{ records|length }} records, {{ graph.edge_count }} relationships</p>
</header>
<main>
<aside>
  <button id="clear-filters" type="button">Clear filters</button>
{% for facet in facets.as_facets() %}
{% if facet.values %}
{% set attribute = facet_attributes[facet.name] %}
  <h3>{{ facet.name }}</h3>
  <ul>
  {% for item in facet.values %}
    <li><label><input type="checkbox" class="facet-filter" data-facet="{{ attribute }}" data-match="{{ 'all' if attribute in multi_valued else 'any' }}" value="{{ item.value }}"> {{ item.value }} ({{ item.count }})</label></li>
  {% endfor %}
  </ul>
{% endif %}
{% endfor %}
</aside>
<section>
  <input id="search" type="search" placeholder="Search records">
{% for record in records %}
{% set targets = outgoing.get(record.id, []) %}
{% set sources = incoming.get(record.id, []) %}
  <article id="{{ record.id }}"
           data-text="{{ (record.title ~ ' ' ~ record.description ~ ' ' ~ record.body_text)|lower }}"
           data-status="{{ record.status }}"
           data-category="{{ record.category }}"
           data-author="{{ record.author }}"
           data-project="{{ record.project }}"
           data-tags="{{ record.tags|join(separator) }}"
           data-technologies="{{ record.technologies|join(separator) }}">
    <h2><span class="status {{ record.status.css_class }}">{{ record.status }}</span> {{ record.title }}</h2>
    {% if record.description %}<p class="description">{{ record.description }}</p>{% endif %}
    {% if targets %}
    <p class="related">Related: {% for node in targets %}<a class="related-link{% if node.is_placeholder %} placeholder{% endif %}" href="#{{ node.id }}" data-id="{{ node.id }}">{{ node.title or node.id }}</a>{% if not loop.last %}, {% endif %}{% endfor %}</p>
    {% endif %}
    {% if sources %}
    <p class="related">Referenced by: {% for node in sources %}<a class="related-link" href="#{{ node.id }}" data-id="{{ node.id }}">{{ node.title or node.id }}</a>{% if not loop.last %}, {% endif %}{% endfor %}</p>
    {% endif %}
    <details>
      <summary>{{ record.filename }}{% if record.created %} &middot; {{ record.created.isoformat() }}{% endif %}</summary>
      {{ record.body_html|safe }}
    </details>
  </article>
{% endfor %}
</section>
</main>
<script id="adrscope-data" type="application/json">{{ data_json|safe }}</script>
<script>
(function () {
  var search = document.getElementById("search");
  var filters = Array.prototype.slice.call(document.querySelectorAll(".facet-filter"));
  var articles = Array.prototype.slice.call(document.querySelectorAll("article"));
  var counter = document.getElementById("visible-count");

  function selectedFilters() {
    var groups = {};
    filters.forEach(function (box) {
      if (!box.checked) return;
      var group = groups[box.dataset.facet] || (groups[box.dataset.facet] = { match: box.dataset.match, values: [] });
      group.values.push(box.value);
    });
    return groups;
  }

  function matchesFilters(article, groups) {
    return Object.keys(groups).every(function (facet) {
      var raw = article.dataset[facet] || "";
      var have = raw ? raw.split("{{ separator }}") : [];
      var group = groups[facet];
      var test = function (value) { return have.indexOf(value) !== -1; };
      return group.match === "all" ? group.values.every(test) : group.values.some(test);
    });
  }

  function applyFilters() {
    var query = search.value.toLowerCase();
    var groups = selectedFilters();
    var visible = 0;
    articles.forEach(function (article) {
      var show = article.dataset.text.indexOf(query) !== -1 && matchesFilters(article, groups);
      article.style.display = show ? "" : "none";
      if (show) visible += 1;
    });
    counter.textContent = visible;
  }

  function clearAllFilters() {
    search.value = "";
    filters.forEach(function (box) { box.checked = false; });
    applyFilters();
  }

  search.addEventListener("input", applyFilters);
  filters.forEach(function (box) { box.addEventListener("change", applyFilters); });
  document.getElementById("clear-filters").addEventListener("click", clearAllFilters);
  document.querySelectorAll(".related-link.placeholder").forEach(function (link) {
    link.addEventListener("click", function (event) { event.preventDefault(); });
  });
})();
</script>
</body>
</html>
"""

_ENV = Environment(
    loader=BaseLoader(),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


def _embed_json(data: Dict) -> str:
    # Keep '</script>' inside strings from closing the data block
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


class HtmlRenderer:
    """Renders records into a single self-contained HTML page."""

    def __init__(self) -> None:
        self._template = _ENV.from_string(VIEWER_TEMPLATE)

    def render(self, records: Sequence[Record], source_dir: str, config: RenderConfig) -> str:
        data = ViewerData.from_records(records, source_dir)
        outgoing, incoming = link_index(data.graph)
        return self._template.render(
            title=config.title,
            theme=config.theme.value,
            statuses=Status.all(),
            records=data.records,
            facets=data.facets,
            graph=data.graph,
            outgoing=outgoing,
            incoming=incoming,
            facet_attributes=FACET_ATTRIBUTES,
            multi_valued=MULTI_VALUED,
            separator=VALUE_SEPARATOR,
            data_json=_embed_json(data.to_dict()),
        )
