from __future__ import annotations

import math
from itertools import combinations
from typing import Dict, List, Sequence, Tuple

import networkx as nx
from pyvis.network import Network

from table_mixer.config import AssignmentOptions
from table_mixer.models import Table
from table_mixer.solver import jaccard, keyword_set, table_diversity

# ---------------------------
# Public API
# ---------------------------

PALETTE = [
    "#FFB347", "#77DD77", "#AEC6CF", "#C23B22", "#F49AC2", "#B39EB5",
    "#03C03C", "#779ECB", "#966FD6", "#FFD700", "#FF6961", "#CB99C9",
]


def generate_assignment_mind_map(
    tables: Sequence[Table],
    options: AssignmentOptions | None = None,
    layout: str = "round",              # "round" or "square"
    show_inter_table_edges: bool = False,
    canvas_size: Tuple[int, int] = (1600, 1000),
) -> str:
    """
    Build an interactive view of the tables.

    People are seated around their table centre and coloured by table.
    Edges join people whose descriptions share keywords, so edges inside a
    table show overlap the builder could not avoid.

    Returns:
      HTML string with embedded network.
    """
    width, height = canvas_size
    centers = _compute_table_centers([t.id for t in tables], width, height)

    G = nx.Graph()
    seats: List[Tuple[str, int, frozenset]] = []
    for i, table in enumerate(tables):
        color = PALETTE[i % len(PALETTE)]
        cx, cy = centers[table.id]
        n = max(1, len(table.members))
        if layout == "square":
            coords = _square_layout(cx, cy, n)
        else:
            coords = _circle_layout(cx, cy, 60 + 6 * n, n)
        diversity = table_diversity(table.members, options)

        for pos, (person, (x, y)) in enumerate(zip(table.members, coords)):
            # Names are not unique, key nodes by seat
            node = f"{table.id}:{pos}"
            words = keyword_set(person, options)
            G.add_node(
                node,
                label=person.name,
                title=_node_tooltip(person.name, table.id, diversity, sorted(words)),
                color=color,
                x=x,
                y=y,
                physics=False,
                shape="dot",
                size=18,
            )
            seats.append((node, table.id, words))

    for (a, ta, wa), (b, tb, wb) in combinations(seats, 2):
        if ta != tb and not show_inter_table_edges:
            continue
        shared = wa & wb
        if not shared:
            continue
        sim = jaccard(wa, wb)
        G.add_edge(
            a, b,
            color="#FF6B6B" if ta == tb else "#A9A9A9",
            weight=1 + round(7 * sim),
            label=", ".join(sorted(shared)),
            smooth=ta != tb,
        )

    net = Network(height="700px", width="100%", bgcolor="#111111", font_color="#EEEEEE")
    net.toggle_physics(False)  # positions are fixed
    net.from_nx(G)

    return _inject_legend_html(net.generate_html())


# ---------------------------
# Internals
# ---------------------------

def _compute_table_centers(table_ids: List[int], width: int, height: int) -> Dict[int, Tuple[int, int]]:
    """Place table centres on a grid inside the canvas area."""
    if not table_ids:
        return {}
    n = len(table_ids)
    cols = max(1, int(math.ceil(math.sqrt(n))))
    rows = int(math.ceil(n / cols))
    margin = 120
    step_x = max(1, width - 2 * margin) // cols
    step_y = max(1, height - 2 * margin) // rows

    centers: Dict[int, Tuple[int, int]] = {}
    for idx, table_id in enumerate(table_ids):
        r, c = divmod(idx, cols)
        centers[table_id] = (margin + c * step_x + step_x // 2, margin + r * step_y + step_y // 2)
    return centers


def _circle_layout(cx: int, cy: int, r: int, n: int) -> List[Tuple[int, int]]:
    return [
        (int(cx + r * math.cos(2 * math.pi * i / n)), int(cy + r * math.sin(2 * math.pi * i / n)))
        for i in range(n)
    ]


def _square_layout(cx: int, cy: int, n: int, cell: int = 28) -> List[Tuple[int, int]]:
    """Seats along the perimeter of a square just large enough for ``n``."""
    side = max(2, int(math.ceil(n / 4)) + 1)
    half = side * cell // 2
    left, top = cx - half, cy - half
    pts = []
    for k in range(side):
        pts.append((left + k * cell, top))
    for k in range(side):
        pts.append((left + side * cell, top + k * cell))
    for k in range(side, 0, -1):
        pts.append((left + k * cell, top + side * cell))
    for k in range(side, 0, -1):
        pts.append((left, top + k * cell))
    return pts[:n]


def _node_tooltip(name: str, table_id: int, diversity: float, keywords: List[str]) -> str:
    return (
        f"<b>{name}</b><br>"
        f"Table: {table_id}<br>"
        f"Table diversity: {diversity:.2f}<br>"
        f"Keywords: {', '.join(keywords) or 'n/a'}"
    )


def _inject_legend_html(html: str) -> str:
    """Append the legend overlay just before the closing body tag."""
    css = """
    <style>
    .legend-box{
      position:absolute;right:12px;bottom:12px;
      background:#222;color:#eee;border:1px solid #444;border-radius:8px;
      padding:8px 12px;font-family:system-ui, -apple-system, Segoe UI, Roboto, Arial;font-size:12px;
      z-index:10;
    }
    .legend-swatch{display:inline-block;width:12px;height:12px;margin-right:6px;vertical-align:middle;border:1px solid #444;}
    </style>
    """
    legend = f"""
    {css}
    <div class="legend-box">
      <div><span class="legend-swatch" style="background:#FF6B6B"></span>shared keywords, same table</div>
      <div><span class="legend-swatch" style="background:#A9A9A9"></span>shared keywords, other table</div>
      <div style="margin-top:6px;">node color: table</div>
      <div>edge width: similarity</div>
    </div>
    """
    if "</body>" in html:
        return html.replace("</body>", legend + "</body>", 1)
    return html + legend
