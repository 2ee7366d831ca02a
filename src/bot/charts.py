"""Chart images for payloads.

Charts are drawn with matplotlib (headless `Agg` backend) into PNG bytes that the bot sends as a
photo.
"""

from __future__ import annotations

from io import BytesIO

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from src.intent.schema import BarPoint, Chart, ChartKind, LinePoint  # noqa: E402

FIGSIZE = (6, 4)
DPI = 120
BAR_COLOR = "#3b82f6"
LINE_COLOR = "#10b981"


def render_chart_png(chart: Chart, title: str | None = None) -> bytes:
    """Draw a bar or line chart and return it as PNG bytes."""

    fig, ax = plt.subplots(figsize=FIGSIZE)
    try:
        if chart.kind == ChartKind.bar:
            bars = [p for p in chart.points if isinstance(p, BarPoint)]
            ax.bar([p.label for p in bars], [p.value for p in bars], color=BAR_COLOR)
        else:
            points = [p for p in chart.points if isinstance(p, LinePoint)]
            ax.plot([p.x for p in points], [p.y for p in points], marker="o", color=LINE_COLOR)
            ax.grid(True, alpha=0.3)

        if title:
            ax.set_title(title)
        fig.tight_layout()

        buffer = BytesIO()
        fig.savefig(buffer, format="png", dpi=DPI)
        return buffer.getvalue()
    finally:
        plt.close(fig)
