"""
Interactive scatter plot of highlighted words.
Uses Plotly with one trace per part of speech so each can be toggled from
the legend.
"""

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from word_verse.visualization.points import PointSet
import config


class ScatterPlotBuilder:
    """
    Builds Plotly scatter plots from per-part-of-speech point sets.

    Features:
    - Fixed color per part of speech, word labels above each marker
    - Hover tooltips with definitions
    - Optional focused word drawn on top with a larger marker
    - Axes pinned to the whole model's extent so they don't jump as words change
    """

    COLORS = config.POS_COLORS
    LABELS = config.POS_LABELS

    MARKER = dict(symbol="circle", size=10, opacity=0.9)
    FOCUS_MARKER = dict(symbol="circle", size=18, opacity=1.0)

    def __init__(
        self,
        height: int = config.PLOT_HEIGHT,
        width: Optional[int] = config.PLOT_WIDTH,
        dark_mode: bool = False
    ):
        """
        Initialize the scatter plot builder.

        Args:
            height: Plot height in pixels
            width: Plot width in pixels (None to fill the container)
            dark_mode: Use the dark template
        """
        self.height = height
        self.width = width
        self.dark_mode = dark_mode

    def build(
        self,
        point_sets: list[PointSet],
        focus_word: Optional[str] = None,
        extent: Optional[np.ndarray] = None,
        title: Optional[str] = None,
    ) -> go.Figure:
        """
        Build the scatter plot.

        Args:
            point_sets: One PointSet per part of speech
            focus_word: Word to emphasize (optional)
            extent: Array of shape (n, 2) whose bounds fix the axis ranges (optional)
            title: Plot title, usually the model name (optional)

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()

        for point_set in point_sets:
            if not len(point_set):
                continue
            pos = point_set.part_of_speech.value
            fig.add_trace(go.Scatter(
                x=point_set.x,
                y=point_set.y,
                mode="text+markers",
                text=point_set.labels,
                textposition="top center",
                marker=dict(color=self.COLORS[pos], **self.MARKER),
                hovertemplate=[f"{t}<extra></extra>" for t in point_set.tooltips],
                name=f"{self.LABELS[pos]} ({len(point_set)})",
                legendgroup=pos,
            ))

        if focus_word:
            self._add_focus_trace(fig, point_sets, focus_word)

        self._apply_layout(fig, extent, title)
        return fig

    def _add_focus_trace(self, fig: go.Figure, point_sets: list[PointSet], focus_word: str) -> None:
        for point_set in point_sets:
            if focus_word not in point_set.labels:
                continue
            i = point_set.labels.index(focus_word)
            fig.add_trace(go.Scatter(
                x=[point_set.x[i]],
                y=[point_set.y[i]],
                mode="markers",
                marker=dict(
                    color=self.COLORS[point_set.part_of_speech.value],
                    line=dict(color="white" if self.dark_mode else "#333333", width=2),
                    **self.FOCUS_MARKER
                ),
                hovertemplate=f"{point_set.tooltips[i]}<extra></extra>",
                name="Focused",
                showlegend=False,
            ))
            return

    def _apply_layout(self, fig: go.Figure, extent: Optional[np.ndarray], title: Optional[str]) -> None:
        x_range, y_range = self.axis_ranges(extent)
        grid = "#333333" if self.dark_mode else "#dddddd"

        fig.update_layout(
            height=self.height,
            width=self.width,
            title=title or "Word Embeddings Visualization",
            template="plotly_dark" if self.dark_mode else "plotly_white",
            paper_bgcolor="rgba(0,0,0,0)",
            showlegend=True,
            legend=dict(
                title=dict(text="Parts of Speech"),
                yanchor="top",
                y=0.99,
                xanchor="left",
                x=0.01,
            ),
            margin=dict(l=20, r=20, t=50, b=20),
            xaxis=dict(title="X", gridcolor=grid, zerolinecolor=grid, range=x_range),
            yaxis=dict(title="Y", gridcolor=grid, zerolinecolor=grid, range=y_range),
            hovermode="closest",
            hoverlabel=dict(align="left", font=dict(size=14)),
        )

    @staticmethod
    def axis_ranges(
        extent: Optional[np.ndarray],
        padding: float = config.AXIS_PADDING
    ) -> tuple[Optional[list[float]], Optional[list[float]]]:
        """
        Compute padded [min, max] ranges for both axes.

        Returns (None, None) when there is nothing to pin to, which leaves
        Plotly on autoscale.
        """
        if extent is None or len(extent) == 0:
            return None, None

        lo = extent.min(axis=0)
        hi = extent.max(axis=0)
        span = np.where(hi - lo == 0, 1.0, hi - lo)
        pad = span * padding
        return [float(lo[0] - pad[0]), float(hi[0] + pad[0])], [float(lo[1] - pad[1]), float(hi[1] + pad[1])]
