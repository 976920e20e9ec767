"""
Dashboard charts.

Rendered server-side with matplotlib and embedded in the page as base64
PNG data URIs.
"""

import io
import base64

# Lazy import matplotlib
_plt = None

BAR_COLOR = '#4F46E5'
GENDER_COLORS = ['#3B82F6', '#EC4899']  # Erkek, Kadın
AXIS_COLOR = '#64748B'
GRID_COLOR = '#E2E8F0'


def _get_plt():
    """Lazy load matplotlib."""
    global _plt
    if _plt is None:
        import matplotlib
        matplotlib.use('Agg')  # Non-interactive backend
        import matplotlib.pyplot as plt
        _plt = plt
    return _plt


def figure_to_base64(fig) -> str:
    """Convert matplotlib figure to base64 PNG string."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=110, bbox_inches='tight',
                facecolor='white', edgecolor='none')
    buf.seek(0)
    img_str = base64.b64encode(buf.read()).decode('utf-8')
    buf.close()
    return f"data:image/png;base64,{img_str}"


def create_exercise_chart(exercise_averages: list) -> str:
    """Bar chart of per-exercise class averages on a fixed 0-100 axis."""
    plt = _get_plt()

    names = [e["name"] for e in exercise_averages]
    scores = [e["score"] for e in exercise_averages]

    fig, ax = plt.subplots(figsize=(8, 4.5))
    bars = ax.bar(names, scores, color=BAR_COLOR, width=0.5, zorder=3)

    for bar, val in zip(bars, scores):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 1,
                str(val), ha='center', va='bottom', fontsize=10, color=AXIS_COLOR)

    ax.set_ylim(0, 100)
    ax.grid(axis='y', linestyle='--', color=GRID_COLOR, zorder=0)
    ax.tick_params(colors=AXIS_COLOR, length=0)
    for side in ('top', 'right', 'left', 'bottom'):
        ax.spines[side].set_visible(False)

    plt.tight_layout()
    result = figure_to_base64(fig)
    plt.close(fig)
    return result


def create_gender_chart(gender_data: list) -> str:
    """Donut chart of the gender split."""
    plt = _get_plt()

    labels = [g["name"] for g in gender_data]
    values = [g["value"] for g in gender_data]

    fig, ax = plt.subplots(figsize=(5, 4.5))
    if sum(values) > 0:
        ax.pie(values, labels=labels, colors=GENDER_COLORS[:len(values)],
               startangle=90, autopct=lambda pct: f"{pct:.0f}%" if pct else '',
               wedgeprops={'width': 0.4, 'edgecolor': 'white', 'linewidth': 3},
               textprops={'fontsize': 10, 'color': AXIS_COLOR})
    ax.axis('equal')

    plt.tight_layout()
    result = figure_to_base64(fig)
    plt.close(fig)
    return result


def build_dashboard_charts(stats):
    """Both dashboard charts for the given class stats, or None when empty."""
    if not stats:
        return None
    return {
        "exercises": create_exercise_chart(stats["exercise_averages"]),
        "gender": create_gender_chart(stats["gender_data"]),
    }
