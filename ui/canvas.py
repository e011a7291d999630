"""
canvas.py — SVG Bar Chart Renderer
====================================
Pure rendering function: values + per-slot ColorTags → SVG string.

The renderer consumes:
  • values  – the array being drawn, one bar per element
  • tags    – ColorTag (or its string value) per slot, same length
  • config  – visual config (canvas size, colors, fonts, …)

Bar height is proportional to value relative to the largest magnitude,
so negative inputs draw downward from a shifted baseline.  The value is
printed on top of each bar while there is room for a label.
"""

from typing import Dict, List, Optional, Sequence, Union

from engine.render import ColorTag, VisualModel


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"

    # tag → fill
    bar_colors: Dict[str, str] = {
        ColorTag.DEFAULT.value:    "#30363d",   # grey
        ColorTag.COMPARING.value:  "#f59e0b",   # amber
        ColorTag.SELECTED.value:   "#0ea5e9",   # cyan blue
        ColorTag.PIVOT.value:      "#ec4899",   # pink
        ColorTag.ACTIVE.value:     "#06b6d4",   # teal
        ColorTag.SORTED.value:     "#10b981",   # emerald green
        ColorTag.FOUND.value:      "#a855f7",   # purple
        ColorTag.NOT_FOUND.value:  "#991b1b",   # dark red
        ColorTag.ELIMINATED.value: "#21262d",   # faded grey
    }

    # bars
    padding:          int = 24
    bar_gap:          int = 4
    bar_min_height:   int = 4
    label_color:      str = "#e6edf3"
    label_size:       int = 12
    label_min_width:  int = 14     # narrower bars get no value label
    index_color:      str = "#7d8590"
    index_size:       int = 10
    empty_text:       str = "Enter an array or generate a random one."


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    values: Sequence[int],
    tags: Optional[Sequence[Union[ColorTag, str]]] = None,
    config: CanvasConfig = CONFIG,
    show_indices: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        values       : The array to draw.
        tags         : ColorTag per slot (missing slots draw as DEFAULT).
        config       : Visual config.
        show_indices : If True, print the index under each bar.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if not values:
        svg_parts.append(
            f'<text x="{config.width / 2}" y="{config.height / 2}" text-anchor="middle" '
            f'font-size="14" fill="{config.index_color}">{config.empty_text}</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    tag_values = _tag_values(tags or [], len(values))
    bounds = (max(max(values), 0), min(min(values), 0))
    for i, (value, tag) in enumerate(zip(values, tag_values)):
        svg_parts.append(_render_bar(i, value, tag, len(values), bounds, config, show_indices))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def render_model(model: VisualModel, config: CanvasConfig = CONFIG) -> str:
    """Convenience wrapper for a RenderLoop snapshot."""
    return render_canvas(model.values, model.tags, config)


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def bar_color(tag: Union[ColorTag, str, None], config: CanvasConfig = CONFIG) -> str:
    key = tag.value if isinstance(tag, ColorTag) else (tag or ColorTag.DEFAULT.value)
    return config.bar_colors.get(key, config.bar_colors[ColorTag.DEFAULT.value])


def _tag_values(tags: Sequence[Union[ColorTag, str]], n: int) -> List[str]:
    out = [t.value if isinstance(t, ColorTag) else str(t) for t in tags[:n]]
    out.extend([ColorTag.DEFAULT.value] * (n - len(out)))
    return out


def _render_bar(
    index: int,
    value: int,
    tag: str,
    n: int,
    bounds: tuple,
    config: CanvasConfig,
    show_indices: bool,
) -> str:
    top, bottom = bounds
    span    = (top - bottom) or 1

    # room for value labels above and indices below
    plot_h  = config.height - 2 * config.padding - 20
    slot_w  = (config.width - 2 * config.padding) / n
    bar_w   = max(1.0, slot_w - config.bar_gap)
    base_y  = config.padding + 10 + plot_h * top / span

    h = max(config.bar_min_height, plot_h * abs(value) / span)
    x = config.padding + index * slot_w + (slot_w - bar_w) / 2
    y = base_y - h if value >= 0 else base_y

    fill = bar_color(tag, config)
    parts = [
        f'<g class="bar" data-index="{index}" data-tag="{tag}">',
        f'  <rect x="{x:.1f}" y="{y:.1f}" width="{bar_w:.1f}" height="{h:.1f}" '
        f'fill="{fill}" rx="2"/>',
    ]
    if bar_w >= config.label_min_width:
        label_y = y - 4 if value >= 0 else y + h + config.label_size
        parts.append(
            f'  <text x="{x + bar_w / 2:.1f}" y="{label_y:.1f}" text-anchor="middle" '
            f'font-size="{config.label_size}" font-family="\'JetBrains Mono\', monospace" '
            f'fill="{config.label_color}">{value}</text>'
        )
        if show_indices:
            parts.append(
                f'  <text x="{x + bar_w / 2:.1f}" y="{config.height - config.padding / 2:.1f}" '
                f'text-anchor="middle" font-size="{config.index_size}" '
                f'fill="{config.index_color}">{index}</text>'
            )
    parts.append('</g>')
    return "\n".join(parts)
