"""
Material Symbols icon rendering.
"""
from django.utils.html import format_html

from .class_names import cn


def icon_font_size(size) -> str:
    """Numbers are pixels, strings are used as given ("1.5rem")."""
    if isinstance(size, (int, float)) and not isinstance(size, bool):
        return f"{size}px"
    return str(size)


def render_icon(name: str, class_name: str = '', filled: bool = False, size=24):
    """
    Render a ligature icon from the Material Symbols font.

    The glyph is picked by the ligature text, so ``name`` is the icon name
    itself (``"calendar_month"``). ``filled`` switches to the filled variant.
    """
    return format_html(
        '<span class="{}" style="font-size: {}">{}</span>',
        cn('material-symbols-outlined', filled and 'icon-fill', class_name),
        icon_font_size(size),
        name,
    )
