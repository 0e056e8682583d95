from django import template

from apps.ui.class_names import cn as merge_class_names
from apps.ui.currency import format_pence
from apps.ui.dates import format_date_uk
from apps.ui.icons import render_icon

register = template.Library()


@register.simple_tag
def icon(name, filled=False, size=24, **kwargs):
    """{% icon "calendar_month" filled=True size=20 class="text-primary" %}"""
    return render_icon(name, class_name=kwargs.get('class', ''),
                       filled=filled, size=size)


@register.simple_tag
def cn(*inputs):
    """{% cn "px-2 py-1" extra_classes %}"""
    return merge_class_names(*inputs)


@register.filter(name="date_uk")
def date_uk(value) -> str:
    """Empty values render as an empty string."""
    if not value:
        return ''
    try:
        return format_date_uk(value)
    except (TypeError, ValueError):
        return ''


@register.filter(name="pence")
def pence(value) -> str:
    try:
        return format_pence(value)
    except (TypeError, ValueError, ArithmeticError):
        return ''
