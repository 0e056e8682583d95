"""
Class-name composition for Tailwind utility classes.

``cn`` accepts the same inputs as clsx (strings, iterables and
``{class: condition}`` mappings) and hands the result to tailwind-merge so
the last conflicting utility wins:

    >>> cn('px-2 py-1 bg-red-500', {'bg-blue-500': True})
    'px-2 py-1 bg-blue-500'
"""
from collections.abc import Iterable, Mapping
from typing import List

from tailwind_merge import TailwindMerge

_tailwind_merge = TailwindMerge()


def class_names(*inputs) -> str:
    """Flatten conditional class inputs into one space separated string."""
    classes: List[str] = []

    def collect(value):
        if not value:
            return
        if isinstance(value, str):
            classes.extend(value.split())
        elif isinstance(value, Mapping):
            classes.extend(str(key) for key, enabled in value.items() if enabled)
        elif isinstance(value, Iterable):
            for item in value:
                collect(item)
        else:
            classes.append(str(value))

    for value in inputs:
        collect(value)
    return ' '.join(classes)


def merge_classes(class_string: str) -> str:
    """Drop every utility overridden by a later conflicting one."""
    if not class_string:
        return ''
    return _tailwind_merge.merge(class_string)


def cn(*inputs) -> str:
    return merge_classes(class_names(*inputs))
