"""
Tests for the Material Symbols icon renderer.
"""
import pytest

from apps.ui.icons import icon_font_size, render_icon


class TestIconFontSize:

    @pytest.mark.parametrize('size,expected', [
        (24, '24px'),
        (18.5, '18.5px'),
        ('1.5rem', '1.5rem'),
    ])
    def test_sizes(self, size, expected):
        assert icon_font_size(size) == expected


class TestRenderIcon:

    def test_defaults(self):
        assert render_icon('calendar_month') == (
            '<span class="material-symbols-outlined" style="font-size: 24px">'
            'calendar_month</span>'
        )

    def test_filled_with_classes(self):
        html = render_icon('star', class_name='text-primary', filled=True, size=20)

        assert 'class="material-symbols-outlined icon-fill text-primary"' in html
        assert 'style="font-size: 20px"' in html

    def test_name_is_escaped(self):
        html = render_icon('<script>')

        assert '<script>' not in html
        assert '&lt;script&gt;' in html
