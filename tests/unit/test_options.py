#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for renderer options and Markdown flavors."""

from dataclasses import FrozenInstanceError

import pytest

from labrender.options import HtmlRendererOptions, MarkdownRendererOptions, get_flavor_defaults
from labrender.utils.flavors import CodelabFlavor, QwiklabsFlavor, get_flavor, list_flavors


@pytest.mark.unit
class TestFlavors:
    """Tests for the flavor registry."""

    def test_list_flavors(self):
        """Test both house styles are registered."""
        assert list_flavors() == ["codelab", "qwiklabs"]

    def test_get_flavor(self):
        """Test flavors are looked up by name."""
        assert isinstance(get_flavor("codelab"), CodelabFlavor)
        assert isinstance(get_flavor("qwiklabs"), QwiklabsFlavor)
        assert get_flavor("qwiklabs").name == "qwiklabs"

    def test_unknown_flavor(self):
        """Test an unknown flavor name is rejected."""
        with pytest.raises(ValueError, match="Unknown markdown flavor"):
            get_flavor("gfm")

    def test_flavor_defaults(self):
        """Test the behaviors each flavor contributes."""
        assert get_flavor_defaults("codelab") == {
            "heading_level_offset": 1,
            "italic_padding": True,
            "terminal_code_style": "indent",
            "terminal_code_language": "",
            "code_block_padding": False,
        }
        assert get_flavor_defaults("qwiklabs") == {
            "heading_level_offset": 0,
            "italic_padding": False,
            "terminal_code_style": "fence",
            "terminal_code_language": "bash",
            "code_block_padding": True,
        }


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Tests for MarkdownRendererOptions."""

    def test_default_is_codelab(self):
        """Test the default options resolve to the codelab flavor."""
        options = MarkdownRendererOptions()
        assert options.flavor == "codelab"
        assert options.heading_level_offset == 1
        assert options.terminal_code_style == "indent"

    def test_flavor_fills_unset_fields(self):
        """Test selecting a flavor supplies its defaults."""
        options = MarkdownRendererOptions(flavor="qwiklabs")
        assert options.heading_level_offset == 0
        assert options.italic_padding is False
        assert options.terminal_code_language == "bash"

    def test_explicit_field_wins_over_flavor(self):
        """Test explicit values are not replaced by flavor defaults."""
        options = MarkdownRendererOptions(flavor="qwiklabs", heading_level_offset=2, terminal_code_language="")
        assert options.heading_level_offset == 2
        assert options.terminal_code_language == ""
        assert options.code_block_padding is True

    def test_unknown_flavor(self):
        """Test an unknown flavor is rejected."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(flavor="gfm")

    def test_negative_heading_offset(self):
        """Test a negative heading offset is rejected."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(heading_level_offset=-1)

    def test_invalid_terminal_style(self):
        """Test an unknown terminal style is rejected."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(terminal_code_style="box")

    def test_empty_button_class(self):
        """Test the button class cannot be blank."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(button_class=" ")

    def test_frozen(self):
        """Test options cannot be mutated in place."""
        options = MarkdownRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.flavor = "qwiklabs"

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        options = MarkdownRendererOptions()
        updated = options.create_updated(infobox_class_prefix="box")
        assert updated.infobox_class_prefix == "box"
        assert options.infobox_class_prefix == "codelabs-infobox"
        assert updated.heading_level_offset == 1


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Tests for HtmlRendererOptions."""

    def test_defaults(self):
        """Test default HTML options."""
        options = HtmlRendererOptions()
        assert options.code_block_class == "prettyprint"
        assert options.button_class == "codelabs-downloadbutton"
        assert "file_download" in options.download_icon

    def test_create_updated(self):
        """Test create_updated on HTML options."""
        assert HtmlRendererOptions().create_updated(code_block_class="c").code_block_class == "c"
