import pytest

from cadcore.color import Color
from cadcore.visual_styles import (
    Colors,
    FillMode,
    LineStyle,
    LineStyleDescription,
    LineThickness,
    LineThicknessDescription,
    PresentationMode,
)


def test_default_color_is_decoded_from_hex():
    assert Colors.DEFAULT.to_hex() == "#c0c0c0"


def test_palette_values_from_source():
    assert Colors.MARKER == Color(1.0, 1.0, 0.0)
    assert Colors.SELECTION == Color(0.98, 0.922, 0.843)
    assert Colors.SKETCH_EDITOR_SEGMENTS == Color.WHITE


def test_shared_highlight_colors_match():
    assert Colors.HIGHLIGHT.to_hex() == Colors.SKETCH_EDITOR_HIGHLIGHT.to_hex()
    assert Colors.SKETCH_EDITOR_CREATING == Color(0.933, 0.706, 0.133)
    assert Colors.FILTERED_SUBSHAPES_HOT == Color(1.0, 0.0, 0.0)
    assert Colors.SKETCH_EDITOR_SELECTION == Color(1.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "enum_cls, names",
    [
        (LineStyle, ["SOLID", "DASH", "SHORT_DASH", "DOT", "DOT_DASH"]),
        (PresentationMode, ["WIREFRAME", "SOLID", "SOLID_WITH_BOUNDARY"]),
        (FillMode, ["NONE", "SOLID"]),
        (LineThickness, ["THIN", "NORMAL", "THICK"]),
    ],
)
def test_enum_member_order(enum_cls, names):
    assert [enum_cls(member.value).name for member in enum_cls] == names


def test_line_style_description_holds_values():
    desc = LineStyleDescription(LineStyle.DOT_DASH, "Dot-Dash", [5.0, 2.0, 1.0, 2.0])
    assert desc.style is LineStyle.DOT_DASH
    assert desc.name == "Dot-Dash"
    assert desc.pattern == [5.0, 2.0, 1.0, 2.0]


def test_line_thickness_description_holds_values():
    desc = LineThicknessDescription(LineThickness.THICK, "Thick", 3.0)
    assert desc.thickness is LineThickness.THICK
    assert desc.width == 3.0
    assert desc == LineThicknessDescription(LineThickness.THICK, "Thick", 3.0)