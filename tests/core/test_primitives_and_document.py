"""Primitive serialization and document composition tests."""

from artforge.core.compose_document import compose_document
from artforge.core.palettes import BOLD
from artforge.core.primitives import Circle, Path, Polygon, Rectangle, Text, fmt_number


def test_fmt_number():
    assert fmt_number(400) == "400"
    assert fmt_number(400.0) == "400"
    assert fmt_number(0.55) == "0.55"
    assert fmt_number(-12.5) == "-12.5"


def test_polygon_svg():
    poly = Polygon(points=((1.0, 2.0), (3.5, 4.0), (5.0, 6.0)), fill="#FFFFFF", opacity=0.5)
    assert poly.to_svg() == '<polygon points="1,2 3.5,4 5,6" fill="#FFFFFF" opacity="0.5"/>'


def test_rectangle_rounded_corners_without_rotation():
    rect = Rectangle(x=10, y=20, width=30, height=40, fill="#000000", opacity=0.7, corner_radius=8)
    svg = rect.to_svg()
    assert 'rx="8"' in svg
    assert "transform" not in svg


def test_stroked_path_svg():
    path = Path(
        commands=(("M", (0.0, 0.0)), ("L", (30.0, 0.0))),
        fill="none", opacity=0.8, stroke="#123456", stroke_width=3,
    )
    assert path.to_svg() == (
        '<path d="M 0 0 L 30 0" stroke="#123456" stroke-width="3" fill="none" opacity="0.8"/>'
    )


def test_text_content_is_escaped():
    text = Text(x=1, y=2, content="<&>", font_size=10, fill="#fff", opacity=1)
    assert ">&lt;&amp;&gt;</text>" in text.to_svg()


def test_document_layout():
    circle = Circle(cx=5, cy=5, r=2, fill=BOLD[2], opacity=0.9)
    rect = Rectangle(x=0, y=0, width=1, height=1, fill=BOLD[3], opacity=1.0)
    doc = compose_document(100, BOLD, [circle, rect])
    svg = doc.to_svg()

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">')
    assert svg.endswith("</svg>")
    assert f'stop-color="{BOLD[0]}" stop-opacity="0.8"' in svg
    assert f'stop-color="{BOLD[1]}" stop-opacity="0.8"' in svg
    assert svg.count('id="bg"') == 1
    background = svg.index('fill="url(#bg)"')
    assert background < svg.index("<circle") < svg.index(f'fill="{BOLD[3]}"')


def test_empty_document():
    doc = compose_document(20, BOLD, [])
    assert doc.primitives == ()
    assert '<rect width="20" height="20" fill="url(#bg)"/>' in doc.to_svg()
