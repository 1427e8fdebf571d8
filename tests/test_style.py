import pytest

from ezatheme.style import Colour, Fixed, Rgb, Style


def test_default_style_has_nothing_set():
    style = Style()
    assert style.foreground is None
    assert style.background is None
    assert not any(
        (
            style.is_bold,
            style.is_dimmed,
            style.is_italic,
            style.is_underline,
            style.is_blink,
            style.is_reverse,
            style.is_hidden,
            style.is_strikethrough,
        )
    )


def test_builders_do_not_mutate():
    base = Style()
    bold = base.bold()
    assert bold.is_bold
    assert not base.is_bold
    assert base == Style()


@pytest.mark.parametrize(
    "method, attribute",
    [
        ("bold", "is_bold"),
        ("dimmed", "is_dimmed"),
        ("italic", "is_italic"),
        ("underline", "is_underline"),
        ("blink", "is_blink"),
        ("reverse", "is_reverse"),
        ("hidden", "is_hidden"),
        ("strikethrough", "is_strikethrough"),
    ],
)
def test_each_attribute_method_sets_its_flag(method, attribute):
    style = getattr(Style(), method)()
    assert getattr(style, attribute) is True


def test_repeated_attribute_is_idempotent():
    assert Style().bold().bold().bold() == Style().bold()


def test_fg_and_on_set_colours():
    style = Style().fg(Colour.RED).on(Colour.YELLOW)
    assert style.foreground == Colour.RED
    assert style.background == Colour.YELLOW


def test_later_colour_overrides_earlier():
    assert Style().fg(Colour.RED).fg(Colour.BLUE) == Style().fg(Colour.BLUE)


def test_order_of_building_does_not_matter():
    a = Style().bold().fg(Fixed(121)).on(Rgb(255, 100, 0))
    b = Style().on(Rgb(255, 100, 0)).fg(Fixed(121)).bold()
    assert a == b


def test_fixed_out_of_range_rejected():
    with pytest.raises(ValueError):
        Fixed(256)
    with pytest.raises(ValueError):
        Fixed(-1)


def test_rgb_out_of_range_rejected():
    with pytest.raises(ValueError):
        Rgb(0, 0, 300)


def test_plain_style_paints_text_unchanged():
    assert Style().paint("hello") == "hello"


def test_paint_red_foreground():
    assert Style().fg(Colour.RED).paint("hi") == "\x1b[31mhi\x1b[0m"


def test_paint_fixed_colour_contains_palette_code():
    painted = Style().fg(Fixed(149)).paint("x")
    assert "38;5;149" in painted
    assert painted.endswith("x\x1b[0m")


def test_paint_background_uses_background_code():
    painted = Style().on(Rgb(255, 100, 0)).paint("x")
    assert "48;2;255;100;0" in painted
    assert painted.startswith("\x1b[")