"""``helperkit color`` - inspect hex colours."""

from __future__ import annotations

import click
import click_extra as clickx

from helperkit.domain import color as colors


def _rgb_or_fail(hex_color: str) -> tuple:
    rgb = colors.hex_to_rgb(hex_color)
    if rgb is None:
        raise click.BadParameter(f"Not a hex colour: {hex_color!r}", param_hint="HEX")
    return rgb


@click.group(cls=clickx.ExtraGroup)
def color() -> None:
    """Convert colours and compare them."""


@color.command()
@click.argument("hex_color", metavar="HEX")
def convert(hex_color: str) -> None:
    """Print HEX as RGB, HSL and HSV."""
    red, green, blue = _rgb_or_fail(hex_color)[:3]
    hue, saturation, lightness = colors.rgb_to_hsl(red, green, blue)
    _, hsv_saturation, value = colors.rgb_to_hsv(red, green, blue)
    click.echo(f"hex: {colors.rgb_to_hex(red, green, blue)}")
    click.echo(f"rgb: {red}, {green}, {blue}")
    click.echo(f"hsl: {hue:g}, {saturation:g}%, {lightness:g}%")
    click.echo(f"hsv: {hue:g}, {hsv_saturation:g}%, {value:g}%")
    click.echo(f"light: {'yes' if colors.is_light_color(red, green, blue) else 'no'}")


@color.command()
@click.argument("foreground", metavar="HEX")
@click.argument("background", metavar="HEX")
def contrast(foreground: str, background: str) -> None:
    """Print the WCAG contrast ratio between two colours."""
    _rgb_or_fail(foreground)
    _rgb_or_fail(background)
    click.echo(f"{colors.get_contrast(foreground, background):.2f}:1")
