"""``helperkit password`` - password strength estimation."""

from __future__ import annotations

import click
import click_extra as clickx

from helperkit.domain import password_strength

STRENGTH_COLORS = {
    password_strength.PasswordStrength.VERY_WEAK: "red",
    password_strength.PasswordStrength.WEAK: "red",
    password_strength.PasswordStrength.MEDIUM: "yellow",
    password_strength.PasswordStrength.STRONG: "green",
    password_strength.PasswordStrength.VERY_STRONG: "green",
}


@click.group(cls=clickx.ExtraGroup)
def password() -> None:
    """Password helpers."""


@password.command()
@click.option(
    "--password",
    "value",
    prompt=True,
    hide_input=True,
    envvar="HELPERKIT_PASSWORD",
    help="Password to rate; prompted for when omitted.",
)
@click.option(
    "--min-strength",
    type=click.IntRange(0, 4),
    default=None,
    help="Exit with status 1 below this strength (0-4).",
)
@click.pass_context
def strength(ctx: click.Context, value: str, min_strength: int | None) -> None:
    """Rate a password from very_weak (0) to very_strong (4)."""
    rating = password_strength.estimate(value)
    click.secho(f"{rating.name.lower()} ({int(rating)}/4)", fg=STRENGTH_COLORS[rating])
    if min_strength is not None and rating < min_strength:
        ctx.exit(1)
