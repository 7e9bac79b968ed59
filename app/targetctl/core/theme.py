"""Console colours for targetctl output.

The palette ships with the package in ``data/theme.toml``. Only the
styles the CLI prints are registered.
"""

import logging
import tomllib
from functools import cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

logger = logging.getLogger(__name__)

THEME_RESOURCE = "theme.toml"


class ThemeColors(BaseModel):
    """Hex colours for each console style (#RRGGBB or #RGB)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: str = "#b2bec3"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        if not isinstance(v, str):
            raise ValueError("color must be a string")
        color = v.strip()
        digits = color[1:]
        if not color.startswith("#") or len(digits) not in (3, 6):
            raise ValueError(f"'{color}' is not a #RGB or #RRGGBB color")
        try:
            int(digits, 16)
        except ValueError:
            raise ValueError(f"'{color}' is not a valid hex color") from None
        return color


def parse_theme(text: str) -> ThemeColors:
    """Build ThemeColors from the ``[colors]`` table of a TOML document.

    Raises:
        tomllib.TOMLDecodeError: If the document is not valid TOML.
        pydantic.ValidationError: If a colour is invalid or unknown.
    """
    data = tomllib.loads(text)
    return ThemeColors.model_validate(data.get("colors", {}))


def load_bundled_theme() -> ThemeColors:
    """Load the palette bundled with the package.

    A missing or broken resource means a damaged install; the built-in
    defaults are used and an error is logged.
    """
    resource = resources.files("targetctl.data").joinpath(THEME_RESOURCE)
    try:
        return parse_theme(resource.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("Bundled theme is unusable, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Map ThemeColors onto Rich style names."""
    return Theme(
        {
            "muted": colors.muted,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
        }
    )


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once."""
    return get_rich_theme(load_bundled_theme())
