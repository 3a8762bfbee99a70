"""Page styles.

A style is a directory holding a ``template.html`` and, optionally, static
assets. The directory doubles as the static-asset base path, so a
template can reference ``static/style.css`` directly.

Templates use ``string.Template`` placeholders:

    $title          page title
    $entries        the entry links
    $qrcode         inline SVG QR code of the page URL (may be empty)
    $shutdown       the shutdown button (may be empty)
    $custom_input   free text input form (may be empty)
"""

from __future__ import annotations

import html
import logging
import shutil
from pathlib import Path
from string import Template
from typing import Iterable
from urllib.parse import quote

from thqm.utils.paths import get_data_dir

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "template.html"
BUNDLED_STYLES_DIR = Path(__file__).resolve().parent


class StyleError(Exception):
    """Raised when a style cannot be loaded or rendered."""


class StyleNotFoundError(StyleError):
    """Raised when no style with the requested name exists."""


def user_styles_dir() -> Path:
    return get_data_dir() / "styles"


def _style_names(root: Path) -> set[str]:
    if not root.is_dir():
        return set()
    return {p.name for p in root.iterdir() if (p / TEMPLATE_NAME).is_file()}


def list_styles() -> list[str]:
    """Names of all available styles, user-installed and bundled."""
    return sorted(_style_names(user_styles_dir()) | _style_names(BUNDLED_STYLES_DIR))


def install_styles(force: bool = False) -> list[str]:
    """Copy the bundled styles into the user data directory.

    Existing user styles are left alone unless ``force`` is set.

    Returns:
        Names of the styles that were copied.
    """
    dest_root = user_styles_dir()
    dest_root.mkdir(parents=True, exist_ok=True)
    installed = []
    for name in sorted(_style_names(BUNDLED_STYLES_DIR)):
        dest = dest_root / name
        if dest.exists():
            if not force:
                logger.debug("Style %s already installed, skipping", name)
                continue
            shutil.rmtree(dest)
        shutil.copytree(BUNDLED_STYLES_DIR / name, dest, ignore=shutil.ignore_patterns("__pycache__"))
        installed.append(name)
        logger.info("Installed style %s to %s", name, dest)
    return installed


class Style:
    """A loaded page style."""

    def __init__(self, name: str, base_path: Path) -> None:
        self.name = name
        self.base_path = base_path

    def __repr__(self) -> str:
        return f"Style(name={self.name!r}, base_path={str(self.base_path)!r})"

    @property
    def template_path(self) -> Path:
        return self.base_path / TEMPLATE_NAME

    @classmethod
    def load(cls, name: str) -> Style:
        """Find a style by name, preferring user-installed styles."""
        if not name or Path(name).name != name:
            raise StyleNotFoundError(f"Invalid style name: {name!r}")
        for root in (user_styles_dir(), BUNDLED_STYLES_DIR):
            candidate = root / name
            if (candidate / TEMPLATE_NAME).is_file():
                logger.debug("Using style %s from %s", name, candidate)
                return cls(name, candidate)
        raise StyleNotFoundError(
            f"Style {name!r} not found, available styles: {', '.join(list_styles())}"
        )

    def render(
        self,
        entries: Iterable[str],
        title: str = "thqm",
        qrcode_svg: str | None = None,
        allow_shutdown: bool = True,
        custom_input: bool = False,
    ) -> str:
        """Render the page HTML for ``entries``."""
        try:
            template = Template(self.template_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StyleError(f"Failed to read template {self.template_path}: {e}") from e

        try:
            return template.substitute(
                title=html.escape(title),
                entries=_render_entries(entries),
                qrcode=_render_qrcode(qrcode_svg),
                shutdown=_SHUTDOWN_HTML if allow_shutdown else "",
                custom_input=_CUSTOM_INPUT_HTML if custom_input else "",
            )
        except (KeyError, ValueError) as e:
            raise StyleError(f"Invalid template {self.template_path}: {e}") from e


_SHUTDOWN_HTML = (
    '<a class="shutdown" href="/cmd/shutdown" title="Shutdown server">&#x23FB;</a>'
)

_CUSTOM_INPUT_HTML = (
    '<form class="custom-input" action="/" method="get">'
    '<input type="text" name="select" placeholder="Custom entry" autocomplete="off">'
    '<button type="submit">&#x23CE;</button>'
    "</form>"
)


def _render_entries(entries: Iterable[str]) -> str:
    items = [
        f'<li><a class="entry" href="/?select={quote(entry, safe="")}">{html.escape(entry)}</a></li>'
        for entry in entries
    ]
    return "<ul class=\"entries\">\n" + "\n".join(items) + "\n</ul>"


def _render_qrcode(qrcode_svg: str | None) -> str:
    if not qrcode_svg:
        return ""
    # Trusted markup produced by thqm.utils.qr
    return f'<div class="qrcode">{qrcode_svg}</div>'
