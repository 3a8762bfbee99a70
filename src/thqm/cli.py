"""Command-line interface for thqm.

Reads entries from stdin, serves them as a web page and prints the
selected entry to stdout. Everything meant for the user (URL, QR code,
logs) goes to stderr so stdout can be piped into another program::

    ls | thqm --oneshot | xargs -I{} echo "picked {}"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import SecretStr

from thqm import __version__
from thqm.config.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Options left unset fall back to the configuration file and
    ``THQM_*`` environment variables.
    """
    parser = argparse.ArgumentParser(
        prog="thqm",
        description="Serve a selection page for the entries read from stdin; "
        "print the selected entry to stdout.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ~/.config/thqm/thqm.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    server = parser.add_argument_group("server")
    server.add_argument("--host", type=str, default=None, help="Address to bind (default: 0.0.0.0)")
    server.add_argument("--port", type=int, default=None, help="Port to listen on (default: 2222)")
    server.add_argument(
        "-u", "--username", type=str, default=None,
        help="Basic auth username (default: thqm)",
    )
    server.add_argument(
        "-p", "--password", type=str, default=None,
        help="Basic auth password, enables basic auth",
    )
    server.add_argument(
        "--interface", type=str, default=None,
        help="Network interface whose address is used in the page URL",
    )
    server.add_argument(
        "-o", "--oneshot", action="store_true", default=None,
        help="Stop the server after the first selection",
    )

    page = parser.add_argument_group("page")
    page.add_argument(
        "-S", "--separator", type=str, default=None,
        help="Entry separator in the input (default: newline)",
    )
    page.add_argument("-t", "--title", type=str, default=None, help="Page title (default: thqm)")
    page.add_argument("-s", "--style", type=str, default=None, help="Page style (default: default)")
    page.add_argument(
        "--custom-input", action="store_true", default=None,
        help="Show a text field for entering a custom entry",
    )
    page.add_argument(
        "--no-shutdown", action="store_true", default=None,
        help="Hide the shutdown button on the page",
    )
    page.add_argument(
        "--no-qrcode", action="store_true", default=None,
        help="Hide the QR code on the page",
    )

    output = parser.add_argument_group("output")
    output.add_argument("-q", "--qrcode", action="store_true", help="Print the QR code to stderr")
    output.add_argument(
        "--save-qrcode", type=Path, default=None, metavar="PATH",
        help="Save the QR code as a PNG image",
    )
    output.add_argument("--url", action="store_true", help="Print the page URL to stderr")

    styles = parser.add_argument_group("styles")
    styles.add_argument("--list-styles", action="store_true", help="List available styles and exit")
    styles.add_argument(
        "--install-styles", action="store_true",
        help="Reinstall the bundled styles into the data directory and exit",
    )

    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of ``settings`` with the explicitly given CLI flags applied."""
    update = {}
    for field in (
        "host", "port", "username", "interface", "oneshot", "separator",
        "title", "style", "custom_input", "no_shutdown", "no_qrcode",
    ):
        value = getattr(args, field)
        if value is not None:
            update[field] = value
    if args.password is not None:
        update["password"] = SecretStr(args.password)
    if update:
        settings = settings.model_copy(update=update)
    if args.verbose:
        settings.logging.level = "DEBUG"
    return settings


def _serve(settings: Settings, args: argparse.Namespace) -> int:
    """Render the page and run the server. Returns the exit code."""
    from thqm.domain.models import Credentials, ServerConfig
    from thqm.server import ServerRunner, create_app
    from thqm.styles import Style
    from thqm.utils.net import format_full_url, resolve_local_address
    from thqm.utils.paths import read_stdin, split_entries
    from thqm.utils.qr import render_qr_svg, render_qr_text, save_qr_png

    style = Style.load(settings.style)
    entries = split_entries(read_stdin(), settings.separator)
    logger.info("Read %d entries from stdin", len(entries))

    credentials = settings.credentials
    ip = resolve_local_address(settings.interface)
    url = format_full_url(
        ip,
        settings.port,
        *(credentials if credentials is not None else (None, None)),
    )

    page = style.render(
        entries,
        title=settings.title,
        qrcode_svg=None if settings.no_qrcode else render_qr_svg(url),
        allow_shutdown=not settings.no_shutdown,
        custom_input=settings.custom_input,
    )

    if args.save_qrcode is not None:
        save_qr_png(url, args.save_qrcode)
    if args.qrcode:
        print(render_qr_text(url), file=sys.stderr)
    if args.url:
        print(url, file=sys.stderr)

    config = ServerConfig(
        host=settings.host,
        port=settings.port,
        oneshot=settings.oneshot,
        credentials=Credentials(login=credentials[0], password=credentials[1]) if credentials else None,
        page=page,
        static_dir=style.base_path,
    )
    runner = ServerRunner(create_app(config), host=config.host, port=config.port)
    return runner.run()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the thqm CLI."""
    args = parse_args(argv)

    from thqm.styles import StyleError, install_styles, list_styles
    from thqm.utils.logging import setup_logging
    from thqm.utils.net import AddressResolutionError
    from thqm.utils.qr import QrCodeError

    try:
        settings = apply_overrides(load_settings(args.config), args)
    except (yaml.YAMLError, ValueError, OSError) as e:
        # Logging is configured from these settings, so report directly.
        print(f"thqm: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    setup_logging(settings.logging)

    if args.list_styles:
        for name in list_styles():
            print(name)
        return

    if args.install_styles:
        for name in install_styles(force=True):
            print(f"Installed style: {name}", file=sys.stderr)
        return

    try:
        exit_code = _serve(settings, args)
    except (StyleError, AddressResolutionError, QrCodeError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
