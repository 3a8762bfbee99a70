"""Page styles: a template plus static assets.

Public API:
    Style -- a loaded style that renders the entry page
    list_styles -- names of the available styles
    install_styles -- copy bundled styles to the data directory
"""

from thqm.styles.style import (
    Style,
    StyleError,
    StyleNotFoundError,
    install_styles,
    list_styles,
)

__all__ = ["Style", "StyleError", "StyleNotFoundError", "install_styles", "list_styles"]
