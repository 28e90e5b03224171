from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from taminal.config.settings import configure_logging
from taminal.container import container
from taminal.exceptions import ConfigurationError

from .main_window import MainWindow

# (window, text, base, alternate base, button, highlight)
_PALETTES: dict[str, tuple[QColor, ...]] = {
    "dark": (
        QColor(17, 18, 23),
        QColor(235, 238, 246),
        QColor(22, 24, 31),
        QColor(27, 30, 39),
        QColor(39, 43, 56),
        QColor(108, 156, 255),
    ),
    "light": (
        QColor(248, 249, 251),
        QColor(24, 28, 37),
        QColor(255, 255, 255),
        QColor(244, 246, 250),
        QColor(255, 255, 255),
        QColor(62, 121, 247),
    ),
}


def apply_theme(app: QApplication, theme: str) -> None:
    app.setStyle("Fusion")
    window, text, base, alt, button, highlight = _PALETTES.get(theme, _PALETTES["dark"])
    palette = QPalette()
    cr = QPalette.ColorRole
    palette.setColor(cr.Window, window)
    palette.setColor(cr.WindowText, text)
    palette.setColor(cr.Base, base)
    palette.setColor(cr.AlternateBase, alt)
    palette.setColor(cr.Text, text)
    palette.setColor(cr.Button, button)
    palette.setColor(cr.ButtonText, text)
    palette.setColor(cr.Highlight, highlight)
    palette.setColor(cr.HighlightedText, QColor(255, 255, 255))
    palette.setColor(QPalette.ColorGroup.Disabled, cr.Text, QColor(127, 127, 127))
    app.setPalette(palette)


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv

    try:
        settings = container.get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    app = QApplication(argv)
    apply_theme(app, settings.ui_theme)

    engine = container.create_shell_engine(capture_output=True)
    win = MainWindow(engine, settings.scrollback_lines)
    win.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
