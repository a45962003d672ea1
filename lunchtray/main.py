"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

from lunchtray.log import configure_logging
from lunchtray.lunchtray_app import LunchTrayApp


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
