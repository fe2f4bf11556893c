"""Main application entry point."""
import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw, Gio
import logging
import sys

from .core.config import load_config
from .ui.main_window import MainWindow

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


class SignpadApp(Adw.Application):
    """Main application class."""
    
    def __init__(self):
        super().__init__(
            application_id='com.signpad.app',
            flags=Gio.ApplicationFlags.NON_UNIQUE
        )
        self.window = None
        self.config = load_config()
        logger.info("Signpad application initialized")
    
    def do_activate(self):
        """Activate the application."""
        if not self.window:
            self.window = MainWindow(self, self.config)
        
        self.window.present()
        logger.info("Application window presented")
    
    def do_shutdown(self):
        """Shutdown the application."""
        logger.info("Application shutting down")
        Adw.Application.do_shutdown(self)


def main():
    """Main entry point."""
    logger.info("Starting Signpad application")
    app = SignpadApp()
    return app.run(sys.argv)


if __name__ == '__main__':
    sys.exit(main())
