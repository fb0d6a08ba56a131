from .main_window import MainWindow
from .dev_panel import DevPanel

__all__ = ["MainWindow", "DevPanel"]
