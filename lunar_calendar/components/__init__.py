"""
Calendar Page Components

Individual components that make up one calendar page.
"""

from .paper import PaperComponent
from .header import HeaderComponent
from .main_content import MainContentComponent
from .seconds_grid import SecondsGridComponent
from .footer import FooterComponent

__all__ = [
    'PaperComponent',
    'HeaderComponent',
    'MainContentComponent',
    'SecondsGridComponent',
    'FooterComponent',
]
