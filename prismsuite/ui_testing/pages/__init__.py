"""
================================================================================
Page Objects
================================================================================

Page Object implementations for the Prism Software Solutions site.

Each page class holds:
    - a static LocatorTable
    - a reference to the scenario's BrowserSession
    - named operations that resolve elements when called

Author: Automation Team
License: MIT
================================================================================
"""

from .about_page import AboutPage
from .contact_page import ContactPage
from .home_page import HomePage

__all__ = [
    "HomePage",
    "AboutPage",
    "ContactPage",
]
