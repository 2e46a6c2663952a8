"""
================================================================================
Home Page Object
================================================================================

Prism Software Solutions landing page (`/`).

Holds the page's locator table and exposes its landmarks as named
operations. Each operation resolves its element when called.

================================================================================
"""

from __future__ import annotations

import allure

from prismsuite.ui_testing.framework.browser_manager import BrowserSession
from prismsuite.ui_testing.framework.element_actions import (
    Element,
    click,
    find,
    is_displayed,
    navigate_to,
    read_text,
    scroll_into_view,
)
from prismsuite.ui_testing.framework.locators import By, Locator, LocatorTable


class HomePage:
    """Home page object."""

    URL_PATH = ""

    LOCATORS = LocatorTable({
        "main_heading": Locator(By.XPATH, "//h1[contains(text(), 'Building Cutting-Edge Software')]"),
        "why_choose_prism_section": Locator(By.XPATH, "//h2[contains(text(), 'Why Choose Prism')]"),
        "our_products_section": Locator(By.XPATH, "//h2[contains(text(), 'Our Latest Products')]"),
        "learn_more_link": Locator(By.XPATH, "//a[contains(text(), 'Learn More')]"),
        "contact_us_link": Locator(By.XPATH, "//a[contains(text(), 'Contact Us')]"),
        "about_link": Locator(By.LINK_TEXT, "About"),
        "prism_logo": Locator(By.XPATH, "//img[@alt]"),
    })

    def __init__(self, session: BrowserSession):
        self.session = session
        self.log = session.log

    def _element(self, name: str) -> Element:
        return find(self.session, self.LOCATORS, name)

    @property
    def url(self) -> str:
        return self.session.settings.url_for(self.URL_PATH)

    @allure.step("Open home page")
    def navigate_to_home_page(self) -> None:
        navigate_to(self.session, self.url)
        self.log.info("Navigated to Prism home page")

    def get_main_heading(self) -> str:
        return read_text(self.session, self._element("main_heading"))

    def is_why_choose_prism_section_visible(self) -> bool:
        return is_displayed(self.session, self._element("why_choose_prism_section"))

    def is_our_products_section_visible(self) -> bool:
        return is_displayed(self.session, self._element("our_products_section"))

    def is_prism_logo_displayed(self) -> bool:
        return is_displayed(self.session, self._element("prism_logo"))

    @allure.step("Click Learn More")
    def click_learn_more(self) -> None:
        click(self.session, self._element("learn_more_link"))
        self.log.info("Clicked Learn More link")

    @allure.step("Click Contact Us")
    def click_contact_us(self) -> None:
        click(self.session, self._element("contact_us_link"))
        self.log.info("Clicked Contact Us link")

    @allure.step("Click About")
    def click_about_link(self) -> None:
        click(self.session, self._element("about_link"))
        self.log.info("Clicked About link")

    def scroll_to_why_choose_prism(self) -> None:
        scroll_into_view(self.session, self._element("why_choose_prism_section"))
        self.log.info("Scrolled to Why Choose Prism section")

    def scroll_to_products(self) -> None:
        scroll_into_view(self.session, self._element("our_products_section"))
        self.log.info("Scrolled to Our Products section")
