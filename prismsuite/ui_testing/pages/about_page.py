"""
About page object (`/about`): mission, vision and Smart Operations sections.
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


class AboutPage:
    """About page object."""

    URL_PATH = "/about"

    LOCATORS = LocatorTable({
        "page_title": Locator(By.XPATH, "//h1[contains(text(), 'About Prism')]"),
        "mission_section": Locator(By.XPATH, "//h3[contains(text(), 'Our Mission')]"),
        "vision_section": Locator(By.XPATH, "//h3[contains(text(), 'Our Vision')]"),
        "smart_operations_section": Locator(By.XPATH, "//h2[contains(text(), 'Smart Operations')]"),
        "home_link": Locator(By.XPATH, "//a[contains(text(), 'Home')]"),
        "contact_link": Locator(By.XPATH, "//a[contains(text(), 'Contact')]"),
    })

    def __init__(self, session: BrowserSession):
        self.session = session
        self.log = session.log

    def _element(self, name: str) -> Element:
        return find(self.session, self.LOCATORS, name)

    @property
    def url(self) -> str:
        return self.session.settings.url_for(self.URL_PATH)

    @allure.step("Open about page")
    def navigate_to_about_page(self) -> None:
        navigate_to(self.session, self.url)
        self.log.info("Navigated to About page")

    def get_page_title(self) -> str:
        return read_text(self.session, self._element("page_title"))

    def get_mission_text(self) -> str:
        return read_text(self.session, self._element("mission_section"))

    def get_vision_text(self) -> str:
        return read_text(self.session, self._element("vision_section"))

    def is_mission_section_visible(self) -> bool:
        return is_displayed(self.session, self._element("mission_section"))

    def is_vision_section_visible(self) -> bool:
        return is_displayed(self.session, self._element("vision_section"))

    def is_smart_operations_section_visible(self) -> bool:
        return is_displayed(self.session, self._element("smart_operations_section"))

    @allure.step("Click Home")
    def click_home_link(self) -> None:
        click(self.session, self._element("home_link"))
        self.log.info("Clicked Home link from About page")

    @allure.step("Click Contact")
    def click_contact_link(self) -> None:
        click(self.session, self._element("contact_link"))
        self.log.info("Clicked Contact link from About page")

    def scroll_to_mission(self) -> None:
        scroll_into_view(self.session, self._element("mission_section"))
        self.log.info("Scrolled to Mission section")

    def scroll_to_vision(self) -> None:
        scroll_into_view(self.session, self._element("vision_section"))
        self.log.info("Scrolled to Vision section")
