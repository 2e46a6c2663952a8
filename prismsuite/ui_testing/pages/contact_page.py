"""
================================================================================
Contact Page Object
================================================================================

Contact page (`/contact`) with the name / email / message form.

The form helpers type whatever they are given. Input shape (e.g. email
format) is the website's concern. `submit_contact_form` is a plain
sequence of steps: if one fails the form stays partially filled and that
step's exception reaches the caller.

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
    type_text,
)
from prismsuite.ui_testing.framework.locators import By, Locator, LocatorTable


class ContactPage:
    """Contact page object."""

    URL_PATH = "/contact"

    LOCATORS = LocatorTable({
        "page_title": Locator(By.XPATH, "//h1[contains(text(), 'Contact Us')]"),
        "connect_section": Locator(By.XPATH, "//h2[contains(text(), \"Let's Connect\")]"),
        "name_input": Locator(By.XPATH, "//input[@placeholder]"),
        "email_input": Locator(By.XPATH, "//input[@type='email']"),
        "message_input": Locator(By.XPATH, "//textarea"),
        "submit_button": Locator(By.XPATH, "//button[contains(., 'Submit')]"),
        "home_link": Locator(By.XPATH, "//a[contains(text(), 'Home')]"),
    })

    def __init__(self, session: BrowserSession):
        self.session = session
        self.log = session.log

    def _element(self, name: str) -> Element:
        return find(self.session, self.LOCATORS, name)

    @property
    def url(self) -> str:
        return self.session.settings.url_for(self.URL_PATH)

    @allure.step("Open contact page")
    def navigate_to_contact_page(self) -> None:
        navigate_to(self.session, self.url)
        self.log.info("Navigated to Contact page")

    def get_page_title(self) -> str:
        return read_text(self.session, self._element("page_title"))

    def is_connect_section_visible(self) -> bool:
        return is_displayed(self.session, self._element("connect_section"))

    def is_name_input_displayed(self) -> bool:
        return is_displayed(self.session, self._element("name_input"))

    def is_email_input_displayed(self) -> bool:
        return is_displayed(self.session, self._element("email_input"))

    def is_submit_button_displayed(self) -> bool:
        return is_displayed(self.session, self._element("submit_button"))

    def enter_name(self, name: str) -> None:
        type_text(self.session, self._element("name_input"), name)
        self.log.info(f"Entered name: {name}")

    def enter_email(self, email: str) -> None:
        type_text(self.session, self._element("email_input"), email)
        self.log.info(f"Entered email: {email}")

    def enter_message(self, message: str) -> None:
        type_text(self.session, self._element("message_input"), message)
        self.log.info(f"Entered message: {message}")

    @allure.step("Click Submit")
    def click_submit_button(self) -> None:
        click(self.session, self._element("submit_button"))
        self.log.info("Clicked Submit button")

    @allure.step("Submit contact form (name={name})")
    def submit_contact_form(self, name: str, email: str, message: str) -> None:
        """Fill name, email and message in that order, then click Submit."""
        self.enter_name(name)
        self.enter_email(email)
        self.enter_message(message)
        self.click_submit_button()
        self.log.info(f"Contact form submitted with name: {name}")

    @allure.step("Click Home")
    def click_home_link(self) -> None:
        click(self.session, self._element("home_link"))
        self.log.info("Clicked Home link from Contact page")
