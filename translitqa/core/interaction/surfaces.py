"""
Locators for the parts of the page the runner touches.
"""

import re

from playwright.sync_api import Locator, Page

from translitqa.types.configuration import SelectorConfig


class UISurfaces:
    """Input box, output panel and optional clear control of one page."""

    def __init__(self, page: Page, selectors: SelectorConfig):
        self.page = page
        self.selectors = selectors

    @property
    def input_box(self) -> Locator:
        return self.page.locator(self.selectors.input_selector).first

    @property
    def output_panel(self) -> Locator:
        # The app renders several panels with this class; the result is last.
        return self.page.locator(self.selectors.output_selector).last

    @property
    def clear_button(self) -> Locator:
        pattern = re.compile(self.selectors.clear_button_pattern, re.IGNORECASE)
        return (
            self.page.locator(self.selectors.clear_button_selector)
            .filter(has_text=pattern)
            .first
        )

    def read_output(self) -> str:
        return self.output_panel.inner_text().strip()

    def read_input(self) -> str:
        return self.input_box.input_value()
