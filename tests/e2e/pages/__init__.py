"""
Page Object Model (POM) classes for the card delivery form.

Page objects keep selectors and interactions out of the scenarios, so a
change to the form's markup only needs an update in one place.
"""

from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.card_delivery_page import CardDeliveryPage

__all__ = ["BasePage", "CardDeliveryPage"]
