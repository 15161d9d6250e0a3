import pytest

from flight_booking_e2e.domain.models import PassengerRecord
from flight_booking_e2e.pages.purchase_page import PurchasePage
from flight_booking_e2e.testing.fakes import FakeBlazeDemoPage

pytestmark = pytest.mark.unit

RECORD = PassengerRecord(
    name="Jane Smith",
    address="12 Main St",
    city="Chicago",
    state="IL",
    zip_code="60601",
    credit_card_number="4111111111111111",
    expiry_month="07",
    expiry_year="2027",
    name_on_card="Jane Smith",
)


@pytest.fixture()
def purchase_view():
    page = FakeBlazeDemoPage()
    page.goto("https://blazedemo.com/")
    page.view = "purchase"
    return page


def test_fill_writes_every_field(purchase_view, config):
    PurchasePage(purchase_view, config).fill_passenger_details(RECORD)

    assert purchase_view.filled == {
        "inputName": "Jane Smith",
        "address": "12 Main St",
        "city": "Chicago",
        "state": "IL",
        "zipCode": "60601",
        "creditCardNumber": "4111111111111111",
        "creditCardMonth": "07",
        "creditCardYear": "2027",
        "nameOnCard": "Jane Smith",
    }


def test_card_type_is_always_visa(purchase_view, config):
    PurchasePage(purchase_view, config).fill_passenger_details(RECORD)
    assert purchase_view.selected["cardType"] == "visa"


def test_complete_purchase_submits_without_waiting(purchase_view, config):
    PurchasePage(purchase_view, config).complete_purchase()

    assert purchase_view.clicks == ["purchaseFlight"]
    assert purchase_view.view == "confirmation"
    assert purchase_view.load_states == []
