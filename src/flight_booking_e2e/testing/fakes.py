from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from playwright.sync_api import Error as PWError
from playwright.sync_api import TimeoutError as PWTimeoutError

from flight_booking_e2e.pages.confirmation_page import ConfirmationSelectors
from flight_booking_e2e.pages.flight_selection_page import FlightSelectors
from flight_booking_e2e.pages.home_page import HomeSelectors
from flight_booking_e2e.pages.purchase_page import PurchaseSelectors

HOME = HomeSelectors()
FLIGHTS = FlightSelectors()
PURCHASE = PurchaseSelectors()
CONFIRMATION = ConfirmationSelectors()

DEPARTURE_CITIES = ("Paris", "Philadelphia", "Boston", "Portland", "San Diego", "Mexico City", "São Paolo")
DESTINATION_CITIES = ("Buenos Aires", "Rome", "London", "Berlin", "New York", "Dublin", "Cairo")

# [choose, flight #, airline, departs, arrives, price]; the choose cell only holds a button
DEFAULT_FLIGHT_ROWS = (
    ("", "43", "Virgin America", "1:43 AM", "9:45 PM", "$472.56"),
    ("", "234", "United Airlines", "7:43 AM", "10:45 PM", "$432.98"),
    ("", "9696", "Aer Lingus", "5:27 AM", "8:22 PM", "$200.98"),
    ("", "12", "Virgin America", "11:23 AM", "1:45 PM", "$765.32"),
    ("", "4346", "Lufthansa", "1:45 AM", "8:34 PM", "$233.98"),
)

PURCHASE_FIELDS = {
    PURCHASE.name: "inputName",
    PURCHASE.address: "address",
    PURCHASE.city: "city",
    PURCHASE.state: "state",
    PURCHASE.zip_code: "zipCode",
    PURCHASE.credit_card_number: "creditCardNumber",
    PURCHASE.credit_card_month: "creditCardMonth",
    PURCHASE.credit_card_year: "creditCardYear",
    PURCHASE.name_on_card: "nameOnCard",
}


@dataclass
class FakeElement:
    name: str
    value: str = ""
    text: str = ""
    options: tuple[str, ...] = ()
    cells: tuple[str, ...] = ()
    on_click: Callable[[], None] | None = None
    read_error: Exception | None = None


class FakeLocator:
    """
    Lazy locator over FakeBlazeDemoPage: resolved on every call, like Playwright's.
    """

    def __init__(self, page: FakeBlazeDemoPage, steps: tuple[tuple[str, object], ...]) -> None:
        self._page = page
        self._steps = steps

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self._page, self._steps + (("query", selector),))

    def nth(self, index: int) -> FakeLocator:
        return FakeLocator(self._page, self._steps + (("nth", index),))

    @property
    def first(self) -> FakeLocator:
        return self.nth(0)

    def _resolve(self) -> list[FakeElement]:
        current: list[FakeElement | None] = [None]
        for kind, arg in self._steps:
            if kind == "query":
                current = [el for scope in current for el in self._page._query(str(arg), scope)]
            else:
                index = int(arg)  # type: ignore[arg-type]
                current = [current[index]] if 0 <= index < len(current) else []
        return [el for el in current if el is not None]

    def _one(self) -> FakeElement:
        elements = self._resolve()
        if not elements:
            raise PWTimeoutError(f"Timeout exceeded waiting for locator {self._steps!r}")
        return elements[0]

    def count(self) -> int:
        return len(self._resolve())

    def is_visible(self) -> bool:
        return bool(self._resolve())

    def evaluate_all(self, expression: str) -> list[str]:
        return [el.value for el in self._resolve()]

    def all_text_contents(self) -> list[str]:
        return [el.text for el in self._resolve()]

    def text_content(self, timeout: float | None = None) -> str | None:
        el = self._one()
        if el.read_error is not None:
            raise el.read_error
        return el.text

    def input_value(self, timeout: float | None = None) -> str:
        return self._one().value

    def select_option(self, value: str, **kwargs) -> list[str]:
        el = self._one()
        if value not in el.options:
            raise PWError(f"Option {value!r} not found in {el.name}")
        el.value = value
        self._page.selected[el.name] = value
        return [value]

    def fill(self, value: str, **kwargs) -> None:
        el = self._one()
        el.value = value
        self._page.filled[el.name] = value

    def click(self, **kwargs) -> None:
        el = self._one()
        self._page.clicks.append(el.name)
        if el.on_click is not None:
            el.on_click()


@dataclass
class FakeBlazeDemoPage:
    """
    What it does:
    - In-memory stand-in for a Playwright Page showing the BlazeDemo site.

    Why it matters:
    - Lets page objects and the booking workflow be tested deterministically without a browser.

    Behavior:
    - Understands exactly the selectors declared by the page objects' selector dataclasses.
    - Walks home -> reserve -> purchase -> confirmation as the real buttons are clicked.
    - Missing elements raise Playwright's TimeoutError, as real waits do.
    - `broken_cells` names confirmation cells ("status", "price", "confirmation_id")
      whose reads raise a Playwright Error.
    """

    departure_cities: tuple[str, ...] = DEPARTURE_CITIES
    destination_cities: tuple[str, ...] = DESTINATION_CITIES
    flight_rows: tuple[tuple[str, ...], ...] = DEFAULT_FLIGHT_ROWS
    status: str = "PendingCapture"
    amount: str = "555 USD"
    confirmation_id: str = "1760000000000"
    broken_cells: frozenset[str] = frozenset()
    confirmation_loads: bool = True

    view: str = "blank"
    url: str = "about:blank"
    visited: list[str] = field(default_factory=list)
    selected: dict[str, str] = field(default_factory=dict)
    filled: dict[str, str] = field(default_factory=dict)
    clicks: list[str] = field(default_factory=list)
    load_states: list[str] = field(default_factory=list)
    screenshots: list[str] = field(default_factory=list)
    searched_route: tuple[str, str] | None = None
    chosen_row: int | None = None

    def __post_init__(self) -> None:
        self._departure = FakeElement("fromPort", options=("",) + tuple(self.departure_cities))
        self._destination = FakeElement("toPort", options=("",) + tuple(self.destination_cities))
        self._card_type = FakeElement("cardType", value="visa", options=("visa", "amex", "dinersclub"))
        self._inputs = {sel: FakeElement(name) for sel, name in PURCHASE_FIELDS.items()}

    # -------------------- Page API --------------------

    def goto(self, url: str, **kwargs) -> None:
        self.visited.append(url)
        self.url = url
        self.view = "home"
        self._departure.value = ""
        self._destination.value = ""

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, (("query", selector),))

    def wait_for_selector(self, selector: str, timeout: float | None = None, **kwargs) -> None:
        if not self._query(selector, None):
            raise PWTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    def wait_for_load_state(self, state: str = "load", **kwargs) -> None:
        self.load_states.append(state)

    def screenshot(self, path: str | None = None, **kwargs) -> bytes:
        self.screenshots.append(str(path))
        return b""

    def title(self) -> str:
        return f"BlazeDemo - {self.view}"

    def set_default_timeout(self, timeout: float) -> None:
        pass

    # -------------------- Navigation --------------------

    def _find_flights(self) -> None:
        self.searched_route = (self._departure.value, self._destination.value)
        self.view = "reserve"
        self.url = "https://blazedemo.com/reserve.php"

    def _choose_flight(self, index: int) -> None:
        self.chosen_row = index
        self.view = "purchase"
        self.url = "https://blazedemo.com/purchase.php"

    def _purchase(self) -> None:
        self.view = "confirmation" if self.confirmation_loads else "error"
        self.url = "https://blazedemo.com/confirmation.php"

    # -------------------- Selector resolution --------------------

    def _query(self, selector: str, scope: FakeElement | None) -> list[FakeElement]:
        if scope is not None:
            return self._query_within(selector, scope)

        if self.view == "home":
            found = {
                HOME.departure_dropdown: self._departure,
                HOME.destination_dropdown: self._destination,
                HOME.find_flights: FakeElement("findFlights", on_click=self._find_flights),
            }.get(selector)
            return [found] if found else []

        if self.view == "reserve":
            if selector == FLIGHTS.flight_rows:
                return [FakeElement(f"row{i}", cells=row) for i, row in enumerate(self.flight_rows)]
            return []

        if self.view == "purchase":
            if selector in self._inputs:
                return [self._inputs[selector]]
            if selector == PURCHASE.card_type:
                return [self._card_type]
            if selector == PURCHASE.purchase_flight:
                return [FakeElement("purchaseFlight", on_click=self._purchase)]
            return []

        if self.view == "confirmation":
            if selector == CONFIRMATION.heading:
                return [FakeElement("heading", text="Thank you for your purchase today!")]
            cells = {
                CONFIRMATION.status_cell: ("status", self.status),
                CONFIRMATION.amount_cell: ("price", self.amount),
                CONFIRMATION.confirmation_id_cell: ("confirmation_id", self.confirmation_id),
            }
            if selector in cells:
                name, text = cells[selector]
                error = PWError(f"{name} cell detached") if name in self.broken_cells else None
                return [FakeElement(name, text=text, read_error=error)]
        return []

    def _query_within(self, selector: str, scope: FakeElement) -> list[FakeElement]:
        if selector == HOME.dropdown_options and scope.options:
            return [FakeElement(f"option:{v}", value=v, text=v) for v in scope.options if v != ""]

        if selector == FLIGHTS.row_cells and scope.cells:
            return [FakeElement(f"{scope.name}:td{i}", text=t) for i, t in enumerate(scope.cells)]

        if selector == FLIGHTS.choose_button and scope.name.startswith("row"):
            index = int(scope.name.removeprefix("row"))
            return [FakeElement(f"choose{index}", on_click=lambda: self._choose_flight(index))]

        return []


class ScriptedRandom:
    """
    RandomSource that replays fixed answers.

    Behavior:
    - randrange(n) returns the next scripted value (must be < n).
    - randint(a, b) returns the next scripted value clamped to [a, b].
    - Records every call in `calls`.
    """

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls: list[tuple[str, tuple[int, ...]]] = []

    def _next(self) -> int:
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        self.calls.append(("randrange", (start,) if stop is None else (start, stop)))
        value = self._next()
        upper = start if stop is None else stop
        if value >= upper:
            raise AssertionError(f"scripted value {value} out of range({upper})")
        return value

    def randint(self, a: int, b: int) -> int:
        self.calls.append(("randint", (a, b)))
        return min(max(self._next(), a), b)
