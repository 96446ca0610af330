"""
Parsing of submitted form data into ledger inputs.

Each fare class is read as its own record, field by field, so an error always
names the class and the field that was wrong.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from ledger import ALL_CLASSES, ValidationError
from models import FARE_CLASS_NAMES, FareClass, FareClassName, Train

TRAIN_REQUIRED = ['trainName', 'trainNumber', 'source', 'destination']

# seat plan the admin form starts from
DEFAULT_CLASSES = {
    FareClassName.FIRST:    {"price": "3500", "totalSeats": "50",  "availableSeats": "50"},
    FareClassName.BUSINESS: {"price": "2000", "totalSeats": "100", "availableSeats": "100"},
    FareClassName.ECONOMY:  {"price": "800",  "totalSeats": "200", "availableSeats": "200"},
}


@dataclass
class SearchQuery:
    date:         str
    from_station: str = ""
    to_station:   str = ""
    passengers:   int = 1
    class_filter: str = ALL_CLASSES


@dataclass
class BookingRequest:
    train_id:   str
    date:       str
    passengers: int
    fare_class: FareClassName


@dataclass
class DescriptionRequest:
    source:        str
    destination:   str
    price_first:   Decimal
    price_economy: Decimal


def form_data(data) -> dict:
    """Treat a missing body as an empty form; anything but an object is rejected."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Form data must be a JSON object.")
    return data


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value).strip()


def _missing(data: dict, keys) -> list:
    return [k for k in keys if not _text(data, k)]


def _decimal(value, label: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a number.")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{label} must be a number.") from None
    if not number.is_finite():
        raise ValidationError(f"{label} must be a number.")
    return number


def _integer(value, label: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a whole number.")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{label} must be a whole number.") from None


def parse_fare_class(name: FareClassName, raw: dict) -> FareClass:
    if not isinstance(raw, dict):
        raise ValidationError(f"{name.value} Class must be an object with price and seat counts.")
    missing = _missing(raw, ['price', 'totalSeats', 'availableSeats'])
    if missing:
        raise ValidationError(f"{name.value} Class is missing: {', '.join(missing)}")

    price     = _decimal(raw['price'], f"{name.value} Class price")
    total     = _integer(raw['totalSeats'], f"{name.value} Class total seats")
    available = _integer(raw['availableSeats'], f"{name.value} Class available seats")

    if price <= 0:
        raise ValidationError(f"{name.value} Class price must be greater than zero.")
    if total < 1:
        raise ValidationError(f"{name.value} Class total seats must be at least 1.")
    if available < 0:
        raise ValidationError(f"{name.value} Class available seats cannot be negative.")
    # available > total is left to the ledger, which reports InvalidSeatConfiguration
    return FareClass(price=price, total_seats=total, available_seats=available)


def parse_train(data: Optional[dict], train_id: Optional[str] = None) -> Train:
    """Build a Train from a submitted form.

    A new train (no ``train_id``) falls back to the default seat plan for any
    class left out; an edit replaces the whole record and needs all three.
    """
    if not isinstance(data, dict):
        raise ValidationError("Please fill all required train fields.")
    missing = _missing(data, TRAIN_REQUIRED)
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")

    raw_classes = data.get('classes') or {}
    if not isinstance(raw_classes, dict):
        raise ValidationError("classes must map First, Business and Economy to seat plans.")
    unknown = [k for k in raw_classes if k not in FARE_CLASS_NAMES]
    if unknown:
        raise ValidationError(f"Unknown fare class: {', '.join(unknown)}")

    classes = {}
    for name in FareClassName:
        raw = raw_classes.get(name.value)
        if raw is None:
            if train_id is not None:
                raise ValidationError(f"Missing fields: classes.{name.value}")
            raw = DEFAULT_CLASSES[name]
        classes[name] = parse_fare_class(name, raw)

    return Train(
        id=train_id,
        train_name=_text(data, 'trainName'),
        train_number=_text(data, 'trainNumber'),
        source=_text(data, 'source'),
        destination=_text(data, 'destination'),
        departure=_text(data, 'departure'),
        description=_text(data, 'description') or None,
        classes=classes,
    )


def parse_search(data: Optional[dict]) -> SearchQuery:
    data = form_data(data)
    date = _text(data, 'date')
    if not date:
        raise ValidationError("Please select a travel date.")

    from_station = _text(data, 'from').upper()
    to_station   = _text(data, 'to').upper()
    if from_station and from_station == to_station:
        raise ValidationError("Source and Destination cannot be the same.")

    passengers = data.get('passengers')
    passengers = 1 if passengers in (None, "") else _integer(passengers, "Passengers")
    if passengers < 1:
        raise ValidationError("Passengers must be at least 1.")

    class_filter = _text(data, 'class') or ALL_CLASSES
    if class_filter != ALL_CLASSES and class_filter not in FARE_CLASS_NAMES:
        raise ValidationError(f"Unknown fare class: {class_filter}")

    return SearchQuery(date=date, from_station=from_station, to_station=to_station,
                       passengers=passengers, class_filter=class_filter)


def parse_booking(data: Optional[dict]) -> BookingRequest:
    data = form_data(data)
    if not _text(data, 'class'):
        raise ValidationError("Please select a class before attempting to book.")
    missing = _missing(data, ['trainId', 'date', 'passengers'])
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")

    fare_class = _text(data, 'class')
    if fare_class not in FARE_CLASS_NAMES:
        raise ValidationError(f"Unknown fare class: {fare_class}")
    passengers = _integer(data['passengers'], "Passengers")
    if passengers < 1:
        raise ValidationError("Passengers must be at least 1.")

    return BookingRequest(train_id=_text(data, 'trainId'), date=_text(data, 'date'),
                          passengers=passengers, fare_class=FareClassName(fare_class))


def parse_description_request(data: Optional[dict]) -> DescriptionRequest:
    data = form_data(data)
    if _missing(data, ['source', 'destination', 'priceFirst', 'priceEconomy']):
        raise ValidationError(
            "Please fill in Source, Destination, First Class Price, and Economy Class Price "
            "before generating a description."
        )
    return DescriptionRequest(
        source=_text(data, 'source'),
        destination=_text(data, 'destination'),
        price_first=_decimal(data['priceFirst'], "First Class price"),
        price_economy=_decimal(data['priceEconomy'], "Economy Class price"),
    )
