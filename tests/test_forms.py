from decimal import Decimal

import pytest

from forms import (parse_booking, parse_description_request, parse_fare_class, parse_search,
                   parse_train)
from ledger import ValidationError
from models import FareClassName


def train_form(**overrides):
    form = {
        "trainName":   "Konkan Kanya",
        "trainNumber": "10111",
        "source":      "mumbai ",
        "destination": "Madgaon",
        "departure":   "23:05",
        "classes": {
            "First":    {"price": "2100", "totalSeats": "30", "availableSeats": "30"},
            "Business": {"price": 1400, "totalSeats": 60, "availableSeats": 58},
            "Economy":  {"price": "499.50", "totalSeats": "150", "availableSeats": "150"},
        },
    }
    form.update(overrides)
    return form


class TestParseTrain:
    def test_builds_uppercased_train(self):
        train = parse_train(train_form())
        assert train.id is None
        assert (train.source, train.destination) == ("MUMBAI", "MADGAON")
        assert train.description is None
        assert train.fare_class("Economy").price == Decimal("499.50")
        assert train.fare_class("Business").available_seats == 58

    def test_missing_fields_are_listed(self):
        with pytest.raises(ValidationError) as exc:
            parse_train(train_form(trainName="", source=None))
        assert exc.value.message == "Missing fields: trainName, source"

    def test_new_train_falls_back_to_default_plan(self):
        train = parse_train(train_form(classes={"First": {"price": 1, "totalSeats": 1, "availableSeats": 0}}))
        economy = train.fare_class("Economy")
        assert (economy.price, economy.total_seats, economy.available_seats) == (Decimal(800), 200, 200)

    def test_edit_needs_every_class(self):
        form = train_form()
        del form["classes"]["Business"]
        with pytest.raises(ValidationError) as exc:
            parse_train(form, train_id="T001")
        assert "Business" in exc.value.message

    def test_unknown_class_is_rejected(self):
        form = train_form()
        form["classes"]["Sleeper"] = {"price": 1, "totalSeats": 1, "availableSeats": 1}
        with pytest.raises(ValidationError):
            parse_train(form)

    def test_available_above_total_is_left_to_ledger(self):
        form = train_form()
        form["classes"]["Economy"] = {"price": 800, "totalSeats": 100, "availableSeats": 120}
        train = parse_train(form)
        assert train.fare_class("Economy").available_seats == 120


class TestParseFareClass:
    @pytest.mark.parametrize("raw, field", [
        ({"price": "abc", "totalSeats": 1, "availableSeats": 1}, "price"),
        ({"price": 0, "totalSeats": 1, "availableSeats": 1}, "price"),
        ({"price": 10, "totalSeats": 0, "availableSeats": 0}, "total seats"),
        ({"price": 10, "totalSeats": "1.5", "availableSeats": 1}, "total seats"),
        ({"price": 10, "totalSeats": 5, "availableSeats": -1}, "available seats"),
        ({"price": 10, "totalSeats": 5}, "availableSeats"),
    ])
    def test_each_field_is_checked(self, raw, field):
        with pytest.raises(ValidationError) as exc:
            parse_fare_class(FareClassName.FIRST, raw)
        assert exc.value.message.startswith("First Class")
        assert field in exc.value.message


class TestParseSearch:
    def test_defaults(self):
        query = parse_search({"date": "2025-01-01"})
        assert (query.from_station, query.to_station) == ("", "")
        assert query.passengers == 1
        assert query.class_filter == "all"

    def test_date_is_required(self):
        with pytest.raises(ValidationError) as exc:
            parse_search({"from": "DELHI"})
        assert exc.value.message == "Please select a travel date."

    def test_same_station_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_search({"date": "2025-01-01", "from": "delhi", "to": "DELHI"})
        assert exc.value.message == "Source and Destination cannot be the same."

    @pytest.mark.parametrize("passengers", [0, "-1", "many"])
    def test_passengers(self, passengers):
        with pytest.raises(ValidationError):
            parse_search({"date": "2025-01-01", "passengers": passengers})


class TestParseBooking:
    def test_class_is_required(self):
        with pytest.raises(ValidationError) as exc:
            parse_booking({"trainId": "T001", "date": "2025-01-01", "passengers": 1})
        assert exc.value.message == "Please select a class before attempting to book."

    def test_valid_request(self):
        req = parse_booking({"trainId": "T001", "date": "2025-01-01", "passengers": "3", "class": "Economy"})
        assert req.passengers == 3
        assert req.fare_class is FareClassName.ECONOMY


def test_description_request_requires_prices():
    with pytest.raises(ValidationError) as exc:
        parse_description_request({"source": "DELHI", "destination": "AGRA", "priceFirst": "900"})
    assert "Economy Class Price" in exc.value.message

    req = parse_description_request({"source": "DELHI", "destination": "AGRA",
                                     "priceFirst": "900", "priceEconomy": 250})
    assert req.price_economy == Decimal(250)


@pytest.mark.parametrize("parse", [parse_search, parse_booking, parse_description_request])
def test_non_object_forms_are_rejected(parse):
    with pytest.raises(ValidationError) as exc:
        parse([1, 2])
    assert exc.value.message == "Form data must be a JSON object."
