"""
Inventory ledger: the single owner of trains and bookings.

Seat counts and bookings only change through the methods below, and every
method validates fully before it mutates anything, so a failed call leaves
the ledger exactly as it was.
"""
import logging
import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple, Union

from models import Booking, BookingStatus, FareClassName, Train

logger = logging.getLogger(__name__)

ALL_CLASSES = "all"


class MoveoError(Exception):
    """Base for every error that is shown to the user as a message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LedgerError(MoveoError):
    pass


class NotFound(LedgerError):
    pass


class ValidationError(LedgerError):
    pass


class InsufficientCapacity(LedgerError):
    def __init__(self, fare_class: FareClassName, requested: int, remaining: int):
        super().__init__(f"Booking failed: Only {remaining} seats available.")
        self.fare_class = fare_class
        self.requested  = requested
        self.remaining  = remaining


class InvalidSeatConfiguration(LedgerError):
    def __init__(self, fare_class: FareClassName, available: int, total: int):
        super().__init__(
            f"Error in {fare_class.value} Class: Available seats ({available}) "
            f"cannot be greater than total seats ({total})."
        )
        self.fare_class = fare_class
        self.available  = available
        self.total      = total


def _new_id(prefix: str) -> str:
    return f"{prefix}{uuid.uuid4().hex[:10].upper()}"


def _fare_class_name(value) -> FareClassName:
    try:
        return FareClassName(value)
    except ValueError:
        raise ValidationError(f"Unknown fare class: {value}") from None


def validate_seat_configuration(train: Train):
    """Every class needs a positive price and 0 <= available <= total seats."""
    for name, fc in train.classes.items():
        if fc.price <= 0:
            raise ValidationError(f"{name.value} Class price must be greater than zero.")
        if fc.total_seats < 1:
            raise ValidationError(f"{name.value} Class total seats must be at least 1.")
        if fc.available_seats < 0:
            raise ValidationError(f"{name.value} Class available seats cannot be negative.")
        if fc.available_seats > fc.total_seats:
            raise InvalidSeatConfiguration(name, fc.available_seats, fc.total_seats)


class Ledger:
    def __init__(self, trains: Iterable[Train] = (), bookings: Iterable[Booking] = ()):
        self._trains:   Dict[str, Train]   = {}
        self._bookings: Dict[str, Booking] = {}
        for train in trains:
            validate_seat_configuration(train)
            self._trains[train.id] = train.copy()
        for booking in bookings:
            self._bookings[booking.id] = replace(booking)

    # -- reads -------------------------------------------------------------

    @property
    def trains(self) -> Tuple[Train, ...]:
        return tuple(t.copy() for t in self._trains.values())

    @property
    def bookings(self) -> Tuple[Booking, ...]:
        return tuple(replace(b) for b in self._bookings.values())

    def get_train(self, train_id: str) -> Train:
        train = self._trains.get(train_id)
        if train is None:
            raise NotFound("Train not found.")
        return train.copy()

    def get_booking(self, booking_id: str) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise NotFound(f"Booking {booking_id} not found.")
        return replace(booking)

    def bookings_for(self, user_id: str) -> List[Booking]:
        return [replace(b) for b in self._bookings.values() if b.user_id == user_id]

    def stations(self) -> List[str]:
        names = set()
        for t in self._trains.values():
            names.add(t.source)
            names.add(t.destination)
        return sorted(names)

    def search(self, from_station: Optional[str] = None, to_station: Optional[str] = None,
               class_filter: str = ALL_CLASSES, min_seats_needed: int = 1) -> List[Train]:
        from_station = (from_station or "").strip().upper()
        to_station   = (to_station or "").strip().upper()
        if class_filter != ALL_CLASSES:
            class_filter = _fare_class_name(class_filter)

        results = []
        for t in self._trains.values():
            if from_station and t.source != from_station:
                continue
            if to_station and t.destination != to_station:
                continue
            if class_filter == ALL_CLASSES:
                seats_ok = any(fc.available_seats >= min_seats_needed for fc in t.classes.values())
            else:
                seats_ok = t.classes[class_filter].available_seats >= min_seats_needed
            if seats_ok:
                results.append(t.copy())
        return results

    # -- bookings ----------------------------------------------------------

    def reserve(self, train_id: str, travel_date: str, passenger_count: int,
                fare_class_name, user_id: str) -> Booking:
        if isinstance(passenger_count, bool) or not isinstance(passenger_count, int) or passenger_count < 1:
            raise ValidationError("Number of passengers must be a positive whole number.")
        name = _fare_class_name(fare_class_name)

        train = self._trains.get(train_id)
        if train is None:
            raise NotFound("Train not found.")

        fc = train.classes[name]
        if fc.available_seats < passenger_count:
            raise InsufficientCapacity(name, passenger_count, fc.available_seats)

        booking_id = _new_id("B")
        while booking_id in self._bookings:
            booking_id = _new_id("B")

        fc.available_seats -= passenger_count
        booking = Booking(
            id=booking_id,
            user_id=user_id,
            train_id=train.id,
            train_name=train.train_name,
            train_number=train.train_number,
            destination=train.destination,
            date=travel_date,
            fare_class=name,
            passengers=passenger_count,
            total_price=Decimal(fc.price) * passenger_count,
            status=BookingStatus.CONFIRMED,
        )
        self._bookings[booking.id] = booking
        logger.info("Reserved %d x %s on %s for %s (booking %s, %d left)",
                    passenger_count, name.value, train.id, user_id, booking.id, fc.available_seats)
        return replace(booking)

    def release(self, booking: Union[Booking, str]) -> Booking:
        booking_id = booking if isinstance(booking, str) else booking.id
        stored = self._bookings.get(booking_id)
        if stored is None:
            raise NotFound(f"Booking {booking_id} not found.")

        train = self._trains.get(stored.train_id)
        if train is None:
            logger.warning("Train %s no longer exists, releasing booking %s without restoring seats",
                           stored.train_id, stored.id)
        else:
            fc = train.classes[stored.fare_class]
            fc.available_seats = min(fc.total_seats, fc.available_seats + stored.passengers)

        del self._bookings[booking_id]
        logger.info("Released booking %s (%d x %s on %s)",
                    stored.id, stored.passengers, stored.fare_class.value, stored.train_id)
        return stored

    # -- admin -------------------------------------------------------------

    def add_train(self, train_data: Train) -> Train:
        validate_seat_configuration(train_data)
        train_id = _new_id("T")
        while train_id in self._trains:
            train_id = _new_id("T")
        train = train_data.copy(id=train_id)
        self._trains[train_id] = train
        logger.info("Added train %s (%s)", train_id, train.train_number)
        return train.copy()

    def update_train(self, train: Train) -> Train:
        if train.id not in self._trains:
            raise NotFound("Train not found.")
        validate_seat_configuration(train)
        self._trains[train.id] = train.copy()
        logger.info("Replaced train %s", train.id)
        return train.copy()

    def delete_train(self, train_id: str) -> Train:
        train = self._trains.pop(train_id, None)
        if train is None:
            raise NotFound("Train not found.")
        outstanding = sum(1 for b in self._bookings.values() if b.train_id == train_id)
        if outstanding:
            logger.warning("Deleted train %s with %d outstanding bookings", train_id, outstanding)
        else:
            logger.info("Deleted train %s", train_id)
        return train
