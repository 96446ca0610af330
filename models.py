from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional


class FareClassName(str, Enum):
    FIRST    = "First"
    BUSINESS = "Business"
    ECONOMY  = "Economy"


FARE_CLASS_NAMES = [c.value for c in FareClassName]


class BookingStatus(str, Enum):
    # cancelled bookings are removed from the ledger, never kept with a status
    CONFIRMED = "Confirmed"


class Role(str, Enum):
    USER  = "user"
    ADMIN = "admin"


def _number(value: Decimal):
    return int(value) if value == value.to_integral_value() else float(value)


@dataclass
class FareClass:
    price:           Decimal
    total_seats:     int
    available_seats: int

    def to_dict(self) -> dict:
        return {
            "price":          _number(self.price),
            "totalSeats":     self.total_seats,
            "availableSeats": self.available_seats,
        }


@dataclass
class Train:
    id:           Optional[str]
    train_name:   str
    train_number: str
    source:       str
    destination:  str
    departure:    str
    classes:      Dict[FareClassName, FareClass]
    description:  Optional[str] = None

    def __post_init__(self):
        self.source      = self.source.strip().upper()
        self.destination = self.destination.strip().upper()
        self.classes     = {FareClassName(name): fc for name, fc in self.classes.items()}
        missing = [c.value for c in FareClassName if c not in self.classes]
        if missing:
            raise ValueError(f"Train is missing fare classes: {', '.join(missing)}")

    def fare_class(self, name) -> FareClass:
        return self.classes[FareClassName(name)]

    def copy(self, **changes) -> "Train":
        """Deep enough copy for handing records out of the ledger."""
        classes = {name: replace(fc) for name, fc in self.classes.items()}
        return replace(self, classes=classes, **changes)

    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "trainName":   self.train_name,
            "trainNumber": self.train_number,
            "source":      self.source,
            "destination": self.destination,
            "departure":   self.departure,
            "description": self.description,
            "classes":     {name.value: fc.to_dict() for name, fc in self.classes.items()},
        }


@dataclass
class Booking:
    id:           str
    user_id:      str
    train_id:     str
    train_name:   str
    train_number: str
    destination:  str
    date:         str
    fare_class:   FareClassName
    passengers:   int
    total_price:  Decimal
    status:       BookingStatus = field(default=BookingStatus.CONFIRMED)

    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "userId":      self.user_id,
            "trainId":     self.train_id,
            "trainName":   self.train_name,
            "trainNumber": self.train_number,
            "destination": self.destination,
            "date":        self.date,
            "class":       self.fare_class.value,
            "passengers":  self.passengers,
            "totalPrice":  _number(self.total_price),
            "status":      self.status.value,
        }


@dataclass
class User:
    uid:   str
    email: str
    role:  Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def to_dict(self) -> dict:
        return {"uid": self.uid, "email": self.email, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(uid=data["uid"], email=data["email"], role=Role(data["role"]))
