"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines core data structures:
- TripRequest (passenger booking: origin, destination, date, seats, fare, payment)
- PackageRequest (parcel delivery: origin, destination, size, quoted price)

Defines enums/constants:
- TripStatus = PENDING | ASSIGNED | PAID | COMPLETED | CANCELLED
- PackageStatus = REQUESTED | NEGOTIATING | QUOTED | PAID | IN_TRANSIT | DELIVERED
- PackageSize = SMALL | MEDIUM | LARGE
- PaymentMethod = MPESA | EMOLA

Rule: No matching, no pricing logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
import uuid


class TripStatus(Enum):
    PENDING = "PENDING"
    ASSIGNED = "ASSIGNED"
    PAID = "PAID"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

class PackageStatus(Enum):
    REQUESTED = "REQUESTED"
    NEGOTIATING = "NEGOTIATING"
    QUOTED = "QUOTED"
    PAID = "PAID"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"

class PackageSize(Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"

class PaymentMethod(Enum):
    MPESA = "MPESA"
    EMOLA = "EMOLA"


@dataclass(frozen=True)
class TripRequest:
    """
    A passenger's seat booking for one day. Direction is implied by
    origin -> destination on the route line.
    """

    id: str
    passenger_id: str
    origin: str
    destination: str
    date: str  # YYYY-MM-DD
    seats: int = 1
    price: int = 0

    status: TripStatus = TripStatus.PENDING
    driver_id: Optional[str] = None
    payment_method: PaymentMethod = PaymentMethod.MPESA
    payment_confirmed: bool = False

    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_awaiting_driver(self) -> bool:
        """Paid for, not yet bound to a driver, and still live."""
        return (
            self.payment_confirmed
            and self.driver_id is None
            and self.status != TripStatus.CANCELLED
        )

    @staticmethod
    def new(passenger_id: str, origin: str, destination: str, date: str,
            seats: int = 1, price: int = 0,
            payment_method: PaymentMethod = PaymentMethod.MPESA) -> TripRequest:
        return TripRequest(
            id=str(uuid.uuid4()),
            passenger_id=passenger_id,
            origin=origin,
            destination=destination,
            date=date,
            seats=seats,
            price=price,
            payment_method=payment_method,
        )


@dataclass(frozen=True)
class PackageRequest:
    """
    A parcel to carry from origin to destination. No travel date:
    any driver who runs the stretch on any of their days can take it.
    """

    id: str
    sender_id: str
    origin: str
    destination: str
    size: PackageSize = PackageSize.SMALL
    description: str = ""

    # Price is quoted by the operator, so it starts at 0.
    price: int = 0
    status: PackageStatus = PackageStatus.REQUESTED
    driver_id: Optional[str] = None

    created_at: datetime = field(default_factory=datetime.utcnow)

    @staticmethod
    def new(sender_id: str, origin: str, destination: str,
            size: PackageSize = PackageSize.SMALL, description: str = "") -> PackageRequest:
        return PackageRequest(
            id=str(uuid.uuid4()),
            sender_id=sender_id,
            origin=origin,
            destination=destination,
            size=size,
            description=description,
        )
