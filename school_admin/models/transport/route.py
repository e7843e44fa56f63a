"""
Bus Route Models

A route ties a vehicle and a driver to an ordered list of stops and keeps
the count of seats still free on the vehicle.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from school_admin.models.base import BaseModel, SchoolScopedMixin

if TYPE_CHECKING:
    from school_admin.models.transport.driver import BusDriver
    from school_admin.models.transport.vehicle import SchoolVehicle


class BusRoute(SchoolScopedMixin, BaseModel):
    __tablename__ = "bus_routes"

    route_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    vehicle_id: Mapped[str] = mapped_column(ForeignKey("school_vehicles.id"), nullable=False, index=True)
    driver_id: Mapped[str] = mapped_column(ForeignKey("bus_drivers.id"), nullable=False, index=True)

    trip_no: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    seating_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    vehicle: Mapped["SchoolVehicle"] = relationship(lazy="joined")
    driver: Mapped["BusDriver"] = relationship(lazy="joined")
    stops: Mapped[List["RouteStop"]] = relationship(
        back_populates="route",
        cascade="all, delete-orphan",
        order_by="RouteStop.position",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("available_seats >= 0", name="ck_bus_routes_available_seats_non_negative"),
    )


class RouteStop(BaseModel):
    """A pickup point with its one-way and round-trip fares."""

    __tablename__ = "route_stops"

    route_id: Mapped[str] = mapped_column(
        ForeignKey("bus_routes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    label: Mapped[str] = mapped_column(String(150), nullable=False)
    stop: Mapped[str] = mapped_column(String(150), nullable=False)
    one_way: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    round_trip: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    route: Mapped[BusRoute] = relationship(back_populates="stops")
