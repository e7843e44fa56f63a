"""
Transport lookups and dashboard figures.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from school_admin.core.clock import Clock
from school_admin.core.constants import MONTH_NAMES
from school_admin.core.logging import get_logger
from school_admin.repositories.transport import (
    DriverRepository,
    RouteRepository,
    StudentTransportRepository,
    VehicleRepository,
)
from school_admin.schemas.transport.dashboard import DashboardFeeDetails, DashboardResponse
from school_admin.utils.date_utils import month_name

logger = get_logger(__name__)


class TransportDashboardService:
    def __init__(self, db_session: Session, clock: Optional[Clock] = None):
        self.clock = clock or Clock()
        self.students = StudentTransportRepository(db_session)
        self.routes = RouteRepository(db_session)
        self.vehicles = VehicleRepository(db_session)
        self.drivers = DriverRepository(db_session)

    @staticmethod
    def months() -> List[str]:
        return list(MONTH_NAMES)

    def dashboard(self, school_id: str, month: Optional[str] = None) -> DashboardResponse:
        """Counts for the school plus the paid and due totals of one month."""
        month = month or month_name(self.clock.today())
        school_filter = {"school_id": school_id}
        paid, due = self.students.month_totals(school_id, month)

        logger.debug("Dashboard computed", extra={"school_id": school_id, "month_name": month})
        return DashboardResponse(
            students_count=self.students.count(school_filter),
            routes_count=self.routes.count(school_filter),
            vehicles_count=self.vehicles.count(school_filter),
            driver_count=self.drivers.count(school_filter),
            stops_count=self.routes.count_stops(school_id),
            fee_details=DashboardFeeDetails(month_name=month, paid_amount=paid, due_amount=due),
        )
