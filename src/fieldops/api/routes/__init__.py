"""API routes."""

from fieldops.api.routes.health import router as health_router
from fieldops.api.routes.pay_periods import router as pay_periods_router
from fieldops.api.routes.payroll import router as payroll_router
from fieldops.api.routes.permissions import router as permissions_router

__all__ = ["health_router", "pay_periods_router", "payroll_router", "permissions_router"]
