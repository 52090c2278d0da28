from fastapi import APIRouter

from leave_planner.api.customers import customers_router
from leave_planner.api.employees import employees_router
from leave_planner.api.leaves import leaves_router
from leave_planner.api.notifications import notifications_router
from leave_planner.api.projects import projects_router

api_router = APIRouter(prefix="/api")
api_router.include_router(employees_router)
api_router.include_router(customers_router)
api_router.include_router(projects_router)
api_router.include_router(leaves_router)
api_router.include_router(notifications_router)
