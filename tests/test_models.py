from __future__ import annotations

import uuid
from datetime import date

from leave_planner.models import (
    AuditLog,
    Customer,
    Employee,
    LeaveRequest,
    LeaveStatus,
    Notification,
    Project,
    ProjectAssignment,
    SQLModel,
    UserRole,
    can_decide,
)

EXPECTED_TABLES = {
    "audit_log",
    "customer",
    "employee",
    "leave_request",
    "notification",
    "project",
    "project_assignment",
}


def test_all_tables_registered() -> None:
    table_names = set(SQLModel.metadata.tables.keys())
    assert EXPECTED_TABLES.issubset(table_names)


def test_leave_request_unique_per_employee_and_date() -> None:
    table = SQLModel.metadata.tables["leave_request"]
    constraint_names = {c.name for c in table.constraints}
    assert "uq_leave_employee_date" in constraint_names


def test_assignment_unique_per_employee_and_project() -> None:
    table = SQLModel.metadata.tables["project_assignment"]
    constraint_names = {c.name for c in table.constraints}
    assert "uq_assignment_employee_project" in constraint_names


def test_employee_defaults() -> None:
    employee = Employee(name="Dana")
    assert employee.role == UserRole.EMPLOYEE
    assert employee.job_title is None
    assert employee.id is not None


def test_project_open_ended_by_default() -> None:
    project = Project(name="Apollo", customer_id=uuid.uuid4(), start_date=date(2025, 1, 1))
    assert project.end_date is None


def test_assignment_instantiation() -> None:
    assignment = ProjectAssignment(employee_id=uuid.uuid4(), project_id=uuid.uuid4())
    assert assignment.id is not None


def test_customer_instantiation() -> None:
    customer = Customer(name="Acme")
    assert customer.name == "Acme"


def test_leave_request_defaults() -> None:
    leave = LeaveRequest(employee_id=uuid.uuid4(), date=date(2025, 7, 1))
    assert leave.status == LeaveStatus.REQUESTED
    assert leave.decided_by is None
    assert leave.decided_at is None
    assert leave.decision_comment is None


def test_notification_defaults() -> None:
    notification = Notification(
        user_id=uuid.uuid4(),
        leave_request_id=uuid.uuid4(),
        kind="SUBMITTED",
        date=date(2025, 7, 1),
    )
    assert notification.is_read is False
    assert notification.actor_id is None
    assert notification.comment is None
    assert notification.created_at is not None


def test_audit_log_instantiation() -> None:
    log = AuditLog(
        actor_id=uuid.uuid4(),
        entity_type="LEAVE_REQUEST",
        entity_id=uuid.uuid4(),
        action="SUBMIT",
    )
    assert log.before_json is None
    assert log.after_json is None


def test_can_decide() -> None:
    assert can_decide(UserRole.APPROVER) is True
    assert can_decide(UserRole.ADMIN) is True
    assert can_decide(UserRole.EMPLOYEE) is False
    assert can_decide("ADMIN") is True
