# kanban/board/state.py
"""
In-memory board state for a kanban client.

Holds the project list and the tickets of the selected project. Every
mutating action issues one request and then refetches the whole ticket list;
nothing is merged locally. Request failures are logged and leave the state
as it was before the action.
"""
from __future__ import annotations

import logging

import httpx

from kanban.board.api import KanbanAPI
from kanban.project.schemas import ProjectOut
from kanban.ticket.schemas import TicketOut, TicketStatus

logger = logging.getLogger(__name__)

COLUMNS: tuple[TicketStatus, ...] = (TicketStatus.TODO, TicketStatus.IN_PROGRESS, TicketStatus.DONE)

COLUMN_TITLES = {
    TicketStatus.TODO: "To Do",
    TicketStatus.IN_PROGRESS: "In Progress",
    TicketStatus.DONE: "Done",
}


class BoardState:
    def __init__(self, api: KanbanAPI):
        self.api = api
        self.projects: list[ProjectOut] = []
        self.selected_project_id: str | None = None
        self.tickets: list[TicketOut] = []
        self.dragged_ticket_id: str | None = None
        self.drag_over_column: TicketStatus | None = None
        self.loading = True

    # Projects
    def load_projects(self) -> None:
        try:
            self.projects = self.api.list_projects()
            if self.projects and not self.selected_project_id:
                self.select_project(self.projects[0].id)
        except httpx.HTTPError:
            logger.exception("Failed to load projects")
        finally:
            self.loading = False

    def select_project(self, project_id: str | None) -> None:
        self.selected_project_id = project_id
        if project_id:
            self.load_tickets()
        else:
            self.tickets = []

    def create_project(self, name: str, description: str = "") -> ProjectOut | None:
        try:
            project = self.api.create_project(name, description)
        except httpx.HTTPError:
            logger.exception("Failed to create project")
            return None
        self.projects = [*self.projects, project]
        self.select_project(project.id)
        return project

    def delete_project(self, project_id: str) -> bool:
        try:
            self.api.delete_project(project_id)
        except httpx.HTTPError:
            logger.exception("Failed to delete project %s", project_id)
            return False
        self.projects = [p for p in self.projects if p.id != project_id]
        if self.selected_project_id == project_id:
            self.select_project(self.projects[0].id if self.projects else None)
        return True

    # Tickets
    def load_tickets(self) -> None:
        if not self.selected_project_id:
            return
        try:
            self.tickets = self.api.list_tickets(self.selected_project_id)
        except httpx.HTTPError:
            logger.exception("Failed to load tickets")

    def create_ticket(self, title: str, **fields) -> bool:
        fields.setdefault("project_id", self.selected_project_id)
        try:
            self.api.create_ticket(title=title, **fields)
        except httpx.HTTPError:
            logger.exception("Failed to create ticket")
            return False
        self.load_tickets()
        return True

    def update_ticket(self, ticket_id: str, **changes) -> bool:
        try:
            self.api.update_ticket(ticket_id, **changes)
        except httpx.HTTPError:
            logger.exception("Failed to update ticket %s", ticket_id)
            return False
        self.load_tickets()
        return True

    def delete_ticket(self, ticket_id: str) -> bool:
        try:
            self.api.delete_ticket(ticket_id)
        except httpx.HTTPError:
            logger.exception("Failed to delete ticket %s", ticket_id)
            return False
        self.load_tickets()
        return True

    # Drag and drop
    def drag_start(self, ticket_id: str) -> None:
        self.dragged_ticket_id = ticket_id

    def drag_over(self, status: TicketStatus) -> None:
        self.drag_over_column = TicketStatus(status)

    def drag_leave(self) -> None:
        self.drag_over_column = None

    def drop(self, status: TicketStatus) -> bool:
        """Move the dragged ticket to ``status``.

        Returns True when an update request was sent. Dropping on the
        ticket's own column sends nothing.
        """
        self.drag_over_column = None
        if not self.dragged_ticket_id:
            return False

        target = TicketStatus(status)
        ticket = next((t for t in self.tickets if t.id == self.dragged_ticket_id), None)
        if ticket is None or ticket.status == target:
            self.dragged_ticket_id = None
            return False

        try:
            self.api.update_ticket(ticket.id, status=target)
            self.load_tickets()
        except httpx.HTTPError:
            logger.exception("Failed to move ticket %s to %s", ticket.id, target.value)
        finally:
            self.dragged_ticket_id = None
        return True

    def columns(self) -> dict[TicketStatus, list[TicketOut]]:
        return {status: [t for t in self.tickets if t.status == status] for status in COLUMNS}
