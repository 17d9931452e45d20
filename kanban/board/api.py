# kanban/board/api.py
from __future__ import annotations

import httpx
from pydantic.alias_generators import to_camel

from kanban.core.config import Settings, get_settings
from kanban.project.schemas import ProjectOut
from kanban.ticket.schemas import TicketOut


class KanbanAPI:
    """Thin HTTP wrapper over the projects/tickets endpoints.

    Every call raises ``httpx.HTTPError`` on transport failure or a non-2xx
    response. Pass ``client`` to reuse an existing ``httpx.Client`` (for
    example FastAPI's ``TestClient``).
    """

    def __init__(self, base_url: str = "http://localhost:3001", client: httpx.Client | None = None):
        self._http = client or httpx.Client(base_url=base_url)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> KanbanAPI:
        settings = settings or get_settings()
        return cls(base_url=settings.API_BASE_URL)

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        r = self._http.request(method, path, **kwargs)
        r.raise_for_status()
        return r

    # Projects
    def list_projects(self) -> list[ProjectOut]:
        return [ProjectOut.model_validate(p) for p in self._request("GET", "/projects").json()]

    def get_project(self, project_id: str) -> ProjectOut:
        return ProjectOut.model_validate(self._request("GET", f"/projects/{project_id}").json())

    def create_project(self, name: str, description: str = "") -> ProjectOut:
        r = self._request("POST", "/projects", json={"name": name, "description": description})
        return ProjectOut.model_validate(r.json())

    def update_project(self, project_id: str, **changes) -> ProjectOut:
        r = self._request("PUT", f"/projects/{project_id}", json=_camel(changes))
        return ProjectOut.model_validate(r.json())

    def delete_project(self, project_id: str) -> None:
        self._request("DELETE", f"/projects/{project_id}")

    # Tickets
    def list_tickets(self, project_id: str | None = None) -> list[TicketOut]:
        params = {"projectId": project_id} if project_id else None
        return [TicketOut.model_validate(t) for t in self._request("GET", "/tickets", params=params).json()]

    def get_ticket(self, ticket_id: str) -> TicketOut:
        return TicketOut.model_validate(self._request("GET", f"/tickets/{ticket_id}").json())

    def create_ticket(self, **fields) -> TicketOut:
        r = self._request("POST", "/tickets", json=_camel(fields))
        return TicketOut.model_validate(r.json())

    def update_ticket(self, ticket_id: str, **changes) -> TicketOut:
        r = self._request("PUT", f"/tickets/{ticket_id}", json=_camel(changes))
        return TicketOut.model_validate(r.json())

    def delete_ticket(self, ticket_id: str) -> None:
        self._request("DELETE", f"/tickets/{ticket_id}")


def _camel(fields: dict) -> dict:
    return {to_camel(key): getattr(value, "value", value) for key, value in fields.items()}
