# kanban/ticket/routes.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from kanban.core.database import get_db
from kanban.core.errors import NotFoundError
from kanban.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from kanban.ticket import services as ticket_service

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get("", response_model=list[TicketOut])
def list_all(
    project_id: str | None = Query(default=None, alias="projectId", description="Only tickets of this project"),
    db: Session = Depends(get_db),
):
    return ticket_service.list_tickets(db, project_id)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise NotFoundError("Ticket not found")
    return ticket


@router.post("", response_model=TicketOut, status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: str, ticket: TicketUpdate, db: Session = Depends(get_db)):
    updated = ticket_service.update_ticket(db, ticket_id, ticket)
    if not updated:
        raise NotFoundError("Ticket not found")
    return updated


@router.delete("/{ticket_id}", status_code=204, response_class=Response)
def delete(ticket_id: str, db: Session = Depends(get_db)):
    if not ticket_service.delete_ticket(db, ticket_id):
        raise NotFoundError("Ticket not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
