# kanban/ticket/services.py
import logging
import uuid
from datetime import timedelta

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from kanban.core.database import utcnow
from kanban.core.errors import translate_storage_errors
from kanban.ticket.models import Ticket
from kanban.ticket.schemas import TicketCreate, TicketOut, TicketPriority, TicketStatus, TicketUpdate

logger = logging.getLogger(__name__)


@translate_storage_errors
def list_tickets(db: Session, project_id: str | None = None) -> list[TicketOut]:
    stmt = select(Ticket)
    if project_id:
        stmt = stmt.where(Ticket.project_id == project_id)
    stmt = stmt.order_by(Ticket.created_at.desc(), Ticket.id.desc())
    return [TicketOut.model_validate(t) for t in db.scalars(stmt)]


@translate_storage_errors
def get_ticket(db: Session, ticket_id: str) -> TicketOut | None:
    db_ticket = db.get(Ticket, ticket_id)
    if not db_ticket:
        return None
    return TicketOut.model_validate(db_ticket)


@translate_storage_errors
def create_ticket(db: Session, payload: TicketCreate) -> TicketOut:
    now = utcnow()
    db_ticket = Ticket(
        id=str(uuid.uuid4()),
        title=payload.title,
        description=payload.description or "",
        status=(payload.status or TicketStatus.TODO).value,
        project_id=payload.project_id,
        priority=(payload.priority or TicketPriority.MEDIUM).value,
        created_at=now,
        updated_at=now,
    )
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Created ticket %s in project %s", db_ticket.id, db_ticket.project_id)
    return TicketOut.model_validate(db_ticket)


@translate_storage_errors
def update_ticket(db: Session, ticket_id: str, payload: TicketUpdate) -> TicketOut | None:
    db_ticket = db.scalars(
        select(Ticket).where(Ticket.id == ticket_id).with_for_update()
    ).first()
    if not db_ticket:
        db.rollback()
        return None
    changes = payload.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    for field, value in changes.items():
        setattr(db_ticket, field, value)
    db_ticket.updated_at = max(utcnow(), db_ticket.updated_at + timedelta(microseconds=1))
    db.commit()
    db.refresh(db_ticket)
    return TicketOut.model_validate(db_ticket)


@translate_storage_errors
def delete_ticket(db: Session, ticket_id: str) -> bool:
    result = db.execute(delete(Ticket).where(Ticket.id == ticket_id))
    db.commit()
    return result.rowcount > 0
