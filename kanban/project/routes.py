# kanban/project/routes.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kanban.core.database import get_db
from kanban.core.errors import NotFoundError
from kanban.project.schemas import ProjectCreate, ProjectOut, ProjectUpdate
from kanban.project import services as project_service

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectOut])
def list_all(db: Session = Depends(get_db)):
    return project_service.list_projects(db)


@router.get("/{project_id}", response_model=ProjectOut)
def get(project_id: str, db: Session = Depends(get_db)):
    project = project_service.get_project(db, project_id)
    if not project:
        raise NotFoundError("Project not found")
    return project


@router.post("", response_model=ProjectOut, status_code=201)
def create(project: ProjectCreate, db: Session = Depends(get_db)):
    return project_service.create_project(db, project)


@router.put("/{project_id}", response_model=ProjectOut)
def update(project_id: str, project: ProjectUpdate, db: Session = Depends(get_db)):
    updated = project_service.update_project(db, project_id, project)
    if not updated:
        raise NotFoundError("Project not found")
    return updated


@router.delete("/{project_id}", status_code=204, response_class=Response)
def delete(project_id: str, db: Session = Depends(get_db)):
    if not project_service.delete_project(db, project_id):
        raise NotFoundError("Project not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
