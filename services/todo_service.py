"""ToDo service"""

from sqlalchemy.orm import Session

from domain.mappers import ToDoMapper
from domain.models import ToDo
from domain.schemas.todo_schemas import ToDoRequest, ToDoResponse
from repositories import TodoRepository
from services.base_service import OwnedResourceService


class TodoService(OwnedResourceService[ToDo, ToDoRequest, ToDoResponse]):
    resource_name = "todo"

    def __init__(self, db: Session):
        super().__init__(db, TodoRepository(db), ToDoMapper(), logger_name="planit.todo")
