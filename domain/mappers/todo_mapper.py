"""ToDo mapper."""

from domain.mappers.base import BaseMapper
from domain.models import ToDo
from domain.schemas.todo_schemas import ToDoRequest, ToDoResponse


class ToDoMapper(BaseMapper[ToDo, ToDoRequest, ToDoResponse]):
    model = ToDo
    response_schema = ToDoResponse
