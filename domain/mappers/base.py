"""
Generic ORM <-> DTO mapper.
"""

from typing import Any, Dict, Generic, Type, TypeVar

from pydantic import BaseModel

ModelType = TypeVar("ModelType")
RequestType = TypeVar("RequestType", bound=BaseModel)
ResponseType = TypeVar("ResponseType", bound=BaseModel)


class BaseMapper(Generic[ModelType, RequestType, ResponseType]):
    """
    Maps request schemas to ORM entities and ORM entities to response schemas.

    Subclasses set ``model`` and ``response_schema``. Request schemas only carry
    client-editable fields, so identifiers and owners never come from a request.
    """

    model: Type[ModelType]
    response_schema: Type[ResponseType]

    def to_dto(self, entity: ModelType) -> ResponseType:
        """Convert an ORM entity to its response DTO"""
        return self.response_schema.model_validate(entity)

    def to_model(self, request: RequestType) -> ModelType:
        """Build a new, unsaved ORM entity from a request DTO"""
        return self.model(**self.to_update_values(request))

    def to_update_values(self, request: RequestType) -> Dict[str, Any]:
        """Column values a request is allowed to write"""
        return request.model_dump()
