"""
Base service for business logic layer.
Services orchestrate business operations using repositories.
"""

from typing import Any, Generic, List, Optional, TypeVar
from abc import ABC
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, OperationFailedError, UnauthorizedError
from domain.mappers.base import BaseMapper
from repositories.base import MAX_OFFSET, BaseRepository

ModelType = TypeVar("ModelType")
RequestType = TypeVar("RequestType")
ResponseType = TypeVar("ResponseType")


class BaseService(ABC):
    """
    Base service providing structured logging helpers.
    All service classes should inherit from this class.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def log_info(self, message: str, **kwargs):
        """Log info message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.info(f"{message} {extra_data}".strip())

    def log_debug(self, message: str, **kwargs):
        """Log debug message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.debug(f"{message} {extra_data}".strip())

    def log_warning(self, message: str, **kwargs):
        """Log warning message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.warning(f"{message} {extra_data}".strip())

    def log_error(self, message: str, **kwargs):
        """Log error message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.error(f"{message} {extra_data}".strip())

    def log_creation_start(self, resource: str):
        self.log_debug(f"Creating new {resource}")

    def log_creation_failure(self, resource: str):
        self.log_error(f"Failed to create new {resource}")

    def log_not_found(self, resource: str, resource_id: Any):
        self.log_warning(f"{resource.capitalize()} not found", id=resource_id)

    def log_unauthorized_access(self, resource: str, resource_id: Any, user_id: Any):
        self.log_warning(
            f"Unauthorized access to {resource}", id=resource_id, user_id=user_id
        )

    def log_operation_success(self, operation: str, resource: str, resource_id: Any):
        self.log_info(f"{resource.capitalize()} {operation}", id=resource_id)

    def log_operation_failure(self, operation: str, resource: str, resource_id: Any):
        self.log_error(f"Failed to {operation} {resource}", id=resource_id)


class OwnedResourceService(BaseService, Generic[ModelType, RequestType, ResponseType]):
    """
    CRUD for resources that belong to exactly one user.

    Every read or mutation of an existing resource resolves it in the same
    order: fetch by id (NotFoundError), compare owner with the caller
    (UnauthorizedError), act, and turn a repository failure signal into
    OperationFailedError. Subclasses change how the owner is determined by
    overriding ``owner_of`` and how new entities are claimed by overriding
    ``assign_owner``.
    """

    resource_name = "resource"

    def __init__(
        self,
        db: Session,
        repository: BaseRepository,
        mapper: BaseMapper,
        logger_name: str,
    ):
        super().__init__(logger_name)
        self.db = db
        self.repository = repository
        self.mapper = mapper

    # ------------------------------------------------------------------
    # Ownership hooks
    # ------------------------------------------------------------------

    def owner_of(self, entity: ModelType) -> Optional[int]:
        """User id that owns ``entity``"""
        return entity.user_id

    def assign_owner(self, entity: ModelType, user_id: int) -> None:
        """Claim a new, unsaved entity for ``user_id``"""
        entity.user_id = user_id

    def check_update(self, entity: ModelType, values: dict, user_id: int) -> None:
        """Validate the values of an update before they are written"""

    # ------------------------------------------------------------------
    # Resolution protocol
    # ------------------------------------------------------------------

    def get_owned_entity(self, user_id: int, entity_id: int) -> ModelType:
        """
        Fetch an entity and verify the caller owns it.

        Raises:
            NotFoundError: If no entity has this id
            UnauthorizedError: If the entity belongs to another user
        """
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            self.log_not_found(self.resource_name, entity_id)
            raise NotFoundError.for_resource(self.resource_name, entity_id)

        if self.owner_of(entity) != user_id:
            self.log_unauthorized_access(self.resource_name, entity_id, user_id)
            raise UnauthorizedError.for_resource(self.resource_name, entity_id)

        return entity

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, user_id: int, request: RequestType) -> ResponseType:
        self.log_creation_start(self.resource_name)

        entity = self.mapper.to_model(request)
        self.assign_owner(entity, user_id)

        added = self.repository.create(entity)
        if added is None:
            self.log_creation_failure(self.resource_name)
            raise OperationFailedError.for_resource(self.resource_name, 0, "create")

        self.log_operation_success("created", self.resource_name, added.id)
        return self.mapper.to_dto(added)

    def get_all(
        self, user_id: int, page_nr: int = 1, page_size: int = 10
    ) -> List[ResponseType]:
        """The caller's resources, one page at a time (page_nr starts at 1)"""
        skip = (max(page_nr, 1) - 1) * page_size
        if skip > MAX_OFFSET:
            return []
        entities = self.repository.get_by_user(user_id, skip=skip, limit=page_size)
        return [self.mapper.to_dto(e) for e in entities]

    def count_all(self, user_id: int) -> int:
        return self.repository.count_by_user(user_id)

    def get_by_id(self, user_id: int, entity_id: int) -> ResponseType:
        self.log_debug(
            f"Retrieving {self.resource_name}", id=entity_id, user_id=user_id
        )
        entity = self.get_owned_entity(user_id, entity_id)

        self.log_operation_success("retrieved", self.resource_name, entity_id)
        return self.mapper.to_dto(entity)

    def update(self, user_id: int, entity_id: int, request: RequestType) -> ResponseType:
        self.log_debug(f"Updating {self.resource_name}", id=entity_id, user_id=user_id)
        entity = self.get_owned_entity(user_id, entity_id)

        values = self.mapper.to_update_values(request)
        self.check_update(entity, values, user_id)

        updated = self.repository.update(entity, values)
        if updated is None:
            self.log_operation_failure("update", self.resource_name, entity_id)
            raise OperationFailedError.for_resource(
                self.resource_name, entity_id, "update"
            )

        self.log_operation_success("updated", self.resource_name, entity_id)
        return self.mapper.to_dto(updated)

    def delete(self, user_id: int, entity_id: int) -> ResponseType:
        self.log_debug(f"Deleting {self.resource_name}", id=entity_id, user_id=user_id)
        entity = self.get_owned_entity(user_id, entity_id)

        # Snapshot before the row is gone; returned only if the delete succeeds
        deleted = self.mapper.to_dto(entity)
        if not self.repository.delete(entity):
            self.log_operation_failure("delete", self.resource_name, entity_id)
            raise OperationFailedError.for_resource(
                self.resource_name, entity_id, "delete"
            )

        self.log_operation_success("deleted", self.resource_name, entity_id)
        return deleted
