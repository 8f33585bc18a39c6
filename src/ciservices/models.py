from enum import Enum
from typing import Annotated, Dict, Iterator, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, Field, ConfigDict, RootModel, model_validator
from pydantic.alias_generators import to_camel


class ASDBaseModel(BaseModel):
    """Base model for dashboard records with camelCase aliasing"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class ServiceType(str, Enum):
    """How the dashboard treats a service endpoint."""

    API = "api"
    WEB = "web"


class ServiceConfig(ASDBaseModel):
    """Inclusive grid-size bounds for widgets of a service."""

    min_columns: Optional[int] = Field(None, ge=0)
    max_columns: Optional[int] = Field(None, ge=0)
    min_rows: Optional[int] = Field(None, ge=0)
    max_rows: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_axis_order(self) -> "ServiceConfig":
        if (
            self.min_columns is not None
            and self.max_columns is not None
            and self.min_columns > self.max_columns
        ):
            raise ValueError("minColumns must not exceed maxColumns")
        if (
            self.min_rows is not None
            and self.max_rows is not None
            and self.min_rows > self.max_rows
        ):
            raise ValueError("minRows must not exceed maxRows")
        return self

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.min_columns, self.max_columns, self.min_rows, self.max_rows)
        )

    def is_complete(self) -> bool:
        return all(
            value is not None
            for value in (self.min_columns, self.max_columns, self.min_rows, self.max_rows)
        )


class ServiceFallback(ASDBaseModel):
    """Request issued when a service endpoint cannot be reached."""

    name: str
    url: str
    method: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


class TemplateSizing(ASDBaseModel):
    """Sizing delegated to a named layout template."""

    kind: Literal["template"] = "template"
    name: str


class ExplicitBounds(ASDBaseModel):
    """Sizing given directly as column and row bounds."""

    kind: Literal["bounds"] = "bounds"
    min_columns: int
    max_columns: int
    min_rows: int
    max_rows: int


Sizing = Annotated[Union[TemplateSizing, ExplicitBounds], Field(discriminator="kind")]


class Service(ASDBaseModel):
    """External service a dashboard widget can be created from.

    A service is sized either by ``template`` or by the four bounds in
    ``config``. Without a template all four bounds are required.
    """

    id: str = Field(description="Unique identifier of the service definition")
    name: str
    url: str
    type: ServiceType
    category: Optional[str] = None
    subcategory: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    max_instances: int = Field(
        ge=0, description="Maximum allowed widget instances, 0 disables the service"
    )
    template: Optional[str] = Field(
        default=None, min_length=1, description="Key of the layout template to size from"
    )
    config: ServiceConfig = Field(default_factory=ServiceConfig)
    fallback: Optional[ServiceFallback] = None

    @model_validator(mode="after")
    def check_sizing(self) -> "Service":
        if self.template is None and not self.config.is_complete():
            raise ValueError(
                "config must define minColumns, maxColumns, minRows and maxRows "
                "when no template is set"
            )
        return self

    @property
    def sizing(self) -> Sizing:
        if self.template is not None:
            return TemplateSizing(name=self.template)
        return ExplicitBounds(
            min_columns=self.config.min_columns,
            max_columns=self.config.max_columns,
            min_rows=self.config.min_rows,
            max_rows=self.config.max_rows,
        )

    @property
    def enabled(self) -> bool:
        return self.max_instances > 0


class ServiceCatalog(RootModel[List[Service]]):
    """Ordered list of services with unique ids."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "ServiceCatalog":
        seen = set()
        duplicates = []
        for service in self.root:
            if service.id in seen and service.id not in duplicates:
                duplicates.append(service.id)
            seen.add(service.id)
        if duplicates:
            raise ValueError(f"duplicate service id(s): {', '.join(duplicates)}")
        return self

    def __iter__(self) -> Iterator[Service]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Service:
        return self.root[index]

    def ids(self) -> List[str]:
        return [service.id for service in self.root]

    def get(self, service_id: str) -> Optional[Service]:
        for service in self.root:
            if service.id == service_id:
                return service
        return None


class ListServicesParams(BaseModel):
    """Input parameters for list_ci_services tool."""

    service_type: Optional[ServiceType] = Field(
        default=None, description="Only list services of this type"
    )


class GetServiceParams(BaseModel):
    """Input parameters for get_ci_service tool."""

    service_id: str = Field(
        min_length=1, description="Id of the service to get details for (case-sensitive)"
    )


class ExportParams(BaseModel):
    """Input parameters for tools that encode or decode service lists."""

    encoding: Literal["json", "base64"] = Field(
        default="json", description="Wire encoding of the services list"
    )
