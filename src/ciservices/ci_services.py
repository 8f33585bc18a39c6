"""Service descriptors used by the dashboard CI suites.

The catalog is validated once at import. Callers always receive deep
copies, so a test that mutates what it gets cannot leak into another.
"""

from typing import List, Optional

from ciservices.models import Service, ServiceCatalog, ServiceConfig, ServiceType


_CATALOG = ServiceCatalog(
    [
        Service(
            id="toolbox",
            name="ASD-toolbox",
            url="http://localhost:8000/asd/toolbox",
            type=ServiceType.API,
            max_instances=20,
            config=ServiceConfig(min_columns=1, max_columns=4, min_rows=1, max_rows=4),
        ),
        Service(
            id="terminal",
            name="ASD-terminal",
            url="http://localhost:8000/asd/terminal",
            type=ServiceType.WEB,
            max_instances=20,
            config=ServiceConfig(min_columns=2, max_columns=6, min_rows=2, max_rows=6),
        ),
        Service(
            id="tunnel",
            name="ASD-tunnel",
            url="http://localhost:8000/asd/tunnel",
            type=ServiceType.WEB,
            max_instances=20,
            config=ServiceConfig(min_columns=1, max_columns=6, min_rows=1, max_rows=6),
        ),
        Service(
            id="containers",
            name="ASD-containers",
            url="http://localhost:8000/asd/containers",
            type=ServiceType.WEB,
            max_instances=20,
            config=ServiceConfig(min_columns=2, max_columns=4, min_rows=2, max_rows=6),
        ),
        Service(
            id="templated",
            name="ASD-templated",
            url="http://localhost:8000/asd/templated",
            type=ServiceType.WEB,
            template="twoByTwo",
            max_instances=20,
            config=ServiceConfig(),
        ),
    ]
)


def get_services() -> List[Service]:
    """Return the CI services in their canonical order."""
    return [service.model_copy(deep=True) for service in _CATALOG]


def get_service(service_id: str) -> Optional[Service]:
    service = _CATALOG.get(service_id)
    if service is None:
        return None
    return service.model_copy(deep=True)


def get_catalog() -> ServiceCatalog:
    return _CATALOG.model_copy(deep=True)
