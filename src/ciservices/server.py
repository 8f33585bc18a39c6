import os
from typing import Optional
from fastmcp import FastMCP, Context
from pydantic import Field, ValidationError
import logging

from ciservices.ci_services import get_service, get_services
from ciservices.loader import (
    ServiceDataError,
    load_services_from_url,
    services_from_base64,
    services_from_json,
    services_to_base64,
    services_to_json,
)
from ciservices.models import (
    ExportParams,
    GetServiceParams,
    ListServicesParams,
    Service,
)

LOG_LEVEL = os.environ.get("CI_SERVICES_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

mcp = FastMCP(name="CI Services MCP Server")


def format_sizing(service: Service) -> str:
    if service.template is not None:
        return f"Template: {service.template}"
    config = service.config
    return (
        f"Grid: {config.min_columns}-{config.max_columns} columns, "
        f"{config.min_rows}-{config.max_rows} rows"
    )


@mcp.tool(
    description="""
    List the services the dashboard CI suites run against.

    Use this tool to:
    - Get an overview of the available test services
    - See service names, types and endpoints
    - Check instance caps and widget sizing

    Returns a formatted list showing each service's id, type, url,
    instance cap and either its grid bounds or its layout template.
    """
)
async def list_ci_services(
    ctx: Context,
    service_type: Optional[str] = Field(
        None, description="Only list services of this type (api or web)"
    ),
) -> str:
    try:
        params = ListServicesParams(service_type=service_type)

        services = get_services()
        if params.service_type is not None:
            await ctx.debug(f"Filtering services by type: {params.service_type.value}")
            services = [s for s in services if s.type == params.service_type]

        if not services:
            await ctx.warning("No services matched the requested type")
            return "No CI services found."

        await ctx.info(f"Found {len(services)} CI services")

        result = f"CI Services ({len(services)} total):\n\n"

        for service in services:
            result += f"Service: {service.name}\n"
            result += f"  ID: {service.id}\n"
            result += f"  Type: {service.type.value}\n"
            result += f"  URL: {service.url}\n"
            result += f"  Max Instances: {service.max_instances}\n"
            result += f"  {format_sizing(service)}\n"
            if service.category:
                result += f"  Category: {service.category}\n"
            result += "\n"

        return result

    except ValidationError as e:
        error_message = f"Invalid parameters: {e}"
        await ctx.error(error_message)
        return error_message
    except Exception as e:
        await ctx.error(f"Unexpected error: {str(e)}")
        return f"Error: {str(e)}"


@mcp.tool(
    description="""Get detailed information about one CI service.

    Returns the service's endpoint, type, instance cap and sizing,
    plus category, tags and fallback request when they are defined.
    """
)
async def get_ci_service(
    ctx: Context,
    service_id: str = Field(
        ..., description="Id of the service to get details for (case-sensitive)"
    ),
) -> str:
    try:
        params = GetServiceParams(service_id=service_id)
        await ctx.info(f"Getting details for service: {params.service_id}")

        service = get_service(params.service_id)
        if service is None:
            await ctx.warning(f"Service '{params.service_id}' not found")
            return f"Service '{params.service_id}' not found in CI services."

        result = f"Service Details: {service.id}\n\n"
        result += f"  Name: {service.name}\n"
        result += f"  Type: {service.type.value}\n"
        result += f"  URL: {service.url}\n"
        result += f"  Max Instances: {service.max_instances}\n"
        if not service.enabled:
            result += "  Status: disabled\n"
        result += f"  {format_sizing(service)}\n"

        if service.category:
            result += f"  Category: {service.category}\n"
        if service.subcategory:
            result += f"  Subcategory: {service.subcategory}\n"
        if service.tags:
            result += f"  Tags: {', '.join(service.tags)}\n"
        if service.fallback:
            method = service.fallback.method or "GET"
            result += f"  Fallback: {service.fallback.name} ({method} {service.fallback.url})\n"

        return result

    except ValidationError as e:
        error_message = f"Invalid parameters: {e}"
        await ctx.error(error_message)
        return error_message
    except Exception as e:
        await ctx.error(f"Unexpected error: {str(e)}")
        return f"Error: {str(e)}"


@mcp.tool(
    description="""Export the CI services in the dashboard's wire format.

    Use encoding "json" for a services.json file or services_url target,
    and "base64" for the services_base64 query parameter.
    """
)
async def export_ci_services(
    ctx: Context,
    encoding: str = Field("json", description="Output encoding: json or base64"),
) -> str:
    try:
        params = ExportParams(encoding=encoding)
        services = get_services()
        await ctx.info(f"Exporting {len(services)} services as {params.encoding}")

        if params.encoding == "base64":
            return services_to_base64(services)
        return services_to_json(services, indent=2)

    except ValidationError as e:
        error_message = f"Invalid parameters: {e}"
        await ctx.error(error_message)
        return error_message
    except Exception as e:
        await ctx.error(f"Unexpected error: {str(e)}")
        return f"Error: {str(e)}"


@mcp.tool(
    description="""Check whether a services payload would be accepted by the dashboard.

    The payload is a JSON array of services, or the same array base64
    encoded. With sanitize enabled, entries without a name are dropped
    before validation, as the dashboard does when it loads stored data.
    """
)
async def validate_services_payload(
    ctx: Context,
    payload: str = Field(..., description="Services list as JSON or base64"),
    encoding: str = Field("json", description="Payload encoding: json or base64"),
    sanitize: bool = Field(False, description="Drop unnamed entries first"),
) -> str:
    try:
        params = ExportParams(encoding=encoding)
    except ValidationError as e:
        error_message = f"Invalid parameters: {e}"
        await ctx.error(error_message)
        return error_message

    try:
        if params.encoding == "base64":
            services = services_from_base64(payload, sanitize=sanitize)
        else:
            services = services_from_json(payload, sanitize=sanitize)
    except (ValidationError, ServiceDataError) as e:
        await ctx.warning(f"Rejected services payload: {e}")
        return f"Invalid services payload: {e}"
    except Exception as e:
        await ctx.error(f"Unexpected error: {str(e)}")
        return f"Error: {str(e)}"

    ids = ", ".join(service.id for service in services)
    return f"Valid services payload ({len(services)} services): {ids}"


@mcp.tool(
    description="""Load and validate a services list from a services_url.

    Accepts s3://bucket/key locations and local .json file paths.
    Validation errors may quote values read from the file.
    """
)
async def load_services(
    ctx: Context,
    services_url: str = Field(..., description="s3:// url or local path of a services.json"),
) -> str:
    try:
        await ctx.info(f"Loading services from {services_url}")
        services = load_services_from_url(services_url)
    except (ValidationError, ServiceDataError) as e:
        await ctx.error(f"Failed to load services: {e}")
        return f"Invalid services payload: {e}"
    except Exception as e:
        await ctx.error(f"Unexpected error: {str(e)}")
        return f"Error: {str(e)}"

    result = f"Loaded {len(services)} services from {services_url}:\n\n"
    for service in services:
        result += f"  • {service.id} ({service.type.value}) {service.url}\n"
    return result


def main():
    logger.info(f"Starting CI Services MCP Server with {len(get_services())} services")
    mcp.run()


if __name__ == "__main__":
    main()
