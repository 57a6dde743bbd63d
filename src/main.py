"""Main application entry point with SubApp mounting."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from neuroglia.eventing.cloud_events.infrastructure.cloud_event_ingestor import CloudEventIngestor
from neuroglia.eventing.cloud_events.infrastructure.cloud_event_middleware import CloudEventMiddleware
from neuroglia.eventing.cloud_events.infrastructure.cloud_event_publisher import CloudEventPublisher
from neuroglia.hosting.configuration.data_access_layer import DataAccessLayer
from neuroglia.hosting.web import SubAppConfig, WebApplicationBuilder
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.observability import Observability
from neuroglia.serialization.json import JsonSerializer

from application.services import configure_logging
from application.settings import app_settings
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.repositories import MotorTaskDtoRepository, MotorUserDtoRepository

configure_logging(log_level=app_settings.log_level, file=app_settings.log_to_file, filename=app_settings.log_filename)
log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Mounts the REST API backend under the /api prefix.

    Returns:
        Configured FastAPI application
    """
    log.debug("🚀 Creating Task Tracker application...")

    builder = WebApplicationBuilder(app_settings=app_settings)

    # Configure core services
    Mediator.configure(
        builder,
        [
            "application.commands",
            "application.queries",
            "application.events.integration",
        ],
    )
    Mapper.configure(
        builder,
        [
            "application.commands",
            "application.queries",
            "integration.models",
        ],
    )
    JsonSerializer.configure(
        builder,
        [
            "domain.models",
            "integration.models",
        ],
    )
    CloudEventPublisher.configure(builder)
    CloudEventIngestor.configure(builder, ["application.events.integration"])
    Observability.configure(builder)

    # Tasks and users are stored state-based in MongoDB
    DataAccessLayer.ReadModel(
        database_name=app_settings.database_name,
        repository_type="motor",
        repository_mappings={
            TaskDtoRepository: MotorTaskDtoRepository,
            UserDtoRepository: MotorUserDtoRepository,
        },
    ).configure(builder, ["integration.models"])

    builder.add_sub_app(
        SubAppConfig(
            path="/api",
            name="api",
            title=f"{app_settings.app_name} API",
            description="Task tracking REST API",
            version=app_settings.app_version,
            controllers=["api.controllers"],
            docs_url="/docs",
        )
    )

    app = builder.build_app_with_lifespan(
        title=app_settings.app_name,
        description="Task tracking service",
        version=app_settings.app_version,
        debug=app_settings.debug,
    )

    app.add_middleware(CloudEventMiddleware, service_provider=app.state.services)

    if app_settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    log.info("✅ Application created successfully!")
    log.info(f"   - API Docs: http://{app_settings.app_host}:{app_settings.app_port}/api/docs")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=app_settings.app_host,
        port=app_settings.app_port,
        reload=app_settings.debug,
    )
