import logging

from multipledispatch import dispatch
from neuroglia.mediation.mediator import IntegrationEventHandler, Mediator

from application.commands.task.create_task_command import CreateTaskCommand
from application.events.integration.task_events import TaskCreationRequestedIntegrationEventV1

log = logging.getLogger(__name__)


class TaskCreationRequestedIntegrationEventV1Handler(IntegrationEventHandler[TaskCreationRequestedIntegrationEventV1]):

    mediator: Mediator
    """ Gets the service used to mediate calls """

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    @dispatch(TaskCreationRequestedIntegrationEventV1)
    async def handle_async(self, notification: TaskCreationRequestedIntegrationEventV1) -> None:
        log.debug(f"🌐 Handling event type: {notification.__cloudevent__type__}")  # type: ignore
        if not notification.title:
            log.warning("❗ Task creation requested event is missing a title. Skipping task creation.")
            return
        if not notification.author_id or not notification.assignee_id:
            log.warning("❗ Task creation requested event is missing its author or assignee. Skipping task creation.")
            return

        result = await self.mediator.execute_async(
            CreateTaskCommand(
                title=notification.title,
                description=notification.description,
                author_id=notification.author_id,
                assignee_id=notification.assignee_id,
                status=notification.status,
                priority=notification.priority,
            )
        )
        if not result.is_success:
            log.warning(f"❗ Task creation requested by event '{notification.aggregate_id}' failed: {result.detail}")
