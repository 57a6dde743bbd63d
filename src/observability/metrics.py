"""Business metrics for the Task Tracker service.

Defines OpenTelemetry metrics for task orchestration.
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# TASK METRICS
# =============================================================================

tasks_created = meter.create_counter(
    name="task_tracker.tasks.created",
    description="Total tasks created",
    unit="1",
)

tasks_updated = meter.create_counter(
    name="task_tracker.tasks.updated",
    description="Total tasks updated",
    unit="1",
)

tasks_deleted = meter.create_counter(
    name="task_tracker.tasks.deleted",
    description="Total tasks deleted",
    unit="1",
)

tasks_failed = meter.create_counter(
    name="task_tracker.tasks.failed",
    description="Total task operation failures",
    unit="1",
)

task_observers_changed = meter.create_counter(
    name="task_tracker.tasks.observers_changed",
    description="Total observer additions and removals",
    unit="1",
)

task_processing_time = meter.create_histogram(
    name="task_tracker.task.processing_time",
    description="Time to process task operations",
    unit="ms",
)

# =============================================================================
# USER METRICS
# =============================================================================

users_created = meter.create_counter(
    name="task_tracker.users.created",
    description="Total users created",
    unit="1",
)
