"""Tests for TaskHydrator."""

import pytest

from application.services import ReferenceResolver, TaskHydrator
from domain.exceptions import EntityKind, EntityNotFoundError
from tests.fixtures.factories import TaskDtoFactory, UserDtoFactory
from tests.fixtures.in_memory_repositories import InMemoryTaskDtoRepository, InMemoryUserDtoRepository


class TestTaskHydrator:
    """Test task hydration."""

    @pytest.fixture
    def hydrator(self, task_repository: InMemoryTaskDtoRepository, user_repository: InMemoryUserDtoRepository) -> TaskHydrator:
        return TaskHydrator(ReferenceResolver(task_repository, user_repository), user_repository)

    @pytest.mark.asyncio
    async def test_hydration_matches_foreign_keys(self, hydrator: TaskHydrator) -> None:
        """author.id == author_id, assignee.id == assignee_id and observer ids equal observer_ids."""
        task = TaskDtoFactory.create(author_id="u1", assignee_id="u2", observer_ids=["u3", "u1"])

        hydrated = await hydrator.hydrate_async(task)

        assert hydrated.task is task
        assert hydrated.author.id == "u1"
        assert hydrated.assignee.id == "u2"
        assert hydrated.resolved_observer_ids == {"u3", "u1"}

    @pytest.mark.asyncio
    async def test_empty_observers_skip_the_bulk_fetch(self, hydrator: TaskHydrator, user_repository: InMemoryUserDtoRepository) -> None:
        task = TaskDtoFactory.create(observer_ids=[])

        hydrated = await hydrator.hydrate_async(task)

        assert hydrated.observers == []
        assert user_repository.get_many_calls == []

    @pytest.mark.asyncio
    async def test_observers_are_deduplicated_and_keep_order(self, hydrator: TaskHydrator, user_repository: InMemoryUserDtoRepository) -> None:
        task = TaskDtoFactory.create(observer_ids=["u3", "u1", "u3"])

        hydrated = await hydrator.hydrate_async(task)

        assert [observer.id for observer in hydrated.observers] == ["u3", "u1"]
        assert user_repository.get_many_calls == [["u3", "u1"]]

    @pytest.mark.asyncio
    async def test_unknown_observers_are_omitted(self, hydrator: TaskHydrator) -> None:
        task = TaskDtoFactory.create(observer_ids=["u3", "ghost"])

        hydrated = await hydrator.hydrate_async(task)

        assert [observer.id for observer in hydrated.observers] == ["u3"]
        assert hydrated.resolved_observer_ids == {"u3"}
        assert hydrated.task.observer_ids == ["u3", "ghost"]

    @pytest.mark.asyncio
    async def test_missing_author_fails_hydration(self, hydrator: TaskHydrator) -> None:
        task = TaskDtoFactory.create(author_id="u9")

        with pytest.raises(EntityNotFoundError) as exc_info:
            await hydrator.hydrate_async(task)

        assert exc_info.value.kind == EntityKind.AUTHOR
        assert exc_info.value.message == "Author not found with id: u9"

    @pytest.mark.asyncio
    async def test_author_failure_reported_before_assignee(self, hydrator: TaskHydrator) -> None:
        """When both references are missing, the author failure is the one reported."""
        task = TaskDtoFactory.create(author_id="missing-author", assignee_id="missing-assignee")

        with pytest.raises(EntityNotFoundError) as exc_info:
            await hydrator.hydrate_async(task)

        assert exc_info.value.kind == EntityKind.AUTHOR
        assert exc_info.value.entity_id == "missing-author"

    @pytest.mark.asyncio
    async def test_lookups_run_concurrently(self, hydrator: TaskHydrator, journal: list) -> None:
        """All three lookups start before any of them completes."""
        task = TaskDtoFactory.create(author_id="u1", assignee_id="u2", observer_ids=["u3"])

        await hydrator.hydrate_async(task)

        first_end = next(i for i, entry in enumerate(journal) if entry[0] == "end")
        started = [entry[1:] for entry in journal[:first_end] if entry[0] == "start"]
        assert started == [
            ("users.get_async", "u1"),
            ("users.get_async", "u2"),
            ("users.get_many_async", ("u3",)),
        ]

    @pytest.mark.asyncio
    async def test_hydration_never_writes(self, hydrator: TaskHydrator, user_repository: InMemoryUserDtoRepository, task_repository: InMemoryTaskDtoRepository) -> None:
        await hydrator.hydrate_async(TaskDtoFactory.create(observer_ids=["u3"]))

        assert task_repository.added == [] and task_repository.updated == []
        assert user_repository.added == [] and user_repository.updated == []

    @pytest.mark.asyncio
    async def test_hydrate_all_fails_the_whole_list(self, hydrator: TaskHydrator, user_repository: InMemoryUserDtoRepository) -> None:
        user_repository.seed(UserDtoFactory.create(user_id="u4"))
        tasks = [
            TaskDtoFactory.create(task_id="t1"),
            TaskDtoFactory.create(task_id="t2", assignee_id="u9"),
            TaskDtoFactory.create(task_id="t3", assignee_id="u4"),
        ]

        with pytest.raises(EntityNotFoundError) as exc_info:
            await hydrator.hydrate_all_async(tasks)

        assert exc_info.value.entity_id == "u9"

    @pytest.mark.asyncio
    async def test_hydrate_all_keeps_task_order(self, hydrator: TaskHydrator) -> None:
        tasks = TaskDtoFactory.create_many(3)

        hydrated = await hydrator.hydrate_all_async(tasks)

        assert [h.id for h in hydrated] == [t.id for t in tasks]

    @pytest.mark.asyncio
    async def test_hydrate_all_with_no_tasks(self, hydrator: TaskHydrator) -> None:
        assert await hydrator.hydrate_all_async([]) == []
