"""Tests for BoardService."""

import random
from datetime import UTC, datetime, timedelta

import pytest

from taskboard.errors import BoardStorageError
from taskboard.models import BoardSnapshot, Priority, SortOrder, Task, TaskStatus, TodoList, User
from taskboard.models.palette import LIST_COLORS, LIST_ICONS
from taskboard.repositories import InMemoryRepository
from taskboard.services import BoardService, default_snapshot, demo_snapshot


class FakeClock:
    """Returns strictly increasing timestamps, one minute apart."""

    def __init__(self) -> None:
        self.current = datetime(2024, 10, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


class FailingRepository(InMemoryRepository):
    """In-memory store whose saves fail once ``fail`` is set."""

    def __init__(self, snapshot: BoardSnapshot | None = None) -> None:
        super().__init__(snapshot)
        self.fail = False

    def save(self, snapshot: BoardSnapshot) -> None:
        if self.fail:
            raise BoardStorageError("disk full")
        super().save(snapshot)


@pytest.fixture
def repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def board_service(repo: InMemoryRepository) -> BoardService:
    """Service seeded with a single empty list."""
    return BoardService(repo, clock=FakeClock(), rng=random.Random(7))


@pytest.fixture
def demo_service() -> BoardService:
    """Service seeded with the demo lists, users and tasks."""
    return BoardService(
        InMemoryRepository(), initial_state=demo_snapshot, clock=FakeClock(), rng=random.Random(7)
    )


class TestBoardServiceLoad:
    """Tests for seeding and loading."""

    def test_empty_repository_seeds_default_list(self, board_service: BoardService, repo):
        """A new board has one list, which is active, and it is saved."""
        assert len(board_service.lists) == 1
        assert board_service.active_list_id == board_service.lists[0].id
        assert board_service.lists[0].name == "My Tasks"
        assert repo.load() == board_service.snapshot

    def test_demo_seed(self, demo_service: BoardService):
        assert len(demo_service.users) == 3
        assert len(demo_service.lists) == 3
        assert len(demo_service.tasks) == 6
        assert demo_service.active_list.name == "Work Projects"

    def test_existing_snapshot_is_used(self):
        """A stored snapshot is loaded as-is."""
        stored = demo_snapshot()
        service = BoardService(InMemoryRepository(stored))
        assert service.snapshot == stored

    def test_snapshot_without_lists_gets_default_list(self):
        repo = InMemoryRepository(BoardSnapshot())
        service = BoardService(repo)
        assert len(service.lists) == 1
        assert service.active_list_id == service.lists[0].id
        assert repo.load().lists == service.lists

    def test_snapshot_without_active_list_selects_first(self):
        lists = (
            TodoList(id="a", name="A", icon="📋", color="#818cf8"),
            TodoList(id="b", name="B", icon="📋", color="#818cf8"),
        )
        service = BoardService(InMemoryRepository(BoardSnapshot(lists=lists)))
        assert service.active_list_id == "a"

    def test_orphan_tasks_and_unknown_assignees_are_repaired(self):
        """Tasks in a missing list are dropped; unknown assignees are cleared."""
        created = datetime(2024, 10, 1, tzinfo=UTC)
        stored = BoardSnapshot(
            lists=(TodoList(id="L1", name="One", icon="📋", color="#818cf8"),),
            users=(User(id="U1", name="Ann", color="#ef4444"),),
            active_list_id="L1",
            tasks=(
                Task(id="orphan", title="Lost", created_at=created, list_id="GONE"),
                Task(id="kept", title="Kept", created_at=created, list_id="L1", assigned_to="NOBODY"),
                Task(id="ann", title="Ann's", created_at=created, list_id="L1", assigned_to="U1"),
            ),
        )
        repo = InMemoryRepository(stored)

        service = BoardService(repo)

        assert [t.id for t in service.tasks] == ["kept", "ann"]
        assert service.get_task("kept").assigned_to is None
        assert service.get_task("ann").assigned_to == "U1"
        assert repo.load() == service.snapshot

    def test_tasks_without_any_list_are_dropped(self):
        stored = BoardSnapshot(
            tasks=(Task(id="t", title="T", created_at=datetime(2024, 10, 1, tzinfo=UTC), list_id="x"),),
        )
        repo = InMemoryRepository(stored)

        service = BoardService(repo)

        assert len(service.lists) == 1
        assert service.tasks == ()
        assert repo.load().tasks == ()

    def test_consistent_snapshot_is_not_rewritten(self):
        stored = demo_snapshot()
        repo = FailingRepository(stored)
        repo.fail = True

        service = BoardService(repo)

        assert service.snapshot is stored

    def test_reload_picks_up_repository_changes(self, board_service: BoardService, repo):
        repo.save(demo_snapshot())
        board_service.reload()
        assert len(board_service.lists) == 3


class TestCreateTask:
    """Tests for task creation."""

    def test_create_adds_one_task_in_active_list(self, board_service: BoardService):
        before = len(board_service.tasks)

        task = board_service.create_task("Write report")

        assert task is not None
        assert len(board_service.tasks) == before + 1
        assert task.list_id == board_service.active_list_id
        assert task.status == TaskStatus.TODO
        assert task.priority == Priority.MEDIUM

    def test_create_follows_active_list(self, demo_service: BoardService):
        family = demo_service.lists[1]
        demo_service.select_list(family.id)

        task = demo_service.create_task("Book dentist")

        assert task.list_id == family.id

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_is_noop(self, board_service: BoardService, title: str):
        before = board_service.snapshot

        assert board_service.create_task(title) is None
        assert board_service.snapshot == before

    def test_title_and_description_are_trimmed(self, board_service: BoardService):
        task = board_service.create_task("  Plan trip  ", description="  flights and hotel \n")
        assert task.title == "Plan trip"
        assert task.description == "flights and hotel"

    def test_fields_are_stored(self, demo_service: BoardService):
        user = demo_service.users[0]
        task = demo_service.create_task(
            "Ship release",
            description="Tag and publish",
            status="in-progress",
            priority="high",
            assigned_to=user.id,
            tags=["release", "urgent"],
        )
        assert task.status == TaskStatus.IN_PROGRESS
        assert task.priority == Priority.HIGH
        assert task.assigned_to == user.id
        assert task.tags == ("release", "urgent")

    def test_ids_are_unique(self, board_service: BoardService):
        ids = {board_service.create_task(f"Task {i}").id for i in range(20)}
        assert len(ids) == 20

    def test_duplicate_titles_allowed(self, board_service: BoardService):
        board_service.create_task("Same")
        board_service.create_task("Same")
        assert [t.title for t in board_service.tasks] == ["Same", "Same"]

    def test_unknown_assignee_is_dropped(self, board_service: BoardService):
        task = board_service.create_task("Task", assigned_to="nobody")
        assert task.assigned_to is None

    def test_duplicate_tags_are_collapsed(self, board_service: BoardService):
        task = board_service.create_task("Task", tags=["a", " a ", "b", "", "A"])
        assert task.tags == ("a", "b", "A")

    def test_unknown_status_is_noop(self, board_service: BoardService):
        assert board_service.create_task("Task", status="blocked") is None
        assert board_service.tasks == ()

    def test_missing_active_list_is_noop(self, board_service: BoardService):
        board_service.select_list("missing")
        assert board_service.create_task("Task") is None
        assert board_service.tasks == ()


class TestUpdateTask:
    """Tests for full-record task updates."""

    def test_update_replaces_fields(self, board_service: BoardService):
        task = board_service.create_task("Old", tags=["x"])

        updated = board_service.update_task(
            task.model_copy(
                update={"title": "New", "description": "Details", "priority": Priority.LOW, "tags": ()}
            )
        )

        assert updated.title == "New"
        assert board_service.get_task(task.id) == updated
        assert updated.tags == ()
        assert updated.priority == Priority.LOW

    def test_created_at_and_list_id_are_fixed(self, demo_service: BoardService):
        task = demo_service.create_task("Task")
        other_list = demo_service.lists[2]

        updated = demo_service.update_task(
            task.model_copy(
                update={"created_at": datetime(2000, 1, 1, tzinfo=UTC), "list_id": other_list.id}
            )
        )

        assert updated.created_at == task.created_at
        assert updated.list_id == task.list_id

    def test_unknown_id_is_noop(self, board_service: BoardService):
        task = board_service.create_task("Task")
        before = board_service.snapshot

        assert board_service.update_task(task.model_copy(update={"id": "missing"})) is None
        assert board_service.snapshot == before

    def test_blank_title_is_noop(self, board_service: BoardService):
        task = board_service.create_task("Task")
        assert board_service.update_task(task.model_copy(update={"title": "  "})) is None
        assert board_service.get_task(task.id).title == "Task"

    def test_unknown_assignee_is_cleared(self, board_service: BoardService):
        task = board_service.create_task("Task")
        updated = board_service.update_task(task.model_copy(update={"assigned_to": "ghost"}))
        assert updated.assigned_to is None


class TestDeleteTask:
    def test_delete_removes_task(self, board_service: BoardService):
        task = board_service.create_task("Task")
        assert board_service.delete_task(task.id) is True
        assert board_service.get_task(task.id) is None

    def test_delete_unknown_returns_false(self, board_service: BoardService):
        board_service.create_task("Task")
        before = board_service.snapshot
        assert board_service.delete_task("missing") is False
        assert board_service.snapshot == before


class TestMoveTask:
    """Tests for status changes."""

    def test_move_changes_only_status(self, board_service: BoardService):
        t1 = board_service.create_task("T1")
        t2 = board_service.create_task("T2")

        moved = board_service.move_task(t1.id, TaskStatus.DONE)

        assert moved.status == TaskStatus.DONE
        assert moved.model_copy(update={"status": TaskStatus.TODO}) == t1
        assert board_service.get_task(t2.id).status == TaskStatus.TODO
        assert board_service.get_tasks_by_status(TaskStatus.TODO) == [board_service.get_task(t2.id)]

    @pytest.mark.parametrize("source", list(TaskStatus))
    @pytest.mark.parametrize("target", list(TaskStatus))
    def test_any_status_to_any_status(self, board_service: BoardService, source, target):
        task = board_service.create_task("Task", status=source)
        assert board_service.move_task(task.id, target).status == target

    def test_unknown_status_is_noop(self, board_service: BoardService):
        task = board_service.create_task("Task")
        assert board_service.move_task(task.id, "archived") is None
        assert board_service.get_task(task.id).status == TaskStatus.TODO

    def test_unknown_task_is_noop(self, board_service: BoardService):
        assert board_service.move_task("missing", TaskStatus.DONE) is None

    def test_move_left_and_right_stop_at_edges(self, board_service: BoardService):
        task = board_service.create_task("Task")

        assert board_service.move_task_left(task.id).status == TaskStatus.TODO
        assert board_service.move_task_right(task.id).status == TaskStatus.IN_PROGRESS
        assert board_service.move_task_right(task.id).status == TaskStatus.DONE
        assert board_service.move_task_right(task.id).status == TaskStatus.DONE
        assert board_service.move_task_left(task.id).status == TaskStatus.IN_PROGRESS

    def test_cycle_wraps_from_done_to_todo(self, board_service: BoardService):
        task = board_service.create_task("Task")
        statuses = [board_service.cycle_task_status(task.id).status for _ in range(3)]
        assert statuses == [TaskStatus.IN_PROGRESS, TaskStatus.DONE, TaskStatus.TODO]


class TestTaskTags:
    def test_add_existing_tag_is_idempotent(self, board_service: BoardService):
        task = board_service.create_task("Task", tags=["bug"])
        before = board_service.snapshot

        result = board_service.add_task_tag(task.id, "bug")

        assert result.tags == ("bug",)
        assert board_service.snapshot == before

    def test_add_tag_is_case_sensitive(self, board_service: BoardService):
        task = board_service.create_task("Task", tags=["bug"])
        assert board_service.add_task_tag(task.id, " Bug ").tags == ("bug", "Bug")

    def test_remove_tag(self, board_service: BoardService):
        task = board_service.create_task("Task", tags=["a", "b"])
        assert board_service.remove_task_tag(task.id, "a").tags == ("b",)

    def test_unknown_task(self, board_service: BoardService):
        assert board_service.add_task_tag("missing", "a") is None
        assert board_service.remove_task_tag("missing", "a") is None


class TestDerivedViews:
    """Tests for the active-list views."""

    def test_only_active_list_tasks(self, demo_service: BoardService):
        active = demo_service.active_list_id
        assert demo_service.get_active_tasks()
        assert all(t.list_id == active for t in demo_service.get_active_tasks())

    def test_newest_and_oldest_are_reversed(self, board_service: BoardService):
        for i in range(5):
            board_service.create_task(f"Task {i}")

        newest = board_service.get_tasks_by_status(TaskStatus.TODO, SortOrder.NEWEST)
        oldest = board_service.get_tasks_by_status(TaskStatus.TODO, SortOrder.OLDEST)

        assert [t.title for t in newest] == ["Task 4", "Task 3", "Task 2", "Task 1", "Task 0"]
        assert newest == list(reversed(oldest))

    def test_sorting_does_not_change_stored_order(self, board_service: BoardService):
        for i in range(3):
            board_service.create_task(f"Task {i}")
        board_service.get_tasks_by_status(TaskStatus.TODO, SortOrder.NEWEST)
        assert [t.title for t in board_service.tasks] == ["Task 0", "Task 1", "Task 2"]

    def test_load_board_partitions_by_status(self, demo_service: BoardService):
        board = demo_service.load_board(SortOrder.OLDEST)

        assert board.todo_list == demo_service.active_list
        assert [t.title for t in board.todo] == ["Update documentation", "Fix login bug"]
        assert [t.title for t in board.in_progress] == ["Design new landing page"]
        assert board.done == []
        assert board.task_count == 3

    def test_unknown_active_list_shows_nothing(self, demo_service: BoardService):
        demo_service.select_list("missing")
        assert demo_service.get_active_tasks() == []
        assert demo_service.load_board().task_count == 0


class TestListOperations:
    """Tests for list creation, selection and deletion."""

    def test_create_list_becomes_active(self, board_service: BoardService):
        todo_list = board_service.create_list("Errands")

        assert board_service.active_list_id == todo_list.id
        assert board_service.lists[-1] == todo_list
        assert todo_list.name == "Errands"
        assert todo_list.icon in LIST_ICONS
        assert todo_list.color in LIST_COLORS

    def test_delete_list_cascades_to_tasks(self, demo_service: BoardService):
        work = demo_service.lists[0]
        remaining = [t for t in demo_service.tasks if t.list_id != work.id]

        assert demo_service.delete_list(work.id) is True

        assert demo_service.get_list(work.id) is None
        assert list(demo_service.tasks) == remaining
        assert all(t.list_id != work.id for t in demo_service.tasks)

    def test_delete_active_list_selects_first_remaining(self, demo_service: BoardService):
        work, family, _personal = demo_service.lists
        assert demo_service.active_list_id == work.id

        demo_service.delete_list(work.id)

        assert demo_service.active_list_id == family.id

    def test_delete_inactive_list_keeps_selection(self, demo_service: BoardService):
        active = demo_service.active_list_id
        demo_service.delete_list(demo_service.lists[2].id)
        assert demo_service.active_list_id == active

    def test_delete_last_list_is_noop(self, board_service: BoardService):
        board_service.create_task("Task")
        before = board_service.snapshot

        assert board_service.delete_list(board_service.lists[0].id) is False
        assert board_service.snapshot == before

    def test_delete_unknown_list_is_noop(self, demo_service: BoardService):
        before = demo_service.snapshot
        assert demo_service.delete_list("missing") is False
        assert demo_service.snapshot == before

    def test_select_list_is_not_validated(self, board_service: BoardService):
        board_service.select_list("missing")
        assert board_service.active_list_id == "missing"
        assert board_service.active_list is None

    def test_select_adjacent_list_wraps(self, demo_service: BoardService):
        work, family, personal = demo_service.lists

        assert demo_service.select_adjacent_list(1) == family
        assert demo_service.select_adjacent_list(1) == personal
        assert demo_service.select_adjacent_list(1) == work
        assert demo_service.select_adjacent_list(-1) == personal


class TestUserOperations:
    """Tests for users and assignment cleanup."""

    def test_create_user(self, board_service: BoardService):
        user = board_service.create_user("Ada", "#93c5fd")
        assert board_service.users == (user,)
        assert board_service.get_user(user.id) == user

    def test_update_user(self, board_service: BoardService):
        user = board_service.create_user("Ada", "#93c5fd")
        updated = board_service.update_user(user.model_copy(update={"name": "Ada L."}))
        assert board_service.get_user(user.id).name == "Ada L."
        assert updated.color == "#93c5fd"

    def test_update_unknown_user_is_noop(self, board_service: BoardService):
        user = board_service.create_user("Ada", "#93c5fd")
        assert board_service.update_user(user.model_copy(update={"id": "ghost"})) is None
        assert board_service.users == (user,)

    def test_delete_user_unassigns_tasks(self, board_service: BoardService):
        u1 = board_service.create_user("U1", "#93c5fd")
        u2 = board_service.create_user("U2", "#f9a8d4")
        t1 = board_service.create_task("T1", assigned_to=u1.id, tags=["x"])
        t2 = board_service.create_task("T2", assigned_to=u2.id)

        assert board_service.delete_user(u1.id) is True

        assert board_service.get_user(u1.id) is None
        assert len(board_service.users) == 1
        assert board_service.get_task(t1.id) == t1.model_copy(update={"assigned_to": None})
        assert board_service.get_task(t2.id).assigned_to == u2.id

    def test_delete_unknown_user_is_noop(self, board_service: BoardService):
        board_service.create_user("Ada", "#93c5fd")
        before = board_service.snapshot
        assert board_service.delete_user("ghost") is False
        assert board_service.snapshot == before


class TestPersistence:
    def test_every_change_is_saved(self, board_service: BoardService, repo):
        task = board_service.create_task("Task")
        assert repo.load().get_task(task.id) == task

        board_service.move_task(task.id, TaskStatus.DONE)
        assert repo.load().get_task(task.id).status == TaskStatus.DONE

    def test_failed_save_keeps_previous_state(self):
        repo = FailingRepository()
        service = BoardService(repo, clock=FakeClock())
        task = service.create_task("Existing")
        before = service.snapshot
        repo.fail = True

        with pytest.raises(BoardStorageError):
            service.create_task("Not saved")
        with pytest.raises(BoardStorageError):
            service.move_task(task.id, TaskStatus.DONE)

        assert service.snapshot is before
        assert repo.load() == before
        assert service.get_task(task.id).status == TaskStatus.TODO

    def test_default_snapshot_has_single_active_list(self):
        snapshot = default_snapshot()
        assert len(snapshot.lists) == 1
        assert snapshot.active_list_id == snapshot.lists[0].id
