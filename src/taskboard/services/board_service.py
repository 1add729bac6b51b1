"""Service owning the board state: tasks, lists and users."""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable, Iterable
from datetime import datetime

from ..models import (
    STATUS_ORDER,
    Board,
    BoardSnapshot,
    Priority,
    SortOrder,
    Task,
    TaskStatus,
    TodoList,
    User,
    sort_tasks,
)
from ..models.palette import LIST_COLORS, LIST_ICONS
from ..repositories import BoardRepositoryProtocol
from ..utils import add_tag, dedupe_tags, generate_id, now_utc, remove_tag
from .seed import default_list, default_snapshot

logger = logging.getLogger(__name__)


def _as_status(value: TaskStatus | str) -> TaskStatus | None:
    try:
        return TaskStatus(value)
    except ValueError:
        return None


def _as_priority(value: Priority | str) -> Priority | None:
    try:
        return Priority(value)
    except ValueError:
        return None


class BoardService:
    """
    Sole owner of the board's tasks, lists and users.

    Every operation either applies completely or is a no-op; invalid input
    (blank titles, unknown ids) is absorbed rather than raised. Each change
    builds a new ``BoardSnapshot``, swaps it in under a lock and hands it to
    the repository, so concurrent callers are serialized.

    Referential rules enforced here:
    - deleting a list deletes its tasks
    - deleting a user unassigns its tasks
    - the last remaining list cannot be deleted
    """

    def __init__(
        self,
        repository: BoardRepositoryProtocol,
        initial_state: Callable[[], BoardSnapshot] = default_snapshot,
        clock: Callable[[], datetime] = now_utc,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the service and load the board.

        Args:
            repository: Storage backend for board snapshots
            initial_state: Builds the board when the repository is empty
            clock: Source of task creation timestamps
            rng: Random generator for list icon/color selection
        """
        self.repository = repository
        self._initial_state = initial_state
        self._clock = clock
        self._rng = rng or random.Random()
        self._lock = threading.RLock()
        self._snapshot = self._load()

    # --- State access ---

    @property
    def snapshot(self) -> BoardSnapshot:
        """The current board state."""
        with self._lock:
            return self._snapshot

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self.snapshot.tasks

    @property
    def lists(self) -> tuple[TodoList, ...]:
        return self.snapshot.lists

    @property
    def users(self) -> tuple[User, ...]:
        return self.snapshot.users

    @property
    def active_list_id(self) -> str | None:
        return self.snapshot.active_list_id

    @property
    def active_list(self) -> TodoList | None:
        snapshot = self.snapshot
        return snapshot.get_list(snapshot.active_list_id)

    def get_task(self, task_id: str) -> Task | None:
        return self.snapshot.get_task(task_id)

    def get_list(self, list_id: str) -> TodoList | None:
        return self.snapshot.get_list(list_id)

    def get_user(self, user_id: str | None) -> User | None:
        return self.snapshot.get_user(user_id)

    def reload(self) -> None:
        """Reload board state from the repository."""
        with self._lock:
            self._snapshot = self._load()

    # --- Derived views ---

    def get_active_tasks(self) -> list[Task]:
        """Tasks of the active list, in stored order."""
        snapshot = self.snapshot
        return [t for t in snapshot.tasks if t.list_id == snapshot.active_list_id]

    def get_tasks_by_status(
        self, status: TaskStatus | str, sort_order: SortOrder = SortOrder.NEWEST
    ) -> list[Task]:
        """Tasks of the active list in one column, sorted by creation time."""
        target = _as_status(status)
        return sort_tasks([t for t in self.get_active_tasks() if t.status == target], sort_order)

    def load_board(self, sort_order: SortOrder = SortOrder.NEWEST) -> Board:
        """Build the active list's board with tasks grouped by status."""
        return Board.from_tasks(self.get_active_tasks(), self.active_list, sort_order)

    # --- Task operations ---

    def create_task(
        self,
        title: str,
        description: str = "",
        status: TaskStatus | str = TaskStatus.TODO,
        priority: Priority | str = Priority.MEDIUM,
        assigned_to: str | None = None,
        tags: Iterable[str] = (),
    ) -> Task | None:
        """
        Create a task in the active list.

        Returns None (and changes nothing) when the title is blank, the
        status or priority is unknown, or the active list does not exist.
        An assignee that is not a known user is dropped.
        """
        title = title.strip()
        task_status = _as_status(status)
        task_priority = _as_priority(priority)
        if not title or task_status is None or task_priority is None:
            logger.debug("create_task: rejected input (title=%r, status=%r)", title, status)
            return None

        with self._lock:
            snapshot = self._snapshot
            if not snapshot.has_list(snapshot.active_list_id):
                logger.debug("create_task: active list missing: %s", snapshot.active_list_id)
                return None

            task = Task(
                id=generate_id(),
                title=title,
                description=description.strip(),
                status=task_status,
                priority=task_priority,
                tags=tuple(dedupe_tags(tags)),
                assigned_to=assigned_to if snapshot.has_user(assigned_to) else None,
                created_at=self._clock(),
                list_id=snapshot.active_list_id,
            )
            self._commit(snapshot.model_copy(update={"tasks": (*snapshot.tasks, task)}))

        logger.info("Task created: %s (status=%s, list=%s)", task.id, task.status.value, task.list_id)
        return task

    def update_task(self, task: Task) -> Task | None:
        """
        Replace the stored task with the same id.

        The whole record is replaced except ``created_at`` and ``list_id``,
        which stay as they were at creation. Unknown ids and blank titles
        are no-ops.
        """
        if not task.title.strip():
            logger.debug("update_task: blank title: %s", task.id)
            return None

        with self._lock:
            snapshot = self._snapshot
            current = snapshot.get_task(task.id)
            if current is None:
                logger.debug("update_task: task not found: %s", task.id)
                return None

            replacement = task.model_copy(
                update={
                    "created_at": current.created_at,
                    "list_id": current.list_id,
                    "assigned_to": task.assigned_to if snapshot.has_user(task.assigned_to) else None,
                }
            )
            self._replace_task(snapshot, replacement)

        logger.info("Task updated: %s", task.id)
        return replacement

    def delete_task(self, task_id: str) -> bool:
        """Delete a task by ID. Returns False if it did not exist."""
        with self._lock:
            snapshot = self._snapshot
            if snapshot.get_task(task_id) is None:
                logger.debug("delete_task: task not found: %s", task_id)
                return False
            tasks = tuple(t for t in snapshot.tasks if t.id != task_id)
            self._commit(snapshot.model_copy(update={"tasks": tasks}))

        logger.info("Task deleted: %s", task_id)
        return True

    def move_task(self, task_id: str, to_status: TaskStatus | str) -> Task | None:
        """
        Move a task to another column.

        Only the status changes. Any status can move to any other.
        """
        target = _as_status(to_status)
        if target is None:
            logger.debug("move_task: unknown status: %r", to_status)
            return None

        with self._lock:
            snapshot = self._snapshot
            task = snapshot.get_task(task_id)
            if task is None:
                logger.debug("move_task: task not found: %s", task_id)
                return None
            if task.status == target:
                return task

            old_status = task.status
            task = task.model_copy(update={"status": target})
            self._replace_task(snapshot, task)

        logger.info("Task moved: %s (%s -> %s)", task_id, old_status.value, target.value)
        return task

    def move_task_left(self, task_id: str) -> Task | None:
        """Move task to the previous column (e.g., in-progress -> todo)."""
        return self._move_by(task_id, -1)

    def move_task_right(self, task_id: str) -> Task | None:
        """Move task to the next column (e.g., todo -> in-progress)."""
        return self._move_by(task_id, 1)

    def cycle_task_status(self, task_id: str) -> Task | None:
        """Advance a task one column, wrapping from done back to todo."""
        task = self.get_task(task_id)
        if task is None:
            return None
        idx = STATUS_ORDER.index(task.status)
        return self.move_task(task_id, STATUS_ORDER[(idx + 1) % len(STATUS_ORDER)])

    def add_task_tag(self, task_id: str, value: str) -> Task | None:
        """Add a tag to a stored task. Blank or duplicate tags change nothing."""
        with self._lock:
            task = self._snapshot.get_task(task_id)
            if task is None:
                return None
            tags = tuple(add_tag(task.tags, value))
            if tags == task.tags:
                return task
            return self.update_task(task.model_copy(update={"tags": tags}))

    def remove_task_tag(self, task_id: str, tag: str) -> Task | None:
        """Remove a tag from a stored task."""
        with self._lock:
            task = self._snapshot.get_task(task_id)
            if task is None:
                return None
            tags = tuple(remove_tag(task.tags, tag))
            if tags == task.tags:
                return task
            return self.update_task(task.model_copy(update={"tags": tags}))

    # --- List operations ---

    def create_list(self, name: str) -> TodoList:
        """
        Create a list and make it the active one.

        The name is used as given; callers reject blank names. Icon and
        color are drawn at random from the fixed palettes.
        """
        with self._lock:
            snapshot = self._snapshot
            todo_list = TodoList(
                id=generate_id(),
                name=name,
                icon=self._rng.choice(LIST_ICONS),
                color=self._rng.choice(LIST_COLORS),
            )
            self._commit(
                snapshot.model_copy(
                    update={
                        "lists": (*snapshot.lists, todo_list),
                        "active_list_id": todo_list.id,
                    }
                )
            )

        logger.info("List created: %s (%s)", todo_list.id, todo_list.name)
        return todo_list

    def delete_list(self, list_id: str) -> bool:
        """
        Delete a list together with all of its tasks.

        Refused while only one list remains. If the deleted list was
        active, the first remaining list becomes active.
        """
        with self._lock:
            snapshot = self._snapshot
            if len(snapshot.lists) <= 1:
                logger.debug("delete_list: refusing to delete the last list")
                return False
            if not snapshot.has_list(list_id):
                logger.debug("delete_list: list not found: %s", list_id)
                return False

            lists = tuple(lst for lst in snapshot.lists if lst.id != list_id)
            tasks = tuple(t for t in snapshot.tasks if t.list_id != list_id)
            active = snapshot.active_list_id
            if active == list_id:
                active = lists[0].id
            self._commit(
                snapshot.model_copy(update={"lists": lists, "tasks": tasks, "active_list_id": active})
            )

        logger.info(
            "List deleted: %s (%d tasks removed)", list_id, len(snapshot.tasks) - len(tasks)
        )
        return True

    def select_list(self, list_id: str) -> None:
        """Make a list active. Unknown ids are accepted and show no tasks."""
        with self._lock:
            snapshot = self._snapshot
            if snapshot.active_list_id == list_id:
                return
            self._commit(snapshot.model_copy(update={"active_list_id": list_id}))
        logger.debug("List selected: %s", list_id)

    def select_adjacent_list(self, delta: int) -> TodoList | None:
        """Select the list ``delta`` positions away from the active one, wrapping."""
        with self._lock:
            lists = self._snapshot.lists
            if not lists:
                return None
            ids = [lst.id for lst in lists]
            try:
                idx = (ids.index(self._snapshot.active_list_id) + delta) % len(ids)
            except ValueError:
                idx = 0
            self.select_list(ids[idx])
            return lists[idx]

    # --- User operations ---

    def create_user(self, name: str, color: str) -> User:
        """Add a user."""
        with self._lock:
            snapshot = self._snapshot
            user = User(id=generate_id(), name=name, color=color)
            self._commit(snapshot.model_copy(update={"users": (*snapshot.users, user)}))

        logger.info("User created: %s (%s)", user.id, user.name)
        return user

    def update_user(self, user: User) -> User | None:
        """Replace the stored user with the same id."""
        with self._lock:
            snapshot = self._snapshot
            if not snapshot.has_user(user.id):
                logger.debug("update_user: user not found: %s", user.id)
                return None
            users = tuple(user if u.id == user.id else u for u in snapshot.users)
            self._commit(snapshot.model_copy(update={"users": users}))

        logger.info("User updated: %s", user.id)
        return user

    def delete_user(self, user_id: str) -> bool:
        """Delete a user and unassign every task assigned to them."""
        with self._lock:
            snapshot = self._snapshot
            if not snapshot.has_user(user_id):
                logger.debug("delete_user: user not found: %s", user_id)
                return False

            users = tuple(u for u in snapshot.users if u.id != user_id)
            unassigned = 0
            tasks = []
            for task in snapshot.tasks:
                if task.assigned_to == user_id:
                    task = task.model_copy(update={"assigned_to": None})
                    unassigned += 1
                tasks.append(task)
            self._commit(snapshot.model_copy(update={"users": users, "tasks": tuple(tasks)}))

        logger.info("User deleted: %s (%d tasks unassigned)", user_id, unassigned)
        return True

    # --- Private Methods ---

    def _load(self) -> BoardSnapshot:
        """Load from the repository, seeding it when empty."""
        snapshot = self.repository.load()
        if snapshot is None:
            snapshot = self._initial_state()
            logger.info("Seeding new board with %d lists", len(snapshot.lists))
            snapshot = self._ensure_list(snapshot)
            self.repository.save(snapshot)
            return snapshot

        ensured = self._ensure_list(snapshot)
        if ensured is not snapshot:
            self.repository.save(ensured)
        return ensured

    def _ensure_list(self, snapshot: BoardSnapshot) -> BoardSnapshot:
        """Guarantee at least one list, an active selection and valid task references.

        Tasks whose list is gone are dropped and assignees that name a
        missing user are cleared. The input is returned unchanged when
        nothing needed repair.
        """
        if not snapshot.lists:
            todo_list = default_list()
            logger.info("Board has no lists, adding %r", todo_list.name)
            snapshot = snapshot.model_copy(update={"lists": (todo_list,), "active_list_id": todo_list.id})
        elif snapshot.active_list_id is None:
            snapshot = snapshot.model_copy(update={"active_list_id": snapshot.lists[0].id})

        list_ids = {lst.id for lst in snapshot.lists}
        user_ids = {user.id for user in snapshot.users}
        tasks: list[Task] = []
        dropped = cleared = 0
        for task in snapshot.tasks:
            if task.list_id not in list_ids:
                dropped += 1
                continue
            if task.assigned_to is not None and task.assigned_to not in user_ids:
                task = task.model_copy(update={"assigned_to": None})
                cleared += 1
            tasks.append(task)

        if dropped or cleared:
            logger.warning(
                "Repaired board: dropped %d orphan task(s), cleared %d unknown assignee(s)",
                dropped,
                cleared,
            )
            snapshot = snapshot.model_copy(update={"tasks": tuple(tasks)})
        return snapshot

    def _replace_task(self, snapshot: BoardSnapshot, task: Task) -> None:
        tasks = tuple(task if t.id == task.id else t for t in snapshot.tasks)
        self._commit(snapshot.model_copy(update={"tasks": tasks}))

    def _move_by(self, task_id: str, delta: int) -> Task | None:
        task = self.get_task(task_id)
        if task is None:
            return None
        idx = STATUS_ORDER.index(task.status) + delta
        if idx < 0 or idx >= len(STATUS_ORDER):
            return task  # Already at the edge column
        return self.move_task(task_id, STATUS_ORDER[idx])

    def _commit(self, snapshot: BoardSnapshot) -> None:
        """Persist the new state, then swap it in."""
        self.repository.save(snapshot)
        self._snapshot = snapshot
