"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .confirm_modal import ConfirmModal
from .list_name_modal import ListNameModal
from .list_picker_modal import ListPickerModal
from .list_sidebar import ListSidebar
from .task_card import TaskCard
from .task_form_modal import TaskFormModal
from .user_management_modal import UserManagementModal

__all__ = [
    "ConfirmModal",
    "EmptyColumnMessage",
    "KanbanColumn",
    "ListNameModal",
    "ListPickerModal",
    "ListSidebar",
    "TaskCard",
    "TaskFormModal",
    "UserManagementModal",
]
