from domain.todo.exceptions.todo_exceptions import TodoBackendError, TodoError, TodoTextEmptyError

__all__ = ["TodoBackendError", "TodoError", "TodoTextEmptyError"]
