"""
Errors raised by the list model. The controller turns them into alerts.
"""


class ShoppingListError(ValueError):
    """Base class for rejected list operations."""


class EmptyValue(ShoppingListError):
    def __init__(self) -> None:
        super().__init__("Value is empty.")


class DuplicateValue(ShoppingListError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Item '{value}' already exists.")
        self.value = value


class NotFound(ShoppingListError):
    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Item with id '{entry_id}' not found.")
        self.entry_id = entry_id
