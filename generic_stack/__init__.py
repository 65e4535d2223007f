from generic_stack.errors import StackError, StaleViewError
from generic_stack.stack import Stack, TopView

__all__ = ["Stack", "TopView", "StackError", "StaleViewError"]
