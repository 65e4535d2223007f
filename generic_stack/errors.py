class StackError(RuntimeError):
    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)

    def __str__(self) -> str:
        return str(self.args[0])


class StaleViewError(StackError):
    def __init__(self, created_at: int, current: int) -> None:
        super().__init__(
            f"Error: view of the top element is stale (stack was modified, "
            f"version {created_at} -> {current})",
            created_at,
            current,
        )
        self.created_at = created_at
        self.current = current
