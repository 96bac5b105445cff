class FileSelectionControl:
    """
    Mirrors a single-file picker.

    Choosing the value the control already holds does not count as a change,
    so a cleared selection must reset the control before the same file can be
    chosen again.
    """

    def __init__(self) -> None:
        self.value: str = ""

    def select(self, value: str) -> bool:
        """Store value and report whether the selection changed."""
        if not value or value == self.value:
            return False
        self.value = value
        return True

    def reset(self) -> None:
        self.value = ""
