"""Error raised when a class is not declared in the parsed source."""


class ClassNotFoundError(LookupError):
    """No class with the requested name exists in the source tree."""

    def __init__(self, class_name: str, source: str | None = None) -> None:
        """Record the missing class name and, when known, the source it came from."""
        self.class_name = class_name
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Class not found{where}: {class_name}")
