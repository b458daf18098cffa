from __future__ import annotations


class ScreenError(ValueError):
    def __init__(self, message: str, details: list[str] | None = None) -> None:
        self.details = details or []
        suffix = "\n".join(self.details)
        super().__init__(f"{message}\n{suffix}" if suffix else message)


class ValidationError(ScreenError):
    def __init__(self, field: str, value: object, allowed: tuple[str, ...]) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        label = field.replace("_", " ")
        super().__init__(f"'{value}' is not a valid {label}; expected one of: {', '.join(allowed)}.")


class UnknownStatusError(ScreenError):
    def __init__(self, status: object, item_id: str | None = None) -> None:
        self.status = status
        self.item_id = item_id
        where = f" on gear item '{item_id}'" if item_id else ""
        super().__init__(f"Unknown gear status '{status}'{where}.")


class MissingDataError(ScreenError):
    pass


class ContentValidationError(ScreenError):
    pass
