"""Connector and service exceptions.

Connectors raise these; the services catch them and degrade to
default data instead of surfacing them to callers.
"""


class InjuryInfoError(Exception):
    """Base exception for all injury info errors."""

    def __init__(self, message: str = "Injury info error"):
        self.message = message
        super().__init__(self.message)


class ConnectorNotConfiguredError(InjuryInfoError):
    """Raised when a connector is built without its required credentials."""

    def __init__(self, connector: str, missing: str):
        self.connector = connector
        self.missing = missing
        super().__init__(f"{connector} connector requires {missing}")


class SpreadsheetError(InjuryInfoError):
    """Raised when a spreadsheet cannot be read."""

    def __init__(
        self,
        message: str = "Spreadsheet request failed",
        sheet_name: str | None = None,
        status_code: int | None = None,
    ):
        self.sheet_name = sheet_name
        self.status_code = status_code
        if sheet_name:
            message = f"{message} (sheet: {sheet_name})"
        super().__init__(message)


class ColumnNotFoundError(SpreadsheetError):
    """Raised when a sheet search targets a column that does not exist."""

    def __init__(self, column: str, sheet_name: str):
        self.column = column
        super().__init__(f"Column {column!r} not found", sheet_name=sheet_name)
