from dataclasses import dataclass, field
from typing import Protocol

SheetRow = dict[str, str]


@dataclass
class SheetData:
    """Rows of one sheet keyed by the header row."""

    headers: list[str] = field(default_factory=list)
    data: list[SheetRow] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: list[list[str]]) -> "SheetData":
        """Build from raw values where the first row holds the headers."""
        if not values:
            return cls()

        headers, *rows = values
        data = [
            {
                header: (row[i] if i < len(row) else "") or ""
                for i, header in enumerate(headers)
            }
            for row in rows
        ]
        return cls(headers=list(headers), data=data)


@dataclass
class SheetSearchResult:
    results: list[SheetRow]
    total: int
    query: str
    column: str


class SpreadsheetPort(Protocol):
    """Port for spreadsheet backends.

    ``read_sheet`` returns an empty SheetData for a sheet without rows and
    raises SpreadsheetError when the sheet cannot be read at all.
    """

    async def read_sheet(self, sheet_name: str) -> SheetData:
        ...
