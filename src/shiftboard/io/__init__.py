# shiftboard/io - Persistence and export
from .csv_export import export_month_to_csv, month_to_dataframe
from .excel_export import export_month_to_excel
from .persistence import (
    JsonFileStorage,
    MemoryStorage,
    SqliteStorage,
    StateStorage,
    StoredState,
    make_storage,
)

__all__ = [
    "export_month_to_csv", "month_to_dataframe", "export_month_to_excel",
    "StateStorage", "StoredState", "MemoryStorage", "JsonFileStorage", "SqliteStorage",
    "make_storage",
]
