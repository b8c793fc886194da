from .database_names import database_to_csv_name, database_to_repository_name

__all__ = [
    "database_to_csv_name",
    "database_to_repository_name",
]
