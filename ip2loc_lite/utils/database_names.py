LITE_TOKEN = "LITE"
CSV_NAME_PREFIX = "IP2LOCATION-LITE-"


def database_to_repository_name(database: str) -> str:
    return database.replace(LITE_TOKEN, "")


def database_to_csv_name(database: str) -> str:
    return f"{CSV_NAME_PREFIX}{database_to_repository_name(database)}.CSV"
