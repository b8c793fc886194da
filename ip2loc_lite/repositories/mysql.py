from ip2loc_lite.repositories._base import IP2LocRepository, StorageEngine

IP_RANGE_COLUMNS = ("ip_from", "ip_to")
COUNTRY_COLUMNS = ("country_code", "country_name")
CITY_COLUMNS = ("region_name", "city_name")
COORDINATE_COLUMNS = ("latitude", "longitude")


class MysqlRepository(IP2LocRepository):
    engine = StorageEngine.MYSQL


class DB1(MysqlRepository):
    table_name = "ip2location_db1"
    columns = IP_RANGE_COLUMNS + COUNTRY_COLUMNS


class DB3(MysqlRepository):
    table_name = "ip2location_db3"
    columns = IP_RANGE_COLUMNS + COUNTRY_COLUMNS + CITY_COLUMNS


class DB5(MysqlRepository):
    table_name = "ip2location_db5"
    columns = IP_RANGE_COLUMNS + COUNTRY_COLUMNS + CITY_COLUMNS + COORDINATE_COLUMNS


class DB9(MysqlRepository):
    table_name = "ip2location_db9"
    columns = (
        IP_RANGE_COLUMNS
        + COUNTRY_COLUMNS
        + CITY_COLUMNS
        + COORDINATE_COLUMNS
        + ("zip_code",)
    )


class DB11(MysqlRepository):
    table_name = "ip2location_db11"
    columns = (
        IP_RANGE_COLUMNS
        + COUNTRY_COLUMNS
        + CITY_COLUMNS
        + COORDINATE_COLUMNS
        + ("zip_code", "time_zone")
    )


repositories: dict[str, type[MysqlRepository]] = {
    "DB1": DB1,
    "DB3": DB3,
    "DB5": DB5,
    "DB9": DB9,
    "DB11": DB11,
}
