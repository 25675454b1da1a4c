# simlogbook/constants/navdata.py

class NavdataConstants:
    """Navigation database locations and schema names."""

    DATABASES = {
        "MSFS": "navdata/msfs.sqlite",
        "XP12": "navdata/xp12.sqlite",
    }
    AIRPORT_TABLE = "airport"
    SPATIAL_INDEX = "airport_coords"


class LogbookConstants:
    """Logbook output format."""

    DEFAULT_PATH = "logbook.csv"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
    CSV_HEADER = (
        "Aircraft Name",
        "Aircraft ICAO",
        "Registration",
        "Taxi Time",
        "Departure ICAO",
        "Departure Time",
        "Arrival ICAO",
        "Arrival Time",
        "Shutdown Time",
    )
