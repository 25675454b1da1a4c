"""simlogbook/constants/simconnect.py"""

class SimConnectRecv:
    """SIMCONNECT_RECV_ID values the logbook reacts to."""
    OPEN = 2
    QUIT = 3
    SIMOBJECT_DATA = 8


class SimVars:
    #------------------------------------------------------------------------------
    # USER AIRCRAFT DATA DEFINITION
    # Order matters: the raw record is laid out exactly in this order.
    # (name, units, size in bytes)
    #------------------------------------------------------------------------------
    TITLE = ("TITLE", "", 128)
    ENG_COMBUSTION = (
        ("ENG COMBUSTION:1", "Boolean", 8),
        ("ENG COMBUSTION:2", "Boolean", 8),
        ("ENG COMBUSTION:3", "Boolean", 8),
        ("ENG COMBUSTION:4", "Boolean", 8),
    )
    LATITUDE = ("PLANE LATITUDE", "Radians", 8)
    LONGITUDE = ("PLANE LONGITUDE", "Radians", 8)
    ON_GROUND = ("SIM ON GROUND", "Boolean", 8)
    # may or may not contain the registration
    ATC_ID = ("ATC ID", "", 32)

    @classmethod
    def data_definition(cls):
        """Variables in the order the binding must register them."""
        return [cls.TITLE, *cls.ENG_COMBUSTION, cls.LATITUDE, cls.LONGITUDE, cls.ON_GROUND, cls.ATC_ID]
