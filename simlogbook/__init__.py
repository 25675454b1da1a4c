"""
simlogbook - Flight simulator logbook

Turns live simulator telemetry into flight lifecycle events and writes
completed flights, with their departure and arrival airports, to a logbook.
"""

__version__ = "0.1.0"
