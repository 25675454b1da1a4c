#!/usr/bin/env python3
# simlogbook/examples/E020_monitor_connection.py

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from simlogbook.sim_connection import MessageKind, SimConnectionError, connect_sim


def main():
    sim = sys.argv[1] if len(sys.argv) > 1 else "XP12"
    print(f"Connecting to {sim}...")
    try:
        connection = connect_sim(sim)
    except (SimConnectionError, OSError) as e:
        print(f"Connection failed: {e}")
        return

    print("Monitoring telemetry. Press Ctrl+C to stop...")
    try:
        while True:
            message = connection.next_message()
            if message.kind is MessageKind.WAITING:
                continue
            if message.kind is MessageKind.QUIT:
                print("Simulator closed the connection.")
                break
            if message.kind is MessageKind.TELEMETRY:
                aircraft = message.aircraft
                print("\n=== TELEMETRY ===")
                print(f"Aircraft: {aircraft.title} ({aircraft.icao}, {aircraft.registration})")
                print(f"Position: {aircraft.position}")
                print(f"Engines: {['ON' if on else 'OFF' for on in aircraft.engines_on]}")
                print(f"On Ground: {aircraft.on_ground}")
            else:
                print(f"Message: {message.kind.name}")
    except KeyboardInterrupt:
        print("\nMonitoring stopped.")
    finally:
        connection.close()


if __name__ == "__main__":
    main()
