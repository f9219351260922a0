import numpy as np
import pandas as pd
from datetime import date, timedelta

from routing.route_line import MOZ_ROUTES

def generate_mock_roster(num_drivers=40, days=7, start_date=None, output_file="mock_roster.csv"):
    """
    Generates a driver roster snapshot (one row per driver-day) for exercising the matcher.
    Each driver works a random subset of the next `days` days and runs a random
    stretch of the Maputo -> Vilanculos line, northbound or southbound.
    """
    start_date = start_date or date.today()
    last_stop = len(MOZ_ROUTES) - 1

    data = []
    for driver_index in range(num_drivers):
        driver_id = f"DRV-{str(driver_index+1).zfill(3)}"

        # 85% approved, 15% flagged as priority
        is_approved = bool(np.random.random() < 0.85)
        is_priority = bool(np.random.random() < 0.15)

        working_days = np.random.choice(days, size=np.random.randint(1, days + 1), replace=False)
        for day_offset in sorted(working_days):
            start_idx, end_idx = np.random.choice(last_stop + 1, size=2, replace=False)

            data.append({
                "driver_id": driver_id,
                "name": f"Motorista {driver_index+1}",
                "is_approved": is_approved,
                "is_priority": is_priority,
                "date": (start_date + timedelta(days=int(day_offset))).isoformat(),
                "route_start": MOZ_ROUTES[start_idx],
                "route_end": MOZ_ROUTES[end_idx],
                "departure_time": f"{np.random.randint(4, 12):02d}:00",
            })

    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"✅ Generated {num_drivers} drivers ({len(df)} driver-days) into '{output_file}'")

    print("\nDrivers per day:")
    counts = df.groupby("date")["driver_id"].nunique()
    for day, count in counts.items():
        print(f"  {day}: {count} drivers")

if __name__ == "__main__":
    generate_mock_roster()
