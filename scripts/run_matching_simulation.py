import logging
import os
import sys
from datetime import date

import numpy as np

from dispatch.dispatcher import Dispatcher
from drivers.roster import load_roster
from orders.models import PackageRequest, TripRequest
from pricing.fares import calculate_price, trip_fare
from routing.route_line import default_route_line

def random_requests(route_line, travel_date, count=10):
    """Random trip requests between two distinct stops on the line."""
    trips = []
    for i in range(count):
        origin_idx, destination_idx = np.random.choice(len(route_line), size=2, replace=False)
        origin = route_line.stops[origin_idx]
        destination = route_line.stops[destination_idx]
        seats = int(np.random.randint(1, 4))
        trips.append(
            TripRequest.new(
                passenger_id=f"p_{i+1}",
                origin=origin,
                destination=destination,
                date=travel_date,
                seats=seats,
                price=trip_fare(origin, destination, seats, route_line) or 0,
            )
        )
    return trips

def run_simulation(roster_file="mock_roster.csv", travel_date=None):
    print("=== STARTING MATCHING SIMULATION ===")

    # Resolve the roster next to the repository root when a relative path is given.
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    roster_path = roster_file if os.path.isabs(roster_file) else os.path.join(base_dir, roster_file)

    route_line = default_route_line()
    drivers = load_roster(roster_path)
    travel_date = travel_date or date.today().isoformat()
    print(f"Loaded {len(drivers)} drivers. Route line: {route_line}\n")

    dispatcher = Dispatcher(route_line=route_line)

    print(f"--- Trips on {travel_date} ---")
    served = 0
    trips = random_requests(route_line, travel_date)
    for trip in trips:
        candidates = dispatcher.candidates_for_trip(trip, drivers)
        ranked = [f"{d.id}{'★' if d.is_priority else ''}" for d in candidates]
        print(f"{trip.origin} -> {trip.destination} x{trip.seats} ({trip.price} MZN): {ranked or 'no drivers'}")
        if candidates:
            served += 1

    print("\n--- Packages (any day) ---")
    package = PackageRequest.new("s_1", route_line.stops[-1], route_line.stops[0])
    candidates = dispatcher.candidates_for_package(package, drivers)
    print(f"{package.origin} -> {package.destination} (ref. {calculate_price(package.origin, package.destination, route_line)} MZN): "
          f"{[d.id for d in candidates] or 'no drivers'}")

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Trips with at least one driver: {served} / {len(trips)}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_simulation(*sys.argv[1:])
