"""Output utilities for writing search results"""
import csv
import json
from pathlib import Path

from flightfinder.models.itinerary import SearchResult

import logging

logger = logging.getLogger(__name__)

CSV_HEADER = [
    'Id',
    'Stops',
    'Route',
    'Flights',
    'Departure',
    'Arrival',
    'Total Duration',
    'Total Price'
]


def write_result(result: SearchResult, output_path: str) -> None:
    """Write result as JSON or CSV depending on the file extension"""
    if output_path.lower().endswith('.json'):
        write_result_json(result, output_path)
    else:
        write_result_csv(result, output_path)


def write_result_json(result: SearchResult, output_path: str) -> None:
    """
    Write the full search result to a JSON file

    Args:
        result: Search result
        output_path: Output file path
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(result.model_dump(mode='json', by_alias=True), f, indent=2)

    logger.debug(f"Result written to {output_path} with {result.total_results} itineraries")


def write_result_csv(result: SearchResult, output_path: str) -> None:
    """
    Write one summary row per itinerary to a CSV file

    Args:
        result: Search result
        output_path: Output file path
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)

        for itinerary in result.itineraries:
            segments = itinerary.segments
            route = '-'.join([segments[0].origin] + [segment.destination for segment in segments])
            writer.writerow([
                itinerary.id,
                itinerary.stops,
                route,
                ' '.join(segment.flight_number for segment in segments),
                segments[0].departure_time,
                segments[-1].arrival_time,
                itinerary.total_duration,
                f"{itinerary.total_price:.2f}"
            ])

    logger.debug(f"Result written to {output_path} with {result.total_results} rows")
