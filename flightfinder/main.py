"""Main entry point for FlightFinder"""
import logging
import sys

import click
from pydantic import ValidationError

from flightfinder.exceptions import FlightFinderError
from flightfinder.models.config import Config
from flightfinder.models.itinerary import SearchResult
from flightfinder.processing.pipeline import run_search_pipeline
from flightfinder.services.flight_store import FlightStore
from flightfinder.utils.output import write_result
from flightfinder.utils.time_utils import format_duration

logger = logging.getLogger(__name__)

dataset_option = click.option(
    '--dataset', 'dataset_input', required=True, envvar='FLIGHTS_DATA_PATH',
    help='Path to the flights JSON dataset (or set FLIGHTS_DATA_PATH)'
)


def configure_logging(debug: bool = False):
    """Configure logging level based on debug flag"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True  # Override any existing configuration
    )


@click.group()
@click.option('-d', '--debug', is_flag=True,
              help='Enable debug logging for detailed output')
def main(debug: bool):
    """
    FlightFinder - search direct, one-stop and two-stop flight itineraries.

    Durations and layovers are computed in absolute time across timezones, and
    connections follow domestic (45 min) and international (90 min) minimum
    layovers with a 6 hour maximum.
    """
    configure_logging(debug=debug)


@main.command()
@dataset_option
@click.option('--origin', required=True, help='Origin airport code (e.g. JFK)')
@click.option('--destination', required=True, help='Destination airport code (e.g. LAX)')
@click.option('--date', 'departure_date', required=True, help='Departure date (YYYY-MM-DD format)')
@click.option('--output', required=False,
              help='Output file path (CSV or JSON based on extension)')
def search(dataset_input: str, origin: str, destination: str, departure_date: str, output: str):
    """Search itineraries between two airports on a date."""
    try:
        config = Config(
            dataset_input=dataset_input,
            output_path=output,
            origin=origin,
            destination=destination,
            date=departure_date
        )
        result = run_search_pipeline(config)

        if config.output_path:
            write_result(result, config.output_path)
            logger.info(f"Result saved to {config.output_path}")

        display_search_summary(result)

    except (FlightFinderError, FileNotFoundError, ValidationError) as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)


@main.command()
@dataset_option
def airports(dataset_input: str):
    """List airports in the dataset."""
    store = load_store_or_exit(dataset_input)
    all_airports = store.all_airports()
    for airport in all_airports:
        click.echo(f"{airport.code}  {airport.name:40s}  {airport.city}, {airport.country}  ({airport.timezone})")
    click.echo(f"Total: {len(all_airports)} airports")


@main.command()
@dataset_option
def stats(dataset_input: str):
    """Show dataset statistics."""
    store = load_store_or_exit(dataset_input)
    store_stats = store.stats()
    click.echo(f"Total airports: {store_stats['total_airports']}")
    click.echo(f"Total flights: {store_stats['total_flights']}")
    click.echo(f"Airport codes: {', '.join(store_stats['airports'])}")


def load_store_or_exit(dataset_input: str) -> FlightStore:
    """Load the dataset, exiting with status 1 if it is missing or invalid"""
    try:
        return FlightStore.from_file(dataset_input)
    except (FlightFinderError, FileNotFoundError) as e:
        logger.error(f"Could not load dataset: {e}")
        sys.exit(1)


def display_search_summary(result: SearchResult) -> None:
    """
    Display summary of search results to console.

    Args:
        result: Search result
    """
    params = result.search_params
    logger.info(f"Total itineraries: {result.total_results}")

    if not result.itineraries:
        click.echo(f"No itineraries found from {params.origin} to {params.destination} on {params.date}")
        return

    click.echo(f"\n{'='*60}")
    click.echo(f"{params.origin} -> {params.destination} on {params.date}: top itineraries")
    click.echo(f"{'='*60}")
    for i, itinerary in enumerate(result.itineraries[:10], 1):
        segments = itinerary.segments
        route = '-'.join([segments[0].origin] + [segment.destination for segment in segments])
        stops = 'Direct' if itinerary.stops == 0 else f"{itinerary.stops} stop{'s' if itinerary.stops > 1 else ''}"
        flights = ' '.join(segment.flight_number for segment in segments)
        click.echo(
            f"{i:2d}. {route:15s}  |  {stops:7s}  |  {format_duration(itinerary.total_duration):8s}  |  "
            f"${itinerary.total_price:8.2f}  |  {flights}"
        )
    click.echo(f"{'='*60}\n")


if __name__ == '__main__':
    main()
