"""Search pipeline: load dataset, build store, run search"""
from flightfinder.models.config import Config
from flightfinder.models.itinerary import SearchResult
from flightfinder.processing.search import ItinerarySearch
from flightfinder.services.flight_store import FlightStore

import logging

logger = logging.getLogger(__name__)


def run_search_pipeline(config: Config) -> SearchResult:
    """
    Execute a complete flight search.

    Steps:
    1. Load the dataset into a FlightStore
    2. Search direct, one-stop and two-stop itineraries
    3. Return the sorted result

    Args:
        config: Application configuration

    Returns:
        SearchResult sorted by total duration
    """
    logger.info(f"Searching {config.origin} -> {config.destination} on {config.date}")
    logger.debug(f"Dataset: {config.dataset_input}")

    store = initialize_store(config)
    result = ItinerarySearch(store).search(config.origin, config.destination, config.date)

    if not result.itineraries:
        logger.warning("No itineraries match the search criteria!")

    logger.info(f"Search completed. Found {result.total_results} itineraries")
    return result


def initialize_store(config: Config) -> FlightStore:
    """
    Load the configured dataset into a new store.

    Args:
        config: Application configuration

    Returns:
        Loaded FlightStore
    """
    logger.debug("Loading flight store...")
    store = FlightStore.from_file(config.dataset_input)
    logger.debug("Flight store loaded successfully")
    return store
