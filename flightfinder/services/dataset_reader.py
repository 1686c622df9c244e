"""Dataset reader for the flights JSON document"""
import json
from pathlib import Path
from typing import Union
import logging

from pydantic import ValidationError

from flightfinder.exceptions import MalformedDataset
from flightfinder.models.flight import FlightDataset

logger = logging.getLogger(__name__)


def parse_dataset(data: object) -> FlightDataset:
    """
    Validate an already-decoded dataset document

    Args:
        data: Decoded JSON with 'airports' and 'flights' lists

    Returns:
        FlightDataset

    Raises:
        MalformedDataset: If the document does not have the expected shape
    """
    try:
        return FlightDataset.model_validate(data)
    except ValidationError as e:
        raise MalformedDataset(f"Dataset does not match the expected shape: {e}") from e


def read_dataset(input_path: Union[str, Path]) -> FlightDataset:
    """
    Read the flights dataset from a local JSON file

    Args:
        input_path: Path to the JSON document

    Returns:
        FlightDataset

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedDataset: If the file is not valid UTF-8 JSON or has the wrong shape
    """
    path = Path(input_path)
    logger.debug(f"Reading flight dataset from {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Dataset file not found: {path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise MalformedDataset(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error(f"Dataset {path} is not valid UTF-8: {e}")
        raise MalformedDataset(f"Dataset {path} is not valid UTF-8: {e}") from e

    dataset = parse_dataset(data)
    logger.debug(f"Read {len(dataset.flights)} flights and {len(dataset.airports)} airports from {path}")
    return dataset
