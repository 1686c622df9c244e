"""Unit tests for the dataset reader"""
import json

import pytest

from flightfinder.exceptions import MalformedDataset
from flightfinder.services.dataset_reader import parse_dataset, read_dataset


class TestDatasetReader:
    """Test reading and validating the dataset document"""

    def test_reads_dataset_file(self, dataset_file):
        dataset = read_dataset(dataset_file)
        assert len(dataset.airports) == 10
        assert len(dataset.flights) == 10
        assert dataset.flights[0].flight_number == "SP100"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_dataset(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "flights.json"
        path.write_text('{"airports": [')
        with pytest.raises(MalformedDataset):
            read_dataset(path)

    def test_non_utf8_file_raises(self, tmp_path):
        """Test that undecodable bytes are reported as a malformed dataset"""
        path = tmp_path / "flights.json"
        path.write_bytes(b'{"airports": [], "flights": [], "x": "\xff\xfe"}')
        with pytest.raises(MalformedDataset):
            read_dataset(path)

    def test_wrong_shape_raises(self, tmp_path):
        path = tmp_path / "flights.json"
        path.write_text(json.dumps({"airports": [], "flights": [{"flightNumber": "SP1"}]}))
        with pytest.raises(MalformedDataset):
            read_dataset(path)

    def test_parse_dataset_from_dict(self, airports_data, make_flight):
        dataset = parse_dataset({
            "airports": airports_data,
            "flights": [make_flight("SP1", "JFK", "LAX", "2024-03-15T08:30:00", "2024-03-15T11:45:00")]
        })
        assert dataset.airports[0].code == "JFK"

    def test_parse_dataset_rejects_non_document(self):
        with pytest.raises(MalformedDataset):
            parse_dataset(["not", "a", "document"])
