"""Tests for loading transactions from JSON files."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from transaction_analyzer.config import settings
from transaction_analyzer.data.storage import load_analyzer, load_transactions
from transaction_analyzer.models.transaction import Transaction


SAMPLE_FILE = Path(__file__).resolve().parent.parent / "data" / "transactions.json"


@pytest.fixture
def temp_data_dir():
    """Create a temporary data directory for tests."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadTransactions:
    """Tests for load_transactions."""

    def test_loads_sample_file(self):
        transactions = load_transactions(SAMPLE_FILE)
        assert len(transactions) == 10
        assert all(isinstance(t, Transaction) for t in transactions)
        assert transactions[0].id == "1"
        assert transactions[0].merchant_name == "SuperMart"

    def test_preserves_file_order(self, temp_data_dir):
        path = write_json(temp_data_dir / "t.json", [
            {"transaction_id": "b", "transaction_date": "2019-01-02", "transaction_amount": 1,
             "transaction_type": "debit", "transaction_description": "x",
             "merchant_name": "M", "card_type": "Visa"},
            {"transaction_id": "a", "transaction_date": "2019-01-01", "transaction_amount": 2,
             "transaction_type": "credit", "transaction_description": "y",
             "merchant_name": "M", "card_type": "Visa"},
        ])
        assert [t.id for t in load_transactions(path)] == ["b", "a"]

    def test_invalid_records_are_not_validated(self, temp_data_dir):
        path = write_json(temp_data_dir / "t.json", [
            {"transaction_id": "1", "transaction_date": "2019-01-01", "transaction_amount": -10,
             "transaction_type": "refund", "transaction_description": "odd",
             "merchant_name": "M", "card_type": "Visa"},
        ])
        transactions = load_transactions(path)
        assert transactions[0].amount == -10
        assert transactions[0].type == "refund"

    def test_missing_fields_load_as_none(self, temp_data_dir):
        path = write_json(temp_data_dir / "t.json", [
            {"transaction_id": "1", "transaction_amount": 5, "transaction_type": "debit"},
        ])
        txn = load_transactions(path)[0]
        assert txn.description is None
        assert txn.parsed_date is None

    def test_to_record_round_trips_file_layout(self):
        record = json.loads(SAMPLE_FILE.read_text(encoding="utf-8"))[0]
        assert load_transactions(SAMPLE_FILE)[0].to_record() == record

    def test_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            load_transactions(temp_data_dir / "missing.json")

    def test_malformed_json(self, temp_data_dir):
        path = temp_data_dir / "bad.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_transactions(path)

    def test_top_level_must_be_array(self, temp_data_dir):
        path = write_json(temp_data_dir / "t.json", {"transactions": []})
        with pytest.raises(ValueError):
            load_transactions(path)

    def test_records_must_be_objects(self, temp_data_dir):
        path = write_json(temp_data_dir / "t.json", [1, 2])
        with pytest.raises(ValueError):
            load_transactions(path)


class TestLoadAnalyzer:
    """Tests for load_analyzer."""

    def test_explicit_path(self):
        analyzer = load_analyzer(SAMPLE_FILE)
        assert len(analyzer) == 10
        assert analyzer.month_with_most_transactions() == 1

    def test_configured_path(self, temp_data_dir, monkeypatch):
        write_json(temp_data_dir / "transactions.json", [])
        monkeypatch.setattr(settings, "data_dir", temp_data_dir)
        assert len(load_analyzer()) == 0
