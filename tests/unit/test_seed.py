"""Tests for loading a roster from a YAML seed file."""

import pytest
import yaml

from roster.sdk import EmployeeStore, SeedError, ValidationError, employee_from_entry, load_seed


# === FIXTURES ===


SEED_EMPLOYEES = [
    {"id": 1, "name": "John Doe", "department": "IT", "salary": 50000,
     "rating": 4.5, "experience": 5, "active": True},
    {"id": 2, "name": "Jane Smith", "department": "HR", "salary": 60000.0,
     "rating": 4.0, "experience": 3},
]


def write_seed(tmp_path, data, name="roster.yaml"):
    path = tmp_path / name
    path.write_text(yaml.dump(data))
    return path


# === TESTS ===


class TestLoadSeed:

    def test_mapping_with_employees_key(self, tmp_path):
        store = load_seed(write_seed(tmp_path, {"employees": SEED_EMPLOYEES}))

        assert len(store) == 2
        assert store.get(1).salary == 50000.0
        assert store.get(2).is_active is True

    def test_bare_list(self, tmp_path):
        store = load_seed(write_seed(tmp_path, SEED_EMPLOYEES))
        assert [e.employee_id for e in store.get_all()] == [1, 2]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(load_seed(path)) == 0

    def test_adds_to_existing_store(self, tmp_path):
        store = EmployeeStore()
        result = load_seed(write_seed(tmp_path, SEED_EMPLOYEES), store)
        assert result is store
        assert len(store) == 2

    def test_later_duplicate_replaces_earlier(self, tmp_path):
        dup = dict(SEED_EMPLOYEES[0], name="Second John")
        store = load_seed(write_seed(tmp_path, SEED_EMPLOYEES + [dup]))
        assert len(store) == 2
        assert store.get(1).name == "Second John"


class TestSeedErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedError, match="not found"):
            load_seed(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("employees: [unclosed")
        with pytest.raises(SeedError, match="Invalid YAML"):
            load_seed(path)

    def test_not_a_list(self, tmp_path):
        with pytest.raises(SeedError, match="list of employees"):
            load_seed(write_seed(tmp_path, "just a string"))

    def test_invalid_entry_names_index_and_adds_nothing(self, tmp_path):
        bad = dict(SEED_EMPLOYEES[1], id=3, salary=-5)
        store = EmployeeStore()

        with pytest.raises(SeedError, match="entry 2: Salary cannot be negative"):
            load_seed(write_seed(tmp_path, SEED_EMPLOYEES + [bad]), store)

        assert len(store) == 0

    def test_entry_must_be_mapping(self, tmp_path):
        with pytest.raises(SeedError, match="entry 0: expected a mapping"):
            load_seed(write_seed(tmp_path, ["John"]))


class TestEmployeeFromEntry:

    def test_missing_keys(self):
        with pytest.raises(ValidationError, match="Missing keys: salary, rating"):
            employee_from_entry({"id": 1, "name": "A", "department": "IT", "experience": 1})

    def test_unknown_keys(self):
        entry = dict(SEED_EMPLOYEES[0], bonus=5)
        with pytest.raises(ValidationError, match="Unknown keys: bonus"):
            employee_from_entry(entry)
