# simglass/tests/test_preferences.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent
sys.path.append(str(project_root))

import json

from simglass.preferences import PreferenceStore


def test_missing_file_reads_defaults(tmp_path):
    store = PreferenceStore(str(tmp_path / "preferences.json"))
    assert store.get('aircraft_type') == "c172"
    assert store.get('pilot_id') == ""
    assert store.get('unknown', 'fallback') == 'fallback'


def test_values_persist_across_instances(tmp_path):
    path = tmp_path / "nested" / "preferences.json"
    PreferenceStore(str(path)).set('aircraft_type', "pa28")

    reloaded = PreferenceStore(str(path))

    assert reloaded.get('aircraft_type') == "pa28"
    assert json.loads(path.read_text(encoding='utf-8')) == {'aircraft_type': "pa28"}


def test_no_temporary_files_left_behind(tmp_path):
    store = PreferenceStore(str(tmp_path / "preferences.json"))
    store.set('pilot_id', "123456")
    store.set('pilot_id', "654321")
    assert [p.name for p in tmp_path.iterdir()] == ["preferences.json"]


def test_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("{not json", encoding='utf-8')

    store = PreferenceStore(str(path))

    assert store.as_dict() == {'aircraft_type': "c172", 'pilot_id': ""}


def test_non_object_file_reads_as_empty(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("[1, 2]", encoding='utf-8')
    assert PreferenceStore(str(path)).get('aircraft_type') == "c172"
