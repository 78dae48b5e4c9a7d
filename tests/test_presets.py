import pytest
import yaml

from projman.presets import Preset, available_presets, load_preset


def test_available_presets_lists_yaml_stems(tmp_path):
    (tmp_path / "web.yaml").write_text("name: web\n")
    (tmp_path / "audio.yaml").write_text("name: audio\n")
    (tmp_path / "notes.txt").write_text("ignored")
    assert available_presets(tmp_path) == ["audio", "web"]


def test_available_presets_missing_directory_is_empty(tmp_path):
    assert available_presets(tmp_path / "absent") == []


def test_load_preset_reads_fields(tmp_path):
    content = {"name": "Hardware", "folders": ["CAD", "Firmware", "BOM"]}
    (tmp_path / "hardware.yaml").write_text(yaml.safe_dump(content))
    preset = load_preset(tmp_path, "hardware")
    assert preset == Preset(name="Hardware", folders=["CAD", "Firmware", "BOM"])


def test_load_preset_missing_fields_use_defaults(tmp_path):
    (tmp_path / "bare.yaml").write_text("name: bare\n")
    assert load_preset(tmp_path, "bare").folders == []


def test_load_preset_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_preset(tmp_path, "absent")


def test_load_preset_invalid_yaml_raises(tmp_path):
    (tmp_path / "broken.yaml").write_text("name: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_preset(tmp_path, "broken")