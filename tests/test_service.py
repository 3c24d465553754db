"""Tests for PropRegistryService."""

from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from prop_registry.registry.models import MeshHandle, PropRecord, PropSize
from prop_registry.registry.service import PropRegistryService
from prop_registry.settings import AppSettings, ConfigError

ReadJson = Callable[[Path], Dict[str, Any]]
WriteJson = Callable[[str, Any], Path]


class TestServiceWithExplicitRoot:
    """Test the service configured with a registry root directly."""

    def test_write_then_load(self, tmp_path: Path, read_json: ReadJson) -> None:
        service = PropRegistryService(registry_root=tmp_path)
        service.write_props(
            [
                PropRecord("Bench", mesh=MeshHandle("/Game/SM_Bench.SM_Bench"), size=PropSize.SMALL),
                PropRecord("Cone", "/Game/SM_Cone.SM_Cone", PropSize.TINY),
            ]
        )

        document = read_json(tmp_path / "Default.PropRegistry.json")
        assert document["definitions"][0]["path"] == "/Game/SM_Bench.SM_Bench"

        definitions = service.load_props()
        assert [d.id for d in definitions] == ["static.prop.bench", "static.prop.cone"]
        assert definitions[1].get_attribute("size").value == "tiny"  # type: ignore[union-attr]

    def test_user_layer_overrides_written_default(
        self, tmp_path: Path, write_json: WriteJson
    ) -> None:
        service = PropRegistryService(registry_root=tmp_path)
        service.write_props([PropRecord("bench", "/Game/SM_Bench", PropSize.SMALL)])
        write_json(
            "mods/user.PropRegistry.json",
            {"definitions": [{"name": "bench", "path": "/Game/SM_Bench", "size": "Big"}]},
        )

        records = service.load_records()

        assert len(records) == 1
        assert records[0].size is PropSize.BIG

    def test_custom_builder(self, tmp_path: Path) -> None:
        service = PropRegistryService(registry_root=tmp_path, builder=lambda records: [r.name for r in records])
        service.write_props([PropRecord("a"), PropRecord("b")])
        assert service.load_props() == ["a", "b"]

    def test_missing_root_raises(self) -> None:
        service = PropRegistryService()
        assert service.default_registry_path is None
        with pytest.raises(ConfigError):
            service.load_props()
        with pytest.raises(ConfigError):
            service.write_props([PropRecord("a")])


class TestServiceWithSettings:
    """Test the service configured from AppSettings."""

    def test_uses_settings_locations(
        self, app_settings: AppSettings, tmp_path: Path, write_json: WriteJson
    ) -> None:
        content = tmp_path / "Content"
        (content / "Props").mkdir(parents=True)
        (content / "Props" / "SM_Bench.uasset").write_bytes(b"")
        app_settings.registry_root = tmp_path / "Config"
        app_settings.content_root = content

        write_json(
            "Config/Default.PropRegistry.json",
            {
                "definitions": [
                    {"name": "bench", "path": "/Game/Props/SM_Bench.SM_Bench", "size": "Small"},
                    {"name": "ghost", "path": "/Game/Props/SM_Ghost.SM_Ghost", "size": "Small"},
                ]
            },
        )

        records = PropRegistryService(app_settings).load_records()

        assert records[0].mesh is not None
        assert records[0].mesh.file == str(content / "Props" / "SM_Bench.uasset")
        assert records[1].mesh is None

    def test_explicit_root_beats_settings(self, app_settings: AppSettings, tmp_path: Path) -> None:
        app_settings.registry_root = tmp_path / "from_settings"
        service = PropRegistryService(app_settings, registry_root=tmp_path / "explicit")
        assert service.default_registry_path == tmp_path / "explicit" / "Default.PropRegistry.json"

    def test_custom_file_naming(self, app_settings: AppSettings, tmp_path: Path) -> None:
        app_settings.registry_root = tmp_path
        app_settings.paths.registry_suffix = ".props.json"
        app_settings.paths.default_marker = "Base"
        app_settings.paths.default_file_name = "Base.props.json"

        service = PropRegistryService(app_settings)
        service.write_props([PropRecord("bench", size=PropSize.HUGE)])

        assert (tmp_path / "Base.props.json").is_file()
        assert [r.size for r in service.load_records()] == [PropSize.HUGE]
