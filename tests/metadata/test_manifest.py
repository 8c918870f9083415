import json
import tempfile
import unittest
from pathlib import Path

from md_release_notes.metadata.manifest import (
    ProjectMetadata,
    discover_project_metadata,
    metadata_from_manifest,
    parse_manifest,
    read_json_manifest,
    read_yaml_manifest,
)


class TestManifestReaders(unittest.TestCase):
    """Tests for the JSON and YAML manifest readers."""

    def test_read_json_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "package.json"
            path.write_text(json.dumps({"name": "app", "version": "1.2.3"}))
            self.assertEqual(read_json_manifest(path), {"name": "app", "version": "1.2.3"})

    def test_read_json_manifest_missing_or_malformed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "package.json"
            self.assertIsNone(read_json_manifest(path))
            path.write_text("{not json")
            self.assertIsNone(read_json_manifest(path))
            path.write_text("[1, 2, 3]")
            self.assertIsNone(read_json_manifest(path))

    def test_read_yaml_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "pubspec.yaml"
            path.write_text("name: my_app\nversion: 2.0.0+4\n")
            self.assertEqual(read_yaml_manifest(path), {"name": "my_app", "version": "2.0.0+4"})

    def test_read_yaml_manifest_missing_or_malformed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "pubspec.yaml"
            self.assertIsNone(read_yaml_manifest(path))
            path.write_text("name: [unclosed\n")
            self.assertIsNone(read_yaml_manifest(path))
            path.write_text("just a string\n")
            self.assertIsNone(read_yaml_manifest(path))

    def test_parse_manifest_picks_format_from_filename(self) -> None:
        self.assertEqual(parse_manifest('{"version": "1.0.0"}', "package.json"), {"version": "1.0.0"})
        self.assertEqual(parse_manifest("version: 1.0.0\n", "pubspec.yaml"), {"version": "1.0.0"})
        self.assertEqual(parse_manifest("version: 1.0.0\n", "chart.yml"), {"version": "1.0.0"})
        self.assertIsNone(parse_manifest("version: 1.0.0\n", "package.json"))

    def test_parse_manifest_too_deeply_nested(self) -> None:
        self.assertIsNone(parse_manifest("[" * 200000, "package.json"))
        self.assertIsNone(parse_manifest("[" * 200000, "pubspec.yaml"))


class TestMetadataFromManifest(unittest.TestCase):
    def test_requires_name_and_version(self) -> None:
        self.assertEqual(
            metadata_from_manifest({"name": "app", "version": "1.0.0"}),
            ProjectMetadata(name="app", version="1.0.0"),
        )
        self.assertIsNone(metadata_from_manifest({"name": "app"}))
        self.assertIsNone(metadata_from_manifest({"version": "1.0.0"}))
        self.assertIsNone(metadata_from_manifest({"name": "app", "version": ""}))
        self.assertIsNone(metadata_from_manifest(None))

    def test_non_string_version_is_stringified(self) -> None:
        self.assertEqual(metadata_from_manifest({"name": "app", "version": 1.5}).version, "1.5")


class TestDiscoverProjectMetadata(unittest.TestCase):
    def test_prefers_package_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            (directory / "package.json").write_text(json.dumps({"name": "node-app", "version": "3.1.0"}))
            (directory / "pubspec.yaml").write_text("name: flutter_app\nversion: 1.0.0\n")
            self.assertEqual(
                discover_project_metadata(directory),
                ProjectMetadata(name="node-app", version="3.1.0"),
            )

    def test_falls_back_to_pubspec(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            # package.json without a name does not qualify
            (directory / "package.json").write_text(json.dumps({"version": "3.1.0"}))
            (directory / "pubspec.yaml").write_text("name: flutter_app\nversion: 1.0.0+7\n")
            self.assertEqual(
                discover_project_metadata(directory),
                ProjectMetadata(name="flutter_app", version="1.0.0+7"),
            )

    def test_nothing_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(discover_project_metadata(Path(tmp)))


if __name__ == "__main__":
    unittest.main()
