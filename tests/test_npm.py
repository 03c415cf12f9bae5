from __future__ import annotations

import json

from wpdev import npm


def _write(tmp_path, manifest):
    (tmp_path / "package.json").write_text(json.dumps(manifest))


def test_scaffolder_manifest_is_not_ours(tmp_path):
    _write(tmp_path, {"name": "mytheme", "scripts": {"watch": "node-sass sass/ -o ./"},
                      "devDependencies": {"node-sass": "^9.0.0"}})
    assert not npm.is_vite_manifest(tmp_path)


def test_written_manifest_is_ours(tmp_path):
    _write(tmp_path, {"name": "mytheme", "scripts": {"dev": "vite", "build": "vite build"}})
    assert npm.is_vite_manifest(tmp_path)


def test_manifest_with_extra_scripts_is_ours(tmp_path):
    _write(tmp_path, {"scripts": {"dev": "vite", "build": "vite build", "preview": "vite preview"}})
    assert npm.is_vite_manifest(tmp_path)


def test_manifest_with_vite_dependency_is_ours(tmp_path):
    _write(tmp_path, {"scripts": {"dev": "vite --host"}, "devDependencies": {"vite": "^5.0.0"}})
    assert npm.is_vite_manifest(tmp_path)


def test_missing_or_broken_manifest(tmp_path):
    assert not npm.is_vite_manifest(tmp_path)
    (tmp_path / "package.json").write_text("{not json")
    assert not npm.is_vite_manifest(tmp_path)
