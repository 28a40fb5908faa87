"""Tests for the full pipeline."""

from pathlib import Path
from unittest import mock

import pytest

from next_unused.errors import ConfigurationError
from next_unused.models import AliasConfig, AnalysisConfig, RouterType
from next_unused.pipeline import find_unused_files, run_analysis

FIXTURES = Path(__file__).parent / "fixtures"
APP = (FIXTURES / "next_app").resolve()


def _config(**overrides):
    values = dict(project_root=APP, router=RouterType.APP, use_src=True, max_workers=2)
    values.update(overrides)
    return AnalysisConfig(**values)


def test_fixture_project_unused():
    result = run_analysis(_config())
    assert [p.relative_to(APP).as_posix() for p in result.unused] == [
        "src/app/_private/page.tsx",
        "src/broken.ts",
        "src/components/Unused.jsx",
        "src/lib/orphan.ts",
    ]
    assert [f.path.name for f in result.failures] == ["broken.ts"]


def test_partition_of_discovered_files():
    result = run_analysis(_config())
    unused = set(result.unused)
    assert unused.isdisjoint(result.reachable)
    assert unused | (result.reachable & set(result.files)) == set(result.files)
    assert set(result.entry_points) <= result.reachable


def test_extra_entry_point():
    result = run_analysis(_config(), extra_entries=[Path("src/lib/orphan.ts")])
    names = [p.name for p in result.unused]
    assert "orphan.ts" not in names
    assert "Unused.jsx" in names


def test_missing_extra_entry():
    with pytest.raises(ConfigurationError, match="does not exist"):
        run_analysis(_config(), extra_entries=[Path("middleware.ts")])


def test_without_aliases_alias_imports_are_lost():
    result = run_analysis(_config(config_file="jsconfig.json"))
    names = {p.name for p in result.unused}
    assert "Header.tsx" in names
    assert "db.ts" in names


def test_wrong_src_answer():
    with pytest.raises(ConfigurationError, match="does not exist"):
        run_analysis(_config(use_src=False))


def test_root_not_a_directory(tmp_path):
    file_root = tmp_path / "file.txt"
    file_root.write_text("")
    with pytest.raises(ConfigurationError, match="not a directory"):
        run_analysis(_config(project_root=file_root))


def test_root_missing(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist"):
        run_analysis(_config(project_root=tmp_path / "nope"))


# ── Engine entry point ────────────────────────────────────────

def test_empty_entry_points_fail_before_reading(tmp_path):
    a = tmp_path / "a.ts"
    a.write_text("export {};\n")
    with mock.patch("pathlib.Path.read_text") as read_text:
        with pytest.raises(ConfigurationError):
            find_unused_files(tmp_path, [a], [])
    read_text.assert_not_called()


def test_engine_cycle_scenario(tmp_path):
    root = tmp_path.resolve()
    a, b, c, d = (root / f"{n}.ts" for n in "abcd")
    a.write_text('import { b } from "./b";\nexport const a = 1;\n')
    b.write_text('import { a } from "./a";\nexport const b = 2;\n')
    c.write_text("export const c = 3;\n")
    d.write_text("export const d = 4;\n")
    result = find_unused_files(root, [a, b, c, d], [a], AliasConfig())
    assert result.reachable == {a, b}
    assert result.unused == [c, d]


def test_engine_alias(tmp_path):
    root = tmp_path.resolve()
    page = root / "src" / "app" / "page.tsx"
    page.parent.mkdir(parents=True)
    page.write_text('import { db } from "@/lib/db";\n')
    db = root / "src" / "lib" / "db.ts"
    db.parent.mkdir(parents=True)
    db.write_text("export const db = {};\n")
    result = find_unused_files(
        root, [page, db], [page], AliasConfig(paths={"@/*": ["src/*"]}),
    )
    assert result.unused == []


def test_progress_stages():
    stages = []
    run_analysis(_config(), progress=lambda stage, cur, total: stages.append(stage))
    assert stages[0] == "Scanning"
    assert "Building graph" in stages
    assert stages[-1] == "Traversing"


def test_overlong_specifier_does_not_abort(tmp_path):
    root = tmp_path.resolve()
    a, b = root / "a.ts", root / "b.ts"
    a.write_text(f'import x from "./{"a" * 300}";\nimport "./b";\n')
    b.write_text("export {};\n")
    result = find_unused_files(root, [a, b], [a], AliasConfig())
    assert result.reachable == {a, b}
    assert result.unused == []
    assert result.failures == []


def test_route_segment_named_like_build_dir(tmp_path):
    root = tmp_path.resolve()
    page = root / "app" / "build" / "page.tsx"
    page.parent.mkdir(parents=True)
    page.write_text('import Widget from "../../components/Widget";\n')
    widget = root / "components" / "Widget.tsx"
    widget.parent.mkdir()
    widget.write_text("export default function Widget() {}\n")
    (root / "build").mkdir()
    (root / "build" / "chunk.js").write_text("module.exports = {};\n")

    result = run_analysis(AnalysisConfig(project_root=root, router=RouterType.APP, use_src=False))
    assert result.entry_points == [page]
    assert result.files == [page, widget]
    assert result.unused == []
