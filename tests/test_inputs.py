import os

import pytest

from xprin.inputs import InputCopier, unique_base_names_for_paths


@pytest.mark.parametrize(
    "paths, expected",
    [
        (None, None),
        ([], []),
        (["/single/xrd.yaml"], ["xrd.yaml"]),
        (["/aws/xrd.yaml", "/gcp/xrd.yaml"], ["xrd.yaml", "xrd_1.yaml"]),
        (["/path/to/crds", "/another/path/to/crds"], ["crds", "crds_1"]),
        (["/a/xrd.yaml", "/b/xrd.yaml", "/c/xrd.yaml"], ["xrd.yaml", "xrd_1.yaml", "xrd_2.yaml"]),
        (["/a/one.yaml", "/b/two.yaml"], ["one.yaml", "two.yaml"]),
    ],
)
def test_unique_base_names_for_paths(paths, expected):
    assert unique_base_names_for_paths(paths) == expected


def test_unique_base_names_are_distinct():
    paths = ["/a/x.yaml", "/b/x.yaml", "/c/y.yaml", "/d/x.yaml", "/e/y.yaml"]
    names = unique_base_names_for_paths(paths)
    assert len(names) == len(paths)
    assert len(set(names)) == len(names)


def test_copy_input_file(tmp_path):
    src = tmp_path / "src" / "xr.yaml"
    src.parent.mkdir()
    src.write_text("kind: XR\n")
    copier = InputCopier(tmp_path / "inputs", False)
    dest = copier.copy_input(src, "xr")
    assert dest == os.path.join(str(tmp_path / "inputs"), "xr", "xr.yaml")
    with open(dest) as fh:
        assert fh.read() == "kind: XR\n"


def test_copy_input_directory(tmp_path):
    src = tmp_path / "crds"
    (src / "nested").mkdir(parents=True)
    (src / "a.yaml").write_text("a")
    (src / "nested" / "b.yaml").write_text("b")
    copier = InputCopier(tmp_path / "inputs", False)
    dest = copier.copy_input(src, "crds")
    assert open(os.path.join(dest, "a.yaml")).read() == "a"
    assert open(os.path.join(dest, "nested", "b.yaml")).read() == "b"


def test_copy_input_missing_source(tmp_path):
    copier = InputCopier(tmp_path / "inputs", False)
    with pytest.raises(OSError, match="failed to copy composition"):
        copier.copy_input(tmp_path / "missing.yaml", "composition")


def test_copy_to_path_creates_parents(tmp_path):
    first = tmp_path / "aws" / "xrd.yaml"
    second = tmp_path / "gcp" / "xrd.yaml"
    first.parent.mkdir()
    second.parent.mkdir()
    first.write_text("aws")
    second.write_text("gcp")
    copier = InputCopier(tmp_path / "inputs", False)
    names = unique_base_names_for_paths([str(first), str(second)])
    dests = [
        copier.copy_to_path(src, tmp_path / "inputs" / "xrds" / name)
        for src, name in zip([first, second], names)
    ]
    assert [open(d).read() for d in dests] == ["aws", "gcp"]
    assert dests[1].endswith("xrd_1.yaml")


def test_copy_to_path_missing_source(tmp_path):
    copier = InputCopier(tmp_path / "inputs", False)
    dest = tmp_path / "out" / "x.yaml"
    with pytest.raises(OSError, match="failed to copy to"):
        copier.copy_to_path(tmp_path / "nope.yaml", dest)


def test_debug_output(tmp_path, capsys):
    src = tmp_path / "f.yaml"
    src.write_text("x")
    copier = InputCopier(tmp_path / "inputs", True)
    dest = copier.copy_input(src, "functions")
    assert f"Copied functions to: {dest}" in capsys.readouterr().err