from solresolve.resolution.absolute import ancestors_below, resolve_absolute_library


def test_resolve_from_dependency_src(tmp_path):
    # <root>/mydependency/
    # └── src (cwd)
    #     └── interfaces
    #         └── IConfig.sol
    root = tmp_path
    dep = root / "mydependency"
    (dep / "src" / "interfaces").mkdir(parents=True)
    (dep / "src" / "interfaces" / "IConfig.sol").touch()

    found = resolve_absolute_library(root, dep / "src", "src/interfaces/IConfig.sol")
    assert found == (dep, dep / "src" / "interfaces" / "IConfig.sol")


def test_nearest_ancestor_wins(tmp_path):
    root = tmp_path
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "a" / "X.sol").touch()
    (root / "a" / "b" / "X.sol").touch()

    ancestor, resolved = resolve_absolute_library(root, root / "a" / "b" / "c", "X.sol")
    assert ancestor == root / "a" / "b"
    assert resolved == root / "a" / "b" / "X.sol"


def test_found_at_roots_immediate_child(tmp_path):
    root = tmp_path
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "a" / "lib").mkdir()
    (root / "a" / "lib" / "Math.sol").touch()

    found = resolve_absolute_library(root, root / "a" / "b" / "c", "lib/Math.sol")
    assert found == (root / "a", root / "a" / "lib" / "Math.sol")


def test_root_itself_is_not_tried(tmp_path):
    root = tmp_path
    (root / "a" / "b").mkdir(parents=True)
    (root / "Only.sol").touch()

    assert resolve_absolute_library(root, root / "a" / "b", "Only.sol") is None


def test_import_normalized(tmp_path):
    root = tmp_path
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "Y.sol").touch()

    ancestor, resolved = resolve_absolute_library(root, root / "a" / "b", "b/../Y.sol")
    assert ancestor == root / "a"
    assert resolved == root / "a" / "Y.sol"


def test_unresolvable_terminates(tmp_path):
    root = tmp_path / "project"
    (root / "a" / "b").mkdir(parents=True)
    assert resolve_absolute_library(root, root / "a" / "b", "Nowhere.sol") is None


def test_cwd_outside_root_terminates(tmp_path):
    # The walk stops at the filesystem root when `root` is never reached
    (tmp_path / "x").mkdir()
    assert resolve_absolute_library(tmp_path / "elsewhere", tmp_path / "x", "Nowhere-3f9a.sol") is None


def test_ancestors_below(tmp_path):
    cwd = tmp_path / "a" / "b" / "c"
    assert list(ancestors_below(tmp_path, cwd)) == [tmp_path / "a" / "b", tmp_path / "a"]
    assert list(ancestors_below(tmp_path, tmp_path / "a")) == []
