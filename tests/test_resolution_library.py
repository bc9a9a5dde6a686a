import pytest
from pathlib import Path
from solresolve.resolution.library import (
    is_local_source_name,
    library_candidates,
    resolve_library,
)


@pytest.fixture
def libs(tmp_path):
    # lib/
    #   ds-test/test.sol
    #   forge-std/src/Test.sol
    #   both/Direct.sol
    #   both/src/Direct.sol
    # vendor/
    #   forge-std/Test.sol
    lib = tmp_path / "lib"
    (lib / "ds-test").mkdir(parents=True)
    (lib / "ds-test" / "test.sol").touch()
    (lib / "forge-std" / "src").mkdir(parents=True)
    (lib / "forge-std" / "src" / "Test.sol").touch()
    (lib / "both" / "src").mkdir(parents=True)
    (lib / "both" / "Direct.sol").touch()
    (lib / "both" / "src" / "Direct.sol").touch()

    vendor = tmp_path / "vendor"
    (vendor / "forge-std").mkdir(parents=True)
    (vendor / "forge-std" / "Test.sol").touch()
    return tmp_path


def test_resolve_direct(libs):
    resolved = resolve_library([libs / "lib"], "ds-test/test.sol")
    assert resolved == libs / "lib" / "ds-test" / "test.sol"


def test_resolve_src_convention(libs):
    resolved = resolve_library([libs / "lib"], "forge-std/Test.sol")
    assert resolved == libs / "lib" / "forge-std" / "src" / "Test.sol"


def test_direct_match_preferred_over_src(libs):
    resolved = resolve_library([libs / "lib"], "both/Direct.sol")
    assert resolved == libs / "lib" / "both" / "Direct.sol"


def test_roots_scanned_in_order(libs):
    # src-convention hit in the first root wins over a direct hit in the second
    resolved = resolve_library([libs / "lib", libs / "vendor"], "forge-std/Test.sol")
    assert resolved == libs / "lib" / "forge-std" / "src" / "Test.sol"

    resolved = resolve_library([libs / "vendor", libs / "lib"], "forge-std/Test.sol")
    assert resolved == libs / "vendor" / "forge-std" / "Test.sol"


def test_missing_roots_are_tolerated(libs):
    resolved = resolve_library([libs / "does-not-exist", libs / "lib"], "ds-test/test.sol")
    assert resolved == libs / "lib" / "ds-test" / "test.sol"


def test_not_found_returns_none(libs):
    assert resolve_library([libs / "lib"], "ds-test/missing.sol") is None
    assert resolve_library([], "ds-test/test.sol") is None


def test_relative_imports_are_not_library_imports(libs):
    assert resolve_library([libs / "lib"], "./ds-test/test.sol") is None
    assert resolve_library([libs / "lib"], "../ds-test/test.sol") is None
    assert resolve_library([libs / "lib"], "") is None


def test_rooted_import_returned_as_is(libs):
    rooted = str(libs / "anything" / "Foo.sol")
    assert resolve_library([libs / "lib"], rooted) == Path(rooted)


def test_library_candidates_order(tmp_path):
    candidates = list(library_candidates([tmp_path / "a", tmp_path / "b"], "dep/sub/X.sol"))
    assert candidates == [
        tmp_path / "a" / "dep" / "sub" / "X.sol",
        tmp_path / "a" / "dep" / "src" / "sub" / "X.sol",
        tmp_path / "b" / "dep" / "sub" / "X.sol",
        tmp_path / "b" / "dep" / "src" / "sub" / "X.sol",
    ]
    assert list(library_candidates([tmp_path], "./X.sol")) == []


def test_is_local_source_name(libs):
    assert is_local_source_name([""], "./local/contract.sol")
    assert is_local_source_name([""], "../local/contract.sol")
    assert not is_local_source_name([""], "/ds-test/test.sol")
    assert not is_local_source_name([libs / "lib"], "ds-test/test.sol")


def test_unusable_candidates_count_as_missing(libs):
    # A component longer than NAME_MAX makes stat() fail with ENAMETOOLONG
    assert resolve_library([libs / "lib"], "x" * 300 + "/A.sol") is None
    assert is_local_source_name([libs / "lib"], "x" * 300 + "/A.sol")
