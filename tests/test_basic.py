"""Tests for the promo_version_checker package."""

import pytest


def test_package_import():
    """Test that the package can be imported."""
    import promo_version_checker
    assert promo_version_checker.__version__ == "0.1.0"


def test_cli_import():
    """Test that CLI module can be imported."""
    from promo_version_checker.cli import main
    assert callable(main)


def test_status_display_metadata():
    """Test that every status carries its display hints."""
    from promo_version_checker.models import Status

    expected = {
        Status.PENDING: (0, False, False),
        Status.FAILED: (0, False, False),
        Status.UP_TO_DATE: (0, False, False),
        Status.OUTDATED: (3, True, True),
        Status.AHEAD: (0, False, False),
        Status.BETA: (0, False, False),
        Status.BETA_OUTDATED: (6, True, True),
    }

    assert len(Status) == 7
    assert sorted(status.value for status in Status) == list(range(1, 8))
    for status, (offset, draw, animated) in expected.items():
        assert status.sheet_offset == offset
        assert status.should_draw is draw
        assert status.is_animated is animated


def test_no_leftover_aliases():
    from promo_version_checker import errors
    from promo_version_checker.models import Status

    assert not hasattr(errors, "BodyDecodeFailed")
    assert not hasattr(Status.OUTDATED, "label")


def test_pending_sentinel_is_empty():
    """Test that the shared pending result has no optional fields."""
    from promo_version_checker.models import PENDING_RESULT, Status

    assert PENDING_RESULT.status is Status.PENDING
    assert PENDING_RESULT.target is None
    assert PENDING_RESULT.changelog is None
    assert PENDING_RESULT.url is None


def test_module_descriptors_key_by_identity():
    """Test that equal-looking descriptors are distinct keys."""
    from promo_version_checker.models import ModuleDescriptor

    first = ModuleDescriptor("demo", "1.0", "https://example.org/a.json")
    second = ModuleDescriptor("demo", "1.0", "https://example.org/a.json")

    assert first != second
    assert len({first, second}) == 2


def test_check_result_changelog_is_read_only():
    """Test that published changelogs cannot be mutated."""
    from promo_version_checker.models import CheckResult, Status

    source = {"1.1": "fix"}
    result = CheckResult.build(Status.BETA, None, source, None)
    source["1.2"] = "later"

    assert dict(result.changelog) == {"1.1": "fix"}
    with pytest.raises(TypeError):
        result.changelog["1.3"] = "nope"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
