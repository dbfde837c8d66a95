"""Verify package imports work correctly."""


def test_import_bracemark() -> None:
    """Test that bracemark can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import bracemark

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert bracemark.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from bracemark import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import bracemark

    for name in bracemark.__all__:
        assert hasattr(bracemark, name), name


def test_logger_namespace() -> None:
    """Loggers are namespaced under bracemark."""
    from bracemark.utils.logger import get_logger

    assert get_logger("mymodule").name == "bracemark.mymodule"
    assert get_logger("bracemark.parser").name == "bracemark.parser"
