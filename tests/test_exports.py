"""Tests for the public package surface."""


def test_package_has_all():
    """Verify the package exports __all__."""
    from srvdisco import __all__ as package_all

    for name in ("discover", "discover_addrs", "discover_addrs_ports", "stream_discover"):
        assert name in package_all


def test_all_names_resolve():
    """Every name in __all__ is importable."""
    import srvdisco

    for name in srvdisco.__all__:
        assert hasattr(srvdisco, name), name


def test_version():
    import srvdisco

    assert srvdisco.__version__ == "0.1.0"
