import pytest

from newversion.version import DEFAULT_VERSION, LocalVersionError, get_app_version, get_package_info


def test_get_package_info_reads_installed_distribution():
    info = get_package_info("httpx")

    assert info.app_id.lower() == "httpx"
    assert info.version


def test_get_package_info_missing_distribution():
    with pytest.raises(LocalVersionError):
        get_package_info("definitely-not-an-installed-distribution")


def test_get_app_version_falls_back(monkeypatch):
    from importlib.metadata import PackageNotFoundError

    def missing(name):
        raise PackageNotFoundError(name)

    monkeypatch.setattr("newversion.version.version", missing)

    assert get_app_version() == DEFAULT_VERSION
