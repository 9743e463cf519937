from cadcore.resources import ICON_PATH_PREFIX, icon_path, is_resource_path_valid


def test_icon_path_format():
    assert icon_path("App/App-MainLogo") == "://icons/App/App-MainLogo.svg"


def test_icon_path_wraps_name():
    name = "App/App-Settings"
    path = icon_path(name)
    assert path.startswith(ICON_PATH_PREFIX)
    assert path.endswith(".svg")
    assert path[len(ICON_PATH_PREFIX):-len(".svg")] == name


def test_existing_file_is_valid(tmp_path):
    target = tmp_path / "icon.svg"
    target.write_text("<svg/>")
    assert is_resource_path_valid(target) is True
    assert is_resource_path_valid(str(target)) is True


def test_missing_file_is_invalid(tmp_path):
    assert is_resource_path_valid(tmp_path / "missing.svg") is False