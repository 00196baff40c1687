import pytest


def test_server_module_import():
    """
    Test that backend.server can be imported successfully.
    This validates that all dependencies and type definitions are correctly defined.
    """
    import importlib

    try:
        importlib.import_module("backend.server")
    except ImportError as e:
        pytest.fail(f"Failed to import backend.server: {e}")
    except NameError as e:
        pytest.fail(f"NameError in backend.server: {e}")


def test_cli_module_import():
    import importlib

    try:
        importlib.import_module("cli")
    except ImportError as e:
        pytest.fail(f"Failed to import cli: {e}")
