import pytest

pytestmark = pytest.mark.unit


def test_import_and_version():
    import unitgraph
    import unitgraph.api as api

    assert hasattr(unitgraph, "__version__")
    assert isinstance(unitgraph.__version__, str)
    assert api.__version__ == unitgraph.__version__


def test_api_exports_resolve():
    import unitgraph.api as api

    for name in api.__all__:
        assert getattr(api, name) is not None
