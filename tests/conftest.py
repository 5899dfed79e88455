from pathlib import Path

import pytest

from tests.infrastructure import make_wadl, write


@pytest.fixture
def wadl_file(tmp_path: Path):
    """Writes a WADL document into tmp_path and returns its path."""
    def _write(body: str, name: str = "application.wadl", **kwargs) -> Path:
        return write(tmp_path / name, make_wadl(body, **kwargs))
    return _write


@pytest.fixture
def sample_wadl(wadl_file) -> Path:
    """Nested resources, placeholders and a duplicated path."""
    return wadl_file(
        '    <resource path="/users/{id}">\n'
        '      <resource path="/orders/{oid}"/>\n'
        '    </resource>\n'
        '    <resource path="/health"/>\n'
        '    <resource path="/health"/>'
    )
