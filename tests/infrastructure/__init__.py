"""
Shared test infrastructure for WADL Dumper.

Modules:
- file_utils: writing fixture files
- cli_utils: running the CLI as a subprocess
- wadl_builders: building WADL documents
- fake_tree: in-memory XmlTreeProtocol implementation
"""

from .file_utils import write
from .cli_utils import run_cli
from .wadl_builders import WADL_NS, make_wadl
from .fake_tree import FakeTree

__all__ = ["write", "run_cli", "WADL_NS", "make_wadl", "FakeTree"]
