"""hitl-cli: Human-in-the-Loop toolkit manager.

Import from submodules:
- version: __version__
- toolkit.scanner: scan_toolkit, resolve_toolkit_path
- toolkit.search: search_tools, get_tool
- io.registry_store: load_registry, register_installation, unregister_installation
- operations.updates: find_updates
"""

from hitl_cli.version import __version__ as __version__
