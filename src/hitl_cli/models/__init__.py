"""Data models for hitl-cli.

Import from submodules:
- tool: Tool, ToolMetadata, ToolType, RawToolRecord
- registry: InstalledTool, Registry
"""
