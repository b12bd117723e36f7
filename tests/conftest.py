"""Shared fixtures for hitl-cli tests."""

from pathlib import Path

import pytest

from tests.test_utils.toolkit_builders import write_file, write_yaml_tool

XML_PROMPT = """<prompt>
  <metadata>
    <id>api-design</id>
    <name>API Design Review</name>
    <version>1.0.0</version>
    <description>Critique a REST API design</description>
    <category>architecture</category>
    <author>Jane Doe</author>
    <license>MIT</license>
    <tags><tag>api</tag><tag>rest</tag></tags>
    <variables>
      <variable>
        <name>api_spec</name>
        <description>The API to review</description>
        <required>true</required>
      </variable>
    </variables>
  </metadata>
  <context>You review HTTP APIs.</context>
  <instructions>Review <api_input>{{api_spec}}</api_input> for problems.</instructions>
  <constraints>Be concise.</constraints>
  <output_format>Markdown list.</output_format>
  <examples><example>GET /getUsers should be GET /users</example></examples>
</prompt>
"""

FRONTMATTER_AGENT = """---
id: test-generator
name: Test Generator
version: 2.0.1
description: Generates unit tests
category: testing
metadata:
  tags: testing
---
You write unit tests.
"""


@pytest.fixture
def toolkit(tmp_path: Path) -> Path:
    """A toolkit with one tool in each supported format."""
    root = tmp_path / "toolkit"
    write_yaml_tool(
        root,
        "prompts",
        "code-review-ts",
        version="1.2.0",
        description="Review TypeScript code",
        category="code-review",
        metadata={"author": "Jane Doe", "license": "MIT", "tags": ["typescript", "review"]},
        template="<context>Review</context>\n<code_input>{{code}}</code_input>",
        variables=[{"name": "code", "description": "Code to review", "required": True}],
    )
    write_file(root / "prompts" / "backend" / "api-design" / "prompt.xml", XML_PROMPT)
    write_file(root / "agents" / "test-generator" / "agent.md", FRONTMATTER_AGENT)
    write_file(
        root / "context-packs" / "python-style" / "config.json",
        '{"id": "python-style", "name": "Python Style", "version": "0.3.0",'
        ' "description": "House conventions", "category": "style"}',
    )
    return root
