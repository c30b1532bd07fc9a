"""
Pytest configuration and common fixtures for markdown forms tests.

All fixtures follow camelCase naming convention.
"""

from pathlib import Path

import pytest

# ============================================================================
# Markdown Fixtures
# ============================================================================


@pytest.fixture
def signupFormMarkdown() -> str:
    """
    Provide a markdown document describing a small sign-up form.

    Returns:
        str: Markdown source with inputs, a select, a modern checklist and a submit button
    """
    return """# Sign up

[Full Name ??*](full name)

[Email ?email?*](email)

[Cellphone Service Provider ?select?](carrier)

- Please select ""
- T-Mobile "TMO"
- Verizon

[?checklist?M Interests](interests)

- Forms
- Markdown

[?submit? Sign up]()
"""


@pytest.fixture
def markdownFile(tmp_path: Path, signupFormMarkdown: str) -> Path:
    """
    Write the sign-up form to a temporary file.

    Returns:
        Path: Path to the markdown file
    """
    path = tmp_path / "signup.md"
    path.write_text(signupFormMarkdown, encoding="utf-8")
    return path


@pytest.fixture
def configFile(tmp_path: Path) -> Path:
    """
    Write a minimal configuration file.

    Returns:
        Path: Path to the TOML file
    """
    path = tmp_path / "config.toml"
    path.write_text(
        """
[markdown]
plugins = []

[logging]
level = "ERROR"
console = false
""",
        encoding="utf-8",
    )
    return path
