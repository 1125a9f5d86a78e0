"""Shared test fixtures for deploydoc tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

SAMPLE_DOCUMENT = """---
title: Example deployment
deployDoc: true
---

# Deploying the example

<!-- deploy-doc require-env FOO -->

<!-- deploy-doc pre-install -->
```bash
echo hi
```

<!-- deploy-doc create-infrastructure -->
```bash
terraform apply
```

<!-- deploy-doc run-tests -->
```bash
exit 1
```

<!-- deploy-doc destroy-infrastructure -->
```bash
terraform destroy
```
"""


class FakeRunner:
    """Step runner that records commands instead of running them.

    Exit codes are looked up by the stripped command text (default 0).
    Commands listed in ``raises`` raise the given exception instead.
    """

    def __init__(
        self,
        exit_codes: dict[str, int] | None = None,
        raises: dict[str, Exception] | None = None,
    ) -> None:
        self.exit_codes = exit_codes or {}
        self.raises = raises or {}
        self.commands: list[str] = []

    def __call__(self, command: str) -> int:
        self.commands.append(command.strip())
        if command.strip() in self.raises:
            raise self.raises[command.strip()]
        return self.exit_codes.get(command.strip(), 0)


def make_document(
    blocks: list[tuple[str, str]],
    front_matter: str = "deployDoc: true\n",
) -> str:
    """Build a document from (marker arguments, shell text) pairs.

    An empty shell text produces a marker without a code block.
    """
    parts = [f"---\n{front_matter}---\n"]
    for marker, shell in blocks:
        parts.append(f"\n<!-- deploy-doc {marker} -->\n")
        if shell:
            parts.append(f"```bash\n{shell}\n```\n")
    return "".join(parts)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_document() -> str:
    """Return the four-phase example document (run-tests fails)."""
    return SAMPLE_DOCUMENT


@pytest.fixture
def document_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into a temporary directory for documents and step side effects."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
