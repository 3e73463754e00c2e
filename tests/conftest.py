from pathlib import Path

import pytest

RESOURCES = Path(__file__).parent / "resources"


def load_resource(name: str) -> str:
    return (RESOURCES / name).read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def simple_html() -> str:
    return load_resource("simple.html")


@pytest.fixture(scope="session")
def reindented_html(simple_html: str) -> str:
    """The simple document with its indentation stripped."""
    return "\n".join(line.strip() for line in simple_html.splitlines())
