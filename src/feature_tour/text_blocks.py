"""Multi-line string literals with common indentation stripped."""

from __future__ import annotations

import textwrap


def get_multiline_text() -> str:
    """Return a JSON-looking description of the tour as a text block."""
    return textwrap.dedent(
        """\
        {
            "name": "Advanced Python Features",
            "version": "1.0",
            "description": "A demonstration of modern Python features"
        }
        """
    )


def demonstrate_text_blocks() -> None:
    print("Text Blocks Example:\n" + get_multiline_text())


def run_all() -> None:
    demonstrate_text_blocks()


if __name__ == "__main__":
    run_all()
