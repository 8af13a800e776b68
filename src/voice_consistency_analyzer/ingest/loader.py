"""Load writing samples from various formats."""

from pathlib import Path

from bs4 import BeautifulSoup

TEXT_SUFFIXES = {".txt", ".md"}
HTML_SUFFIXES = {".html", ".htm"}


def load_sample(path: Path) -> str:
    """
    Load a writing sample from file and return plain text.

    Supports:
    - .txt / .md files (read directly)
    - .html / .htm files (visible text only)
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in TEXT_SUFFIXES:
        return load_txt(path)
    elif suffix in HTML_SUFFIXES:
        return load_html(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix or path.name}")


def load_txt(path: Path) -> str:
    """Load a plain text file."""
    # Try common encodings
    for encoding in ["utf-8", "utf-8-sig", "latin-1", "cp1252"]:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue

    raise ValueError(f"Could not decode {path} with any common encoding")


def load_html(path: Path) -> str:
    """Extract the visible text of an HTML page (landing pages, emails)."""
    soup = BeautifulSoup(load_txt(path), "html.parser")

    for element in soup(["script", "style"]):
        element.decompose()

    text = soup.get_text(separator="\n")

    # Clean up whitespace
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)
