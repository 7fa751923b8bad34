"""Docs lookup: URL id -> slug -> <slug>.md -> rendered HTML + page title."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import markdown
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.tables import TableExtension
from markdown.extensions.toc import TocExtension

from froq_site.config import DOCS_DIR

logger = logging.getLogger(__name__)

# Enough for a file name
MAX_SLUG_LENGTH = 50
BASE_TITLE = "Docs"

_NON_SLUG_RE = re.compile(r"[^a-z0-9_]+")
_SEPARATOR_RUN_RE = re.compile(r"_{2,}")
# Stop at "[" so link syntax in the heading is left out
_HEADING_RE = re.compile(r"# ([^\[]+)")


class DocumentNotFound(LookupError):
    """No markdown file exists for the resolved slug."""

    def __init__(self, slug: str):
        super().__init__(f"No document for slug {slug!r}")
        self.slug = slug


@dataclass(frozen=True)
class DocumentRecord:
    title: str
    content: str
    toc: str = ""


def markdown_extensions() -> list:
    return [
        FencedCodeExtension(),
        CodeHiliteExtension(css_class="highlight", guess_lang=False),
        TableExtension(),
        TocExtension(permalink=True),
    ]


def resolve_slug(doc_id: str) -> str:
    """Normalize a URL id into a filesystem-safe slug.

    "-" becomes "_" first ("_" names are internal, e.g. _index), then the id
    is cut to MAX_SLUG_LENGTH, lowercased, and every run of characters outside
    [a-z0-9_] is folded into a single "_".
    """
    slug = doc_id.replace("-", "_")[:MAX_SLUG_LENGTH].lower()
    slug = _NON_SLUG_RE.sub("_", slug)
    slug = _SEPARATOR_RUN_RE.sub("_", slug)
    # lower() may grow some non-ASCII input
    return slug[:MAX_SLUG_LENGTH]


def extract_heading(line: str) -> str:
    """Return the text of a leading "# " heading, or "" if there is none."""
    match = _HEADING_RE.match(line)
    if not match:
        return ""
    return match.group(1).strip()


def render_markdown(text: str) -> tuple[str, str]:
    """Render markdown, return (html, toc)."""
    md = markdown.Markdown(extensions=markdown_extensions())
    html = md.convert(text)
    toc = getattr(md, "toc", "")
    return html, toc


def resolve(
    doc_id: str,
    is_index_request: bool,
    docs_dir: Path = DOCS_DIR,
    base_title: str = BASE_TITLE,
) -> DocumentRecord:
    """Find and render the document for ``doc_id``.

    Raises DocumentNotFound when no ``<slug>.md`` exists in ``docs_dir``.
    The index page keeps ``base_title`` as is; other pages append the first
    line's heading, e.g. "Docs | Controller".
    """
    slug = resolve_slug(doc_id)
    filepath = Path(docs_dir) / f"{slug}.md"
    if not slug or not filepath.is_file():
        logger.debug("Doc not found: id=%r slug=%r", doc_id, slug)
        raise DocumentNotFound(slug)

    text = filepath.read_text(encoding="utf-8")

    title = base_title
    if not is_index_request:
        first_line = text.splitlines()[0] if text else ""
        heading = extract_heading(first_line)
        if heading:
            title = f"{base_title} | {heading}"

    html, toc = render_markdown(text)
    return DocumentRecord(title=title, content=html, toc=toc)
