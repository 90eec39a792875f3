from typing import Callable, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from faleproxy.domain.rewrite_result import RewrittenDocument
from faleproxy.exceptions import RewriteError
from faleproxy.services.term_rewriter import TermRewriter

# Markup strings that are never rendered as text
SKIPPED_STRING_TYPES = (Comment, Declaration, Doctype, CData, ProcessingInstruction)

# Elements whose strings are code, not prose
NON_TEXT_PARENTS = {"script", "style"}

# Attributes a human reads; href, src, action and friends are left alone
READABLE_ATTRIBUTES = ("title", "alt", "placeholder", "aria-label")

# <meta name|property="..."> whose content is page copy
META_TEXT_NAMES = {
    "description",
    "og:title",
    "og:description",
    "twitter:title",
    "twitter:description",
}

# <input type="..."> whose value is drawn as the button label
BUTTON_INPUT_TYPES = {"submit", "button", "reset"}


class DocumentRewriter(Protocol):
    def rewrite(self, html: Optional[str]) -> RewrittenDocument: ...


class HtmlRewriter:
    """Substitute a term inside the visible text of an HTML document.

    Text nodes and a small set of human-readable attributes are rewritten.
    Link targets and all other markup are serialized back as parsed.
    Parser failures surface as RewriteError; callers log them.
    """

    def __init__(
        self,
        term_rewriter: TermRewriter,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._term_rewriter = term_rewriter
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def rewrite(self, html: Optional[str]) -> RewrittenDocument:
        if not html:
            return RewrittenDocument(content=html or "", title=None, replacements=0)

        try:
            soup = self._soup_factory(html)
        except Exception as e:
            raise RewriteError(e) from e

        replacements = self._rewrite_text_nodes(soup)
        replacements += self._rewrite_attributes(soup)

        title = soup.title.get_text() if soup.title is not None else None
        return RewrittenDocument(content=str(soup), title=title, replacements=replacements)

    def _rewrite_text_nodes(self, soup: BeautifulSoup) -> int:
        replaced = 0
        for node in soup.find_all(string=True):
            if isinstance(node, SKIPPED_STRING_TYPES):
                continue
            if node.parent is not None and node.parent.name in NON_TEXT_PARENTS:
                continue
            hits = self._term_rewriter.count(node)
            if not hits:
                continue
            node.replace_with(self._term_rewriter.rewrite(str(node)))
            replaced += hits
        return replaced

    def _rewrite_attributes(self, soup: BeautifulSoup) -> int:
        replaced = 0
        for tag in soup.find_all(True):
            names = list(READABLE_ATTRIBUTES)
            if tag.name == "meta" and self._is_text_meta(tag):
                names.append("content")
            if tag.name == "input" and self._is_button_input(tag):
                names.append("value")
            for name in names:
                value = tag.get(name)
                if not isinstance(value, str):
                    continue
                hits = self._term_rewriter.count(value)
                if hits:
                    tag[name] = self._term_rewriter.rewrite(value)
                    replaced += hits
        return replaced

    def _is_text_meta(self, tag) -> bool:
        key = tag.get("name") or tag.get("property") or ""
        return isinstance(key, str) and key.strip().lower() in META_TEXT_NAMES

    def _is_button_input(self, tag) -> bool:
        kind = tag.get("type") or ""
        return isinstance(kind, str) and kind.strip().lower() in BUTTON_INPUT_TYPES
