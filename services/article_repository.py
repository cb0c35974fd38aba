"""
Article Repository - Reads Markdown articles from the content directory

This service scans the articles directory, splits each file into YAML
frontmatter and a Markdown body, normalizes the metadata, and serves sorted
listings, type groupings, previews and rendered single articles.

Every call rescans the directory; nothing is cached between calls.
"""

import logging
import os
import re
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import frontmatter
import yaml

from models import Article
from schemas import validate_frontmatter
from services.markdown_renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_WORDS = 20
DEFAULT_PREVIEW_FALLBACK = "Preview unavailable..."

# Characters that would let a slug leave the articles directory
UNSAFE_SLUG_CHARS = ('/', '\x00') + ((os.altsep,) if os.altsep else ())

# Preview text cleanup, applied in order
_IMAGE_RE = re.compile(r'!\[.*?\]\(.*?\)')
_HEADING_RE = re.compile(r'#{1,6}\s')
_BOLD_RE = re.compile(r'\*\*(.*?)\*\*')
_ITALIC_RE = re.compile(r'\*(.*?)\*')
_INLINE_CODE_RE = re.compile(r'`(.*?)`')
_LINK_RE = re.compile(r'\[([^\]]+)\]\([^)]+\)')
_BULLET_RE = re.compile(r'^\s*[-*+]\s+', re.MULTILINE)
_NUMBERED_RE = re.compile(r'^\s*\d+\.\s+', re.MULTILINE)
_NEWLINES_RE = re.compile(r'\n+')

IMAGE_PLACEHOLDER = '[img]'
ELLIPSIS = '...'


class ArticleNotFoundError(LookupError):
    """Raised when a requested article slug has no readable file."""

    def __init__(self, article_id):
        self.article_id = article_id
        super().__init__(f"Article not found: {article_id}")


class ArticleParseError(ValueError):
    """Raised when an article's frontmatter can't be parsed."""

    def __init__(self, article_id, reason):
        self.article_id = article_id
        super().__init__(f"Could not parse article {article_id}: {reason}")


class ArticleRepository:
    """Read-only, file-system backed store of Markdown articles."""

    def __init__(self, articles_dir: Path, extension: str = '.md',
                 renderer: Optional[MarkdownRenderer] = None):
        """
        Initialize the repository.

        Args:
            articles_dir: Path to the directory containing article files
            extension: File extension recognized as article content
            renderer: Markdown renderer used for single-article fetches
        """
        self.articles_dir = Path(articles_dir)
        self.extension = extension
        self.renderer = renderer or MarkdownRenderer()

    # ========== LISTING ==========

    def list_articles_sorted(self) -> List[Article]:
        """
        List every article, newest first.

        Missing or empty directories and unreadable files are logged and
        skipped; this never raises. Equal dates keep file-name order, but
        callers should not rely on tie order.

        Returns:
            List of Article objects without content_html
        """
        if not self.articles_dir.is_dir():
            logger.warning(f"Articles directory does not exist: {self.articles_dir}")
            return []

        try:
            paths = sorted(
                p for p in self.articles_dir.iterdir()
                if p.is_file() and p.name.endswith(self.extension)
            )
        except OSError as e:
            logger.warning(f"Could not scan articles directory {self.articles_dir}: {e}")
            return []
        if not paths:
            logger.warning(f"No {self.extension} files found in {self.articles_dir}")
            return []

        articles = []
        for path in paths:
            article_id = path.name[:-len(self.extension)]
            try:
                article, _ = self._load(article_id, path)
            except (OSError, ArticleParseError) as e:
                logger.warning(f"Skipping article {path.name}: {e}")
                continue
            articles.append(article)

        return sorted(articles, key=lambda a: a.date_obj, reverse=True)

    def group_articles_by_type(self) -> Dict[str, List[Article]]:
        """
        Partition the sorted listing by article_type.

        Returns:
            Dictionary of article_type -> articles, newest first within each group
        """
        grouped: Dict[str, List[Article]] = {}
        for article in self.list_articles_sorted():
            grouped.setdefault(article.article_type, []).append(article)
        return grouped

    def list_articles_by_type(self, article_type: str) -> List[Article]:
        """
        Get the articles of one type, newest first.

        Args:
            article_type: Type to match, case-insensitively

        Returns:
            Filtered list of Article objects
        """
        wanted = article_type.casefold()
        return [a for a in self.list_articles_sorted() if a.article_type.casefold() == wanted]

    # ========== SINGLE ARTICLE ==========

    def get_article_content(self, article_id: str) -> Article:
        """
        Load a single article and render its body to HTML.

        Args:
            article_id: Article slug (file name without extension)

        Returns:
            Article with content_html populated

        Raises:
            ArticleNotFoundError: Unknown, unreadable or unsafe slug
            ArticleParseError: Frontmatter could not be parsed
        """
        path = self._resolve(article_id)
        try:
            article, body = self._load(article_id, path)
        except OSError:
            raise ArticleNotFoundError(article_id)

        return replace(article, content_html=self.renderer.render(body))

    def get_article_body(self, article_id: str) -> str:
        """
        Return the raw Markdown body of an article, without frontmatter.

        Raises:
            ArticleNotFoundError: Unknown, unreadable or unsafe slug
            ArticleParseError: Frontmatter could not be parsed
        """
        path = self._resolve(article_id)
        try:
            _, body = self._load(article_id, path)
        except OSError:
            raise ArticleNotFoundError(article_id)
        return body

    # ========== PREVIEWS ==========

    @staticmethod
    def first_words(content: str, word_count: int = DEFAULT_PREVIEW_WORDS) -> str:
        """
        Build a plain-text preview from a Markdown body.

        Images become a placeholder, formatting markers are stripped, link
        text is kept, and the result is cut to `word_count` words with an
        ellipsis when truncated.

        Args:
            content: Raw Markdown body
            word_count: Maximum number of words to keep

        Returns:
            Preview string
        """
        text = _IMAGE_RE.sub(IMAGE_PLACEHOLDER, content)
        text = _HEADING_RE.sub('', text)
        text = _BOLD_RE.sub(r'\1', text)
        text = _ITALIC_RE.sub(r'\1', text)
        text = _INLINE_CODE_RE.sub(r'\1', text)
        text = _LINK_RE.sub(r'\1', text)
        text = _BULLET_RE.sub('', text)
        text = _NUMBERED_RE.sub('', text)
        text = _NEWLINES_RE.sub(' ', text).strip()

        words = [word for word in text.split() if word]
        preview = ' '.join(words[:word_count])
        if len(words) > word_count:
            preview += ELLIPSIS
        return preview

    def get_article_preview(self, article_id: str, word_count: int = DEFAULT_PREVIEW_WORDS,
                            fallback: str = DEFAULT_PREVIEW_FALLBACK) -> str:
        """
        Preview text for one article, or a placeholder if it can't be read.

        Args:
            article_id: Article slug
            word_count: Maximum number of words to keep
            fallback: Text returned when the article can't be loaded

        Returns:
            Preview string
        """
        try:
            body = self.get_article_body(article_id)
        except (ArticleNotFoundError, ArticleParseError) as e:
            logger.warning(f"Preview unavailable for {article_id}: {e}")
            return fallback
        return self.first_words(body, word_count)

    def enrich_article(self, article: Article, word_count: int = DEFAULT_PREVIEW_WORDS,
                       fallback: str = DEFAULT_PREVIEW_FALLBACK) -> Article:
        """
        Populate a list-level article with its preview text.

        Creates a new Article instance; content_html stays empty.

        Args:
            article: Base article object
            word_count: Maximum number of preview words
            fallback: Preview used when the file can't be loaded

        Returns:
            New Article instance with preview set
        """
        return replace(
            article,
            content_html=None,
            preview=self.get_article_preview(article.id, word_count, fallback)
        )

    # ========== INTERNALS ==========

    def _resolve(self, article_id: str) -> Path:
        """Map a slug to a file path inside the articles directory."""
        # Any file base name is a valid slug; only separators, NUL and dot-dirs are refused
        if (not isinstance(article_id, str) or article_id in ('', '.', '..')
                or any(char in article_id for char in UNSAFE_SLUG_CHARS)):
            raise ArticleNotFoundError(article_id)

        base_dir = self.articles_dir.resolve()
        filepath = (base_dir / f"{article_id}{self.extension}").resolve()

        # Ensure the resolved path is still within articles directory (prevents traversal)
        try:
            filepath.relative_to(base_dir)
        except ValueError:
            raise ArticleNotFoundError(article_id)
        return filepath

    def _load(self, article_id: str, path: Path) -> Tuple[Article, str]:
        """
        Read one file and normalize its frontmatter.

        Raises:
            OSError: File missing or unreadable
            ArticleParseError: Undecodable file or malformed frontmatter
        """
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                raw = f.read()
        except UnicodeDecodeError as e:
            raise ArticleParseError(article_id, e)

        try:
            post = frontmatter.loads(raw)
            meta = validate_frontmatter(post.metadata)
        except (yaml.YAMLError, ValueError) as e:
            raise ArticleParseError(article_id, e)

        article = Article(
            id=article_id,
            title=meta.title or article_id,
            date=meta.date,
            categories=list(meta.categories),
            article_type=meta.article_type,
        )
        return article, post.content
