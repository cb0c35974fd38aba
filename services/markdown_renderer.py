"""
Markdown Renderer - Converts article bodies to HTML fragments

Raw HTML embedded in the Markdown is passed through untouched and fenced
code blocks are highlighted with Pygments through the codehilite extension.
"""

from typing import Dict, List, Optional

import markdown

DEFAULT_EXTENSIONS = ['extra', 'codehilite', 'toc']

DEFAULT_EXTENSION_CONFIGS = {
    'codehilite': {
        'css_class': 'highlight',
        'guess_lang': False,
    },
}


class MarkdownRenderer:
    """Service wrapping python-markdown with the site's dialect."""

    def __init__(self, extensions: Optional[List[str]] = None,
                 extension_configs: Optional[Dict[str, dict]] = None):
        """
        Initialize the renderer.

        Args:
            extensions: python-markdown extension names
            extension_configs: Per-extension settings
        """
        self.extensions = list(extensions if extensions is not None else DEFAULT_EXTENSIONS)
        self.extension_configs = dict(
            extension_configs if extension_configs is not None else DEFAULT_EXTENSION_CONFIGS
        )

    def render(self, text: str) -> str:
        """
        Convert a Markdown body to an HTML fragment.

        A fresh Markdown instance is built per call so that state such as
        the table of contents never leaks between articles.

        Args:
            text: Markdown source without frontmatter

        Returns:
            HTML string suitable for embedding in a page body
        """
        md = markdown.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs,
            output_format='html',
        )
        return md.convert(text or '')
