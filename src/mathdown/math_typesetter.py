"""Interface to the external math typesetting engine."""

from abc import ABC, abstractmethod


class MathTypesetterError(Exception):
    """Raised by a typesetter when it fails to typeset a region."""


class MarkdownRenderRegion:
    """
    The rendered output of one message.

    A typesetter works on a region rather than on the document tree.  Each time
    new HTML is rendered into the region its generation moves on, which lets a
    typeset result that finishes late be recognised as stale.
    """

    def __init__(self) -> None:
        """Initialize an empty region."""
        self.html = ""
        self.generation = 0
        self.typeset_html: str | None = None

    def update(self, html: str) -> None:
        """
        Replace the region's contents with newly rendered HTML.

        Args:
            html: The new HTML
        """
        self.html = html
        self.generation += 1
        self.typeset_html = None


class MathTypesetter(ABC):
    """Base class for math typesetting engines (MathJax, KaTeX and so on)."""

    @abstractmethod
    def clear(self, region: MarkdownRenderRegion) -> None:
        """
        Discard anything previously typeset in a region.

        Args:
            region: The region to clear
        """

    @abstractmethod
    async def typeset(self, region: MarkdownRenderRegion) -> str:
        """
        Typeset the math in a region.

        Args:
            region: The region whose HTML holds `$...$` and `$$...$$` math

        Returns:
            The region's HTML with the math typeset

        Raises:
            MathTypesetterError: If typesetting fails
        """
