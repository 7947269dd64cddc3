"""
Renders AI message text and decides when to typeset its math.

The message is re-parsed and re-rendered in full on every update, including
each update while a response is still streaming in.  Typesetting math is far
more expensive than parsing, so it only happens once the text has settled.
"""

import asyncio
import logging
from typing import AsyncIterator, Set

from mathdown.markdown_ast_builder import MarkdownASTBuilder
from mathdown.markdown_ast_node import MarkdownASTDocumentNode
from mathdown.markdown_html_renderer import MarkdownHTMLRenderer
from mathdown.markdown_render_settings import MarkdownRenderSettings
from mathdown.math_typesetter import MarkdownRenderRegion, MathTypesetter, MathTypesetterError


class MarkdownContentRenderer:
    """Renders one message's text into a region and triggers math typesetting."""

    def __init__(
        self,
        typesetter: MathTypesetter | None = None,
        settings: MarkdownRenderSettings | None = None
    ) -> None:
        """
        Initialize the content renderer.

        Args:
            typesetter: Engine used to typeset math, or None to leave math as source text
            settings: Render settings; defaults are used if not given
        """
        self._typesetter = typesetter
        self._settings = settings if settings is not None else MarkdownRenderSettings()
        self._ast_builder = MarkdownASTBuilder(self._settings)
        self._html_renderer = MarkdownHTMLRenderer(self._settings.code_class_prefix)
        self._region = MarkdownRenderRegion()
        self._document = MarkdownASTDocumentNode()
        self._typeset_task: asyncio.Task[None] | None = None
        self._pending_tasks: Set[asyncio.Task[None]] = set()

        self._logger = logging.getLogger("MarkdownContentRenderer")

    @property
    def region(self) -> MarkdownRenderRegion:
        """The region holding the most recently rendered output."""
        return self._region

    @property
    def document(self) -> MarkdownASTDocumentNode:
        """The document built by the most recent render."""
        return self._document

    @property
    def typeset_task(self) -> asyncio.Task[None] | None:
        """The typeset task started by the most recent render, if any."""
        return self._typeset_task

    def render(self, text: str, is_streaming: bool) -> str:
        """
        Parse and render message text, then typeset it if it has settled.

        Args:
            text: The full message text so far
            is_streaming: True while more text is still arriving

        Returns:
            The rendered HTML (before any typesetting)
        """
        self._document = self._ast_builder.build_ast(text)
        html = self._html_renderer.render(self._document)
        self._region.update(html)
        self._typeset_task = self.maybe_typeset(self._region, is_streaming)
        return html

    def maybe_typeset(self, region: MarkdownRenderRegion, is_streaming: bool) -> asyncio.Task[None] | None:
        """
        Typeset the math in a region, but only once its text has settled.

        The region is cleared before typesetting so an earlier pass cannot leave
        duplicate output behind.  Typesetter errors are logged and never raised.

        If an event loop is running the typeset runs as a task on it and the task
        is returned; otherwise it runs to completion before this returns.

        Args:
            region: The region to typeset
            is_streaming: True while more text is still arriving

        Returns:
            The typeset task, or None if no task was started
        """
        if is_streaming:
            return None

        if self._typesetter is None or not self._settings.math_enabled:
            return None

        try:
            self._typesetter.clear(region)

        except Exception as e:
            self._logger.warning("Failed to clear typeset region, skipping typesetting: %s", str(e))
            return None

        coro = self._typeset(region, region.generation)

        try:
            loop = asyncio.get_running_loop()

        except RuntimeError:
            asyncio.run(coro)
            return None

        task = loop.create_task(coro)
        self._pending_tasks.add(task)
        task.add_done_callback(self._pending_tasks.discard)
        return task

    async def _typeset(self, region: MarkdownRenderRegion, generation: int) -> None:
        """
        Run the typesetter over a region and store the result if it is still current.

        Args:
            region: The region to typeset
            generation: The region generation the typeset was started for
        """
        assert self._typesetter is not None, "Typesetting requires a typesetter"

        try:
            if self._settings.typeset_timeout is not None:
                result = await asyncio.wait_for(self._typesetter.typeset(region), self._settings.typeset_timeout)

            else:
                result = await self._typesetter.typeset(region)

        except asyncio.TimeoutError:
            self._logger.warning("Math typesetting timed out after %s seconds", self._settings.typeset_timeout)
            return

        except MathTypesetterError as e:
            self._logger.warning("Math typesetting error: %s", str(e))
            return

        except Exception as e:
            self._logger.exception("Unexpected error typesetting math: %s", str(e))
            return

        if region.generation != generation:
            self._logger.debug(
                "Discarding stale typeset result (generation %d, now %d)", generation, region.generation
            )
            return

        region.typeset_html = result

    async def render_stream(self, chunks: AsyncIterator[str]) -> str:
        """
        Render a response as it streams in.

        Each chunk is appended to the text and the whole text is re-rendered.
        When the stream ends the final text is rendered once more as settled,
        and its typesetting is awaited.

        Args:
            chunks: The response text, delivered in pieces

        Returns:
            The final rendered HTML
        """
        text = ""
        async for chunk in chunks:
            text += chunk
            self.render(text, is_streaming=True)

        html = self.render(text, is_streaming=False)
        if self._typeset_task is not None:
            await self._typeset_task

        return html
