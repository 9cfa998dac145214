"""In-memory text document implementing the Editor port."""


class DocumentEditor:
    """Plain text buffer with a single selection range.

    Attributes:
        text: Current document contents
        selection_start: Start offset of the selection
        selection_end: End offset of the selection (equal to start for a cursor)
    """

    def __init__(
        self,
        text: str = "",
        selection_start: int | None = None,
        selection_end: int | None = None,
    ) -> None:
        """Create a document, placing the cursor at the end unless told otherwise.

        Args:
            text: Initial contents
            selection_start: Selection start offset (default: end of text)
            selection_end: Selection end offset (default: selection_start)

        Raises:
            ValueError: If the selection falls outside the text or is reversed
        """
        self.text = text
        start = len(text) if selection_start is None else selection_start
        end = start if selection_end is None else selection_end
        if not 0 <= start <= end <= len(text):
            raise ValueError(f"Invalid selection ({start}, {end}) for text of length {len(text)}")
        self.selection_start = start
        self.selection_end = end

    @property
    def selected_text(self) -> str:
        return self.text[self.selection_start : self.selection_end]

    def select(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(
                f"Invalid selection ({start}, {end}) for text of length {len(self.text)}"
            )
        self.selection_start = start
        self.selection_end = end

    def replace_selection(self, text: str) -> None:
        """Replace the selected range with text and put the cursor after it."""
        self.text = self.text[: self.selection_start] + text + self.text[self.selection_end :]
        self.selection_start += len(text)
        self.selection_end = self.selection_start
