"""
Error taxonomy for Word-Verse.
Every error is recoverable; messages are shown to the user as-is.
"""


class WordVerseError(ValueError):
    """Base class for user-facing, recoverable errors."""


class EmptyModel(WordVerseError):
    """CSV yielded no valid rows; no model was created."""

    def __init__(self, name: str = ""):
        self.name = name
        super().__init__("No valid embeddings found in file")


class NoActiveModel(WordVerseError):
    """An operation needing a model was invoked with none selected."""

    def __init__(self):
        super().__init__("Please select a model first")


class WordNotFound(WordVerseError):
    """Word is absent from the active model's vocabulary."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f'Word "{word}" not found in the model')


class AlreadyHighlighted(WordVerseError):
    """Word is already in the highlight set."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f'Word "{word}" is already visualized')


class NoMatch(WordVerseError):
    """Paragraph yielded no (new) vocabulary words."""

    def __init__(self, message: str = "No words from the paragraph were found in the model"):
        super().__init__(message)
