"""Session context holding the analyzer that tools operate on."""

import contextvars
from typing import Optional

from transaction_analyzer.analyzer import TransactionAnalyzer
from transaction_analyzer.data.storage import load_analyzer

# Context variable for the current analyzer
_current_analyzer: contextvars.ContextVar[Optional[TransactionAnalyzer]] = (
    contextvars.ContextVar("current_analyzer", default=None)
)


def get_current_analyzer() -> TransactionAnalyzer:
    """Get the analyzer for the current session.

    Returns the analyzer from the context variable if set. Otherwise the
    configured transactions file is loaded once and bound to the context.

    Returns:
        The current session's analyzer

    Raises:
        FileNotFoundError: If no analyzer is set and the configured file is missing
    """
    analyzer = _current_analyzer.get()
    if analyzer is not None:
        return analyzer

    analyzer = load_analyzer()
    _current_analyzer.set(analyzer)
    return analyzer


def set_current_analyzer(
    analyzer: TransactionAnalyzer,
) -> contextvars.Token[Optional[TransactionAnalyzer]]:
    """Set the analyzer in session context.

    Args:
        analyzer: The analyzer to bind

    Returns:
        Token that can be used to reset the context
    """
    return _current_analyzer.set(analyzer)


def reset_current_analyzer(token: contextvars.Token[Optional[TransactionAnalyzer]]) -> None:
    """Reset the analyzer context to its previous value.

    Args:
        token: Token returned from set_current_analyzer()
    """
    _current_analyzer.reset(token)
