"""
Error types for KhojVerse.

The core performs no fallible I/O, so every error here signals a caller
breaking an input contract: an unknown sort or category, a malformed record,
or an action that is not legal on the current screen.
"""


class ContractViolation(ValueError):
    """Raised when a caller passes a value outside the closed input contract."""


class IllegalTransition(ContractViolation):
    """
    Raised when an action is dispatched on a screen that does not accept it.

    Attributes:
        screen: Value of the screen the action was dispatched on.
        action: Name of the rejected action type.
    """

    def __init__(self, screen: str, action: str, detail: str = ""):
        self.screen = screen
        self.action = action
        message = f"{action} is not allowed on the {screen} screen"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
