"""Custom completer for the VFS CLI."""

from typing import Callable, Iterable, List, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS
from common.constants import SORT_FLAGS, SORT_ORDERS

# Position of the sort flag (1-based token index) per listing command
_SORT_FLAG_POSITION = {
    "list-folders": 2,
    "list-files": 3,
}

_NO_ARGUMENT_COMMANDS = {"clear", "exit", "help"}


class VFSCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Registered username completion for the second token
    - Sort flag and order completion for list-folders / list-files
    """

    def __init__(self, username_source: Optional[Callable[[], List[str]]] = None):
        """
        Initialize the completer.

        Args:
            username_source: Callable returning registered usernames
        """
        self._username_source = username_source

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_words(COMMANDS, tokens[0] if tokens else "", ignore_case=True)
            return

        command = tokens[0].lower()
        if command in _NO_ARGUMENT_COMMANDS or command not in COMMANDS:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        position = len(tokens) if is_typing_new_token else len(tokens) - 1

        if position == 1:
            yield from self._complete_words(self._usernames(), current_word, ignore_case=True)
            return

        flag_position = _SORT_FLAG_POSITION.get(command)
        if flag_position is None:
            return
        if position == flag_position:
            yield from self._complete_words(SORT_FLAGS, current_word)
        elif position == flag_position + 1 and tokens[flag_position] in SORT_FLAGS:
            yield from self._complete_words(SORT_ORDERS, current_word)

    def _usernames(self) -> List[str]:
        if self._username_source is None:
            return []
        return sorted(self._username_source())

    @staticmethod
    def _complete_words(words: Iterable[str], partial: str, ignore_case: bool = False) -> Iterable[Completion]:
        """Complete words matching the partial input."""
        if ignore_case:
            partial_cmp = partial.lower()
            matches = (w for w in words if w.lower().startswith(partial_cmp))
        else:
            matches = (w for w in words if w.startswith(partial))
        for word in matches:
            yield Completion(word, start_position=-len(partial))
